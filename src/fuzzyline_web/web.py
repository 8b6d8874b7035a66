from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from fuzzyline import config as CFG
from fuzzyline.engine import Engine
from fuzzyline.errors import FuzzyLineError
from fuzzyline.wordset import ScoringPolicy

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/find")
def api_find():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.TOP_K, type=int)
    if not q:
        return jsonify([])
    if _engine is None or not _engine.loaded:
        return jsonify({"error": "no document loaded"}), 503
    k = max(1, min(50, k))
    rows = _engine.rank(q, top_k=k)
    return jsonify([r.to_dict() for r in rows])

@app.get("/health")
def health():
    loaded = _engine is not None and _engine.loaded
    lines = len(_engine.document) if loaded else 0  # type: ignore[union-attr, arg-type]
    return jsonify({"ok": loaded, "lines": lines}), (200 if loaded else 503)

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Line Finder</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; }
.controls input[type=text]{ flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:16px; outline:none; }
.controls input[type=text]:focus{ border-color:var(--accent) }
.controls input[type=number]{ width:64px; background:#0b1117; color:var(--ink); border:1px solid var(--border);
  border-radius:10px; padding:10px; }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.row{ display:grid; grid-template-columns:3rem 6rem 5rem 1fr; gap:10px; padding:10px 14px; border-top:1px solid var(--border); }
.head{ font-weight:600; color:var(--muted); border-top:none }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Line Finder</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type the line you remember…" autocomplete="off" autofocus />
        <input id="k" type="number" min="1" max="50" value="5" />
      </div>
      <div id="stats" class="meta">Ready.</div>
      <div class="row head"><div>#</div><div>Score</div><div>Line</div><div>Text</div></div>
      <div id="out" class="empty">Start typing to see results.</div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), k = $("#k"), out = $("#out"), stats = $("#stats");
let t;
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function search(){
  const query = q.value;
  if(query.trim().length === 0){
    out.className = "empty"; out.innerHTML = "Start typing to see results."; stats.textContent = "Ready.";
    return;
  }
  const topk = Math.max(1, Math.min(50, parseInt(k.value || "5", 10)));
  const t0 = performance.now();
  try{
    const resp = await fetch(`/api/find?q=${encodeURIComponent(query)}&k=${topk}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Results: ${data.length} • ~${Math.max(1, Math.round(performance.now() - t0))} ms`;
    out.className = "";
    out.innerHTML = data.map((r,i)=>`
      <div class="row">
        <div class="small">${i+1}</div>
        <div class="small">${r.score.toFixed(4)}</div>
        <div class="small">${r.index}</div>
        <div>${esc(r.line)}</div>
      </div>`).join("");
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 150); });
k.addEventListener("change", search);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("-d", "--document", default=CFG.DEFAULT_DOCUMENT)
    ap.add_argument("--policy", choices=[sp.value for sp in ScoringPolicy], default=CFG.DEFAULT_POLICY)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    global _engine
    _engine = Engine(policy=args.policy, verbose=args.verbose)
    try:
        _engine.load(args.document)
    except FuzzyLineError as exc:
        print(exc)
        return 1
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
