from __future__ import annotations
import argparse, json, sys
from typing import List, Optional

from . import config as CFG
from .engine import Engine
from .errors import FuzzyLineError
from .loader import read_queries
from .models import FindResult
from .wordset import ScoringPolicy

DESCRIPTION = (
    "fuzzyline is a pattern matcher that finds the most similar line of text "
    "from a document to a set of words. The set of words can be provided as a "
    "file with each set on its own line, or as quoted sets of words on the "
    "command line. With neither, one set of words is read from standard input "
    "and only the matching line is printed."
)

EXAMPLES = """\
examples:
  fuzzyline -d ./lepanto.txt -i ./testInputs.txt
      Finds the closest matching lines in "./lepanto.txt" to each set of
      words on each line of "./testInputs.txt".

  fuzzyline -d ./lepanto.txt -c "his head a flag" "test word set two" "set three"
      Finds the closest matching lines in "./lepanto.txt" to each set of
      words given in quotes.
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fuzzyline",
        description=DESCRIPTION,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-d", "--document", default=None,
                   help=f"Document to search (interactive default: {CFG.DEFAULT_DOCUMENT})")
    g = p.add_mutually_exclusive_group()
    g.add_argument("-i", "--input", dest="query_file", default=None,
                   help="File with one set of words per line")
    g.add_argument("-c", "--cli", dest="queries", nargs="+", default=None,
                   help="Sets of words given on the command line")
    p.add_argument("-k", "--top-k", type=int, default=1, help="Lines to print per query")
    p.add_argument("--policy", choices=[sp.value for sp in ScoringPolicy], default=CFG.DEFAULT_POLICY,
                   help="How word, character and run scores are combined")
    p.add_argument("--repl", action="store_true", help="Keep reading queries until an empty line")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    return p


def _print_rows(query: str, rows: List[FindResult], top_k: int) -> None:
    print(f'Searching for word set: "{query}"')
    if top_k <= 1:
        r = rows[0]
        print(f'Found line {r.index}: "{r.line}"')
        return
    print("#  Score    Line   Text")
    for i, r in enumerate(rows, 1):
        print(f"{i:<2} {r.score:<8.4f} {r.index:<6} {r.line}")


def _search(eng: Engine, query: str, top_k: int) -> List[FindResult]:
    if top_k <= 1:
        return [eng.find(query)]
    return eng.rank(query, top_k=top_k)


def _run_batch(eng: Engine, queries: List[str], args) -> None:
    if args.json:
        out = [{"query": q, "matches": [r.to_dict() for r in _search(eng, q, args.top_k)]}
               for q in queries]
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return
    for q in queries:
        _print_rows(q, _search(eng, q, args.top_k), args.top_k)


def _run_interactive(eng: Engine, args) -> None:
    # Prompt before loading so the document is read while the user types
    print(">", end="", flush=True)
    eng.load(args.document or CFG.DEFAULT_DOCUMENT)
    while True:
        raw = sys.stdin.readline()
        query = raw.rstrip("\r\n")
        if args.repl and not query:
            break
        rows = _search(eng, query, args.top_k)
        if args.json:
            print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False))
        else:
            for r in rows:
                print(r.line)
        if not args.repl or raw == "":
            break
        print(">", end="", flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    batch = args.query_file is not None or args.queries is not None
    if batch and not args.document:
        p.error("-i/-c require -d DOCUMENT")
    if args.top_k < 1:
        p.error("-k must be at least 1")

    eng = Engine(policy=args.policy, verbose=args.verbose)
    try:
        if not batch:
            _run_interactive(eng, args)
            return 0

        eng.load(args.document)
        queries = read_queries(args.query_file) if args.query_file else list(args.queries)
        _run_batch(eng, queries, args)
        return 0
    except FuzzyLineError as exc:
        print(exc)
        p.print_help()
        return 1
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
