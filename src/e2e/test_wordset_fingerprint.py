import pytest

from fuzzyline.normalize import collapse_breaks, scan_line
from fuzzyline.wordset import WordSet, ScoringPolicy, containment


def test_normalized_collapses_break_runs_and_drops_leading():
    ws = WordSet("  Hello,  World!! ")
    assert ws.normalized == "hello world "
    assert dict(ws.words) == {"hello": 1, "world": 1}


def test_char_counts_include_break_characters_before_collapse():
    ws = WordSet("  Hello,  World!! ")
    assert ws.chars[" "] == 5
    assert ws.chars["!"] == 2
    assert ws.chars[","] == 1
    assert ws.chars["l"] == 3
    assert "H" not in ws.chars


def test_repeated_words_are_counted():
    ws = WordSet("To be, or not to be")
    assert ws.words["to"] == 2
    assert ws.words["be"] == 2
    assert ws.words["or"] == 1


def test_curly_quotes_and_em_dash_break_words():
    words, _ = scan_line("“Don’t”—he said")
    assert dict(words) == {"don": 1, "t": 1, "he": 1, "said": 1}
    assert collapse_breaks("“Don’t”—he said") == "don t he said"


def test_tabs_and_hyphens_are_not_breaks():
    ws = WordSet("well-known\tfact")
    assert dict(ws.words) == {"well-known\tfact": 1}


@pytest.mark.parametrize("line", ["", "   ", "...!!", "(;:)"])
def test_all_break_lines_have_no_words_but_have_chars(line):
    ws = WordSet(line)
    assert len(ws.words) == 0
    assert "" not in ws.words
    assert len(ws.chars) == len(set(line))


def test_tables_are_read_only():
    ws = WordSet("a b")
    with pytest.raises(TypeError):
        ws.words["a"] = 5  # type: ignore[index]
    with pytest.raises(AttributeError):
        ws.extra = 1  # type: ignore[attr-defined]


@pytest.mark.parametrize("line", [
    "",
    "The quick brown fox",
    "  spaced   out  ",
    "“Quoted,” she said — twice.",
    "x",
])
@pytest.mark.parametrize("policy", list(ScoringPolicy))
def test_identity_scores_exactly_one(line, policy):
    assert WordSet(line).measure_containment(WordSet(line), policy) == 1.0


def test_case_and_punctuation_differences_still_exact():
    a = WordSet("The Quick, Brown Fox!")
    b = WordSet("the quick brown fox ")
    assert a.normalized == b.normalized
    assert a.measure_containment(b) == 1.0


def test_weighted_policy_combines_words_and_chars_two_to_one():
    doc, query = WordSet("the lazy dog"), WordSet("lazy cat")
    words = containment(doc.words, query.words)
    chars = containment(doc.chars, query.chars)
    assert doc.measure_containment(query, ScoringPolicy.WEIGHTED) == (2 * words + chars) / 3
    assert doc.measure_containment(query, "weighted") == (2 * words + chars) / 3


def test_shared_policy_is_the_default():
    doc, query = WordSet("the lazy dog"), WordSet("lazy cat")
    assert doc.measure_containment(query) == doc.measure_containment(query, ScoringPolicy.SHARED)
    assert ScoringPolicy.coerce(None) is ScoringPolicy.SHARED


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        ScoringPolicy.coerce("bogus")


def test_missing_word_lowers_the_score():
    doc = WordSet("the lazy dog")
    plain = doc.measure_containment(WordSet("lazy dog"))
    extra = doc.measure_containment(WordSet("lazy dog zebra"))
    assert extra < plain


def test_typo_scores_higher_than_unrelated_words():
    doc = WordSet("He shakes the peacock gardens as he rides")
    typo = doc.measure_containment(WordSet("shakes the peacok gardns"))
    unrelated = doc.measure_containment(WordSet("submarine voltage"))
    assert typo > unrelated


def test_reordered_words_score_well():
    doc = WordSet("the lazy dog sleeps")
    reordered = doc.measure_containment(WordSet("sleeps dog lazy the"))
    unrelated = doc.measure_containment(WordSet("quantum flux capacitor"))
    assert reordered > 0.5 > unrelated


@pytest.mark.parametrize("a,b", [
    ("the cat sat", "a dog ran"),
    ("quick brown fox", "quick fox"),
    ("to be or not to be", "be not"),
    ("lepanto", "don john of austria"),
])
def test_scores_stay_in_range_for_realistic_lines(a, b):
    score = WordSet(a).measure_containment(WordSet(b))
    assert -1.0 <= score <= 1.0
