import pytest

from argtab.trex import ICASE, RegexError, TRex


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("abc", "abc"),
        ("a+b", "aaab"),
        ("a*", ""),
        ("colou?r", "color"),
        ("colou?r", "colour"),
        ("cat|dog", "dog"),
        ("cat|dog", "cat"),
        ("[a-c]+", "abcab"),
        ("[^0-9]+", "abc"),
        ("\\d+", "12345"),
        ("\\w+", "foo_bar9"),
        ("\\s", " "),
        ("a.c", "abc"),
        ("^ab$", "ab"),
        ("a{2}", "aa"),
        ("a{2,}", "aaaa"),
        ("(?:ab)+", "abab"),
        ("\\bfoo\\b", "foo"),
        ("a\\.b", "a.b"),
        ("a\\tb", "a\tb"),
    ],
)
def test_match_accepts(pattern, text):
    assert TRex(pattern).match(text)


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("abc", "abd"),
        ("abc", "ab"),
        ("abc", "abcd"),
        ("a+b", "b"),
        ("cat|dog", "cow"),
        ("cat|dog", "catdog"),
        ("[a-c]+", "abd"),
        ("[^0-9]+", "a1"),
        ("\\d+", "12a"),
        ("a.c", "ac"),
        ("a{2}", "a"),
        ("a{2}", "aaa"),
        ("a{2,}", "a"),
        ("a{1,2}", "aaa"),
        ("\\bfoo\\b", "foox"),
        ("a\\.b", "axb"),
    ],
)
def test_match_rejects(pattern, text):
    assert not TRex(pattern).match(text)


def test_ignore_case_flag():
    assert TRex("hello", ICASE).match("HeLLo")
    assert not TRex("hello").match("HeLLo")


def test_ignore_case_applies_to_ranges():
    assert TRex("[a-c]+", ICASE).match("ABC")
    assert not TRex("[a-c]+").match("ABC")


def test_compiled_pattern_is_reusable():
    rex = TRex("\\d+")
    assert rex.match("42")
    assert not rex.match("4x2")
    assert rex.match("7")


def test_capture_groups():
    rex = TRex("(\\d+)-(\\d+)")
    text = "12-345"
    assert rex.match(text)
    whole = rex.subexp(0)
    first = rex.subexp(1)
    second = rex.subexp(2)
    assert text[whole.begin:whole.begin + whole.length] == text
    assert text[first.begin:first.begin + first.length] == "12"
    assert text[second.begin:second.begin + second.length] == "345"


def test_subexp_count_includes_whole_pattern():
    assert TRex("(\\d+)-(\\d+)").subexp_count() == 3
    assert TRex("(?:ab)+").subexp_count() == TRex("ab").subexp_count()


@pytest.mark.parametrize("index", [-1, 3])
def test_subexp_out_of_range(index):
    with pytest.raises(IndexError):
        TRex("(\\d+)-(\\d+)").subexp(index)


def test_search_finds_first_occurrence():
    text = "abc 123 def 456"
    begin, end = TRex("\\d+").search(text)
    assert text[begin:end] == "123"


def test_search_without_match():
    assert TRex("\\d+").search("abc") is None


def test_search_empty_text():
    assert TRex("a*").search("") is None


def test_search_range_respects_bounds():
    text = "abc 123"
    found = TRex("\\d+").search_range(text, 4, 5)
    assert found == (4, 5)


def test_search_range_empty_range():
    assert TRex("a").search_range("aaa", 2, 2) is None


def test_search_result_matches_whole_pattern():
    text = "xx colour yy"
    rex = TRex("colou?r")
    begin, end = rex.search(text)
    assert rex.match(text[begin:end])


@pytest.mark.parametrize(
    "pattern, message",
    [
        ("", "letter expected"),
        ("(abc", "expected paren"),
        ("(?x)", "expected paren"),
        ("[]", "empty class"),
        ("a{x}", "number expected"),
        ("a{2x", ", or } expected"),
        ("[\\d-z]", "cannot use character classes in ranges"),
        ("a)", "unexpected character"),
        ("a{1234567890}", "overflow in numeric constant"),
    ],
)
def test_compile_errors(pattern, message):
    with pytest.raises(RegexError) as excinfo:
        TRex(pattern)
    assert str(excinfo.value) == message
    assert excinfo.value.pattern == pattern


def test_regex_error_is_value_error():
    with pytest.raises(ValueError):
        TRex("[]")