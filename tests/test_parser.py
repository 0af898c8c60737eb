import pytest

from inidoc import Document, MalformedLine, parse, strip_comments


# ---- comment stripping ----

def test_strip_keeps_line_count():
    src = "[A]\n; comment\nx = 1 # trailing\n\n"
    out = strip_comments(src)
    assert out == "[A]\n\nx = 1\n\n"
    assert out.count("\n") == 4


def test_strip_earlier_marker_wins():
    assert strip_comments("a = 1 # x ; y") == "a = 1\n"
    assert strip_comments("a = 1 ; x # y") == "a = 1\n"


def test_strip_ignores_quotes():
    assert strip_comments('url = "a#b"') == 'url = "a\n'


def test_strip_trims_and_terminates_last_line():
    assert strip_comments("   [A]   \n  k=v") == "[A]\nk=v\n"
    assert strip_comments("a\r\nb\r\n") == "a\nb\n"


def test_strip_empty():
    assert strip_comments("") == ""


@pytest.mark.parametrize("src", [
    "",
    "[A]\nx = 1 ; c\n",
    "  # only comment\n\n\n",
    "key = value # a ; b\n[ S ] ;x\n",
])
def test_strip_is_idempotent(src):
    once = strip_comments(src)
    assert strip_comments(once) == once


# ---- scenarios ----

def test_single_pair():
    assert parse("[A]\nx = 1\n").to_dict() == {"A": {"x": "1"}}


def test_comment_and_empty_section():
    doc = parse("[A]\n;comment\n[B]\ny=2\n")
    assert doc.to_dict() == {"A": {}, "B": {"y": "2"}}


def test_pair_without_section():
    with pytest.raises(MalformedLine) as exc:
        parse("x = 1\n")
    assert exc.value.line_number == 1
    assert exc.value.reason == MalformedLine.NO_SECTION


def test_line_without_separator():
    with pytest.raises(MalformedLine) as exc:
        parse("[A]\nbadline\n")
    assert exc.value.line_number == 2
    assert exc.value.text == "badline"
    assert exc.value.reason == MalformedLine.NO_SEPARATOR
    assert "line 2" in str(exc.value)


def test_repeated_section_merges():
    doc = parse("[A]\nx=1\n[A]\ny=2\n")
    assert doc.to_dict() == {"A": {"x": "1", "y": "2"}}


def test_empty_input():
    doc = parse("")
    assert len(doc) == 0
    assert doc == Document()


# ---- details ----

def test_line_numbers_count_comments_and_blanks():
    with pytest.raises(MalformedLine) as exc:
        parse("[A]\n# c\n\n   \nx = 1\noops ; not a pair\n")
    assert exc.value.line_number == 6
    assert exc.value.text == "oops"


def test_unterminated_header_is_malformed():
    with pytest.raises(MalformedLine) as exc:
        parse("[A]\nx = 1\n[B\n")
    assert exc.value.line_number == 3


def test_fails_on_first_bad_line():
    with pytest.raises(MalformedLine) as exc:
        parse("[A]\nfirst\nsecond\n")
    assert exc.value.line_number == 2


def test_value_keeps_later_separators():
    doc = parse("[db]\nurl = postgres://h/db?a=b&c=d\n")
    assert doc["db"]["url"] == "postgres://h/db?a=b&c=d"


def test_comment_cuts_value():
    assert parse("[A]\ncolor = #fff\n")["A"]["color"] == ""


def test_key_and_value_trimmed():
    doc = parse("[A]\n   spaced key   =   spaced value   \nempty=\n")
    assert doc["A"].to_dict() == {"spaced key": "spaced value", "empty": ""}


def test_last_duplicate_key_wins():
    assert parse("[A]\nx=1\nx=2\n")["A"]["x"] == "2"


def test_header_interior_trimmed():
    doc = parse("  [  Install Options ]  \nALLUSERS = 1\n")
    assert list(doc) == ["Install Options"]


@pytest.mark.parametrize("header, name", [
    ("[A]", "A"),
    ("  [ A ]  ", "A"),
    ("[x = 1]", "x = 1"),
    ("[]", ""),
    ("[[nested]]", "[nested]"),
])
def test_header_opens_named_section(header, name):
    doc = parse(f"[other]\nk=v\n{header}\nz=9\n")
    assert doc[name]["z"] == "9"


def test_trailing_empty_section_kept():
    doc = parse("[A]\nx=1\n[Empty]\n")
    assert "Empty" in doc
    assert len(doc["Empty"]) == 0


def test_case_sensitive_sections():
    doc = parse("[a]\nx=1\n[A]\nx=2\n")
    assert doc["a"]["x"] == "1"
    assert doc["A"]["x"] == "2"


def test_order_preserved():
    doc = parse("[z]\nb=1\na=2\n[y]\n[x]\n")
    assert list(doc) == ["z", "y", "x"]
    assert list(doc["z"]) == ["b", "a"]


def test_parse_calls_are_independent():
    first = parse("[A]\nx=1\n")
    second = parse("[B]\ny=2\n")
    assert "B" not in first
    assert "A" not in second


@pytest.mark.parametrize("sections", [
    {},
    {"A": {}},
    {"A": {"x": "1", "y": "two words"}},
    {"Install": {"ALLUSERS": "1", "Path": "C:/Program Files/x"},
     "Empty": {},
     "z": {"k": "v"}},
])
@pytest.mark.parametrize("blank_lines", [0, 2])
def test_rendered_text_parses_back(sections, blank_lines):
    doc = Document(sections)
    assert parse(doc.dumps(blank_lines=blank_lines)) == doc
    assert parse(doc.dumps(delimiter="=")) == doc
