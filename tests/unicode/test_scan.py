"""Tests for locating malformed escapes with the pyparsing scanner."""

import pytest

from native2ascii.unicode.scan import describe_location, find_malformed_escapes
from native2ascii.unicode.unescape import MalformedEscapeError, unescape


def test_no_escapes():
    """Text without escapes has nothing to report."""
    assert list(find_malformed_escapes("")) == []
    assert list(find_malformed_escapes("plain text\n")) == []


def test_valid_escapes_not_reported():
    """Well-formed escapes and other backslash pairs are not reported."""
    text = "I \\u2665 Unicode!\\n\\ud842\\udfb7 \\q trailing\\"
    assert list(find_malformed_escapes(text)) == []


def test_reports_every_malformed_escape():
    """All malformed escapes are found, in order."""
    text = "a=\\u00ah\nb=\\u2665\nc=\\uXYZW\nd=\\u12"
    errors = list(find_malformed_escapes(text))

    assert [e.position for e in errors] == [2, 21, 31]
    assert [e.character for e in errors] == ["h", "X", None]
    assert [e.escape for e in errors] == ["\\u00ah", "\\uX", "\\u12"]
    assert errors[-1].truncated


def test_escaped_backslash_not_reported():
    """A backslash pair hides the u that follows it, as in unescape."""
    assert list(find_malformed_escapes("\\\\uzzzz")) == []
    errors = list(find_malformed_escapes("\\\\\\uzzzz"))
    assert [e.position for e in errors] == [2]


def test_scanning_resumes_at_bad_character():
    """A backslash that stops an escape can start the next one."""
    errors = list(find_malformed_escapes("\\u0\\u0041\\u1\\uq"))
    assert [e.position for e in errors] == [0, 9, 12]
    assert [e.character for e in errors] == ["\\", "\\", "q"]


def test_tabs_do_not_shift_positions():
    """Positions refer to the original text, tabs included."""
    errors = list(find_malformed_escapes("\t\t\\ug"))
    assert errors[0].position == 2


@pytest.mark.parametrize(
    "text",
    [
        "\\u00ah",
        "\\u00a",
        "ok \\u2665 then \\uzz00 and \\u1",
        "\\\\\\u12",
        "x\ny\n\\u\n",
    ],
)
def test_first_error_matches_unescape(text):
    """The first reported error is the one unescape raises."""
    with pytest.raises(MalformedEscapeError) as excinfo:
        unescape(text)
    first = next(find_malformed_escapes(text))
    assert first.position == excinfo.value.position
    assert first.character == excinfo.value.character
    assert first.escape == excinfo.value.escape
    assert str(first) == str(excinfo.value)


def test_describe_location():
    """Locations are 1-based lines and columns."""
    text = "first line\nkey=\\u00zz\n\\uq"
    errors = list(find_malformed_escapes(text))
    assert describe_location(errors[0]) == "line 2, column 5"
    assert describe_location(errors[1]) == "line 3, column 1"
