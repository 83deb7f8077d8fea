import re

import pytest

from barstatus.util import fmt_human, read_int, read_line, warn

_HUMAN = re.compile(r"^(\d+\.\d) (\w*)$")
_ORDER = {
    1000: ["", "k", "M", "G", "T", "P", "E", "Z", "Y"],
    1024: ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"],
}


def test_warn_plain_message(capsys):
    warn("something happened")
    assert capsys.readouterr().err == "something happened\n"


def test_warn_appends_error_text(capsys):
    try:
        open("/nonexistent/definitely/missing")
    except OSError:
        warn("open '/nonexistent':")
    err = capsys.readouterr().err
    assert err.startswith("open '/nonexistent': ")
    assert err.endswith("\n")
    assert len(err) > len("open '/nonexistent': \n")


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_one_kibi():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [1, 999, 1500, 123456, 98765432, 5 * 10**12, 7 * 2**50])
def test_fmt_human_round_trip(num, base):
    match = _HUMAN.match(fmt_human(num, base))
    assert match is not None
    value, prefix = float(match.group(1)), match.group(2)
    index = _ORDER[base].index(prefix)
    assert value < base
    assert value * base**index == pytest.approx(num, rel=0.06, abs=0.06)


def test_fmt_human_below_base_has_no_prefix():
    assert fmt_human(999, 1000).endswith(" ")
    assert fmt_human(1000, 1000).endswith(" k")


def test_read_line_strips_newline(tmp_path):
    path = tmp_path / "f"
    path.write_text("first line\nsecond\n")
    assert read_line(path) == "first line"


def test_read_line_missing(tmp_path, capsys):
    assert read_line(tmp_path / "missing") is None
    assert "missing" in capsys.readouterr().err


def test_read_int_leading_whitespace(tmp_path):
    path = tmp_path / "n"
    path.write_text("  4711 trailing\n")
    assert read_int(path) == 4711


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "n"
    path.write_text("abc\n")
    assert read_int(path) is None


def test_read_int_missing(tmp_path):
    assert read_int(tmp_path / "missing") is None