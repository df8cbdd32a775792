import pytest

from slstatus.util import (
    FatalError,
    die,
    fmt_human,
    read_first_line,
    read_int,
    warn,
)


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


@pytest.mark.parametrize("power, prefix", [(0, ""), (1, "k"), (2, "M"), (3, "G")])
def test_fmt_human_exact_powers_of_1000(power, prefix):
    assert fmt_human(1000**power, 1000) == "1.0 " + prefix


@pytest.mark.parametrize("power, prefix", [(1, "Ki"), (2, "Mi"), (4, "Ti")])
def test_fmt_human_exact_powers_of_1024(power, prefix):
    assert fmt_human(1024**power, 1024) == "1.0 " + prefix


def test_fmt_human_below_base_is_unscaled():
    assert fmt_human(999, 1000) == "999.0 "


def test_fmt_human_caps_at_largest_prefix():
    assert fmt_human(1000**11, 1000).endswith(" Y")


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_warn_writes_stderr(capsys):
    warn("something odd")
    assert capsys.readouterr().err == "something odd\n"


def test_die_raises():
    with pytest.raises(FatalError, match="fatal thing"):
        die("fatal thing")


def test_read_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("hello\nworld\n")
    assert read_first_line(path) == "hello"


def test_read_first_line_without_newline(tmp_path):
    path = tmp_path / "f"
    path.write_text("alone")
    assert read_first_line(path) == "alone"


def test_read_first_line_empty_file(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    assert read_first_line(path) is None


def test_read_first_line_missing(tmp_path, capsys):
    path = tmp_path / "missing"
    assert read_first_line(path) is None
    assert str(path) in capsys.readouterr().err


def test_read_first_line_truncates_long_lines(tmp_path):
    path = tmp_path / "f"
    path.write_text("x" * 5000 + "\n")
    line = read_first_line(path)
    assert len(line) < 5000
    assert set(line) == {"x"}


def test_read_int(tmp_path):
    path = tmp_path / "n"
    path.write_text("  42\n")
    assert read_int(path) == 42


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "n"
    path.write_text("abc\n")
    assert read_int(path) is None


def test_read_int_missing(tmp_path):
    assert read_int(tmp_path / "none") is None