import io

import pytest

from slstatus.config import Arg
from slstatus.main import Options, build_status, main, parse_args, render, run
from slstatus.util import FatalError


def const(value):
    return lambda argument: value


def test_parse_no_arguments():
    assert parse_args([]) == Options(single=False, once=False)


def test_parse_single():
    assert parse_args(["-s"]) == Options(single=True, once=False)


def test_parse_once_implies_single():
    assert parse_args(["-1"]) == Options(single=True, once=True)


def test_parse_combined_flags():
    assert parse_args(["-s1"]) == Options(single=True, once=True)


def test_parse_double_dash_ends_options():
    assert parse_args(["-s", "--"]) == Options(single=True, once=False)


def test_parse_version():
    with pytest.raises(FatalError, match="slstatus-1.0"):
        parse_args(["-v"])


def test_parse_unknown_flag():
    with pytest.raises(FatalError, match="usage"):
        parse_args(["-x"])


def test_parse_positional_rejected():
    with pytest.raises(FatalError, match="usage"):
        parse_args(["-s", "extra"])


def test_parse_lone_dash_rejected():
    with pytest.raises(FatalError, match="usage"):
        parse_args(["-"])


def test_render_substitutes_value():
    assert render("[%s] ", "x") == "[x] "


def test_render_keeps_unknown_conversion():
    assert render("%s%] ", "42") == "42%] "


def test_render_percent_escape():
    assert render("%s%%", "7") == "7%"


def test_build_status_concatenates():
    args = [Arg(const("a"), "<%s>"), Arg(const("b"), "[%s]")]
    assert build_status(args, "n/a", 2048) == "<a>[b]"


def test_build_status_unknown_for_none():
    args = [Arg(const(None), "%s|"), Arg(const(""), "%s|")]
    assert build_status(args, "n/a", 2048) == "n/a||"


def test_build_status_passes_argument():
    args = [Arg(lambda a: a * 2, "%s", "ab")]
    assert build_status(args, "n/a", 2048) == "abab"


def test_build_status_truncates_and_stops():
    args = [
        Arg(const("abc"), "%s"),
        Arg(const("defgh"), "%s"),
        Arg(const("zzz"), "%s"),
    ]
    status = build_status(args, "n/a", 6)
    assert status == "abcde"
    assert len(status.encode()) < 6


def test_run_once_prints_single_line():
    out = io.StringIO()
    run([Arg(const("up"), "[%s]")], Options(single=True, once=True), 1000, out)
    assert out.getvalue() == "[up]\n"


def test_run_once_uses_unknown():
    out = io.StringIO()
    run([Arg(const(None), "%s")], Options(single=True, once=True), 1000, out)
    assert out.getvalue() == "n/a\n"


def test_main_version(capsys):
    assert main(["-v"]) == 1
    assert "slstatus-1.0" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main(["bogus"]) == 1
    assert "usage: slstatus [-v] [-s] [-1]" in capsys.readouterr().err