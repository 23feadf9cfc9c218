import io

import pytest

import kalkulator


def test_run_quiet_prints_current_line(capsys):
    kalkulator.main(["run", "--keys", "1234+1=", "--quiet"])

    assert capsys.readouterr().out.strip() == "1,235"


def test_run_reads_keys_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10/4=\n"))

    kalkulator.main(["run", "-q"])

    assert capsys.readouterr().out.strip() == "2.5"


def test_run_with_unknown_key_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        kalkulator.main(["run", "--keys", "1+?"])

    assert exc_info.value.code == 1
    assert "Unknown key" in capsys.readouterr().err


def test_eval_prints_result(capsys):
    kalkulator.main(["eval", "10", "/", "4"])

    assert capsys.readouterr().out.strip() == "2.5"


def test_eval_non_numeric_prints_empty_line(capsys):
    kalkulator.main(["eval", "abc", "+", "1"])

    assert capsys.readouterr().out == "\n"


def test_format_prints_grouped_operand(capsys):
    kalkulator.main(["format", "1234567.891"])

    assert capsys.readouterr().out.strip() == "1,234,567.891"


def test_repl_processes_lines_until_quit(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("12\n+3\n=\nq\n9\n"))
    shown = []
    monkeypatch.setattr(kalkulator, "_print_display", lambda session: shown.append(session.display.current))

    kalkulator.main(["repl"])

    assert shown == [None, "12", "3", "15"]


def test_keypad_lists_every_button(capsys):
    kalkulator.main(["keypad"])

    out = capsys.readouterr().out
    for label in ["AC", "DEL", "/", "*", "+", "-", ".", "="]:
        assert label in out
