#!/usr/bin/env python3
"""
kalkulator.py — CLI narzędzie Kalkulatora.

Działa całkowicie lokalnie — nie wymaga uruchomionego serwera API.

Podkomendy:
    run     — naciśnij sekwencję klawiszy i pokaż ślad stanów
    eval    — policz jedną operację (previous op current)
    format  — sformatuj operand jak na wyświetlaczu
    keypad  — pokaż układ przycisków
    repl    — tryb interaktywny (jedna sekwencja klawiszy na linię)

Użycie:
    python kalkulator.py run --keys "12+3*2="
    echo "10/4=" | python kalkulator.py run --quiet
    python kalkulator.py eval 10 / 4
    python kalkulator.py format 1234567.891
    python kalkulator.py keypad
    python kalkulator.py repl

Klawisze: 0-9 . + - * / = AC (lub C) DEL (lub <)
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = "" if value is None else str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _session():
    from adapters.formatter.grouping_formatter import GroupingFormatter
    from adapters.session import CalculatorSession
    from config import Settings

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    return CalculatorSession(
        formatter=GroupingFormatter(grouping_separator=settings.grouping_separator),
    )


def _print_display(session) -> None:
    display = session.display
    table = Table(box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Display", justify="right", min_width=24)
    table.add_row(_safe_terminal_text(display.previous), style="dim")
    table.add_row(_safe_terminal_text(display.current or ""), style="bold")
    _console().print(table)


def _print_trace_table(session) -> None:
    table = Table(title=f"Trace [{len(session.trace)}]", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Event", no_wrap=True, style="cyan")
    table.add_column("Previous", justify="right")
    table.add_column("Current", justify="right")
    table.add_column("Overwrite", no_wrap=True)
    for i, entry in enumerate(session.trace, start=1):
        lines = session.formatter.render(entry.state)
        payload = getattr(entry.event, "digit", None) or getattr(entry.event, "operation", None)
        event_text = entry.event.type if payload is None else f"{entry.event.type} {payload}"
        table.add_row(
            str(i),
            _safe_terminal_text(event_text),
            _safe_terminal_text(lines.previous),
            _safe_terminal_text(lines.current),
            "yes" if entry.state.overwrite else "",
        )
    _console().print(table)


def _read_keys(args: argparse.Namespace) -> str:
    keys = args.keys if args.keys is not None else sys.stdin.read().strip()
    if not keys:
        print("Błąd: podaj klawisze przez --keys lub stdin", file=sys.stderr)
        sys.exit(1)
    return keys


# -- podkomendy ------------------------------------------------------------

def _run(args: argparse.Namespace) -> None:
    from contracts import UnknownKeyError

    keys = _read_keys(args)
    session = _session()
    try:
        session.press_many(keys)
    except UnknownKeyError as exc:
        print(f"Błąd: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.quiet:
        print(_safe_terminal_text(session.display.current or ""))
        return
    _print_trace_table(session)
    _print_display(session)


def _eval(args: argparse.Namespace) -> None:
    from adapters.evaluator.float_evaluator import FloatEvaluator

    result = FloatEvaluator().evaluate(args.previous, args.current, args.operation)
    print(result)


def _format(args: argparse.Namespace) -> None:
    from adapters.formatter.grouping_formatter import GroupingFormatter
    from config import Settings

    formatter = GroupingFormatter(grouping_separator=Settings().grouping_separator)
    print(_safe_terminal_text(formatter.format_operand(args.operand)))


def _keypad(args: argparse.Namespace) -> None:
    from contracts import KEYPAD_LAYOUT

    width = max(sum(span for _, span in row) for row in KEYPAD_LAYOUT)
    table = Table(title="Keypad", box=box.ASCII, show_header=False, show_lines=True)
    for _ in range(width):
        table.add_column(justify="center", min_width=4)
    for row in KEYPAD_LAYOUT:
        cells: list[str] = []
        for label, span in row:
            # rich nie łączy komórek — szeroki przycisk zajmuje kolejną pustą
            cells.append(label)
            cells.extend([""] * (span - 1))
        table.add_row(*cells)
    _console().print(table)


def _repl(args: argparse.Namespace) -> None:
    from contracts import UnknownKeyError

    session = _session()
    _print_display(session)
    for line in sys.stdin:
        keys = line.strip()
        if keys.lower() in ("q", "quit", "exit"):
            break
        if not keys:
            continue
        try:
            session.press_many(keys)
        except UnknownKeyError as exc:
            print(f"Błąd: {exc}", file=sys.stderr)
            continue
        _print_display(session)


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="kalkulator",
        description="Kalkulator — CLI (lokalny, bez serwera API)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # run
    p = sub.add_parser("run", help="Naciśnij sekwencję klawiszy")
    p.add_argument("--keys", "-k", help='Klawisze, np. "12+3=" (lub stdin)')
    p.add_argument("--quiet", "-q", action="store_true",
                   help="Tylko bieżąca linia wyświetlacza, bez śladu")

    # eval
    p = sub.add_parser("eval", help="Policz jedną operację")
    p.add_argument("previous", help="Pierwszy operand")
    p.add_argument("operation", choices=["+", "-", "*", "/"])
    p.add_argument("current", help="Drugi operand")

    # format
    p = sub.add_parser("format", help="Sformatuj operand jak na wyświetlaczu")
    p.add_argument("operand")

    # keypad
    sub.add_parser("keypad", help="Pokaż układ przycisków")

    # repl
    sub.add_parser("repl", help="Tryb interaktywny (q kończy)")

    args = parser.parse_args(argv)

    cmds = {
        "run":    _run,
        "eval":   _eval,
        "format": _format,
        "keypad": _keypad,
        "repl":   _repl,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
