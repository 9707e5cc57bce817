#!/usr/bin/env python3
"""
exprcalc.py — CLI narzędzie ExprCalc.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem EXPRCALC_
lub plik .env (np. EXPRCALC_STRICT_OPERANDS=true).

Podkomendy:
    eval     : policz wyrażenie, wypisz wynik lub "no result"
    tokens   : pokaż tokeny wyrażenia
    postfix  : pokaż wyrażenie w notacji postfiksowej (RPN)
    steps    : pokaż kolejne kroki redukcji i wynik

Użycie:
    python exprcalc.py eval --text "1- (10/5)* 2 +7"
    echo "(3 + 4) * 2" | python exprcalc.py steps
    python exprcalc.py tokens -t "1.5 + 2.5"
    python exprcalc.py eval --strict-operands -t "1 2"
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
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj wyrażenie przez --text lub stdin", file=sys.stderr)
        sys.exit(2)
    return text


def _settings(args: argparse.Namespace):
    from config import Settings

    overrides: dict[str, Any] = {}
    if args.strict_operands:
        overrides["strict_operands"] = True
    if args.strict_characters:
        overrides["strict_characters"] = True
    return Settings(**overrides)


def _calculator(args: argparse.Namespace):
    from adapters.calculator.pipeline_calculator import PipelineCalculator

    return PipelineCalculator.from_settings(_settings(args))


def _print_tokens_table(expression: str, tokens: list[Any]) -> None:
    table = Table(
        title=f"Tokens [{len(tokens)}]: {_safe_terminal_text(expression)}",
        box=box.ASCII,
        show_lines=False,
    )
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True, style="cyan")
    table.add_column("Symbol", no_wrap=True)
    for idx, token in enumerate(tokens, 1):
        table.add_row(str(idx), token.kind, _safe_terminal_text(token.symbol))
    _console().print(table)


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> int:
    expression = _read_text(args)
    outcome = _calculator(args).explain(expression)
    if not outcome.ok:
        print("no result")
        return 1
    print(outcome.answer)
    return 0


def _tokens(args: argparse.Namespace) -> int:
    from adapters.tokenizer.char_scan_tokenizer import CharScanTokenizer
    from contracts import ExpressionError

    expression = _read_text(args)
    tokenizer = CharScanTokenizer(strict_characters=_settings(args).strict_characters)
    try:
        tokens = tokenizer.tokenize(expression)
    except ExpressionError as exc:
        print(f"{exc.code}: {exc}", file=sys.stderr)
        return 1
    _print_tokens_table(expression, tokens)
    return 0


def _postfix(args: argparse.Namespace) -> int:
    from adapters.notation_converter.shunting_yard import ShuntingYardConverter
    from adapters.tokenizer.char_scan_tokenizer import CharScanTokenizer
    from contracts import ExpressionError, render_tokens

    expression = _read_text(args)
    tokenizer = CharScanTokenizer(strict_characters=_settings(args).strict_characters)
    try:
        postfix = ShuntingYardConverter().to_postfix(tokenizer.tokenize(expression))
    except ExpressionError as exc:
        print(f"{exc.code}: {exc}", file=sys.stderr)
        return 1
    print(render_tokens(postfix))
    return 0


def _steps(args: argparse.Namespace) -> int:
    expression = _read_text(args)
    outcome = _calculator(args).explain(expression)
    if not outcome.ok:
        print(f"no result ({outcome.error_code})")
        return 1
    for idx, step in enumerate(outcome.steps, 1):
        print(f"  {idx}. {step}")
    print(f"= {outcome.answer}")
    return 0


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="ExprCalc: kalkulator wyrażeń + - * / ( ) (lokalny, bez serwera API)",
    )
    parser.add_argument("--log-level", default=None,
                        help="Poziom logowania (domyślnie z EXPRCALC_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("eval", "Policz wyrażenie"),
        ("tokens", "Pokaż tokeny wyrażenia"),
        ("postfix", "Pokaż wyrażenie w notacji postfiksowej"),
        ("steps", "Pokaż kroki redukcji i wynik"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")
        p.add_argument("--strict-operands", action="store_true",
                       help="Błąd gdy zostają liczby bez operatora (np. '1 2')")
        p.add_argument("--strict-characters", action="store_true",
                       help="Błąd na nieznanych znakach zamiast ich pomijania")

    args = parser.parse_args(argv)

    log_level = args.log_level or _settings(args).log_level
    logging.basicConfig(level=log_level.upper())

    cmds = {
        "eval":    _eval,
        "tokens":  _tokens,
        "postfix": _postfix,
        "steps":   _steps,
    }
    return cmds[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
