"""CLI for StrongPass: generate passwords and score their strength."""

import argparse
import logging
import sys

from rich import print
from rich.markup import escape
from rich.panel import Panel

from .config import check_length, default_options, load_config
from .errors import GenerationError
from .evaluator import StrengthRating
from .generator import GenerationOptions, generate
from .report import StrengthReport, evaluate

RATING_STYLE = {
    StrengthRating.VERY_STRONG: "green",
    StrengthRating.STRONG: "yellow",
    StrengthRating.WEAK: "red",
}

def print_report(report: StrengthReport) -> None:
    style = RATING_STYLE[report.rating]
    header = f"Rating: [{style}]{report.rating.value}[/{style}]"
    body = (
        f"Entropy: {report.entropy_bits:.2f} bits\n"
        f"Estimated time to crack: [{style}]{report.crack_time}[/{style}]"
    )
    print(Panel(body, title=header))
    print("[bold]Advice:[/bold]")
    for a in report.advice:
        print(f" • {a}")

def cmd_generate(args, cfg) -> int:
    length = args.length if args.length is not None else cfg["default_length"]
    defaults = default_options(cfg)
    options = GenerationOptions(
        use_lower=defaults.use_lower and not args.no_lower,
        use_upper=defaults.use_upper and not args.no_upper,
        use_digits=defaults.use_digits and not args.no_digits,
        use_symbols=defaults.use_symbols and not args.no_symbols,
    )
    try:
        check_length(length, cfg)
        for i in range(args.copies):
            pw = generate(length, options)
            print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
            print_report(evaluate(pw))
    except GenerationError as e:
        print(f"[red]Cannot generate password ({e.code}): {e}[/red]")
        return 2
    return 0

def cmd_score(args, cfg) -> int:
    if not args.password:
        print("[red]Nothing to evaluate: the password is empty.[/red]")
        return 2
    print_report(evaluate(args.password))
    return 0

def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strongpass")
    parser.add_argument("--config", type=str, help="Path to a JSON config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (default from config)")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--copies", type=positive_int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show advice")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(args.config)
    return args.func(args, cfg)

if __name__ == "__main__":
    sys.exit(main())
