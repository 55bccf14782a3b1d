from __future__ import annotations

import argparse
import logging
import sys
from getpass import getpass

from .alphabets import alphabet_names, get_alphabet, resolve_alphabet
from .audit import DEFAULT_ALPHA, audit_sampler
from .batch import generate_n
from .config import Settings, load_settings
from .errors import PassgenError
from .log import configure_logging
from .passphrases import PassphraseGenerator
from .passwords import PasswordGenerator
from .sampler import BitPool
from .strength import StrengthReport, analyze, analyze_against, analyze_passphrase
from .wordlists import get_wordlist, resolve_wordlist, wordlist_names

logger = logging.getLogger(__name__)


def _pick(value, fallback):
    return fallback if value is None else value


def _with_strength(value: str, report: StrengthReport) -> str:
    return f"{value} [{report.label}, {report.bits:.1f} bits]"


def _cmd_password(args: argparse.Namespace, settings: Settings) -> int:
    alphabet = resolve_alphabet(args.alphabet, args.custom, default=settings.alphabet)
    length = _pick(args.length, settings.password_length)
    count = _pick(args.count, settings.count)
    logger.debug(
        "generating %d password(s): length=%d alphabet=%s (%d symbols)",
        count, length, alphabet.name, alphabet.size,
    )
    gen = PasswordGenerator(alphabet=alphabet, pool=BitPool(refill_bytes=settings.refill_bytes))
    passwords = generate_n(count, lambda: gen.password(length))
    for value in passwords:
        if args.strength:
            print(_with_strength(value, analyze_against(value, alphabet)))
        else:
            print(value)
    return 0


def _cmd_passphrase(args: argparse.Namespace, settings: Settings) -> int:
    wordlist = resolve_wordlist(
        name=args.wordlist,
        custom=args.custom,
        custom_file=args.custom_file,
        search_dir=_pick(args.wordlist_dir, settings.wordlist_dir),
        default=settings.wordlist,
    )
    words = _pick(args.length, settings.passphrase_words)
    count = _pick(args.count, settings.count)
    separator = _pick(args.separator, settings.separator)
    logger.debug(
        "generating %d passphrase(s): words=%d wordlist=%s (%d words)",
        count, words, wordlist.name, wordlist.size,
    )
    gen = PassphraseGenerator(
        wordlist=wordlist,
        separator=separator,
        pool=BitPool(refill_bytes=settings.refill_bytes),
    )
    phrases = generate_n(count, lambda: gen.passphrase(words))
    report = analyze_passphrase(words, wordlist) if args.strength else None
    for value in phrases:
        print(_with_strength(value, report) if report else value)
    return 0


def _cmd_check(args: argparse.Namespace, _: Settings) -> int:
    password = args.password
    if password is None:
        password = getpass("Password to check: ")
    if args.alphabet is not None or args.custom is not None:
        report = analyze_against(password, resolve_alphabet(args.alphabet, args.custom))
        space = f"{report.symbol_space_size} ({report.alphabet})"
    else:
        report = analyze(password)
        detected = "+".join(report.classes) or "none"
        space = f"{report.symbol_space_size} (detected: {detected})"
    print(f"Length: {report.length} characters")
    print(f"Symbol space: {space}")
    print(f"Entropy: {report.bits:.1f} bits")
    print(f"Strength: {report.label}")
    if report.common:
        print("Warning: this is a well-known password and is guessed first by attackers.")
    return 0


def _cmd_audit(args: argparse.Namespace, settings: Settings) -> int:
    report = audit_sampler(
        n=args.range,
        trials=args.trials,
        pool=BitPool(refill_bytes=settings.refill_bytes),
        alpha=args.alpha,
    )
    print(f"Draws: {report.trials} in [0, {report.n})")
    print(
        f"Chi-square: stat={report.chi_square.stat:.3f} df={report.chi_square.df} "
        f"p={report.chi_square.pvalue:.4f}"
    )
    print(
        f"Bit balance: ones={report.bits.ones} zeros={report.bits.zeros} "
        f"p={report.bits_pvalue:.4f}"
    )
    if args.plot:
        from .viz import save_audit_figure

        out = save_audit_figure(report, args.plot)
        print(f"Figure written to {out}")
    print("Result: " + ("PASS" if report.passed else "FAIL"))
    return 0 if report.passed else 1


def _cmd_list(_: argparse.Namespace, settings: Settings) -> int:
    print("Alphabets:")
    for name in alphabet_names():
        print(f"- {name}: {get_alphabet(name).size} symbols")
    print("Wordlists:")
    for name in wordlist_names():
        print(f"- {name}: {get_wordlist(name, settings.wordlist_dir).size} words")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="passgen - random passwords, diceware passphrases and strength checks",
    )
    parser.add_argument("-d", "--debug", action="count", default=0, help="Debug message verbosity (repeat for more)")
    parser.add_argument("--config", default=None, help="Path to a JSON settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    cmd_password = sub.add_parser("password", aliases=["generate"], help="Generate random passwords")
    cmd_password.add_argument("-l", "--length", type=int, default=None, help="Password length (default: 12)")
    cmd_password.add_argument("-c", "--count", type=int, default=None, help="Number of passwords (default: 1)")
    source = cmd_password.add_mutually_exclusive_group()
    source.add_argument("-a", "--alphabet", default=None, help=f"Alphabet preset: {', '.join(alphabet_names())}")
    source.add_argument("-C", "--custom", default=None, help="Custom alphabet (repeated characters are ignored)")
    cmd_password.add_argument("-s", "--strength", action="store_true", help="Print the strength of each password")
    cmd_password.set_defaults(func=_cmd_password)

    cmd_phrase = sub.add_parser("passphrase", help="Generate diceware-style passphrases")
    cmd_phrase.add_argument("-l", "--length", type=int, default=None, help="Number of words (default: 3)")
    cmd_phrase.add_argument("-c", "--count", type=int, default=None, help="Number of passphrases (default: 1)")
    cmd_phrase.add_argument("-S", "--separator", default=None, help="Word separator, used verbatim (default: -)")
    words = cmd_phrase.add_mutually_exclusive_group()
    words.add_argument("-w", "--wordlist", default=None, help=f"Wordlist preset: {', '.join(wordlist_names())}")
    words.add_argument("-C", "--custom", nargs="+", default=None, metavar="WORD", help="Custom words")
    words.add_argument("--custom-file", default=None, help="File with one word per line (or EFF format)")
    cmd_phrase.add_argument("--wordlist-dir", default=None, help="Directory holding the EFF wordlist files")
    cmd_phrase.add_argument("-s", "--strength", action="store_true", help="Print the strength of each passphrase")
    cmd_phrase.set_defaults(func=_cmd_passphrase)

    cmd_check = sub.add_parser("check", help="Check password strength")
    cmd_check.add_argument("password", nargs="?", default=None, help="Password to check (prompted for when omitted)")
    checked = cmd_check.add_mutually_exclusive_group()
    checked.add_argument("-a", "--alphabet", default=None, help="Alphabet the password was drawn from")
    checked.add_argument("-C", "--custom", default=None, help="Custom alphabet the password was drawn from")
    cmd_check.set_defaults(func=_cmd_check)

    cmd_audit = sub.add_parser("audit", help="Statistically audit the random index sampler")
    cmd_audit.add_argument("-n", "--range", type=int, default=10, help="Sample indices in [0, N) (default: 10)")
    cmd_audit.add_argument("-t", "--trials", type=int, default=100_000, help="Number of draws (default: 100000)")
    cmd_audit.add_argument("--alpha", type=float, default=DEFAULT_ALPHA, help="Significance level (default: 0.001)")
    cmd_audit.add_argument("--plot", default=None, metavar="FILE", help="Save a histogram figure to FILE")
    cmd_audit.set_defaults(func=_cmd_audit)

    cmd_list = sub.add_parser("list", help="List alphabet and wordlist presets")
    cmd_list.set_defaults(func=_cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)
    try:
        settings = load_settings(args.config)
        return int(args.func(args, settings))
    except PassgenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
