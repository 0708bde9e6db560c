"""Command-line interface for medilingo.

Intentionally simple:
- reads one instruction per line from stdin or a file (or a single --text)
- translates each instruction independently
- writes translations to stdout and diagnostics to stderr

Exit status is 0 when every instruction translated, 2 otherwise.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Iterable, TextIO

from . import config
from .errors import InputLengthError, MedilingoError
from .pipeline import lex_instruction, simplify_instruction

logger = logging.getLogger(__name__)


def _read_lines(path: str | None) -> TextIO:
    if path is None or path == "-":
        return sys.stdin
    return open(path, "r", encoding="utf-8")


def check_length(text: str,
                 minimum: int = config.MIN_INSTRUCTION_LENGTH,
                 maximum: int = config.MAX_INSTRUCTION_LENGTH) -> str:
    """Apply the length bounds the core leaves to its caller."""
    n = len(text)
    if n < minimum or n > maximum:
        raise InputLengthError(n, minimum, maximum)
    return text


def _process(text: str, show_tokens: bool) -> str:
    check_length(text)
    if show_tokens:
        return " ".join(str(t) for t in lex_instruction(text))
    return simplify_instruction(text)


def run(instructions: Iterable[str], show_tokens: bool = False, skip_blank: bool = True) -> int:
    failed = 0
    for raw in instructions:
        text = raw.strip()
        if not text and skip_blank:
            continue
        try:
            out = _process(text, show_tokens)
        except MedilingoError as ex:
            failed += 1
            logger.debug("failed (%s): %r", ex.kind, text)
            sys.stderr.write(f"error: {ex}\n")
            continue
        sys.stdout.write(out + "\n")
    return 2 if failed else 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="medilingo",
        description="Simplify English dosage instructions into Taglish.",
    )
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--text", help="Translate a single instruction instead of reading lines")
    p.add_argument("--tokens", action="store_true", help="Print the token sequence instead of translating")
    p.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages to stderr")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.text is not None:
        return run([args.text], show_tokens=args.tokens, skip_blank=False)

    try:
        fh = _read_lines(args.path)
    except OSError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    if fh is sys.stdin:
        return run(fh, show_tokens=args.tokens)
    with fh:
        return run(fh, show_tokens=args.tokens)


if __name__ == "__main__":
    raise SystemExit(main())
