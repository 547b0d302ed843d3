"""Command-line front door for dirtree.

Parses the root path and depth bound, validates the root, then streams the
tree rows and the closing directory/file summary to stdout.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import TextIO

from . import config
from .file_tree_model import InvalidRootError, validate_root
from .render import format_summary
from .ui_theme import available_theme_names, resolve_theme
from .walk import walk_tree

PROG = "dirtree"

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_FLAG_OPTIONS = frozenset({"-h", "--help", "--no-color", "-v", "--verbose", "--save-defaults"})
_VALUE_OPTIONS = frozenset({"--theme"})


def parse_depth(value: str) -> int:
    """Parse a depth argument like C ``atoi`` and clamp it to at least 1.

    Leading whitespace and a sign are accepted, trailing junk is ignored, and
    input without leading digits parses as 0.
    """
    match = _LEADING_INT_RE.match(value)
    parsed = int(match.group(1)) if match else 0
    return max(1, parsed)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List a directory as an ASCII-art tree with directory/file totals.",
        allow_abbrev=False,
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "depth",
        nargs="?",
        default=None,
        help="Maximum recursion level; the root's children are level 1 (default: 1).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given --theme, --no-color and depth as defaults for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log absorbed filesystem errors to stderr.")
    return parser


def split_positionals(argv: list[str]) -> list[str]:
    """Reorder ``argv`` so every token that is not a known option follows ``--``.

    Paths and depth values starting with ``-`` then reach the positional
    arguments instead of being rejected as unknown options.
    """
    options: list[str] = []
    positionals: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            positionals.extend(tokens)
            break
        if token in _FLAG_OPTIONS:
            options.append(token)
        elif token in _VALUE_OPTIONS:
            options.append(token)
            value = next(tokens, None)
            if value is not None:
                options.append(value)
        elif token.split("=", 1)[0] in _VALUE_OPTIONS:
            options.append(token)
        else:
            positionals.append(token)
    return [*options, "--", *positionals]


def write_text(stream: TextIO, text: str) -> None:
    """Write ``text`` to ``stream``, passing undecodable filename bytes through.

    Names that are not valid in the filesystem encoding arrive as lone
    surrogates; ``surrogateescape`` turns them back into their original bytes.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return
    stream.flush()
    buffer.write(text.encode(stream.encoding or "utf-8", errors="surrogateescape"))


def _save_defaults(args: argparse.Namespace) -> None:
    if args.theme is not None:
        config.save_theme_name(args.theme)
    config.save_no_color(args.no_color)
    if args.depth is not None:
        config.save_default_depth(parse_depth(args.depth))


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested directory.

    Exits through ``SystemExit`` with a ``dirtree:``-prefixed message when the
    root is missing or is not a directory. No other condition aborts.
    """
    raw_argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(split_positionals(raw_argv))
    _configure_logging(args.verbose)

    try:
        root = validate_root(args.path)
    except InvalidRootError as exc:
        raise SystemExit(f"{PROG}: {exc}") from exc

    if args.save_defaults:
        _save_defaults(args)

    max_depth = parse_depth(args.depth) if args.depth is not None else config.load_default_depth()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color or config.load_no_color())

    out = sys.stdout
    write_text(out, f"{args.path}\n")
    totals = walk_tree(root, max_depth, lambda row: write_text(out, f"{row}\n"), theme=theme)
    write_text(out, f"\n{format_summary(totals)}\n")
    out.flush()


if __name__ == "__main__":
    main()
