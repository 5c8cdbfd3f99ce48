"""
Command-line interface for browsing and serving the word repository.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .config import Settings, configure_logging
from .exceptions import ConfigError, DataImportError
from .models import MorphemeKind, Morpheme, Word
from .repository import Repository
from .seed import load_dataset

logger = logging.getLogger(__name__)

KIND_CHOICES = [k.value for k in MorphemeKind]


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the wordblocks CLI."""
    load_dotenv()
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = Settings.from_env()
        configure_logging(args.log_level or settings.log_level)
        repo = build_repository(args, settings)
    except (ConfigError, DataImportError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return args.func(args, repo, settings)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordblocks",
        description="Break words into prefix, root and suffix building blocks",
    )
    parser.add_argument(
        "--data",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help="Extra YAML dataset to load (repeatable)",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start from an empty repository instead of the reference dataset",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WORDBLOCKS_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Port to listen on")
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable the Flask debugger",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # words command
    words_parser = subparsers.add_parser("words", help="List words")
    words_parser.add_argument(
        "--search", "-s",
        type=str,
        help="Only words containing this text (case-insensitive)",
    )
    words_parser.set_defaults(func=cmd_words)

    # word command
    word_parser = subparsers.add_parser(
        "word",
        help="Show a word and its morphemes",
    )
    word_parser.add_argument("word", type=str, help="Word to show")
    word_parser.set_defaults(func=cmd_word)

    # morpheme command
    morpheme_parser = subparsers.add_parser("morpheme", help="Show a morpheme")
    morpheme_parser.add_argument("text", type=str, help="Morpheme text, e.g. dis-")
    morpheme_parser.add_argument("kind", choices=KIND_CHOICES, help="Morpheme type")
    morpheme_parser.set_defaults(func=cmd_morpheme)

    # morphemes command
    morphemes_parser = subparsers.add_parser(
        "morphemes",
        help="List morphemes of one type",
    )
    morphemes_parser.add_argument("kind", choices=KIND_CHOICES, help="Morpheme type")
    morphemes_parser.set_defaults(func=cmd_morphemes)

    # stats command
    stats_parser = subparsers.add_parser("stats", help="Show record counts")
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def build_repository(args: argparse.Namespace, settings: Settings) -> Repository:
    if args.no_seed:
        repo = Repository(seed=False)
    else:
        repo = Repository(seed_path=settings.seed_file)
    for path in args.data:
        repo.load(load_dataset(path))
    return repo


def cmd_serve(args: argparse.Namespace, repo: Repository, settings: Settings) -> int:
    """Handle serve command."""
    from .api import create_app

    app = create_app(repo, settings)
    app.run(
        host=args.host or settings.host,
        port=args.port or settings.port,
        debug=args.debug,
    )
    return 0


def cmd_words(args: argparse.Namespace, repo: Repository, settings: Settings) -> int:
    """Handle words command."""
    words = repo.list_words(args.search)
    if not words:
        print("No words found.")
        return 0
    for w in words:
        print(f"  {w.word:<20} {_format_blocks(w)}")
    return 0


def cmd_word(args: argparse.Namespace, repo: Repository, settings: Settings) -> int:
    """Handle word command."""
    record = repo.get_word(args.word)
    if record is None:
        print(f"[ERROR] Word not found: {args.word}")
        return 1

    print(f"\n{record.word}  ({_format_blocks(record)})")
    print(f"  {record.definition}")
    print()
    for kind, text, morpheme in repo.resolve_components(record.word) or []:
        if morpheme is None:
            print(f"  [{kind.value}] {text}: (no entry)")
        else:
            print(f"  [{kind.value}] {text}: {morpheme.definition}")
    return 0


def cmd_morpheme(args: argparse.Namespace, repo: Repository, settings: Settings) -> int:
    """Handle morpheme command."""
    morpheme = repo.get_morpheme(args.text, args.kind)
    if morpheme is None:
        print(f"[ERROR] Morpheme not found: {args.text} ({args.kind})")
        return 1
    _print_morpheme(morpheme)
    return 0


def cmd_morphemes(args: argparse.Namespace, repo: Repository, settings: Settings) -> int:
    """Handle morphemes command."""
    morphemes = repo.list_morphemes_by_kind(args.kind)
    if not morphemes:
        print(f"No {args.kind} morphemes.")
        return 0
    for m in morphemes:
        print(f"  {m.text:<12} {m.definition}")
    return 0


def cmd_stats(args: argparse.Namespace, repo: Repository, settings: Settings) -> int:
    """Handle stats command."""
    print(f"Words:     {repo.word_count}")
    print(f"Morphemes: {repo.morpheme_count}")
    for kind in MorphemeKind:
        print(f"  {kind.value:<8} {len(repo.list_morphemes_by_kind(kind))}")
    return 0


def _format_blocks(word: Word) -> str:
    return " + ".join(text for _, text in word.components.parts())


def _print_morpheme(morpheme: Morpheme) -> None:
    print(f"\n{morpheme.text} [{morpheme.kind.value}]")
    print(f"  {morpheme.definition}")
    if morpheme.examples:
        print(f"  Examples: {', '.join(morpheme.examples)}")


if __name__ == "__main__":
    sys.exit(main())
