#!/usr/bin/env python3
"""
pseudolex CLI
=============
Command-line interface for building models and generating words.

Usage:
    pseudolex build
    pseudolex build --source file --words words.txt
    pseudolex generate -n 99 --min-length 9 --max-length 14
    pseudolex check "plam"
"""

import argparse
import logging
import random
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pseudolex import __version__
from pseudolex.build import build_artifacts, load_generation_artifacts
from pseudolex.dictionary import PROVIDERS, load_words
from pseudolex.generation import GenerationSession, NonEnglishWordGenerator
from pseudolex.quality import CandidateFilter, is_pronounceable
from pseudolex.settings import get_setting, require_setting, resolve_path
from pseudolex.store import ModelStore
from similarity_checker import SimilarityChecker

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support.

    Words go to stdout; everything else goes to stderr.
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(stderr=True)

    def word(self, word: str):
        print(word, flush=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        self.console.print(f"[bold red]Error:[/] {msg}", highlight=False)

    def success(self, msg: str):
        if not self.quiet:
            self.console.print(f"[green]OK:[/] {msg}", highlight=False)


def setup_logging(verbose: bool = False, quiet: bool = False):
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = get_setting("logging.level", "INFO")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def option_or_setting(value, path: str):
    """Use an explicit CLI value (even 0) before the app.yaml setting."""
    return value if value is not None else require_setting(path)


def get_store(args) -> ModelStore:
    directory = option_or_setting(getattr(args, 'store', None), "store.directory")
    return ModelStore(resolve_path(directory))


def validate_word(word: str) -> tuple[bool, str]:
    """Validate a word argument."""
    if not word or not word.strip():
        return False, "Word cannot be empty"
    word = word.strip()
    if not word.isalpha() or not word.islower() or not word.isascii():
        return False, "Word must contain only lowercase letters a-z"
    return True, word


# =============================================================================
# Commands
# =============================================================================

def cmd_build(args, out: Output):
    """Build all models and indexes from the word source."""
    store = get_store(args)
    words = load_words(provider=args.source, path=args.words, top_n=args.top_n)
    if not words:
        out.error("Word source is empty")
        return 1

    with out.console.status("Building...") as status:
        report = build_artifacts(words, store, on_step=status.update)

    table = Table(title=f"Artifacts in {store.directory}")
    table.add_column("Artifact")
    table.add_column("Entries", justify="right")
    for name, entries in report.artifacts.items():
        table.add_row(name, f"{entries:,}")
    out.print(table)
    out.success(f"Built from {report.source_words:,} words ({report.unique_words:,} unique)")
    return 0


def cmd_generate(args, out: Output):
    """Generate words, one per line on stdout."""
    store = get_store(args)
    trigram_model, preprocessed_dictionary = load_generation_artifacts(
        store, restricted=args.restricted
    )

    count = option_or_setting(args.count, "generation.count")
    max_attempts = args.max_attempts
    if max_attempts is None:
        max_attempts = get_setting("generation.max_attempts")

    generator = NonEnglishWordGenerator(
        trigram_model,
        preprocessed_dictionary,
        min_length=option_or_setting(args.min_length, "generation.min_length"),
        max_length=option_or_setting(args.max_length, "generation.max_length"),
        threshold=option_or_setting(args.threshold, "generation.similarity_threshold"),
        max_attempts=max_attempts,
        rng=random.Random(args.seed) if args.seed is not None else None,
    )

    session = GenerationSession()
    for word in generator.generate(count, session):
        out.word(word)

    logger.info(
        f"Generated {len(session.used_words)} words in {session.total_attempts:,} attempts"
    )
    return 0


def cmd_check(args, out: Output):
    """Run a word through every filter and report the result."""
    valid, word = validate_word(args.word)
    if not valid:
        out.error(word)
        return 1

    store = get_store(args)
    _, preprocessed_dictionary = load_generation_artifacts(store, restricted=args.restricted)

    threshold = (args.threshold if args.threshold is not None
                 else require_setting("generation.similarity_threshold"))
    candidate_filter = CandidateFilter(
        preprocessed_dictionary,
        min_length=args.min_length if args.min_length is not None else 1,
        threshold=threshold,
    )
    verdict = candidate_filter.evaluate(word)
    similarity = SimilarityChecker(preprocessed_dictionary, threshold).check(word)

    table = Table(title=word, show_header=False)
    table.add_row("Pronounceable", "yes" if is_pronounceable(word) else "no")
    table.add_row("Closest real word", similarity.closest_word or "-")
    table.add_row("Distance", "-" if similarity.distance is None else str(similarity.distance))
    table.add_row("Verdict", "accepted" if verdict.accepted else verdict.rejection.value)
    out.console.print(table)
    return 0 if verdict.accepted else 2


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='pseudolex',
        description='Generate pronounceable words that are not English',
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')
    parser.add_argument('--store', help='Model directory (default: store.directory in app.yaml)')

    # --store is accepted after the subcommand too; SUPPRESS keeps an
    # earlier top-level value from being reset to None
    store_options = argparse.ArgumentParser(add_help=False)
    store_options.add_argument('--store', default=argparse.SUPPRESS,
                               help='Model directory (default: store.directory in app.yaml)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- build ---
    p = subparsers.add_parser('build', aliases=['b'], parents=[store_options],
                              help='Build models from the word source')
    p.add_argument('--source', choices=PROVIDERS, help='Word source (default: word_source.provider)')
    p.add_argument('--words', help='Word list file for --source file')
    p.add_argument('--top-n', type=int, help='Number of wordfreq words to use')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], parents=[store_options],
                              help='Generate words')
    p.add_argument('-n', '--count', type=int, help='Number of words (default: generation.count)')
    p.add_argument('--min-length', type=int, help='Minimum word length')
    p.add_argument('--max-length', type=int, help='Maximum letters sampled per word')
    p.add_argument('--threshold', '-t', type=int, help='Max edit distance to a real word')
    p.add_argument('--max-attempts', type=int, help='Give up after this many candidates per word')
    p.add_argument('--restricted', '-r', action='store_true', help='Use the restricted-letter model')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')

    # --- check ---
    p = subparsers.add_parser('check', aliases=['c'], parents=[store_options],
                              help='Check a word against the filters')
    p.add_argument('word', help='Word to check')
    p.add_argument('--min-length', type=int, help='Minimum word length')
    p.add_argument('--threshold', '-t', type=int, help='Max edit distance to a real word')
    p.add_argument('--restricted', '-r', action='store_true', help='Use the restricted-letter index')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'b': 'build',
        'gen': 'generate', 'g': 'generate',
        'c': 'check',
    }
    command = cmd_map.get(args.command, args.command)

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    out = Output(quiet=args.quiet)

    commands = {
        'build': cmd_build,
        'generate': cmd_generate,
        'check': cmd_check,
    }

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except Exception as e:
        out.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
