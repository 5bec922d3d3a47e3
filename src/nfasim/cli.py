"""Command-line driver: test every line of a strings file against an automaton."""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from nfasim import __version__
from nfasim.automaton.automaton import Automaton
from nfasim.automaton.simulator import Simulator
from nfasim.config import Config
from nfasim.diagnostics.trace import format_states
from nfasim.exceptions import LoadError
from nfasim.parser.fa_parser import load_automaton
from nfasim.parser.input_line import parse_input_line

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_LOAD_ERROR = 2
EXIT_STRINGS_ERROR = 3

DESCRIPTION = "Simulate a nondeterministic finite automaton (NFA) on a list of strings."

EPILOG = """\
automaton file (.fa):
  line 1   alphabet symbols separated by spaces ('&' is reserved for epsilon)
  line 2   number of states
  line 3   start state
  then one line per state: <id> <accept 0|1> <count> [<symbol> <dest>]...

strings file:
  one string per line, optionally preceded by a numeric label ("3 abba").
  Use '&' for the empty string.
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="nfasim",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("automaton", help="automaton definition (.fa)")
    parser.add_argument("strings", help="file with one input string per line")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="print a step-by-step simulation trace for every string",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="print a summary of the loaded automaton first",
    )
    parser.add_argument(
        "--no-labels",
        action="store_true",
        help="do not strip a leading numeric label from each line",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        strip_numeric_labels=not args.no_labels,
        trace=args.trace,
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )


def describe(automaton: Automaton) -> str:
    """Summarize an automaton as text."""
    lines = [
        f"Alphabet: {{{','.join(sorted(automaton.alphabet))}}}",
        f"States: {automaton.num_states}",
        f"Start state: {automaton.start_state}",
        f"Accepting states: {format_states(automaton.accepting_states)}",
        f"Transitions ({automaton.transition_count()}):",
    ]
    lines.extend(
        f"  {source} -{symbol}-> {target}"
        for source, symbol, target in automaton.iter_transitions()
    )
    return "\n".join(lines)


def run_strings(
    simulator: Simulator, lines: Iterable[str], config: Config, out: TextIO
) -> None:
    """Simulate every line and write ``<line> --- Accepted|Rejected``."""
    for raw in lines:
        line = parse_input_line(raw, config)
        if config.trace:
            trace = simulator.trace(line.text)
            print(trace.render(), file=out)
            accepted = trace.accepted
        else:
            accepted = simulator.simulate(line.text)
        result = "Accepted" if accepted else "Rejected"
        print(f"{line.original} --- {result}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the driver and return the process exit code."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    if args.verbose:
        logging.basicConfig(
            level=config.log_level, format="%(name)s %(levelname)s: %(message)s"
        )

    try:
        automaton = load_automaton(args.automaton)
    except LoadError as e:
        print(f"Error loading automaton: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    if args.describe:
        print(describe(automaton))

    try:
        with open(args.strings, encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        print(f"Cannot read strings file {args.strings}: {e.strerror}", file=sys.stderr)
        return EXIT_STRINGS_ERROR
    except UnicodeDecodeError:
        print(
            f"Cannot read strings file {args.strings}: not valid UTF-8", file=sys.stderr
        )
        return EXIT_STRINGS_ERROR

    run_strings(Simulator(automaton), lines, config, sys.stdout)

    logger.debug("Finished %s", args.strings)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
