"""Command-line entry point: compile-timer <mode> <dir>."""

import argparse
import sys

from .clocks import Clock, MonotonicClock
from .config import TimerConfig
from .errors import EXIT_OK, EXIT_USAGE, TimerError
from .timer import run_mode


USAGE_MESSAGE = "Args expected: [mode (start/stop)] [dir_for_cache_file]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compile-timer",
        usage="%(prog)s [--config PATH] [--strict-exit] [--verbose] [--] mode dir",
        description="Measure elapsed time between a 'start' and a later 'stop' call",
        allow_abbrev=False,
    )
    parser.add_argument("--config", help="YAML config file (default: $COMPILE_TIMER_CONFIG)")
    parser.add_argument("--strict-exit", action="store_true",
                        help="Exit non-zero when an error is reported")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print the cache path and raw stamps")
    return parser


def parse_command_line(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """Split argv into known flags and the positional words.

    Flags may appear anywhere. Anything argparse does not recognise, such
    as a directory named ``-build``, is kept as a positional, and
    everything after ``--`` is taken as-is. The count is checked by the
    caller so a wrong count prints the usage line on stdout.
    """
    if "--" in argv:
        split = argv.index("--")
        head, tail = argv[:split], argv[split + 1:]
    else:
        head, tail = argv, []
    args, rest = build_parser().parse_known_args(head)
    return args, rest + tail


def report_error(error: TimerError):
    """Print an error and its guidance note to stdout."""
    print(str(error))
    if error.guidance:
        print(error.guidance)


def main(argv: list[str] | None = None, clock: Clock | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args, positionals = parse_command_line(list(argv))

    try:
        config = TimerConfig.load(args.config).override(
            strict_exit_codes=args.strict_exit,
            verbose=args.verbose,
        )
    except TimerError as e:
        report_error(e)
        return e.exit_code if args.strict_exit else EXIT_OK

    if len(positionals) != 2:
        print(USAGE_MESSAGE)
        return EXIT_USAGE if config.strict_exit_codes else EXIT_OK

    mode, directory = positionals
    try:
        run_mode(mode, directory, clock=clock or MonotonicClock(), config=config)
    except TimerError as e:
        report_error(e)
        # Failures still exit 0 unless strict exit codes are enabled
        return e.exit_code if config.strict_exit_codes else EXIT_OK

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
