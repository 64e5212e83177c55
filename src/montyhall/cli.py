"""
Command-line front end.

Collects the configuration from arguments, runs the experiment, and prints
per-trial narration and the final report. Raw argument values are passed
through :func:`montyhall.validation.coerce_config`, so ``--doors abc`` falls
back to the default with a warning, as the interactive prompts did.

Usage::

    montyhall --doors 10 --reveal 8 --switch --experiments 15000 --show-each
"""

import argparse
import logging
import signal
import sys
import threading
from typing import List, Optional

from .config import DEFAULT_NUMBER_OF_EXPERIMENTS, TrialConfig
from .exceptions import MontyHallError
from .experiment import run_experiments
from .narration import TrialNarrator, format_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='montyhall',
        description='Monte Carlo simulation of the generalized Monty Hall problem.',
    )
    parser.add_argument('--doors', default=None,
                        help='number of doors the contestant can choose from (default 3)')
    parser.add_argument('--reveal', default=None,
                        help='number of doors to reveal, 1 to doors-2 (default doors-2)')
    parser.add_argument('--switch', action=argparse.BooleanOptionalAction, default=True,
                        help='switch doors after the host reveals non-winning doors')
    parser.add_argument('--experiments', type=int, default=DEFAULT_NUMBER_OF_EXPERIMENTS,
                        help='number of Monte Carlo experiments (default %(default)s)')
    parser.add_argument('--show-each', action='store_true',
                        help='print one line per experiment')
    parser.add_argument('--seed', type=int, default=None, help='random seed')
    parser.add_argument('--jobs', type=int, default=1,
                        help='worker processes, -1 for all CPUs (default 1)')
    parser.add_argument('--csv', metavar='PATH', default=None,
                        help='write the per-experiment history to a CSV file')
    parser.add_argument('--plot', metavar='PATH', default=None,
                        help='save a running win-rate plot')
    parser.add_argument('-v', '--verbose', action='store_true', help='log progress')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    sequential = args.jobs == 1
    record_trials = bool(args.csv or args.plot)
    stop_event = threading.Event() if sequential else None
    previous_handler = None
    if stop_event is not None and threading.current_thread() is threading.main_thread():
        # Ctrl+C finishes the current trial and reports what was completed.
        previous_handler = signal.signal(signal.SIGINT, lambda signum, frame: stop_event.set())

    try:
        config = TrialConfig.from_user_input(args.doors, args.reveal, args.switch)
        results = run_experiments(
            config,
            args.experiments,
            seed=args.seed,
            observer=TrialNarrator(sys.stdout) if args.show_each else None,
            stop_event=stop_event,
            record_trials=record_trials,
            n_jobs=args.jobs,
        )
        if args.csv:
            results.to_csv(args.csv)
        if args.plot:
            results.plot({'savefig': args.plot})
    except MontyHallError as e:
        print(f"montyhall: error: {e}", file=sys.stderr)
        return 2
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)

    print(format_report(results))
    return 0


if __name__ == '__main__':
    sys.exit(main())
