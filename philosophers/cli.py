"""Command-line entry point: run the dining philosophers simulation."""

import sys
import threading

from .args import ArgumentError
from .monitor import death_monitor
from .routines import philosopher_routine
from .table import Settings, Table

PHILOSOPHERS_JOINED = "\t\tAll Philosopher Threads have rejoined the Main Thread."
MONITOR_JOINED = "\t\tThe Death Monitor Thread has rejoined the Main Thread."


def _join(threads, out):
    for thread in threads:
        thread.join()
    print(PHILOSOPHERS_JOINED, file=out, flush=True)


def run(settings, out=None):
    """Run a simulation to its end; return False if a thread failed to start."""
    out = out if out is not None else sys.stdout
    table = Table(settings, out=out)
    started = []
    for philo in table.philosophers:
        thread = threading.Thread(
            target=philosopher_routine, args=(table, philo), daemon=True
        )
        try:
            thread.start()
        except RuntimeError:
            table.stop()
            _join(started, out)
            return False
        philo.thread = thread
        started.append(thread)
    monitor = threading.Thread(target=death_monitor, args=(table,), daemon=True)
    try:
        monitor.start()
    except RuntimeError:
        table.stop()
        _join(started, out)
        return False
    table.start()
    _join(started, out)
    monitor.join()
    print(MONITOR_JOINED, file=out, flush=True)
    return True


def main(argv=None):
    """Parse arguments, run the simulation and return an exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = Settings.from_args(args)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return 1
    return 0 if run(settings) else 1


if __name__ == "__main__":
    sys.exit(main())