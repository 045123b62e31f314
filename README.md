# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and cycles through eating, sleeping and thinking. A fork lies
between each pair of neighbours, and a philosopher needs both of them to eat.
A separate monitor thread watches for a philosopher who has gone too long
without a meal. It also ends the run once every philosopher has eaten the
required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

The same command can be started with `python -m philosophers.cli`.

All arguments must be positive integers below 2147483647, written with
digits only. Times are in milliseconds. If `number_of_meals` is given, the
simulation stops once every philosopher has eaten at least that many times.
Without it, the simulation runs until a philosopher dies.

Example:

```
philo 5 800 200 200 7
```

Every state change is printed as one line: the time in milliseconds since
the start, the philosopher's number, and the action (`has taken a fork`,
`is eating`, `is sleeping`, `is thinking`).

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

When a philosopher starves, the monitor prints `<time> <id> died` and no
further state lines are printed. A lone philosopher takes the single fork,
can never eat, and so dies once `time_to_die` has passed. When all threads
have finished, two closing lines report that the philosopher threads and
the monitor thread have rejoined the main thread.

Invalid arguments print an error to standard error, and the command exits
with status 1. The command also exits with status 1 if a thread could not
be started.

## Using it from Python

```python
import sys

from philosophers.table import Settings
from philosophers.cli import run

settings = Settings.from_args(["4", "410", "200", "200", "3"])
run(settings, sys.stdout)
```

- `philosophers.args.validate_args` checks a list of arguments the same way
  the command does and returns them as integers. It raises `ArgumentError`
  (a `ValueError`) when they are invalid. `philosophers.args.atoi` parses a
  leading integer from text as C's `atoi` does.
- `philosophers.table.Settings` holds the parameters; `Table` holds the
  philosophers, the forks and the shared stop flag, and writes the output.
- `philosophers.clock.Clock` gives milliseconds since the start of a run.
- `philosophers.routines` holds the philosopher thread body
  (`philosopher_routine`) and the eat, sleep and think steps.
- `philosophers.monitor` holds the monitor thread body (`death_monitor`) and
  a single inspection pass (`check_once`).

## Running the tests

```
pip install .[test]
pytest
```