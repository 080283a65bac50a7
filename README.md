# philosim

A simulation of the dining philosophers problem. The philosophers sit
around a table, and there is one fork between each pair of neighbours.
Each philosopher runs in its own thread. A philosopher has to hold both
neighbouring forks to eat. After eating it sleeps, and then it thinks. A
watcher thread announces the death of any philosopher who goes too long
without a meal. Once a death is announced, no more events are printed.

## Installation

```
pip install .
```

## Usage

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

You can also run `python -m philosim.cli` with the same arguments.

All times are in milliseconds. `MEALS` is optional. If you give it, a
philosopher stops once it has eaten that many meals. A philosopher who
has finished its meals is never announced as dead. If you leave `MEALS`
out, the simulation runs until a philosopher dies.

Example:

```
philosim 5 800 200 200 7
```

Each event is printed on its own line. A line holds the milliseconds
since the start, three spaces, the philosopher's number and what
happened:

```
0   2 has taken a fork
0   2 has taken a fork
0   2 is eating
200   2 is sleeping
...
```

The events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Philosophers with even numbers start eating
straight away. Philosophers with odd numbers first wait for
`TIME_TO_EAT`.

### Argument rules

- You must give four or five arguments. With any other number of
  arguments, the command prints
  `philos - t die - t eat - t sleep - [meals]`.
- An argument may be at most 11 characters long. A longer argument
  prints `Error int out of limits` on standard error.
- An argument may contain only digits, spaces, `+` and `-`.
- Leading whitespace and a run of sign characters are accepted.
  Reading stops at the first character that is not a digit. A value
  that is negative, or larger than 2147483647, is rejected. So is an
  argument that is empty or holds only whitespace.
- At least one philosopher is required. A single philosopher takes the
  only fork and dies after `TIME_TO_DIE` milliseconds.
- If the arguments are invalid, the command prints a message and exits
  with status 1. The message goes to standard output, except where
  noted above.

## Library use

```python
import sys

from philosim.args import parse_settings
from philosim.table import Table

settings = parse_settings(["4", "410", "200", "200", "3"])
Table(settings, sys.stdout).run()
```

- `parse_settings` returns a `Settings` dataclass with the fields
  `philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
  `meals`. `meals` is `None` when no meal count is given.
- `parse_settings` raises `ArgumentError` when the arguments are
  invalid. `ArgumentError` is a subclass of `ValueError`. Its
  `to_stderr` attribute tells whether the message belongs on standard
  error.
- `parse_limited_int` and `is_numeric` are the single-argument checks
  that `parse_settings` uses.
- `Table` writes its events to any text stream with `write` and
  `flush`.

## Running the tests

```
pip install .[test]
pytest
```