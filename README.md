# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. It picks up the two forks beside it (each fork is a lock),
eats, sleeps and thinks, and it dies if it goes too long without a meal.
Every event is printed with the number of milliseconds since the table was
laid.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

The same command is available as `python -m philosophers.cli`.

- `number_of_philosophers`: from 1 to 200.
- `time_to_die`, `time_to_eat`, `time_to_sleep`: in milliseconds, at least 60 each.
- `meals` (optional): each philosopher stops once it has eaten this many times.

Example:

```
philo 5 800 200 200 7
```

The output has one line per event, for example:

```
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
```

Each line gives a timestamp, then a philosopher's number (starting at 1),
then what it did: `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Once one philosopher has died, the others stop at
their next check.

With a single philosopher there is only one fork: it takes it, waits
`time_to_die` milliseconds and dies.

### How arguments are read

Numbers are read leniently: leading whitespace and a `+` are skipped, and
reading stops at the first character that is not a digit, so `200ms` counts
as 200. An argument with no digits, or whose digits run past its tenth
character, counts as 0. A leading `-` is an error.

When a philosopher is certain to starve anyway (`time_to_die` is not longer
than `time_to_eat` or `time_to_sleep`, or is shorter than the two together),
eating and sleeping are cut down to `time_to_die`.

### Errors

Bad input prints a message on standard error and exits with status 1. This
covers a wrong number of arguments, negative numbers, durations below 60 ms,
and a philosopher count of zero or above 200.

## Using it from Python

```python
import io

from philosophers.parsing import parse_args
from philosophers.table import Table

settings = parse_args(["4", "410", "200", "200", "3"])
log = io.StringIO()
Table(settings, output=log).run()
print(log.getvalue())
```

- `philosophers.parsing.parse_args(args)` takes the four or five arguments
  as strings and returns a `Settings` (`philosophers`, `time_to_die`,
  `time_to_eat`, `time_to_sleep`, `max_meals`, the last being `None` when
  not given). It raises `philosophers.parsing.ConfigError` on bad input.
- `philosophers.parsing.parse_number(text)` reads one argument as described
  above.
- `philosophers.table.Table(settings, output=None)` lays the table; events
  go to `output`, or to standard output when it is `None`. `Table.run()`
  starts one thread per philosopher and returns when they have all stopped.
- `philosophers.table.clamp_durations(time_to_die, time_to_eat, time_to_sleep)`
  returns the `(time_to_eat, time_to_sleep)` pair actually used.
- `philosophers.cli.main(argv=None)` runs the command and returns its exit
  status.

## Running the tests

```
pip install .[test]
pytest
```