# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread; forks are locks shared between neighbours around a round
table. A monitor thread watches for a philosopher who starves and,
optionally, for the moment when everyone has eaten enough.

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same entry point is available as `python -m philosophers.cli`.

All times are in milliseconds. Every argument must be a plain run of ASCII
digits (no signs, no spaces) and fit in a 32-bit signed integer. The
number of philosophers and `time_to_die` must be positive; the optional
meal count, when given, must be positive as well.

Example:

```
philo 5 800 200 200 7
```

Each event is printed on its own line as

```
<milliseconds since start> <philosopher id> <message>
```

where the message is one of `has taken a fork`, `is eating`,
`is sleeping`, `is thinking` or `died`. The simulation stops as soon as a
philosopher dies or, when a meal count was given, once every philosopher
has eaten at least that many times.

With a single philosopher there is only one fork: the program prints that
the fork was taken, waits `time_to_die` milliseconds and prints
`<time_to_die> 1 died`.

Invalid input prints one of `invalid arguments`, `invalid argument values`
or `invalid number of eats` on standard error and exits with status 1.

## Library use

```python
import sys
from philosophers.args import parse_args
from philosophers.simulation import Simulation

settings = parse_args(["4", "410", "200", "200", "3"])
Simulation(settings, sys.stdout).run()
```

- `philosophers.args.parse_args(argv)` takes the arguments that follow the
  program name and returns a frozen `Settings` dataclass
  (`number_of_philosophers`, `time_to_die`, `time_to_eat`,
  `time_to_sleep`, `number_of_eats`, the last being `None` when not
  given). It raises `ArgumentError`, a `ValueError`, on bad input.
  `parse_number(text)` is the digit-only number parser it uses.
- `philosophers.table.Table(settings)` builds the ring of `Philosopher`
  objects numbered from 1; it is iterable, has a length, and `all_ate()`
  reports whether every philosopher has reached the meal count.
  `Philosopher.forks_in_order()` gives the two forks lower seat first, and
  `starving_for(now)` the milliseconds since the last meal.
  `timestamp_ms()` returns wall-clock time in milliseconds.
- `philosophers.simulation.Simulation(settings, out)` runs the dinner with
  `run()`, writing events to `out` (standard output by default).
  `check_once()` performs a single monitor pass and returns `True` when the
  dinner is over. `run_lone_philosopher(settings, out)` plays out the
  single-philosopher case.
- `philosophers.cli.main(argv=None)` is the command's entry point and
  returns the exit status.

## Tests

```
pip install -e .[test]
pytest
```