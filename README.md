# diningtable

This package simulates the dining philosophers problem. Philosophers sit
around a table. Each one eats, then sleeps, then thinks, and repeats. A
philosopher needs two forks to eat. If a philosopher goes longer than
`time_to_die` milliseconds without starting a meal, that philosopher dies
and the simulation stops.

The package has two tables. Both use threads.

- `diningtable.table.Table` gives every fork its own lock. A philosopher
  in an even position takes the left fork first. A philosopher in an odd
  position takes the right fork first. A monitor loop watches for deaths
  and for philosophers who have eaten enough.
- `diningtable.semaphore_table.SemaphoreTable` puts all the forks in one
  counting semaphore. A second semaphore lets at most half of the table
  reach for forks at the same time. Each seat has its own watcher thread
  that detects when that seat starves.

## Install

```
pip install .
```

## Command line

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
philo-bonus number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

`philo` runs `Table`. `philo-bonus` runs `SemaphoreTable`. All times are in
milliseconds. The arguments must follow these rules:

- There must be four or five arguments.
- The number of philosophers must be from 1 to 200.
- `time_to_die`, `time_to_eat` and `time_to_sleep` must each be at least 60.
- `meals` is optional. If you give it, it must be positive, and the
  simulation ends once every philosopher has eaten that many times.

Each argument is read as a leading signed integer. Any characters after
the digits are ignored, and an argument with no leading digits reads as 0.
If the arguments break the rules, the command prints `wrong input` and
exits with status 1.

A single philosopher has only one fork and so can never eat. For one
philosopher, the command prints two lines and exits with status 1:

```
0 1 has taken a fork
<time_to_die> 1 has died
```

In every other case, each event is printed on its own line as
`<ms since start> <philosopher id> <action>`. The action is one of these:
`has taken a fork`, `is eating`, `is sleeping`, `is thinking` or `died`.
No lines are printed after the simulation ends.

## Library use

```python
import sys
from diningtable.config import parse_settings
from diningtable.table import Table

settings = parse_settings(["4", "410", "200", "200", "5"])
dead = Table(settings, sys.stdout).run()  # id of the philosopher who died, or None
```

- `diningtable.config`
  - `parse_settings(args)` takes the arguments that follow the program name.
    It returns a frozen `Settings`, which has the fields `philosophers`,
    `time_to_die`, `time_to_eat`, `time_to_sleep` and `meal_limit`, where 0
    means no limit, plus a `has_meal_limit` property. It raises
    `InvalidInput`, a `ValueError`, when the arguments break the rules above.
  - `parse_long(text)` does the integer reading described above.
  - `lone_philosopher_lines(settings)` returns the two fixed lines for a
    single philosopher.
- `diningtable.table.Table(settings, out=None)` writes to `out`, or to
  standard output if `out` is None. It has these methods:
  - `run()` runs the simulation and returns the id of the philosopher who
    died, or `None`.
  - `stop()` ends the simulation.
  - `is_running()` reports whether the simulation is still going.
- `diningtable.semaphore_table.SemaphoreTable(settings, out=None)` has
  `run()`, which returns a value in the same way as `Table.run()`.
- `diningtable.clock`
  - `now_ms()` returns wall-clock milliseconds.
  - `sleep_ms(duration, keep_going=None)` sleeps in short steps. It stops
    early once `keep_going()` returns false, and returns whether the full
    duration passed.

Both table classes raise `ValueError` if they have fewer than two
philosophers. Only the command line handles the single-philosopher case.

## Limits

- Both tables run inside one Python process as threads. The semaphore
  table does not use separate processes or named system semaphores.
- Timing depends on the operating system's scheduler and on the Python
  interpreter. With tight timings, a philosopher can die even when the
  settings should in theory let everyone survive.

## Tests

```
pip install .[test]
pytest
```