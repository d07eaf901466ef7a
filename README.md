# cpsolvers

Solutions to a collection of classic competitive programming problems.
Each one is an ordinary Python function that takes values and returns an
answer, rather than reading and printing text. A small command-line front
end runs some of them on input in the usual judge format.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Using the library

The problems are grouped by difficulty letter.

`cpsolvers.problems_a`

- `cheap_travel(n, m, a, b)`: lowest cost of `n` rides when a single ride
  costs `a` and a ticket for `m` rides costs `b`.
- `cut_ribbon(n, x, y, z)`: most pieces of lengths `x`, `y`, `z` that make up
  length `n`, or `-1` if none do.
- `mex_spiral(n)`: an `n` x `n` grid holding `0 .. n*n-1` in a spiral that
  starts at the centre.
- `has_two_substrings(s)`: whether `s` holds non-overlapping `"AB"` and `"BA"`.
- `min_rest_days(days)`: fewest rest days, given day codes 0 (nothing open),
  1 (contest), 2 (gym) and 3 (both), when the same activity may not be done
  on two days running.

`cpsolvers.problems_b`

- `max_books(times, limit)`: longest run of consecutive books that can be
  read within `limit`.
- `can_make(x)`: whether `x` is a sum of numbers 11, 111, 1111, ...
- `flower_difference(beauties)`: the largest beauty difference and the number
  of pairs that reach it.
- `sort_by_reversal(values)`: the 1-based segment whose reversal sorts the
  list, `(1, 1)` if it is already sorted, or `None`.
- `prime_sieve(limit)`: primality flags for `0 .. limit`.
- `is_t_prime(x)`: whether `x` has exactly three divisors.
- `min_clicks(n, m)`: fewest presses of "x2" and "-1" to turn `n` into `m`.
- `lantern_radius(positions, length)`: smallest light radius that lights the
  whole street `[0, length]`.

`cpsolvers.problems_c`

- `NameRegistry`: its `register(name)` returns `"OK"` for a new name, or
  registers and returns `name1`, `name2`, ... for a taken one.
- `mosquito_max(values)`, `divisible_by_eight(digits)`,
  `last_exam_day(exams)`, `min_max_numbers(m, s)`,
  `max_query_sum(values, queries)`, `has_median_split(values, k)`,
  `max_felled_trees(trees)`.

`cpsolvers.problems_d`

- `arcology_sequence(n, m, k)`, `count_topic_pairs(a, b)`,
  `min_desk_length(n, m, k)`.

Functions raise `ValueError` on input they cannot answer, such as an empty
list where at least one element is needed.

A few examples:

```python
from cpsolvers.problems_a import cheap_travel, cut_ribbon
from cpsolvers.problems_b import min_clicks, can_make
from cpsolvers.problems_c import NameRegistry

cheap_travel(6, 2, 1, 2)   # 6
cut_ribbon(5, 5, 3, 2)     # 2
min_clicks(4, 6)           # 2
can_make(33)               # True

registry = NameRegistry()
registry.register("first")  # "OK"
registry.register("first")  # "first1"
```

## Command line

```
cpsolvers PROBLEM [-i FILE]
```

The command reads the problem's input from standard input, or from `FILE`
with `-i`/`--input`, and writes the answer to standard output. `PROBLEM` is
one of:

| Problem         | Input                                             | Output                       |
|-----------------|---------------------------------------------------|------------------------------|
| `cheap-travel`  | `n m a b`                                         | lowest cost                  |
| `mex-grid`      | number of cases, then `n` for each                | each grid, one row per line  |
| `t-primes`      | count, then the numbers                           | `YES` or `NO` for each       |
| `sort-array`    | `n`, then `n` numbers                             | `yes` and the segment, or `no` |
| `registration`  | count, then the names                             | `OK` or the numbered name    |
| `median-splits` | number of cases, then `n k` and `n` numbers each  | `YES` or `NO` for each       |
| `olympiad`      | number of cases, then `n m k` for each            | shortest bench for each      |

For example:

```
echo "6 2 1 2" | cpsolvers cheap-travel
```

prints `6`. Missing or non-numeric input is reported on standard error and
the command exits with status 1.

## What the command does not cover

Only the seven problems above can be run from the command line. The other
functions are available from Python alone.