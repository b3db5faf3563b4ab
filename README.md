# rxutil

Numerical helpers for pharmacometric modelling code. The package is pure
Python and has no runtime dependencies.

## Modules

### `rxutil.transforms`

Parameter transformations selected by an integer code. The last decimal
digit picks the transformation, and the remaining digits pick the residual
distribution (`split_yj` returns `(distribution, transformation)`):

| digit | transformation                     |
|-------|------------------------------------|
| 0     | Box-Cox                            |
| 1     | Yeo-Johnson                        |
| 2     | identity                           |
| 3     | log                                |
| 4     | logit on `(low, high)`             |
| 5     | logit followed by Yeo-Johnson      |
| 6     | probit on `(low, high)`            |
| 7     | probit followed by Yeo-Johnson     |

Each function takes `(x, lam, yj, low, high)`:

- `power_d` applies the transform and `power_d_inverse` reverses it.
- `power_dd` and `power_ddd` give the first and second derivatives in `x`.
- `power_l` gives the log-Jacobian, which enters the likelihood.
- `power_dl` gives the derivative of `power_l` with respect to `lam`.

Non-finite inputs and unknown codes give NaN. Values outside `(low, high)`
for the logit and probit transforms also give NaN.

The module also has `erfinv`, `abs1` (absolute value, with 0 mapped to 1),
`dabs` (the sign), `dabs2` (always 0) and the `Distribution` enum, which
names the residual distributions.

### `rxutil.evid`

`is_dose(evid)` and `is_obs(evid)` sort event ids into dosing records
(3, or 100 and above) and observation records (0, 2, or 9 to 99).

### `rxutil.links`

- `logit`, `expit`, `probit` and `probit_inv` map between the open
  interval `(low, high)`, which defaults to `(0, 1)`, and the real line.
- `logit_values`, `expit_values`, `probit_values` and `probit_inv_values`
  map a sequence and return a list. They first check the bounds. Each bound
  must be a single number, or a sequence of length one, and `high` must be
  greater than `low`. Otherwise they raise `TypeError` or `ValueError`.
- `rs_print(message)` writes to standard output unless `set_silent(True)`
  has been called. `is_silent()` reports the current setting.

### `rxutil.timsort` and `rxutil.merging`

- `timsort(items, less=None, key=None)` is a stable in-place sort. `less`
  is a strict "less than" predicate and defaults to `operator.lt`. `key` is
  applied to both operands before they are compared.
- `timmerge(items, middle, less=None, key=None)` merges the sorted ranges
  `items[:middle]` and `items[middle:]` in place, keeping the merge stable.
- The building blocks are public as well: `min_run_length`,
  `count_run_and_make_ascending` and `binary_sort` in `rxutil.timsort`, and
  `gallop_left`, `gallop_right`, `Run` and `MergeState` in `rxutil.merging`.
  A comparison that is not a consistent ordering may raise `ValueError`.

### `rxutil.strings`

`strncmpci(s1, s2, num)` compares at most `num` characters of two strings
or byte strings. It folds only ASCII `A`-`Z` to lower case, and a NUL
character ends a string. It returns 0 on a match, or otherwise the
difference of the first differing character codes. It raises `TypeError`
for `None` and `ValueError` for a negative `num`.

### `rxutil.numeric`

- `vmnorm(v, w)` gives the weighted max-norm `max(abs(v[i]) * w[i])`, which
  is never below 0. NaN products are skipped, and the two inputs must have
  the same length.
- `rx_erf(values)` applies the error function to each value and returns a
  list.
- `is_null_zero(obj)` returns True for `None` and for an all-zero matrix,
  that is, a list of equal-length numeric rows. For a list or mapping of
  matrices it scans from the last element. The first all-zero matrix gives
  True, and any element that is not a matrix gives False.

### `rxutil.checks`

The `as_int`, `as_unsigned_int`, `as_double`, `as_bool`, `as_str`,
`as_list`, `as_str_vector`, `as_logical_vector`, `as_numeric_vector` and
`as_int_vector` functions check and coerce their arguments. A sequence of
length one counts as a scalar. When a value does not fit, they raise
`ArgumentError`, which is both a `TypeError` and a `ValueError`. Its
message names the argument, for example `'n' needs to be an integer`.

## Installation

```
pip install .
```

Install the test tools with `pip install .[test]`.

## Examples

```python
from rxutil.links import logit, expit
from rxutil.transforms import power_d, power_d_inverse
from rxutil.timsort import timsort

y = logit(0.25)                 # -log(3)
x = expit(y)                    # 0.25

bc = power_d(2.0, 0.5, 0, 0.0, 1.0)           # Box-Cox with lambda 0.5
back = power_d_inverse(bc, 0.5, 0, 0.0, 1.0)  # 2.0

items = [3, 1, 2]
timsort(items)                  # items is now [1, 2, 3]
```

## What it does not do

This is a library of helper functions. It does not integrate differential
equations or draw random numbers, and it has no command-line interface.

## Running the tests

```
pytest
```