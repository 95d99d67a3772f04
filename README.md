# dsadrills

A small collection of classic data-structure and algorithm drills. Each one is
a plain Python function that you can call, read and test against.

- **Digit maths** (`dsadrills.basic_maths`): `armstrong_sum`, `is_armstrong`,
  `reverse_digits`, `is_palindrome_number`, `count_digits`.
- **Recursion** (`dsadrills.recursion`): `one_to_n`, `n_to_one`,
  `is_palindrome_string`, `factorial`, `fibonacci`, `repeat_name`,
  `reverse_array`, `sum_to_n`.
- **Sorting** (`dsadrills.sorting`): `bubble_sort`, `insertion_sort`,
  `selection_sort`. Each one returns a new ascending list.
- **Easy array problems** (`dsadrills.arrays_easy`): `missing_number_linear`,
  `missing_number_hashing`, `union_sorted`, `union_merge`, `is_sorted`,
  `largest_element`, `left_rotate_one`, `move_zeroes_to_end`,
  `remove_duplicates`, `rotate_right`, `rotate_left`, `second_largest`,
  `single_occurrence`.
- **Medium array problems** (`dsadrills.arrays_medium`): `two_sum`,
  `max_subarray_sum` (Kadane), `longest_subarray_with_sum` (prefix sums, any
  sign), `longest_positive_subarray_with_sum` (sliding window, non-negative
  input only), `majority_element` (Boyer-Moore), `rearrange_by_sign`,
  `count_subarrays_with_sum`, `leaders`, `sort_zeros_ones_twos` (Dutch national
  flag), `max_profit`.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsadrills.basic_maths import is_armstrong, count_digits
from dsadrills.recursion import fibonacci, is_palindrome_string
from dsadrills.sorting import bubble_sort
from dsadrills.arrays_medium import max_subarray_sum, leaders

is_armstrong(153)                 # True
count_digits(12345)               # 5
fibonacci(10)                     # 55
is_palindrome_string("racecar")   # True
bubble_sort([5, 1, 4, 2])         # [1, 2, 4, 5]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
leaders([16, 17, 4, 3, 5, 2])     # [17, 5, 2]
```

The functions take ordinary lists and integers. The list functions return new
lists and leave their input unchanged. Some points about results and errors:

- When there is no answer, some functions return `None`: `two_sum`,
  `majority_element`, `second_largest` and `single_occurrence`. The two
  missing-number functions return `-1`.
- Some inputs raise `ValueError`. These are empty input to `largest_element`
  or `max_subarray_sum`, a negative count to `rotate_left` or `factorial`, and
  unequal numbers of positive and non-positive values to `rearrange_by_sign`.
- `reverse_digits` works on signed 32-bit integers and raises `ValueError` for
  values outside that range. It returns `0` for the 32-bit minimum and for any
  reversal that would overflow.

## Command line

Installing the package provides a `dsadrills` command. It runs three of the
array drills on integers given as arguments:

```
dsadrills missing 0 1 3
dsadrills union --first 1 2 3 --second 2 4
dsadrills longest 3 1 2 1 1
```

- `missing` prints the result of both missing-number methods.
- `union` prints the sorted union, then the two-pointer merge. The merge
  expects both lists to be sorted already.
- `longest` takes `k` first, then the numbers. It prints the sliding-window
  length and the prefix-sum length for subarrays that add up to `k`.

To list the commands and their options:

```
dsadrills --help
```

## What it does not do

The command line covers only the `missing`, `union` and `longest` drills. It
takes its numbers as arguments and does not read them from standard input. To
use any other drill, call its function from Python.