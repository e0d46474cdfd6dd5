# judgekit

Classic online-judge exercises, such as arithmetic, strings, stacks, queues, sorting,
searching, statistics and number theory, written as small functions. Each function
takes ordinary Python values and returns its answer. Bad input raises an exception
(`ValueError`, `IndexError` or `ZeroDivisionError`) instead of producing an error code.

The package has no dependencies beyond the standard library. It needs Python 3.10 or later.

## Installation

```
pip install judgekit
```

## Examples

```python
from judgekit.arithmetic import four_operations, check_digit
from judgekit.conditionals import is_leap_year, hotel_room
from judgekit.stacks import is_vps, stack_sequence
from judgekit.queues import josephus, format_josephus
from judgekit.number_theory import primes_between, nth_doom_number

four_operations(7, 3)            # (10, 4, 21, 2, 1)
check_digit([0, 4, 2, 5, 6])     # 1
is_leap_year(2000)               # True
hotel_room(6, 12, 10)            # 402
is_vps("(())())")                # False
format_josephus(josephus(7, 3))  # "<3, 6, 2, 7, 5, 1, 4>"
primes_between(3, 16)            # [3, 5, 7, 11, 13]
nth_doom_number(2)               # 1666
```

## Modules

| Module | Contents |
| --- | --- |
| `judgekit.arithmetic` | `add`, `subtract`, `multiply`, `divide`, `four_operations`, `pair_sums`, `sums_until_zero`, `concat_difference`, `check_digit` |
| `judgekit.conditionals` | `is_leap_year`, `compare`, `grade`, `alarm_time`, `hotel_room`, `multiplication_table`, `count_up` |
| `judgekit.ascii_art` | `hello_world`, `cat`, `dog`, `sprout` |
| `judgekit.text` | `first_positions`, `count_words`, `ascii_code`, `digit_sum`, `char_at`, `repeat_chars`, `ox_score` |
| `judgekit.sequences` | `min_max`, `less_than`, `max_with_position`, `digit_counts`, `distinct_remainders`, `scale_kind`, `stairs`, `right_aligned_stairs` |
| `judgekit.stacks` | `zero_sum`, `run_stack_commands`, `stack_sequence`, `is_balanced`, `is_vps` |
| `judgekit.queues` | `josephus`, `format_josephus`, `last_card`, `print_order`, `run_queue_commands` |
| `judgekit.sorting` | `sort_members`, `counting_sort`, `sort_points`, `sort_points_by_y`, `sort_words`, `sort_numbers` |
| `judgekit.searching` | `card_counts`, `binary_search`, `membership`, `max_cable_length` |
| `judgekit.stats` | `round_half_away`, `solved_ac_difficulty`, `summary_statistics` |
| `judgekit.number_theory` | `binomial`, `factorial_trailing_zeros`, `primes_between`, `is_prime`, `count_primes`, `gcd_lcm`, `decomposition_sum`, `smallest_generator`, `honeycomb_distance`, `apartment_residents`, `nth_doom_number` |
| `judgekit.wordplay` | `polynomial_hash`, `is_palindrome` |
| `judgekit.brute_force` | `min_repaint`, `blackjack`, `bulk_ranks` |
| `judgekit.everyday` | `adjusted_average`, `sugar_bags`, `snail_days`, `next_number`, `welcome_kit`, `is_right_triangle` |

## Behaviour worth knowing

- `four_operations` divides toward zero. The remainder takes the sign of the dividend.
  `divide` returns a float and raises `ZeroDivisionError` for a zero divisor.
- `pair_sums` and `sums_until_zero` are generators. `sums_until_zero` stops at the first `(0, 0)` pair.
- `run_stack_commands` and `run_queue_commands` take command strings such as `"push 3"` or
  `"pop"`. They return the values those commands report: `-1` for an empty pop, top,
  front or back, and `1` or `0` for `empty`. They ignore commands they do not recognise.
- `stack_sequence` returns the list of `"+"` and `"-"` steps, or `None` when one stack
  cannot produce the sequence.
- `print_order` raises `IndexError` when the target index is not in the queue.
- `counting_sort` accepts only numbers from 1 to 10000. It raises `ValueError` for any other number.
- `sort_words` drops duplicates. It orders words by length and breaks ties alphabetically.
- `round_half_away` rounds halves away from zero, unlike the built-in `round`.
  `summary_statistics` returns `(mean, median, mode, range)`. When several values tie for
  most frequent, the mode is the second smallest of them.
- `max_cable_length`, `blackjack` and `smallest_generator` return `0` when no answer
  exists. `sugar_bags` returns `-1` in that case.
- `min_repaint` takes rows of `"B"` and `"W"` and needs a board of at least 8 by 8.
- `next_number` works on text and returns text.

## What it does not do

judgekit is a library only. It has no command-line program. It does not read standard
input and prints nothing. Parsing an exercise's input format and printing the answer
are left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```