# drillbox

A small library of solutions to classic programming exercises on arrays,
strings and arithmetic. Every function is a plain Python function that takes
ordinary lists and strings. The library needs nothing outside the standard
library.

## Installation

```
pip install drillbox
```

Python 3.10 or later is required.

## What is inside

### `drillbox.arrays`

- `max_circular_sum(arr)`: the largest sum of a non-empty contiguous
  subarray when the sequence is treated as circular. It raises `ValueError`
  for an empty sequence.
- `max_chunks_to_sorted(arr)`: for a permutation of `0..n-1`, the largest
  number of chunks that can be sorted separately and joined back into a
  sorted list.
- `rotate(nums, k)`: rotates a list to the right by `k` places, in place,
  and returns `None`. A `k` larger than the length wraps around, and an empty
  list is left unchanged.
- `sum_of_subarray_sums(arr)`: the total of the sums of all contiguous
  subarrays.
- `wave(arr)`: returns a new list with each neighbouring pair swapped. The
  input is not changed. Applied to a sorted list, the result is in wave form
  (`a[0] >= a[1] <= a[2] >= ...`). If the length is odd, the last element
  stays in place.

### `drillbox.maths`

- `segregate_even_odd(arr)`: reorders a list in place so that the even
  numbers come first in ascending order, followed by the odd numbers in
  ascending order.
- `power(x, n)`: returns `x` raised to the integer power `n` as a float,
  computed by repeated squaring.
  - A non-integer exponent, including `bool`, raises `TypeError`.
  - A zero base with a negative exponent raises `ZeroDivisionError`.

### `drillbox.contest`

- `gemstones(rocks)`: the number of distinct characters (minerals) that occur
  in every string (rock). It raises `ValueError` when no rocks are given.
- `minimum_number(password)`: how many characters must be added to make a
  password strong. A strong password has at least `MIN_PASSWORD_LENGTH` (6)
  characters and contains a digit, a lower-case letter, an upper-case letter
  and one of `SPECIAL_CHARACTERS` (`!@#$%^&*()-+`).
- `missing_character_types(password)`: the `CharacterType` members that a
  password lacks, in the order `LOWERCASE`, `UPPERCASE`, `DIGIT`, `SPECIAL`.
  Each member has:
  - an `alphabet` of the characters it accepts;
  - an `advice` line, such as `"Add at least 1 number (0-9)"`;
  - a `matches(char)` method.

### `drillbox.text`

- `is_anagram(s, t)`: whether two strings are anagrams of each other.
- `frequency_sort(s)`: the characters of a string regrouped so that the most
  frequent come first.
- `is_isomorphic(s, t)`: whether one string maps to the other character by
  character, one to one.
- `check_inclusion(s1, s2)`: whether some permutation of `s1` appears as a
  substring of `s2`.
- `roman_to_int(s)`: the value of a Roman numeral. Subtractive pairs such as
  `IV` and `CM` are read as one symbol. Any character that is not a Roman
  digit raises `ValueError`.

## Examples

```python
from drillbox.arrays import max_circular_sum, sum_of_subarray_sums, wave
from drillbox.maths import power
from drillbox.contest import gemstones, minimum_number, missing_character_types
from drillbox.text import check_inclusion, is_anagram, roman_to_int

max_circular_sum([8, -8, 9, -9, 10, -11, 12])   # 22
sum_of_subarray_sums([1, 2, 3])                 # 20
wave([1, 2, 3, 4, 5])                           # [2, 1, 4, 3, 5]
power(2.0, 10)                                  # 1024.0
gemstones(["abcdde", "baccd", "eeabg"])         # 2
minimum_number("#2bbbb")                        # 1
[t.advice for t in missing_character_types("#2bbbb")]
# ['Add at least 1 uppercase letter (A-Z)']
is_anagram("listen", "silent")                  # True
check_inclusion("ab", "eidbaooo")               # True
roman_to_int("MCMXCIV")                         # 1994
```

## What it does not do

drillbox is a library only. It has no command-line program and does not read
its input from standard input. Call the functions from your own code.

## Running the tests

```
pip install "drillbox[test]"
pytest
```