# algodrills

Compact solutions to well-known programming exercises, grouped by the kind
of data they work on. Everything is plain Python with no dependencies beyond
the standard library.

## Installation

```
pip install algodrills
```

To run the test suite as well, from a checkout of the project:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it covers |
| --- | --- |
| `algodrills.arrays` | integer lists and grids: height checker, container with most water, unique occurrences, grouping people, kids with candies, majority element, highest altitude, array difference, products except self, largest k with its negative, in-place removal, happiness sum, relative ranks, subarray sums, maximum average, pivot index, k-th smallest fraction, lemonade change, island perimeter |
| `algodrills.words` | common characters, longest common prefix, prefix word search, vowels in a window, reversing words, merging alternately, bracket checks, reversing a prefix, inserting spaces, chessboard square colours |
| `algodrills.numbers` | `tribonacci`, `number_to_words` (English spelling below one trillion), `find_complement` |
| `algodrills.text` | `str_str`, `can_make_subsequence`, `compressed_string`, `reverse_vowels`, `is_subsequence`, `longest_palindrome`, `compress`, `replace_words`, `my_atoi`, `uncommon_from_sentences` |
| `algodrills.linked_lists` | `ListNode` with `build_list` / `list_values`, `add_two_numbers`, `merge_two_lists`, `delete_node`, `double_it` |
| `algodrills.trees` | `TreeNode` and `NaryNode` with `preorder_traversal`, `inorder_traversal`, `postorder_traversal`, `level_order`, `nary_preorder`, `nary_postorder` |
| `algodrills.graphs` | `valid_path`, `find_min_height_trees`, `lock_neighbours`, `open_lock` |

## Examples

```python
from algodrills.arrays import max_area, product_except_self
from algodrills.numbers import number_to_words
from algodrills.linked_lists import build_list, list_values, merge_two_lists
from algodrills.graphs import open_lock

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])          # 49
product_except_self([1, 2, 3, 4])              # [24, 12, 8, 6]
number_to_words(1_000_000)                     # "One Million"

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)                            # [1, 1, 2, 3, 4, 4]

open_lock(["0201", "0101", "0102", "1212", "2002"], "0202")  # 6
```

## Behaviour worth knowing

- `move_zeroes`, `remove_element`, `remove_duplicates` and `compress` modify
  the list they are given. The last three return the length of the
  meaningful prefix; the items after it are left as they were.
- The linked-list functions work on the nodes they are given: `add_two_numbers`
  writes the sum into the longer list, `double_it` rewrites the digits and
  returns a new head only when the number gains a digit.
- Inputs outside what an exercise allows raise `ValueError`, for example an
  empty word list in `common_chars`, a window length out of range in
  `max_vowels` or `find_max_average`, a single number in `product_except_self`,
  or a number outside 0 to 999,999,999,999 in `number_to_words`.
  `kth_smallest_prime_fraction` raises `IndexError` when `k` is out of range.

## What it does not do

This is a library only: it has no command-line tool, and nothing reads input
files or prints results. Call the functions from your own code.