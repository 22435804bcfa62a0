# katabox

A small library of well-known algorithm solutions, grouped by the data they
work on. Every function takes plain Python values (lists, strings, integers)
and returns a plain result. Invalid input raises `ValueError`.

It has no dependencies beyond the standard library and needs Python 3.10 or
later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `katabox.linked_list`

- `ListNode(val=0, next=None)`: a singly linked list node with `val` and `next`.
- `from_values(values)`: build a list from any iterable; empty input gives `None`.
- `to_values(head)`: read an acyclic list back into a Python list.
- `reverse_k_group(head, k)`: relink the nodes so that every complete group of
  `k` is reversed; a trailing group shorter than `k` keeps its order. Returns
  the new head. `k` below 1 raises `ValueError`.
- `has_cycle(head)`: tell whether following `next` ever loops.
- `is_palindrome(head)`: tell whether the values read the same both ways.

```python
from katabox.linked_list import from_values, to_values, reverse_k_group

head = reverse_k_group(from_values([1, 2, 3, 4, 5]), 2)
print(to_values(head))  # [2, 1, 4, 3, 5]
```

### `katabox.strings`

- `word_break(s, words)`: whether `s` is a concatenation of words from `words`.
- `concatenated_words(words)`: the words, in input order, that are made up
  entirely of other words in the list.
- `smallest_equivalent_string(s1, s2, base)`: `s1[i]` and `s2[i]` are
  equivalent letters; each letter of `base` is replaced by the smallest letter
  equivalent to it. Only lowercase ASCII letters are accepted, and `s1` and
  `s2` must have the same length.
- `clear_stars(s)`: remove every `*` together with the smallest character to
  its left (the rightmost one among equals). A `*` with nothing left to remove
  raises `ValueError`.
- `largest_box_string(word, num_friends)`: the lexicographically largest piece
  over all splits of `word` into `num_friends` non-empty pieces.
- `max_parity_difference(s)`: largest odd letter frequency minus smallest even
  letter frequency; raises `ValueError` if either kind is missing.
- `generate_tag(caption)`: a camel-case hashtag of at most 100 characters built
  from the ASCII letters of `caption`.

```python
from katabox.strings import word_break, smallest_equivalent_string, generate_tag

word_break("leetcode", ["leet", "code"])                  # True
smallest_equivalent_string("parker", "morris", "parser")  # "makkek"
generate_tag("Leetcode daily streak achieved")            # "#leetcodeDailyStreakAchieved"
```

### `katabox.graphs`

- `shortest_path_all_nodes(graph)`: length of the shortest walk that visits
  every node of an adjacency-list graph, starting and ending anywhere. An empty
  or disconnected graph raises `ValueError`.
- `shortest_path_with_eliminations(grid, k)`: fewest steps from the top-left to
  the bottom-right cell of a 0/1 grid when up to `k` obstacle cells may be
  walked through, or `None` when there is no such path.
- `max_candies(status, candies, keys, contained_boxes, initial_boxes)`: total
  candies collectable by opening boxes with the keys found inside them. The
  inputs are left unchanged.
- `weighted_median_nodes(n, edges, queries)`: `edges` holds `(u, v, weight)`
  triples of a tree on nodes `0..n-1`; for each `(u, v)` query, the first node
  on the path from `u` towards `v` at which at least half of the path weight
  has been covered.

### `katabox.arrays`

- `trap_rain_water(heights)`: units of water held by an elevation map.
- `max_profit_two_transactions(prices)`: best profit from at most two
  non-overlapping trades.
- `find_rotated_min(nums)`: minimum of a rotated sorted sequence that may hold
  duplicates.
- `partition_count(nums, k)`: fewest groups whose max minus min is at most `k`.
- `max_first_last_product(nums, m)`: largest `nums[i] * nums[j]` with
  `j - i >= m - 1`.
- `x_values(nums, k)`: for each remainder `x` below `k`, the number of
  subarrays whose product is `x` modulo `k`.
- `count_unlock_permutations(complexity)`: number of valid unlocking orders,
  modulo 10**9 + 7.
- `max_triangle_area(coords)`: twice the largest area of a triangle with a side
  parallel to an axis, or `None` when none has positive area.
- `can_make_equal(nums, k)`: whether at most `k` flips of adjacent sign pairs
  make a sequence of 1 and -1 all equal.
- `special_triplets(nums)`: count of `i < j < k` with
  `nums[i] == nums[k] == 2 * nums[j]`, modulo 10**9 + 7.

`MOD` holds the modulus 10**9 + 7 used by the counting functions.

```python
from katabox.arrays import trap_rain_water, max_profit_two_transactions

trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
max_profit_two_transactions([3, 3, 5, 0, 0, 3, 1, 4])  # 6
```

## What it does not do

katabox is a library only: it has no command-line program, reads no input
files and prints nothing. Call the functions from your own code.