# algosuite

A collection of well-known algorithms written as plain Python functions and
small classes. It needs nothing beyond the standard library and supports
Python 3.10 and later.

## Installation

```
pip install .
```

## Modules

### `algosuite.strings`

- `length_of_longest_substring(s)`: length of the longest substring with no
  repeated character.
- `longest_palindrome(s)`: the longest palindromic substring; the earliest one
  wins ties, and `""` gives `""`.
- `is_valid_parentheses(s)`: whether every `()`, `[]` and `{}` bracket closes in
  order. An empty string is reported as not valid.
- `min_window(s, t)`: shortest substring of `s` holding every character of `t`
  (with multiplicity), or `""` if there is none.
- `find_repeated_dna_sequences(s)`: every 10-letter sequence that occurs more
  than once, in order of first occurrence.
- `longest_substring_k_repeating(s, k)`: longest substring in which every
  character occurs at least `k` times.
- `character_replacement(s, k)`: longest run of one character reachable by
  replacing at most `k` characters.
- `check_inclusion(s1, s2)`: whether some permutation of `s1` is a substring of
  `s2`.
- `count_palindromic_substrings(s)`: number of palindromic substrings, counted
  by position.

### `algosuite.dynamic`

- `climb_stairs(n)`: ways to climb `n` steps taking one or two at a time.
- `num_decodings(s)`: ways a digit string decodes with `1`..`26` mapped to
  letters.
- `word_break(s, word_dict)`: whether `s` splits into dictionary words. An
  empty dictionary never matches.
- `max_product(nums)`: largest product of a contiguous subarray; raises
  `ValueError` on an empty sequence.
- `rob(nums)`: largest sum of non-adjacent values.
- `rob_circular(nums)`: the same, with the first and last values adjacent.
- `length_of_lis(nums)`: length of the longest strictly increasing
  subsequence. An empty sequence gives 1.
- `coin_change(coins, amount)`: fewest coins making `amount`, or `-1`. Raises
  `ValueError` for a negative amount or a coin value that is not positive.
- `min_cost_climbing_stairs(cost)`: cheapest way past the top, starting at step
  0 or 1; raises `ValueError` on an empty list.

### `algosuite.backtracking`

- `letter_combinations(digits)`: every string a phone keypad spells for the
  digits; `""` gives `[]`, and digits without letters give no combinations.
- `generate_parenthesis(n)`: every balanced string of `n` bracket pairs, in
  sorted order.
- `permute(nums)`: every ordering of `nums`.
- `solve_n_queens(n)`: every placement of `n` non-attacking queens, each board
  a list of rows drawn with `Q` and `.`; `n <= 0` gives `[[]]`.
- `word_exists(board, word)`: whether `word` can be traced through horizontally
  or vertically adjacent cells, each used at most once. Raises `ValueError` for
  a board with no rows.
- `subsets_with_dup(nums)`: every distinct sub-multiset, each sorted.
- `partition_palindromes(s)`: every way to cut `s` into palindromes.

### `algosuite.arrays`

- `MinStack`: a stack with `push(val)`, `pop()`, `top()`, `get_min()` and
  `len()`. `pop`, `top` and `get_min` raise `IndexError` when the stack is empty.
- `trap(height)`: rain water held by an elevation map.
- `max_sliding_window(nums, k)`: maximum of every window of `k` values; raises
  `ValueError` if `k < 1`.
- `daily_temperatures(temperatures)`: days until a warmer day, 0 if never.
- `min_eating_speed(piles, h)`: slowest speed that finishes all piles within `h`
  hours; raises `ValueError` for no piles.

### `algosuite.grids`

Every function raises `ValueError` for a grid with no rows.

- `solve_surrounded(board)`: flips to `X`, in place, every `O` region that does
  not touch the border. The rows must be mutable lists.
- `num_islands(grid)`: number of connected groups of `'1'` cells.
- `pacific_atlantic(heights)`: `[row, col]` pairs, in row-major order, of cells
  whose water reaches both the top/left and the bottom/right edges.
- `max_area_of_island(grid)`: size of the largest connected group of `1` cells.
- `oranges_rotting(grid)`: minutes until no fresh orange (`1`) is left as rot
  (`2`) spreads, or `-1`. The grid is not changed.

### `algosuite.linked`

- `ListNode(val, next)`: a list node; iterating over it yields the values from
  that node onwards.
- `linked_list(values)`: builds a list; an empty input gives `None`.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one, reusing
  their nodes; on equal values the node from `list2` comes first.
- `reverse_list(head)`: reverses in place and returns the new head.

### `algosuite.trees`

- `TreeNode(val, left, right)`: a binary tree node.
- `inorder(root)`: generator of the values in in-order sequence.
- `kth_smallest(root, k)`: the `k`-th value (1-based) of a binary search tree;
  raises `IndexError` if `k` is out of range.

### `algosuite.graphs`

- `GraphNode(val, neighbors)`: a vertex with its adjacency list.
- `UnionFind(n)`: disjoint sets over `0..n-1` with `find(x)`, `union(x, y)`
  (returns `False` if already joined), `len()` and a `count` attribute holding
  the number of sets. `find` raises `IndexError` for an element out of range.
- `clone_graph(node)`: deep copy of the graph reachable from `node`.
- `can_finish(num_courses, prerequisites)`: whether the prerequisites
  (`[a, b]`: `b` before `a`) are free of cycles.
- `find_order(num_courses, prerequisites)`: a valid course order, or `[]`.
  Both course functions raise `ValueError` for a course number out of range.
- `find_redundant_connection(edges)`: first edge, numbered from 1, that closes
  a cycle, or `[]`.
- `make_connected(n, connections)`: cables to move so all `n` computers are
  connected, or `-1` if there are too few.

## Examples

```python
from algosuite.strings import length_of_longest_substring
from algosuite.dynamic import coin_change
from algosuite.arrays import MinStack
from algosuite.linked import linked_list, reverse_list

length_of_longest_substring("abcabcbb")   # 3
coin_change([1, 2, 5], 11)                # 3

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                           # 1

list(reverse_list(linked_list([1, 2, 3])))  # [3, 2, 1]
```

## What it does not do

algosuite is a library only: it has no command-line program, reads no input
files and stores nothing. Call its functions from your own code.

## Running the tests

```
pip install .[test]
pytest
```