# algokit

Plain-Python implementations of well-known algorithm problems, grouped by the kind
of data they work on. The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.trees` | `TreeNode`, `recover_from_preorder`, `construct_from_pre_post`, `FindElements` |
| `algokit.containers` | `ProductOfNumbers`, `NumberContainers` |
| `algokit.graphs` | `UnionFind`, `valid_path`, `count_paths`, `find_all_recipes`, `most_profitable_path`, `count_complete_components`, `minimum_cost`, `find_redundant_connection`, `eventual_safe_nodes` |
| `algokit.grids` | `count_servers`, `highest_peak`, `min_operations_uni_value`, `max_points`, `find_missing_and_repeated_values`, `largest_island`, `check_valid_cuts` |
| `algokit.strings` | `number_of_substrings`, `are_almost_equal`, `remove_occurrences`, `minimum_recolors`, `clear_digits`, `count_of_substrings`, `add_binary`, `partition_labels` |
| `algokit.combinatorics` | `num_tile_possibilities`, `get_happy_string`, `construct_distanced_sequence`, `subset_xor_sum`, `find_different_binary_string`, `smallest_number`, `punishment_number`, `check_powers_of_three` |
| `algokit.numbers` | `closest_primes`, `colored_cells`, `fib`, `climb_stairs`, `maximum_score`, `tuple_same_product`, `count_bad_pairs`, `num_of_subarrays` |
| `algokit.search` | `maximum_count`, `min_capability`, `repair_cars`, `min_zero_array` |
| `algokit.arrays` | `max_absolute_sum`, `check_sorted_rotated`, `max_ascending_sum`, `pivot_array`, `divide_array`, `maximum_sum`, `longest_nice_subarray`, `apply_operations`, `minimum_index`, `maximum_triplet_value`, `lexicographically_smallest_array`, `min_operations_threshold`, `longest_monotonic_subarray`, `is_array_special`, `query_results`, `count_days`, `min_flip_operations`, `number_of_alternating_groups`, `is_zero_array`, `len_longest_fib_subseq`, `merge_arrays`, `most_points`, `put_marbles` |

`algokit.graphs.UnionFind` is a reusable disjoint-set structure (`find`, `union`);
`algokit.grids.largest_island` builds on it.

## Examples

```python
from algokit.strings import add_binary, partition_labels
from algokit.graphs import valid_path
from algokit.containers import ProductOfNumbers
from algokit.trees import recover_from_preorder

add_binary("1010", "1011")                   # "10101"
partition_labels("ababcbacadefegdehijhklij") # [9, 7, 8]
valid_path(3, [[0, 1], [1, 2]], 0, 2)        # True

products = ProductOfNumbers()
for n in (3, 0, 2, 5, 4):
    products.add(n)
products.get_product(2)                      # 20

root = recover_from_preorder("1-2--3--4-5--6--7")
root.val, root.left.val, root.right.val      # (1, 2, 5)
```

## Behaviour

- Functions take ordinary lists, strings and integers and return new values without
  changing their arguments. The exceptions are `FindElements`, which rewrites the
  values of the tree it is given, and the stateful classes in `algokit.containers`.
- Inputs that have no meaningful answer (empty sequences where a value is needed,
  out-of-range `k`, malformed binary strings or patterns) raise `ValueError`.
- `num_of_subarrays`, `count_paths` and `maximum_score` return their result modulo
  1 000 000 007.

## What it does not do

algokit is a library only: it has no command-line interface, and it does not read
problem input from files or print results.