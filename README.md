# algokit

A small collection of classic algorithms, usable as a library or from the
command line. It has no dependencies beyond the standard library.

- **Numbers** (`algokit.numbers`): `count_digits`, `armstrong_sum`,
  `is_armstrong`, `is_cubic_armstrong`, `factorial`, `fibonacci`,
  `fibonacci_series`, `gcd`, `binomial_coefficient`, `pascal_triangle`,
  `format_pascal_triangle`, `is_perfect` and `is_prime`.
- **Sequences** (`algokit.sequences`): `is_palindrome` and `merged_median`,
  the integer median of two sequences taken together (for an even count the
  two middle values are averaged, truncating toward zero).
- **Optimisation** (`algokit.optimization`): `knapsack_01`,
  `fractional_knapsack` over `Item(value, weight)` objects (with a `ratio`
  property; the weight must be positive), and `optimal_bst_cost`, the least
  total search cost of a binary search tree for a list of key frequencies.
- **Graphs** (`algokit.graphs`): `hamiltonian_cycle`, `prim_mst` with
  `format_mst`, and `tsp_min_distance`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algokit.numbers import gcd, is_armstrong, is_prime
from algokit.optimization import Item, fractional_knapsack, knapsack_01, optimal_bst_cost
from algokit.graphs import hamiltonian_cycle, tsp_min_distance

gcd(12, 18)                  # 6
is_armstrong(153)            # True
is_prime(7)                  # True

knapsack_01(10, [5, 4, 6, 3], [10, 40, 30, 50])   # 90
optimal_bst_cost([34, 8, 50])                     # 142
fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])  # 240.0

tsp_min_distance([
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
])                           # 80

hamiltonian_cycle([
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 1],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 1],
    [0, 1, 1, 1, 0],
])                           # [0, 1, 2, 4, 3, 0]
```

Graphs are given as square adjacency matrices (lists of lists of integers);
a matrix that is empty or not square raises `ValueError`.

- `hamiltonian_cycle` returns a cycle that starts and ends at vertex 0, or
  `None` if there is none.
- `prim_mst` returns `(parent, vertex, weight)` edges; a weight of `0` means
  "no edge", and a graph that is not connected raises `ValueError`.
  `format_mst` renders the edges as an `Edge   Weight` table.
- `tsp_min_distance` returns the length of the shortest tour from city 0
  through every city and back.

Invalid input elsewhere also raises `ValueError`: for example
`fibonacci_series` with a count below 1, `binomial_coefficient` with a
negative argument, `merged_median` of two empty sequences, or `knapsack_01`
with weights and values of different lengths.

## Command line

The package installs an `algokit` command with one sub-command per task:

```
algokit armstrong 153            # 153 is an Armstrong number.
algokit fibonacci 7              # Fibonacci Series: 0 1 1 2 3 5 8
algokit palindrome level         # The string is a palindrome.
algokit knapsack 50 60 10 100 20 120 30
                                 # Maximum value we can obtain = 240.00
algokit hamiltonian graph.txt
algokit mst graph.txt
algokit tsp distances.txt
```

`knapsack` takes the capacity followed by `VALUE WEIGHT` pairs.

`hamiltonian`, `mst` and `tsp` read a square matrix of whitespace-separated
integers from the named file, or from standard input when no file is given;
the matrix size is taken from the number of values. For example:

```
printf '0 10 15 20\n10 0 35 25\n15 35 0 30\n20 25 30 0\n' | algokit tsp
# Minimum Distance Travelled -> 80
```

Invalid input (a matrix that is not square, a disconnected graph for `mst`,
an odd number of knapsack values, a non-positive item weight) prints
`algokit: error: ...` on standard error and exits with status 1.

See all commands and their options with:

```
algokit --help
```

## What it does not do

The command line covers only the sub-commands listed above. The remaining
functions (factorials, GCD, binomial coefficients, Pascal's triangle, perfect
and prime numbers, the merged median, the 0/1 knapsack and the optimal BST
cost) are available from Python only.