# sortbench

Textbook sorting algorithms written out by hand, binary max-heap helpers, a
small singly linked list, and an interactive bench that times a chosen
algorithm on a fixed sample of numbers.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## The interactive bench

```
sortbench
```

The bench prints a menu of algorithms (1 bubble, 2 quick, 3 merge,
4 insertion, 5 bucket, 6 heap; 0 exits) and asks for one, then asks for an
order (1 ascending, 2 descending; any other answer means ascending). Only the
first character of each answer counts. It then sorts a copy of the fixed
sample

```
50 32 28 72 61 84 18 41 99 5 35 75 79 15 43 70 66
```

and prints the unsorted sample, the sorted result prefixed by the algorithm's
name (for example `quick sorted: ...`), and the CPU time the sort took. An
unknown choice prints `undefined sorting option: ...` and leaves the sample
unsorted. The loop ends when you enter `0` or input runs out. `sortbench --help`
shows a short usage message; the command takes no other options.

The bench always sorts the built-in sample; it does not read numbers from the
user or from a file.

From Python, `sortbench.cli.run_once(algorithm, order, out)` performs one round
of the bench, writes the report to `out` (standard output by default) and
returns the sorted list. `format_array` and `format_elapsed` give the text of
the array and timing lines.

## Sorting

Every sort in `sortbench.sorting` rearranges a mutable sequence of integers in
place and returns `None`. Each takes an `Order` (`Order.ASCENDING` by default
or `Order.DESCENDING`); descending order is produced by sorting ascending and
then reversing.

```python
from sortbench.sorting import Algorithm, Order, sort, merge_sort, bucket_sort

numbers = [50, 32, 28, 72, 61, 84, 18]
sort(numbers, Algorithm.QUICK, Order.ASCENDING)

values = [5, 3, 9, 1]
merge_sort(values, Order.DESCENDING)   # values == [9, 5, 3, 1]

small = [42, 7, 99, 0, 13]
bucket_sort(small, 10, 10, Order.ASCENDING)
```

- `bubble_sort`, `insertion_sort`, `quick_sort`, `merge_sort`, `heap_sort`
  take `(numbers, order)`.
- `bucket_sort(numbers, bucket_count=10, bucket_capacity=10, order)` puts each
  value into bucket `value / bucket_count` (rounded toward zero), merge-sorts
  each bucket and joins them. It raises `ValueError` when a value's bucket
  index falls outside `0..bucket_count - 1`, when a bucket already holds
  `bucket_capacity` values, or when the counts themselves are invalid. With the
  defaults it takes values from 0 to 99, at most ten per bucket.
- `heap_sort` rebuilds a max-heap over the shrinking unsorted prefix on every
  step.
- `partition(numbers, low, high)` is the Lomuto partition around
  `numbers[high]`, returning the pivot's final index, and
  `merge_sorted(numbers, left, mid, right)` merges two adjacent sorted runs.
- `sort(numbers, algorithm=Algorithm.QUICK, order=Order.ASCENDING)` dispatches
  to one of the above. `algorithm` and `order` may also be given as their menu
  characters (`"1"` to `"6"`, `"1"` or `"2"`). An unknown algorithm raises
  `UnknownAlgorithmError`, a subclass of `ValueError`.

## Heap helpers

```python
from sortbench.heap import build_heap, heapify, format_heap, print_heap

data = [3, 9, 2, 7, 5]
build_heap(data, len(data))   # data now satisfies the max-heap property
print(format_heap(data))      # elements in storage order, space separated
```

`heapify(numbers, index=0, size=None)` sifts one element down;
`build_heap(numbers, size=None)` heapifies the first `size` elements (all of
them by default). A `size` outside `0..len(numbers)` raises `ValueError`.
`print_heap(numbers, file=None)` writes the `format_heap` line to a file or
standard output.

## Linked list

```python
from sortbench.linkedlist import LinkedList

items = LinkedList()
items.insert(1)
items.insert_tail(2)
items.insert_head(0)
print(list(items), len(items))   # [0, 1, 2] 3
print(items.format())            # (0) (1) (2)
```

`LinkedList(items)` may be built from any iterable. `insert_after(node, data)`
inserts after a given `ListNode` (or at the front when `node` is `None`); every
insert method returns the new node. `head` and `tail` give the first and last
nodes, or `None` for an empty list.