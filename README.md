# diccionario

Two dictionary data types that share one small interface:

- `BinarySearchTree` (in `diccionario.abb`) is an ordered dictionary built on an
  unbalanced binary search tree. It takes an optional three-way comparison
  function `cmp(a, b)` that returns a negative number, zero or a positive
  number. Without one, the keys' natural ordering is used. It iterates in key
  order and can also iterate over an inclusive key range.
- `HashTable` (in `diccionario.hash_table`) is a hash table with linear probing
  and tombstones. A key's slot comes from the 64-bit FNV-1 hash of `str(key)`,
  and keys are matched with `==`. The table starts with 13 slots. It doubles
  when live plus deleted cells exceed 70% of the slots. It halves when they drop
  below 20%, but never below 13 slots. The module also exposes the hash
  function as `fnv1_64(data)`.

Both implement `Dictionary` from `diccionario.base`. The tree also implements
`OrderedDictionary`.

## Installation

```
pip install .
```

## Usage

```python
from diccionario.abb import BinarySearchTree

tree = BinarySearchTree()          # natural ordering
for key, value in zip([5, 3, 1, 4, 2, 8, 6, 9], "ecadbhfi"):
    tree.save(key, value)

len(tree)           # 8
tree.contains(4)    # True
tree.get(6)         # "f"
tree.delete(3)      # "c"

# Internal iteration: the callback returns False to stop early.
tree.iterate(lambda key, value: print(key, value) or True)

# Inclusive range; None leaves a side open.
tree.iterate_range(2, 6, lambda key, value: print(key) or True)

# External iteration.
it = tree.range_iterator(None, 5)
while it.has_next():
    key, value = it.current()
    it.advance()

# Iterators also follow the Python iterator protocol.
list(tree.range_iterator(2, 6))    # [(2, "b"), (4, "d"), (5, "e"), (6, "f")]
```

You can pass your own comparison function:

```python
def by_length(a, b):
    return len(a) - len(b)

words = BinarySearchTree(by_length)
```

The dictionaries also support the usual Python operators: `in`, `[]`,
assignment, `del`, `len()` and iteration over `(key, value)` pairs.

```python
from diccionario.hash_table import HashTable

table = HashTable()
table["gato"] = "miau"
"gato" in table      # True
table["gato"]        # "miau"
del table["gato"]
list(table)          # []
```

`HashTable` iterates in slot order, which is not insertion order and not key
order.

## Errors

Both error classes live in `diccionario.base`:

- Looking up or deleting a missing key raises `KeyNotFoundError`, a subclass of
  `KeyError`. Its message is "La clave no pertenece al diccionario".
- Calling `current()` or `advance()` on an exhausted iterator raises
  `IteratorExhaustedError`. Its message is "El iterador termino de iterar".

## What it does not do

These are in-memory data structures only:

- There is no persistence.
- There is no command-line tool.
- The tree does not rebalance itself, so inserting keys in sorted order produces
  a degenerate tree.

## Running the tests

```
pip install .[test]
pytest
```