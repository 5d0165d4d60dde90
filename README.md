# vdskit

A small collection of classic data structures with a plain, Pythonic interface. It needs only the standard library.

## What is in it

### `vdskit.arraylist`

`ArrayList(capacity=100, name_size=50)` is a list of strings with a fixed number of slots.

- `add(item)` puts the item in the first free slot and returns that slot's index. If the item is longer than `name_size` characters, it raises `ValueError`. If every slot is taken, it raises `ListFullError`.
- `remove(item, index)` frees slot `index`, but only if that slot holds `item`. Otherwise it raises `ValueError`. An index outside the list raises `IndexError`.
- `remove_last()` frees the highest occupied slot and returns its item. On an empty list it raises `IndexError`.
- `get(index)` returns the item in a slot. An empty slot or an index out of range raises `IndexError`.
- `indices_of(item)` returns the indices of every slot that holds `item`.
- `print_item(item)`, `print_index(index)` and `print_all()` write items out, one per line. `print_item` writes lines of the form `"<item> at index <n>"`.

When an item is removed, the items in the other slots stay where they are, so their indices do not change. Iteration yields the stored items in slot order, and `len()` gives the number of items stored.

### `vdskit.stack`

- `DynamicStack()` is a stack of linked nodes with no size limit.
- `StaticStack(capacity=100)` holds at most `capacity` values. It has an `is_full()` method, and pushing onto a full stack raises `StackFullError`.

Both stacks have `push`, `pop`, `peek` and `is_empty`. Popping or peeking at an empty stack raises `StackEmptyError`, which is a subclass of `IndexError`. Iteration goes from top to bottom.

### `vdskit.singly_linked` and `vdskit.doubly_linked`

`SinglyLinkedList(iterable=None)` and `DoublyLinkedList(iterable=None)` share the same set of methods:

- `push_front`, `push_back` and `insert_at(index, value)` add values.
- `pop_front`, `pop_back` and `remove_at(index)` remove a value and return it. These raise `IndexError` on an empty list or a bad index.
- `remove_value(value)` removes every element equal to `value` and returns how many were removed.
- `get_at(index)` returns the element at a position. `find(value)` returns the position of the first equal element, or raises `ValueError`.
- `is_empty()`, `clear()`, `reverse()` (in place), `copy()` and `print()` are also available.

`DoublyLinkedList` also supports `reversed()`.

All of the containers support `len()` and iteration. The `print*` methods take an optional `file` argument, which works like the `file` argument of the built-in `print`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from vdskit.arraylist import ArrayList
from vdskit.stack import DynamicStack, StaticStack
from vdskit.singly_linked import SinglyLinkedList
from vdskit.doubly_linked import DoublyLinkedList

names = ArrayList(capacity=100, name_size=50)
names.add("Example item")                 # 0
names.add("Example item 2")               # 1
names.print_all()
names.remove_last()                       # "Example item 2"
print(names.get(0))                       # Example item
print(names.indices_of("Example item"))   # [0]

stack = StaticStack(capacity=2)
stack.push(1)
stack.push(2)
print(stack.is_full())    # True
print(stack.pop())        # 2

dyn = DynamicStack()
dyn.push("a")
print(dyn.peek())         # a

items = SinglyLinkedList([1, 2, 3])
items.push_front(0)
items.insert_at(2, 99)
items.reverse()
print(list(items))        # [3, 2, 99, 1, 0]

both = DoublyLinkedList("abc")
print(list(reversed(both)))   # ['c', 'b', 'a']
print(both.find("b"))         # 1
```

## What it does not do

This package is a library only. It has no command-line tool, and it does not save its containers anywhere: every structure exists only in memory.