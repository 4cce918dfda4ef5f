"""Linear containers, a chained hash table and an unbalanced binary search tree.

Empty pops and peeks, missing keys and out-of-range indexes all answer
None (or False for mutating calls); nothing here raises on absence.
"""
import logging
import weakref
from typing import Any, Callable, Generic, Hashable, Iterator, List, Optional, Protocol, Tuple, TypeVar

from .config import get_settings
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


C = TypeVar("C", bound=SupportsLessThan)


class Stack(Generic[T]):
    def __init__(self):
        self._items: List[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> Optional[T]:
        if not self._items: return None
        return self._items.pop()

    def peek(self) -> Optional[T]:
        if not self._items: return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self):
        return f"{type(self).__name__}({self._items!r})"


class MinStack(Stack[C]):
    """Stack that also reports its smallest element in O(1)."""

    def __init__(self):
        super().__init__()
        self._mins: List[C] = []

    def push(self, value: C) -> None:
        super().push(value)
        if not self._mins or not self._mins[-1] < value: self._mins.append(value)

    def pop(self) -> Optional[C]:
        if not self._items: return None
        value = self._items.pop()
        if not self._mins[-1] < value and not value < self._mins[-1]: self._mins.pop()
        return value

    def min(self) -> Optional[C]:
        if not self._mins: return None
        return self._mins[-1]


class Queue(Generic[T]):
    """FIFO queue over a list with a moving front cursor.

    Dequeued slots are released lazily: once the consumed prefix is at least
    half of the storage it is cut off in one slice, which keeps dequeue O(1)
    amortized instead of the O(n) of ``list.pop(0)``.
    """

    _COMPACT_MIN = 32

    def __init__(self):
        self._items: List[Any] = []
        self._front = 0

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> Optional[T]:
        if self._front == len(self._items): return None
        value = self._items[self._front]
        self._items[self._front] = None
        self._front += 1
        if self._front == len(self._items):
            self._items.clear(); self._front = 0
        elif self._front >= self._COMPACT_MIN and self._front * 2 >= len(self._items):
            del self._items[:self._front]
            self._front = 0
        return value

    def peek(self) -> Optional[T]:
        if self._front == len(self._items): return None
        return self._items[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def size(self) -> int:
        return len(self._items) - self._front

    def __len__(self):
        return self.size()

    def __iter__(self) -> Iterator[T]:
        for i in range(self._front, len(self._items)):
            yield self._items[i]

    def __repr__(self):
        return f"Queue({list(self)!r})"


class Deque(Generic[T]):
    """Double-ended queue on a circular buffer that doubles when full."""

    def __init__(self, capacity: int = 8):
        self._buf: List[Any] = [None] * max(1, capacity)
        self._head = 0
        self._size = 0

    def _grow(self):
        cap = len(self._buf)
        self._buf = [self._buf[(self._head + i) % cap] for i in range(self._size)] + [None] * cap
        self._head = 0

    def push_back(self, value: T) -> None:
        if self._size == len(self._buf): self._grow()
        self._buf[(self._head + self._size) % len(self._buf)] = value
        self._size += 1

    def push_front(self, value: T) -> None:
        if self._size == len(self._buf): self._grow()
        self._head = (self._head - 1) % len(self._buf)
        self._buf[self._head] = value
        self._size += 1

    def pop_front(self) -> Optional[T]:
        if not self._size: return None
        value = self._buf[self._head]
        self._buf[self._head] = None
        self._head = (self._head + 1) % len(self._buf)
        self._size -= 1
        return value

    def pop_back(self) -> Optional[T]:
        if not self._size: return None
        idx = (self._head + self._size - 1) % len(self._buf)
        value = self._buf[idx]
        self._buf[idx] = None
        self._size -= 1
        return value

    def peek_front(self) -> Optional[T]:
        if not self._size: return None
        return self._buf[self._head]

    def peek_back(self) -> Optional[T]:
        if not self._size: return None
        return self._buf[(self._head + self._size - 1) % len(self._buf)]

    def is_empty(self) -> bool:
        return not self._size

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[T]:
        cap = len(self._buf)
        for i in range(self._size):
            yield self._buf[(self._head + i) % cap]

    def __repr__(self):
        return f"Deque({list(self)!r})"


class ListNode(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Optional[ListNode[T]]" = None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"ListNode({self.value!r})"


class LinkedListView(Generic[T]):
    """Restartable traversal of the values a list held when the view was taken.

    The view walks the live nodes until its list is about to change; the
    list then freezes it, copying the captured values once.
    """

    def __init__(self, head: Optional[ListNode[T]], length: int):
        self._head = head
        self._length = length
        self._values: Optional[List[T]] = None

    def _walk(self) -> Iterator[T]:
        node = self._head
        for _ in range(self._length):
            if node is None: return
            yield node.value
            node = node.next

    def _freeze(self) -> None:
        if self._values is None:
            self._values = list(self._walk())
            self._head = None

    def __iter__(self) -> Iterator[T]:
        if self._values is not None: return iter(self._values)
        return self._walk()

    def __repr__(self):
        return f"LinkedListView({list(self)!r})"


class LinkedList(Generic[T]):
    def __init__(self, values=()):
        self._head: Optional[ListNode[T]] = None
        self._tail: Optional[ListNode[T]] = None
        self._size = 0
        self._views: "weakref.WeakSet[LinkedListView[T]]" = weakref.WeakSet()
        for value in values:
            self.append(value)

    @property
    def head(self) -> Optional[T]:
        return self._head.value if self._head else None

    @property
    def tail(self) -> Optional[T]:
        return self._tail.value if self._tail else None

    def _freeze_views(self) -> None:
        for view in list(self._views):
            view._freeze()
        self._views.clear()

    def append(self, value: T) -> None:
        self._freeze_views()
        node = ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node; self._tail = node
        self._size += 1

    def prepend(self, value: T) -> None:
        self._freeze_views()
        self._head = ListNode(value, self._head)
        if self._tail is None: self._tail = self._head
        self._size += 1

    def _node_at(self, index: int) -> ListNode[T]:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_at(self, index: int, value: T) -> bool:
        """Insert before position ``index``; False when index is outside 0..size."""
        if not 0 <= index <= self._size: return False
        if index == 0:
            self.prepend(value)
        elif index == self._size:
            self.append(value)
        else:
            self._freeze_views()
            prev = self._node_at(index - 1)
            prev.next = ListNode(value, prev.next)
            self._size += 1
        return True

    def get(self, index: int) -> Optional[T]:
        if not 0 <= index < self._size: return None
        return self._node_at(index).value

    def delete(self, value: T) -> bool:
        prev, cur = None, self._head
        while cur:
            if cur.value == value:
                self._freeze_views()
                if prev is None: self._head = cur.next
                else: prev.next = cur.next
                if cur is self._tail: self._tail = prev
                self._size -= 1
                return True
            prev, cur = cur, cur.next
        return False

    def find(self, value: T) -> Optional[int]:
        for index, item in enumerate(self):
            if item == value: return index
        return None

    def to_sequence(self) -> LinkedListView[T]:
        view = LinkedListView(self._head, self._size)
        self._views.add(view)
        return view

    def reverse(self) -> None:
        self._freeze_views()
        prev, cur = None, self._head
        self._tail = self._head
        while cur:
            cur.next, prev, cur = prev, cur, cur.next
        self._head = prev

    def middle(self) -> Optional[T]:
        """Middle value; the second of the two middles for an even length."""
        slow = fast = self._head
        while fast and fast.next:
            slow = slow.next; fast = fast.next.next
        return slow.value if slow else None

    def nth_from_end(self, n: int) -> Optional[T]:
        if n < 1: return None
        fast = slow = self._head
        for _ in range(n):
            if not fast: return None
            fast = fast.next
        while fast:
            fast = fast.next; slow = slow.next
        return slow.value

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self.find(value) is not None

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node:
            yield node.value
            node = node.next

    def __repr__(self):
        return f"LinkedList({list(self)!r})"


class HashTable(Generic[K, V]):
    """Separate-chaining hash table.

    The bucket array doubles whenever an insert would push ``size / capacity``
    past ``max_load_factor``; it never shrinks. ``hash_fn`` defaults to the
    builtin ``hash`` and may be replaced, e.g. with a constant to force every
    key into one chain.
    """

    def __init__(self, capacity: Optional[int] = None, max_load_factor: Optional[float] = None,
                 hash_fn: Optional[Callable[[K], int]] = None):
        settings = get_settings()
        capacity = settings.hash_initial_capacity if capacity is None else capacity
        self.max_load_factor = settings.hash_max_load_factor if max_load_factor is None else max_load_factor
        if capacity < 1: raise InvalidArgumentError("capacity must be at least 1")
        if self.max_load_factor <= 0: raise InvalidArgumentError("max_load_factor must be positive")
        self._hash_fn = hash_fn or hash
        self._buckets: List[List[list]] = [[] for _ in range(capacity)]
        self._size = 0

    def _bucket(self, key: K) -> List[list]:
        return self._buckets[self._hash_fn(key) % len(self._buckets)]

    def _resize(self, capacity: int) -> None:
        logger.debug("hash table resize %d -> %d buckets (%d entries)", len(self._buckets), capacity, self._size)
        old = self._buckets
        self._buckets = [[] for _ in range(capacity)]
        for bucket in old:
            for pair in bucket:
                self._bucket(pair[0]).append(pair)

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def set(self, key: K, value: V) -> None:
        for pair in self._bucket(key):
            if pair[0] is key or pair[0] == key:
                pair[1] = value
                return
        capacity = len(self._buckets)
        while (self._size + 1) / capacity > self.max_load_factor:
            capacity *= 2
        if capacity != len(self._buckets): self._resize(capacity)
        self._bucket(key).append([key, value])
        self._size += 1

    def get(self, key: K) -> Optional[V]:
        for k, v in self._bucket(key):
            if k is key or k == key: return v
        return None

    def contains(self, key: K) -> bool:
        return any(k is key or k == key for k, _ in self._bucket(key))

    def delete(self, key: K) -> bool:
        bucket = self._bucket(key)
        for i, (k, _) in enumerate(bucket):
            if k is key or k == key:
                del bucket[i]
                self._size -= 1
                return True
        return False

    def keys(self) -> List[K]:
        return [k for bucket in self._buckets for k, _ in bucket]

    def values(self) -> List[V]:
        return [v for bucket in self._buckets for _, v in bucket]

    def items(self) -> List[Tuple[K, V]]:
        return [(k, v) for bucket in self._buckets for k, v in bucket]

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self):
        return f"HashTable({dict(self.items())!r})"


class TreeNode(Generic[C]):
    __slots__ = ("key", "left", "right")

    def __init__(self, key: C, left: "Optional[TreeNode[C]]" = None, right: "Optional[TreeNode[C]]" = None):
        self.key, self.left, self.right = key, left, right

    def __repr__(self):
        return f"TreeNode({self.key!r})"


class BinarySearchTree(Generic[C]):
    """Unbalanced BST with unique keys.

    Traversals are iterative and use O(height) extra space; the ``*_recursive``
    variants are kept as short reference versions for shallow trees.
    """

    def __init__(self, values=()):
        self._root: Optional[TreeNode[C]] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: C) -> bool:
        """Insert ``key``; inserting a key already present changes nothing and returns False."""
        if self._root is None:
            self._root = TreeNode(key); self._size = 1
            return True
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = TreeNode(key); break
                node = node.left
            elif node.key < key:
                if node.right is None:
                    node.right = TreeNode(key); break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def contains(self, key: C) -> bool:
        node = self._root
        while node:
            if key < node.key: node = node.left
            elif node.key < key: node = node.right
            else: return True
        return False

    def remove(self, key: C) -> bool:
        parent, node = None, self._root
        while node and (key < node.key or node.key < key):
            parent, node = node, (node.left if key < node.key else node.right)
        if node is None: return False
        if node.left and node.right:
            succ_parent, succ = node, node.right
            while succ.left:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
            parent, node = succ_parent, succ
        child = node.left or node.right
        if parent is None: self._root = child
        elif parent.left is node: parent.left = child
        else: parent.right = child
        self._size -= 1
        return True

    def min(self) -> Optional[C]:
        node = self._root
        if node is None: return None
        while node.left: node = node.left
        return node.key

    def max(self) -> Optional[C]:
        node = self._root
        if node is None: return None
        while node.right: node = node.right
        return node.key

    def in_order(self) -> List[C]:
        out, stack, cur = [], [], self._root
        while stack or cur:
            while cur:
                stack.append(cur); cur = cur.left
            cur = stack.pop()
            out.append(cur.key)
            cur = cur.right
        return out

    def pre_order(self) -> List[C]:
        out, stack = [], [self._root] if self._root else []
        while stack:
            node = stack.pop()
            out.append(node.key)
            if node.right: stack.append(node.right)
            if node.left: stack.append(node.left)
        return out

    def post_order(self) -> List[C]:
        out, stack, cur, last = [], [], self._root, None
        while stack or cur:
            if cur:
                stack.append(cur); cur = cur.left
                continue
            top = stack[-1]
            if top.right and last is not top.right:
                cur = top.right
            else:
                out.append(top.key)
                last = stack.pop()
        return out

    def level_order(self) -> List[C]:
        out = []
        if self._root is None: return out
        q: Queue[TreeNode[C]] = Queue()
        q.enqueue(self._root)
        while not q.is_empty():
            node = q.dequeue()
            out.append(node.key)
            if node.left: q.enqueue(node.left)
            if node.right: q.enqueue(node.right)
        return out

    def in_order_recursive(self) -> List[C]:
        out = []
        def walk(node):
            if not node: return
            walk(node.left); out.append(node.key); walk(node.right)
        walk(self._root)
        return out

    def pre_order_recursive(self) -> List[C]:
        out = []
        def walk(node):
            if not node: return
            out.append(node.key); walk(node.left); walk(node.right)
        walk(self._root)
        return out

    def post_order_recursive(self) -> List[C]:
        out = []
        def walk(node):
            if not node: return
            walk(node.left); walk(node.right); out.append(node.key)
        walk(self._root)
        return out

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        if self._root is None: return 0
        depth, level = 0, [self._root]
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child]
        return depth

    def is_valid(self) -> bool:
        stack = [(self._root, None, None)] if self._root else []
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low < node.key: return False
            if high is not None and not node.key < high: return False
            if node.left: stack.append((node.left, low, node.key))
            if node.right: stack.append((node.right, node.key, high))
        return True

    def lowest_common_ancestor(self, a: C, b: C) -> Optional[C]:
        if not (self.contains(a) and self.contains(b)): return None
        node = self._root
        while node:
            if a < node.key and b < node.key: node = node.left
            elif node.key < a and node.key < b: node = node.right
            else: return node.key
        return None

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self) -> Iterator[C]:
        return iter(self.in_order())

    def __repr__(self):
        return f"BinarySearchTree({self.in_order()!r})"
