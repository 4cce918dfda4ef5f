import pytest
from hypothesis import given, strategies as st

from my_dsa import BinarySearchTree, Deque, HashTable, InvalidArgumentError, LinkedList, MinStack, Queue, Stack


# ============================================================================
# STACK / QUEUE / DEQUE
# ============================================================================

def test_stack_operations():
    stack = Stack()
    assert stack.is_empty()
    assert stack.pop() is None
    assert stack.peek() is None
    stack.push(1)
    stack.push(2)
    assert stack.peek() == 2
    assert stack.size() == 2
    assert list(stack) == [2, 1]
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.pop() is None
    assert stack.is_empty()


@given(st.lists(st.integers()))
def test_stack_pops_in_reverse_push_order(values):
    stack = Stack()
    for v in values:
        stack.push(v)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == values[::-1]


def test_min_stack_tracks_minimum_with_duplicates():
    stack = MinStack()
    assert stack.min() is None
    for v in [5, 3, 3, 7, 1]:
        stack.push(v)
    assert stack.min() == 1
    assert stack.pop() == 1
    assert stack.min() == 3
    stack.pop(); stack.pop()
    assert stack.min() == 3
    stack.pop()
    assert stack.min() == 5
    assert stack.pop() == 5
    assert stack.min() is None
    assert stack.pop() is None


def test_queue_operations():
    queue = Queue()
    assert queue.is_empty()
    assert queue.dequeue() is None
    assert queue.peek() is None
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.peek() == 1
    assert queue.size() == 2
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert queue.dequeue() is None
    assert queue.is_empty()


@given(st.lists(st.one_of(st.tuples(st.just("in"), st.integers()), st.just(("out", None)))))
def test_queue_is_fifo_under_interleaving(ops):
    queue, model = Queue(), []
    for op, value in ops:
        if op == "in":
            queue.enqueue(value); model.append(value)
        else:
            expected = model.pop(0) if model else None
            assert queue.dequeue() == expected
        assert queue.size() == len(model)
    assert list(queue) == model


def test_queue_compacts_consumed_prefix():
    queue = Queue()
    for i in range(1000):
        queue.enqueue(i)
    for i in range(900):
        assert queue.dequeue() == i
    assert len(queue._items) < 1000
    assert list(queue) == list(range(900, 1000))


def test_deque_both_ends():
    dq = Deque(capacity=2)
    assert dq.pop_front() is None
    assert dq.pop_back() is None
    assert dq.peek_front() is None and dq.peek_back() is None
    dq.push_back(2)
    dq.push_front(1)
    dq.push_back(3)
    dq.push_front(0)
    assert list(dq) == [0, 1, 2, 3]
    assert dq.peek_front() == 0 and dq.peek_back() == 3
    assert dq.pop_back() == 3
    assert dq.pop_front() == 0
    assert dq.size() == 2
    assert list(dq) == [1, 2]


@given(st.lists(st.tuples(st.sampled_from(["pf", "pb", "of", "ob"]), st.integers())))
def test_deque_matches_list_model(ops):
    dq, model = Deque(capacity=1), []
    for op, value in ops:
        if op == "pf":
            dq.push_front(value); model.insert(0, value)
        elif op == "pb":
            dq.push_back(value); model.append(value)
        elif op == "of":
            assert dq.pop_front() == (model.pop(0) if model else None)
        else:
            assert dq.pop_back() == (model.pop() if model else None)
    assert list(dq) == model


# ============================================================================
# LINKED LIST
# ============================================================================

def test_linked_list_operations():
    linked = LinkedList()
    assert linked.find(1) is None
    assert not linked.delete(1)
    linked.append(1)
    linked.append(2)
    linked.append(3)
    linked.prepend(0)
    assert list(linked) == [0, 1, 2, 3]
    assert linked.find(2) == 2
    assert linked.delete(2)
    assert linked.find(2) is None
    assert not linked.delete(4)
    assert list(linked) == [0, 1, 3]
    assert linked.size() == 3


def test_linked_list_delete_tail_relinks_tail():
    linked = LinkedList([1, 2, 3])
    assert linked.delete(3)
    assert linked.tail == 2
    linked.append(4)
    assert list(linked) == [1, 2, 4]
    assert linked.delete(1) and linked.delete(2) and linked.delete(4)
    assert linked.head is None and linked.tail is None
    linked.append(9)
    assert list(linked) == [9]


def test_linked_list_delete_removes_first_match_only():
    linked = LinkedList([1, 2, 1])
    assert linked.delete(1)
    assert list(linked) == [2, 1]


def test_linked_list_insert_at_and_get():
    linked = LinkedList([1, 3])
    assert linked.insert_at(1, 2)
    assert linked.insert_at(0, 0)
    assert linked.insert_at(4, 4)
    assert list(linked) == [0, 1, 2, 3, 4]
    assert linked.tail == 4
    assert not linked.insert_at(6, 99)
    assert not linked.insert_at(-1, 99)
    assert list(linked) == [0, 1, 2, 3, 4]
    assert linked.get(2) == 2
    assert linked.get(5) is None
    assert linked.get(-1) is None


def test_linked_list_view_is_restartable_and_ignores_later_appends():
    linked = LinkedList([1, 2, 3])
    view = linked.to_sequence()
    assert list(view) == [1, 2, 3]
    assert list(view) == [1, 2, 3]
    linked.append(4)
    assert list(view) == [1, 2, 3]
    assert list(linked.to_sequence()) == [1, 2, 3, 4]


def test_linked_list_view_keeps_contents_after_delete_and_append():
    linked = LinkedList([1, 2, 3])
    view = linked.to_sequence()
    assert linked.delete(2)
    linked.append(4)
    assert list(view) == [1, 2, 3]
    assert list(view) == [1, 2, 3]
    assert list(linked) == [1, 3, 4]


def test_linked_list_view_keeps_contents_after_reverse():
    linked = LinkedList([1, 2, 3])
    view = linked.to_sequence()
    linked.reverse()
    assert list(view) == [1, 2, 3]
    assert list(linked) == [3, 2, 1]


def test_linked_list_view_keeps_contents_after_insert_at_and_prepend():
    linked = LinkedList([1, 2, 3])
    before_insert = linked.to_sequence()
    assert linked.insert_at(1, 9)
    before_prepend = linked.to_sequence()
    linked.prepend(0)
    assert list(before_insert) == [1, 2, 3]
    assert list(before_prepend) == [1, 9, 2, 3]
    assert list(linked) == [0, 1, 9, 2, 3]


def test_linked_list_failed_mutations_leave_view_live():
    linked = LinkedList([1, 2])
    view = linked.to_sequence()
    assert not linked.delete(7)
    assert not linked.insert_at(5, 7)
    assert list(view) == [1, 2]


def test_linked_list_reverse():
    linked = LinkedList([1, 2, 3, 4])
    linked.reverse()
    assert list(linked) == [4, 3, 2, 1]
    assert linked.head == 4 and linked.tail == 1
    linked.append(0)
    assert list(linked) == [4, 3, 2, 1, 0]
    empty = LinkedList()
    empty.reverse()
    assert list(empty) == []


def test_linked_list_two_pointer_helpers():
    linked = LinkedList([1, 2, 3, 4, 5])
    assert linked.middle() == 3
    assert linked.nth_from_end(1) == 5
    assert linked.nth_from_end(5) == 1
    assert linked.nth_from_end(6) is None
    assert linked.nth_from_end(0) is None
    assert LinkedList([1, 2]).middle() == 2
    assert LinkedList().middle() is None


# ============================================================================
# HASH TABLE
# ============================================================================

def test_hash_table_basic_operations():
    table = HashTable()
    assert table.get("a") is None
    assert not table.delete("a")
    table.set("a", 1)
    table.set("b", 2)
    table.set("a", 3)
    assert table.get("a") == 3
    assert table.size() == 2
    assert sorted(table.keys()) == ["a", "b"]
    assert sorted(table.values()) == [2, 3]
    assert "b" in table
    assert table.delete("b")
    assert "b" not in table
    assert table.get("b") is None
    assert len(table) == 1


def test_hash_table_forced_collisions_stay_correct():
    table = HashTable(capacity=4, hash_fn=lambda key: 0)
    for i in range(50):
        table.set(i, str(i))
    table.set(10, "ten")
    assert table.size() == 50
    assert table.get(10) == "ten"
    assert table.delete(25)
    assert table.get(25) is None
    assert table.get(26) == "26"
    assert sorted(table.keys()) == [i for i in range(50) if i != 25]


def test_hash_table_resizes_and_keeps_keys():
    table = HashTable(capacity=2, max_load_factor=0.75)
    for i in range(100):
        table.set(f"k{i}", i)
    assert table.capacity >= 128
    assert table.load_factor <= 0.75
    assert all(table.get(f"k{i}") == i for i in range(100))


def test_hash_table_rejects_bad_capacity():
    with pytest.raises(InvalidArgumentError):
        HashTable(capacity=0)
    with pytest.raises(InvalidArgumentError):
        HashTable(max_load_factor=0)


@given(st.lists(st.tuples(st.booleans(), st.integers(-20, 20), st.integers())))
def test_hash_table_matches_dict(ops):
    table, model = HashTable(capacity=1, hash_fn=lambda k: k % 3), {}
    for is_set, key, value in ops:
        if is_set:
            table.set(key, value); model[key] = value
        else:
            assert table.delete(key) == (key in model)
            model.pop(key, None)
    assert dict(table.items()) == model


# ============================================================================
# BINARY SEARCH TREE
# ============================================================================

def test_bst_example_in_order():
    tree = BinarySearchTree()
    for v in [5, 3, 8, 1, 4]:
        tree.insert(v)
    assert tree.in_order() == [1, 3, 4, 5, 8]
    assert tree.pre_order() == [5, 3, 1, 4, 8]
    assert tree.post_order() == [1, 4, 3, 8, 5]
    assert tree.level_order() == [5, 3, 8, 1, 4]


def test_bst_duplicate_insert_is_noop():
    tree = BinarySearchTree([5, 3, 8])
    assert not tree.insert(3)
    assert tree.size() == 3
    assert tree.in_order() == [3, 5, 8]


def test_bst_contains_min_max_height():
    tree = BinarySearchTree([5, 3, 8, 1, 4])
    assert tree.contains(4)
    assert not tree.contains(7)
    assert tree.min() == 1 and tree.max() == 8
    assert tree.height() == 3
    empty = BinarySearchTree()
    assert empty.min() is None and empty.max() is None
    assert empty.height() == 0
    assert empty.in_order() == [] and empty.level_order() == []


def test_bst_remove():
    tree = BinarySearchTree([5, 3, 8, 1, 4, 7, 9])
    assert tree.remove(3)
    assert tree.in_order() == [1, 4, 5, 7, 8, 9]
    assert tree.remove(5)
    assert tree.in_order() == [1, 4, 7, 8, 9]
    assert not tree.remove(42)
    assert tree.is_valid()
    assert tree.size() == 5


def test_bst_lowest_common_ancestor():
    tree = BinarySearchTree([6, 2, 8, 0, 4, 7, 9, 3, 5])
    assert tree.lowest_common_ancestor(2, 8) == 6
    assert tree.lowest_common_ancestor(2, 4) == 2
    assert tree.lowest_common_ancestor(3, 5) == 4
    assert tree.lowest_common_ancestor(3, 42) is None


def test_bst_iterative_traversal_on_degenerate_tree():
    tree = BinarySearchTree(range(2000))
    assert tree.in_order() == list(range(2000))
    assert tree.post_order() == list(range(1999, -1, -1))
    assert tree.height() == 2000


@given(st.lists(st.integers()))
def test_bst_traversals_agree_with_recursive(values):
    tree = BinarySearchTree(values)
    assert tree.in_order() == sorted(set(values))
    assert tree.in_order() == tree.in_order_recursive()
    assert tree.pre_order() == tree.pre_order_recursive()
    assert tree.post_order() == tree.post_order_recursive()
    assert sorted(tree.level_order()) == sorted(set(values))
    assert tree.is_valid()
