from treekit.analysis import is_complete
from treekit.heap import MaxHeap, is_heap
from treekit.tree import Node


ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _max_ordered(node):
    for child in (node.left, node.right):
        if child is not None:
            if child.value > node.value or child.parent is not node:
                return False
            if not _max_ordered(child):
                return False
    return True


def test_is_heap_empty_is_false():
    assert is_heap(None) is False


def test_is_heap_single_node():
    assert is_heap(Node(98)) is True


def test_is_heap_accepts_valid_heap():
    root = Node(98)
    left = root.insert_left(90)
    root.insert_right(79)
    left.insert_left(20)
    left.insert_right(10)
    assert is_heap(root) is True


def test_is_heap_allows_equal_values():
    root = Node(5)
    root.insert_left(5)
    root.insert_right(5)
    assert is_heap(root) is True


def test_is_heap_rejects_order_violation():
    root = Node(98)
    left = root.insert_left(90)
    root.insert_right(79)
    left.insert_left(95)
    assert is_heap(root) is False


def test_is_heap_rejects_incomplete_tree():
    root = Node(98)
    root.insert_left(90)
    root.insert_right(79).insert_left(10)
    assert is_heap(root) is False


def test_is_heap_rejects_right_only_child():
    root = Node(98)
    root.insert_right(50)
    assert is_heap(root) is False


def test_from_iterable_builds_heap():
    heap = MaxHeap.from_iterable(ARRAY)
    assert heap.root.value == max(ARRAY)
    assert len(heap) == len(ARRAY)
    assert sorted(heap) == sorted(ARRAY)
    assert is_heap(heap.root)
    assert _max_ordered(heap.root)


def test_every_prefix_is_heap():
    heap = MaxHeap()
    for count, value in enumerate(ARRAY, start=1):
        heap.insert(value)
        assert len(heap) == count
        assert is_complete(heap.root)
        assert is_heap(heap.root)


def test_insert_into_empty_heap_returns_root():
    heap = MaxHeap()
    node = heap.insert(42)
    assert node is heap.root
    assert node.value == 42


def test_insert_sifts_up_to_root():
    heap = MaxHeap.from_iterable([1, 2])
    node = heap.insert(3)
    assert node is heap.root
    assert list(heap) == [3, 1, 2]


def test_insert_small_value_stays_at_bottom():
    heap = MaxHeap.from_iterable([98, 90, 79])
    node = heap.insert(5)
    assert node.value == 5
    assert node.is_leaf()
    assert node.parent is heap.root.left
    assert node.parent.left is node


def test_insert_returns_node_holding_value():
    heap = MaxHeap.from_iterable(ARRAY[:-1])
    node = heap.insert(ARRAY[-1])
    assert node.value == ARRAY[-1]
    assert node.parent is None or node.parent.value >= node.value


def test_empty_heap():
    heap = MaxHeap.from_iterable([])
    assert heap.root is None
    assert len(heap) == 0
    assert list(heap) == []