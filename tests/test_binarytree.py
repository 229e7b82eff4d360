import pytest

from dsakit.binarytree import Tree, build_tree

DEMO = [35, 165, 47, 243, 65, 146, 10, 6, 40, 60, 15]
SMALL = [4, 2, 3, 0, 5]


def test_in_order_is_sorted():
    assert Tree(DEMO).in_order() == sorted(DEMO)


def test_iteration_matches_in_order():
    tree = Tree(DEMO)
    assert list(tree) == tree.in_order()


def test_pre_order():
    assert Tree(DEMO).pre_order() == [35, 10, 6, 15, 165, 47, 40, 65, 60, 146, 243]


def test_pre_order_starts_with_root():
    order = Tree(DEMO).pre_order()
    assert order[0] == DEMO[0]
    assert sorted(order) == sorted(DEMO)


def test_post_order_ends_with_root():
    order = Tree(DEMO).post_order()
    assert order[-1] == DEMO[0]
    assert sorted(order) == sorted(DEMO)


def test_post_order_small():
    assert Tree(SMALL).post_order() == [0, 3, 2, 5, 4]


def test_empty_traversals():
    tree = Tree()
    assert tree.in_order() == []
    assert tree.pre_order() == []
    assert tree.post_order() == []
    assert tree.paths() == []


def test_search():
    tree = Tree(DEMO)
    assert all(tree.search(v) for v in DEMO)
    assert not tree.search(999)
    assert 10 in tree
    assert not Tree().search(1)


def test_min_max():
    tree = Tree(DEMO)
    assert tree.min() == min(DEMO)
    assert tree.max() == max(DEMO)


@pytest.mark.parametrize("method", ["min", "max"])
def test_min_max_empty_raises(method):
    with pytest.raises(ValueError):
        getattr(Tree(), method)()


def test_duplicates_ignored():
    tree = Tree([5, 5, 3, 3, 7])
    assert tree.in_order() == [3, 5, 7]


def test_delete_sequence():
    tree = Tree(DEMO)
    remaining = list(DEMO)
    for key in (165, 47, 15):
        tree.delete(key)
        remaining.remove(key)
        assert tree.in_order() == sorted(remaining)
        assert not tree.search(key)


def test_delete_root_with_single_child():
    tree = Tree([5, 3])
    tree.delete(5)
    assert tree.in_order() == [3]
    assert tree.root.data == 3


def test_delete_only_node():
    tree = Tree([1])
    tree.delete(1)
    assert tree.root is None


def test_delete_missing_keeps_tree():
    tree = Tree(DEMO)
    tree.delete(1000)
    assert tree.in_order() == sorted(DEMO)


def test_paths():
    assert Tree(SMALL).paths() == ["4->2->0", "4->2->3", "4->5"]


def test_paths_count_equals_leaves():
    tree = Tree(DEMO)
    paths = tree.paths()
    assert all(p.startswith(str(DEMO[0])) for p in paths)
    leaves = {int(p.split("->")[-1]) for p in paths}
    assert leaves <= set(DEMO)


def test_build_tree_level_order():
    tree = build_tree([1, 2, 3, None, 4])
    root = tree.root
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left is None
    assert root.left.right.data == 4


@pytest.mark.parametrize("values", [[], [None], [None, 1, 2]])
def test_build_tree_empty(values):
    assert build_tree(values).root is None