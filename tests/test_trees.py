import pytest

from algosolve.trees import (
    TreeNode,
    evaluate_tree,
    is_same_tree,
    level_order,
    remove_leaf_nodes,
)


def test_from_list_empty():
    assert TreeNode.from_list([]) is None


def test_from_list_structure():
    root = TreeNode.from_list([3, 9, 20, None, None, 15, 7])
    assert root.val == 3
    assert root.left.val == 9
    assert root.left.left is None and root.left.right is None
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_level_order():
    root = TreeNode.from_list([3, 9, 20, None, None, 15, 7])
    assert level_order(root) == [[3], [9, 20], [15, 7]]


def test_level_order_empty_and_single():
    assert level_order(None) == []
    assert level_order(TreeNode(1)) == [[1]]


def test_level_order_flattens_to_input_without_gaps():
    values = [1, 2, 3, 4, 5, 6, 7]
    levels = level_order(TreeNode.from_list(values))
    assert [v for level in levels for v in level] == values


def test_is_same_tree_reflexive_and_different():
    a = TreeNode.from_list([1, 2, 3])
    b = TreeNode.from_list([1, 2, 3])
    assert is_same_tree(a, b) is True
    assert is_same_tree(TreeNode.from_list([1, 2]), TreeNode.from_list([1, None, 2])) is False
    assert is_same_tree(TreeNode.from_list([1, 2, 1]), TreeNode.from_list([1, 1, 2])) is False
    assert is_same_tree(None, None) is True
    assert is_same_tree(None, TreeNode(1)) is False


def test_remove_leaf_nodes_cascades():
    root = TreeNode.from_list([1, 2, 3, 2, None, 2, 4])
    result = remove_leaf_nodes(root, 2)
    assert is_same_tree(result, TreeNode.from_list([1, None, 3, None, 4]))


def test_remove_leaf_nodes_removes_everything():
    root = TreeNode.from_list([1, 1, 1])
    assert remove_leaf_nodes(root, 1) is None


def test_remove_leaf_nodes_keeps_tree_without_target():
    root = TreeNode.from_list([1, 2, 3])
    result = remove_leaf_nodes(root, 9)
    assert is_same_tree(result, TreeNode.from_list([1, 2, 3]))


def test_evaluate_tree():
    assert evaluate_tree(TreeNode.from_list([2, 1, 3, None, None, 0, 1])) is True
    assert evaluate_tree(TreeNode(0)) is False
    assert evaluate_tree(TreeNode.from_list([3, 1, 0])) is False
    assert evaluate_tree(TreeNode.from_list([2, 0, 0])) is False


def test_evaluate_tree_invalid_value():
    with pytest.raises(ValueError):
        evaluate_tree(TreeNode(7))


def test_evaluate_tree_missing_child():
    with pytest.raises(ValueError):
        evaluate_tree(TreeNode.from_list([2, 1]))