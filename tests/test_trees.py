import pytest

from offerkit.trees import (
    TreeNode,
    bst_to_list,
    depth,
    deserialize,
    has_subtree,
    inorder,
    inorder_successor,
    is_balanced,
    is_valid_postorder,
    kth_node,
    mirror,
    reconstruct,
    serialize,
)

PRE = [1, 2, 4, 7, 3, 5, 6, 8]
IN = [4, 7, 2, 1, 5, 3, 8, 6]
BST_FORM = [10, 6, 4, -1, -1, 8, -1, -1, 14, 12, -1, -1, 16, -1, -1]


def all_nodes(root):
    if root is None:
        return []
    return all_nodes(root.left) + [root] + all_nodes(root.right)


def test_reconstruct_gives_inorder():
    root = reconstruct(PRE, IN)
    assert inorder(root) == IN
    assert root.val == PRE[0]


def test_reconstruct_empty():
    assert reconstruct([], []) is None


def test_reconstruct_mismatch_raises():
    with pytest.raises(ValueError):
        reconstruct([1, 2], [1, 3])
    with pytest.raises(ValueError):
        reconstruct([1, 2], [1])


def test_serialize_round_trip():
    root = reconstruct(PRE, IN)
    form = serialize(root)
    again = deserialize(form)
    assert inorder(again) == IN
    assert serialize(again) == form
    assert form[0] == PRE[0]


def test_deserialize_then_serialize():
    assert serialize(deserialize(BST_FORM)) == BST_FORM


def test_empty_serialization():
    assert serialize(None) == []
    assert deserialize([]) is None
    assert deserialize([-1]) is None


def test_deserialize_sets_parents():
    root = deserialize(BST_FORM)
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.left.parent is root.right


def test_has_subtree():
    root = reconstruct(PRE, IN)
    part = TreeNode(2, TreeNode(4))
    assert has_subtree(root, part)
    assert not has_subtree(root, TreeNode(2, None, TreeNode(4)))
    assert not has_subtree(root, None)
    assert not has_subtree(None, part)


def test_mirror():
    root = reconstruct(PRE, IN)
    form = serialize(root)
    mirror(root)
    assert inorder(root) == IN[::-1]
    mirror(root)
    assert serialize(root) == form


def test_mirror_none():
    assert mirror(None) is None


@pytest.mark.parametrize(
    "values, expected",
    [([5, 7, 6, 9, 11, 10, 8], True), ([7, 4, 6, 5], False), ([], True), ([3], True)],
)
def test_is_valid_postorder(values, expected):
    assert is_valid_postorder(values) is expected


def test_bst_to_list():
    root = deserialize(BST_FORM)
    expected = inorder(root)
    head = bst_to_list(root)
    forward = []
    node = head
    tail = None
    while node is not None:
        forward.append(node.val)
        tail = node
        node = node.right
    backward = []
    node = tail
    while node is not None:
        backward.append(node.val)
        node = node.left
    assert forward == expected
    assert backward == expected[::-1]
    assert head.left is None


def test_bst_to_list_empty():
    assert bst_to_list(None) is None


def test_depth():
    chain = [1, 2, 3]
    root = deserialize(chain + [-1] * (len(chain) + 1))
    assert depth(root) == len(chain)
    assert depth(TreeNode(5)) == 1
    assert depth(None) == 0


def test_is_balanced():
    assert is_balanced(deserialize(BST_FORM))
    assert is_balanced(None)
    assert not is_balanced(deserialize([1, 2, 3, -1, -1, -1, -1]))


def test_inorder_successor():
    root = deserialize(BST_FORM)
    nodes = all_nodes(root)
    for current, following in zip(nodes, nodes[1:]):
        assert inorder_successor(root, current) is following
    assert inorder_successor(root, nodes[-1]) is None
    assert inorder_successor(None, nodes[0]) is None


def test_kth_node():
    root = deserialize(BST_FORM)
    ordered = sorted(inorder(root))
    for k, value in enumerate(ordered, start=1):
        assert kth_node(root, k).val == value
    assert kth_node(root, 0) is None
    assert kth_node(root, len(ordered) + 1) is None
    assert kth_node(None, 1) is None