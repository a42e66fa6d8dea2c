from ..order import Ordering, compare

class BSTreeNode(object):
    """A binary search tree node.

    An absent child is None. The comparator is never stored on the node,
    it is passed to add() and contains() by the owning tree.
    """

    __slots__ = ('value', 'left', 'right')

    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None


def insert(node, cmp, value):
    """Inserts value into the subtree rooted at node.

    Returns a tuple (root, inserted): the root of the resulting subtree (a
    new leaf if node is None, node itself otherwise) and whether a node was
    created. If a value comparing EQUAL is already on the search path,
    nothing is changed.

    Time complexity: O(h), h being the height of the subtree"""
    if node is None:
        return (BSTreeNode(value), True)
    x = node
    while True:
        r = compare(cmp, value, x.value)
        if r is Ordering.LESS_THAN:
            if x.left is None:
                x.left = BSTreeNode(value)
                return (node, True)
            x = x.left
        elif r is Ordering.GREATER_THAN:
            if x.right is None:
                x.right = BSTreeNode(value)
                return (node, True)
            x = x.right
        else:
            return (node, False)

def add(node, cmp, value):
    """Like insert(), but returns only the subtree root."""
    return insert(node, cmp, value)[0]

def find(node, cmp, value):
    """Finds the node in the subtree rooted at node whose value compares
    EQUAL to value. Returns None if there is no such node.

    Time complexity: O(h), h being the height of the subtree"""
    x = node
    while x is not None:
        r = compare(cmp, value, x.value)
        if r is Ordering.LESS_THAN:
            x = x.left
        elif r is Ordering.GREATER_THAN:
            x = x.right
        else:
            return x
    return None

def contains(node, cmp, value):
    return find(node, cmp, value) is not None

def height(node):
    """Number of nodes on the longest path from node down to a leaf."""
    h = 0
    level = [node] if node is not None else []
    while level:
        h += 1
        level = [c for x in level for c in (x.left, x.right) if c is not None]
    return h


class BSTree(object):
    """Unbalanced binary search tree ordered by a caller supplied comparator.

    The comparator is fixed at construction. Values comparing EQUAL to a
    value already in the tree are not inserted again. There is no
    rebalancing: inserting values in sorted order produces a list-shaped
    tree with O(n) operations. Not safe for concurrent modification.
    """

    def __init__(self, cmp):
        self._cmp = cmp
        self.root = None
        self._size = 0

    @property
    def cmp(self):
        return self._cmp

    def add(self, value):
        self.root, inserted = insert(self.root, self._cmp, value)
        if inserted:
            self._size += 1

    def contains(self, value):
        return contains(self.root, self._cmp, value)

    def find(self, value):
        """Returns the stored value comparing EQUAL to value, or None.

        Time complexity: O(h)"""
        x = find(self.root, self._cmp, value)
        return x.value if x is not None else None

    def size(self):
        """Returns the number of nodes stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def height(self):
        """Time complexity: O(n)"""
        return height(self.root)

    def __contains__(self, value):
        return self.contains(value)

    def __len__(self):
        return self._size


def new_tree(cmp):
    return BSTree(cmp)
