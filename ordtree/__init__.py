__version__ = '0.2.0'

from .order import (
        Ordering,
        chain_order,
        compare,
        key_order,
        natural_order,
        reverse_order,
        to_ordering
    )
from .tree.bstree import BSTree, new_tree
