"""Three-way orderings and comparators.

A comparator is any callable cmp(a, b) that returns an Ordering or a signed
integer: negative if a sorts before b, zero if they are equivalent and
positive if a sorts after b. A method taking one other instance, e.g.
Person.order, is already such a callable.

Comparators must implement a total order. Nothing here checks that.
"""

import enum

class Ordering(enum.IntEnum):
    LESS_THAN    = -1
    EQUAL        = 0
    GREATER_THAN = 1

    def reverse(self):
        return Ordering(-self.value)


def to_ordering(r):
    """Normalize a comparator result to an Ordering."""
    if isinstance(r, Ordering):
        return r
    if r < 0:
        return Ordering.LESS_THAN
    if r > 0:
        return Ordering.GREATER_THAN
    return Ordering.EQUAL

def compare(cmp, a, b):
    return to_ordering(cmp(a, b))


def natural_order(a, b):
    """Comparator for any type with native < and > operators.

    Works for numbers, strings, bytes, tuples and similar types.
    """
    if a < b:
        return Ordering.LESS_THAN
    if a > b:
        return Ordering.GREATER_THAN
    return Ordering.EQUAL

def reverse_order(cmp):
    def _reversed(a, b):
        return compare(cmp, a, b).reverse()
    return _reversed

def key_order(key, cmp=natural_order):
    """Orders values by comparing key(a) with key(b) using cmp."""
    def _by_key(a, b):
        return compare(cmp, key(a), key(b))
    return _by_key

def chain_order(*cmps):
    """Lexicographic combination: the first comparator not reporting EQUAL
    decides.

    chain_order(key_order(attrgetter('name')), key_order(attrgetter('age')))
    orders records by name, then by age.
    """
    def _chained(a, b):
        for cmp in cmps:
            r = compare(cmp, a, b)
            if r is not Ordering.EQUAL:
                return r
        return Ordering.EQUAL
    return _chained
