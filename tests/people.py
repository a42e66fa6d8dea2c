import dataclasses

from ordtree.order import Ordering


@dataclasses.dataclass(frozen=True)
class Person:
    name: str
    age: int

    def order(self, other):
        if self.name < other.name:
            return -1
        if self.name > other.name:
            return 1
        return self.age - other.age


def order_people(p1, p2):
    if p1.name != p2.name:
        return Ordering.LESS_THAN if p1.name < p2.name else Ordering.GREATER_THAN
    return p1.age - p2.age
