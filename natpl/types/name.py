from __future__ import annotations
import sys


class Name:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash across the three namespaces
        self.id = sys.intern(str(name))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Name) and self.id == other.id

    def __lt__(self, other: Name) -> bool:
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Name({self.id!r})"

    def __str__(self):
        return self.id
