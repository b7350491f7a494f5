# pgroup.py


class PGroup:
    """Persistent set of values.

    ``add`` and ``delete`` never touch the group they are called on; they
    hand back a new group (or the same one, when membership would not
    change). Members only need ``==``, not hashing.
    """

    __slots__ = ("_members",)

    def __init__(self, members=()):
        self._members = tuple(members)

    def add(self, value):
        if value in self._members:
            return self
        return PGroup(self._members + (value,))

    def delete(self, value):
        if value not in self._members:
            return self
        return PGroup(m for m in self._members if m != value)

    def has(self, value):
        return value in self._members

    @classmethod
    def from_iterable(cls, values):
        group = cls.empty
        for value in values:
            group = group.add(value)
        return group

    def __contains__(self, value):
        return self.has(value)

    def __iter__(self):
        return iter(self._members)

    def __len__(self):
        return len(self._members)

    def __eq__(self, other):
        if not isinstance(other, PGroup):
            return NotImplemented
        return (len(self._members) == len(other._members)
                and all(m in other._members for m in self._members))

    __hash__ = None

    def __repr__(self):
        return f"PGroup({list(self._members)!r})"


PGroup.empty = PGroup()
