from __future__ import annotations


class EmptyType:
    """The value of `()`: an empty code block and the explicit null."""

    _instance: EmptyType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return hash(EmptyType)

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


Empty = EmptyType()
