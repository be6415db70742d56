from typing import Any


class RandomAccessListError(Exception): ...


class IndexOutOfRange(RandomAccessListError, IndexError):
    def __init__(self, index: Any, size: int):
        super().__init__(
            f"{index!r} is out of range for a structure of"
            f" {size} element{'' if size == 1 else 's'}"
        )
        self.index = index
        self.size = size


class LengthMismatch(RandomAccessListError, ValueError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Expected {expected} elements but got {actual}"
        )
        self.expected = expected
        self.actual = actual


class ShapeMismatch(RandomAccessListError, ValueError):
    """
    Two trees (or two digit spines) that have to line up don't.

    Can't happen through the list operations unless the digit
    bookkeeping is broken, but direct tree operations can hit it.
    """

    def __init__(self, left: Any, right: Any):
        super().__init__(
            f"Shapes don't match: {left!r} vs {right!r}"
        )
        self.left = left
        self.right = right
