import math
from abc import ABC, abstractmethod


class IndexedSource(ABC):
    """
    Abstract base class for anything the searches can read by index.
    Finite sources report their length; unbounded sources return None from length()
    and rely on the caller to define what lies past the real data.
    """

    @abstractmethod
    def get(self, index: int):
        """Returns the element stored at index."""
        pass

    @abstractmethod
    def length(self) -> int | None:
        """Number of elements, or None if the source has no known bound."""
        pass

    def __getitem__(self, index: int):
        return self.get(index)

    def __len__(self) -> int:
        n = self.length()
        if n is None:
            raise TypeError(f"{type(self).__name__} is unbounded and has no len()")
        return n


class ArraySource(IndexedSource):
    """A finite source backed by any list-like sequence."""

    def __init__(self, data):
        self.data = data

    def get(self, index: int):
        if index < 0 or index >= len(self.data):
            raise IndexError(f"index {index} out of range for source of length {len(self.data)}")
        return self.data[index]

    def length(self) -> int:
        return len(self.data)


class UnboundedArraySource(IndexedSource):
    """
    Presents finite data as an infinite ascending array.
    Every index past the real data reads as `sentinel`, which must compare
    greater than or equal to any target searched for.
    """

    def __init__(self, data, sentinel=math.inf):
        self.data = data
        self.sentinel = sentinel

    def get(self, index: int):
        if index < 0:
            raise IndexError(f"negative index {index}")
        if index >= len(self.data):
            return self.sentinel
        return self.data[index]

    def length(self) -> None:
        return None


class CountingSource(IndexedSource):
    """
    Wraps a source (or a plain sequence) and counts element reads.
    The benchmark reports `probes` as the cost of each search.
    """

    def __init__(self, inner):
        self.inner = inner
        self.probes = 0

    def get(self, index: int):
        self.probes += 1
        return self.inner[index]

    def length(self) -> int | None:
        # len() would raise for an unbounded inner source
        if isinstance(self.inner, IndexedSource):
            return self.inner.length()
        return len(self.inner)

    def reset(self):
        self.probes = 0
