from collections.abc import Sequence

from .searches import binary_search
from .sources import IndexedSource, UnboundedArraySource
from .utils import NOT_FOUND

DEFAULT_MAX_DOUBLINGS = 64


def find_window(source: IndexedSource, target: int, max_doublings: int | None = DEFAULT_MAX_DOUBLINGS):
    """
    Grows a window [start, end] from [0, 1] until source[end] >= target.
    Each new window starts right after the previous one and is twice as wide,
    so the target's range is found in O(log(index of target)) reads.
    A source with a known length never has its window grown past the last index.
    Returns (start, end), or None if no window can contain target.
    """
    n = source.length()
    if n == 0:
        return None
    start = 0
    end = 1 if n is None else min(1, n - 1)
    doublings = 0
    while target > source.get(end):
        if n is not None and end == n - 1:
            return None
        if max_doublings is not None and doublings >= max_doublings:
            return None
        new_start = end + 1
        end = end + (end - start + 1) * 2
        if n is not None:
            end = min(end, n - 1)
        start = new_start
        doublings += 1
    return start, end


def search_unbounded(source: IndexedSource | Sequence[int], target: int,
                     max_doublings: int | None = DEFAULT_MAX_DOUBLINGS) -> int:
    """
    Doubling (exponential) search over an ascending source with no known length.

    The source may be read far past its real data. Whatever it returns there
    must compare >= target, e.g. UnboundedArraySource's infinite sentinel;
    otherwise the window never closes. max_doublings caps the number of window
    growths and returns -1 once exceeded; pass None to rely purely on the sentinel.
    Searching for the sentinel itself finds it past the real data, so the
    returned index is then >= the data's length.

    Plain sequences are wrapped in an UnboundedArraySource. Finite sources
    (ArraySource, or a CountingSource over a list) are searched up to their last index.
    """
    if not isinstance(source, IndexedSource):
        source = UnboundedArraySource(source)
    window = find_window(source, target, max_doublings)
    if window is None:
        return NOT_FOUND
    start, end = window
    return binary_search(source, target, start, end)
