"""Ordered collection primitive shared by the scene and asset stores."""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


def move_element(items: List[T], from_index: int, to_index: int) -> List[T]:
    """Return a copy of ``items`` with one element moved.

    The element at ``from_index`` is removed and reinserted at ``to_index``
    in a single pass, so ``to_index`` addresses the list after removal.

    Args:
        items: Source sequence. Not modified.
        from_index: Current position of the element.
        to_index: Position the element ends up at.

    Returns:
        New list with the same elements.

    Raises:
        IndexError: If either index is outside the list.
    """
    size = len(items)
    for index in (from_index, to_index):
        if not 0 <= index < size:
            raise IndexError(f"Index {index} out of range for {size} items")

    result = list(items)
    if from_index == to_index:
        return result
    element = result.pop(from_index)
    result.insert(to_index, element)
    return result


class OrderedCollection(Generic[T]):
    """A list whose order carries meaning, with safe index operations."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def snapshot(self) -> List[T]:
        """Return a shallow copy of the current order."""
        return list(self._items)

    def replace(self, items: Iterable[T]) -> None:
        self._items = list(items)

    def append(self, item: T) -> None:
        self._items.append(item)

    def insert(self, index: int, item: T) -> None:
        """Insert ``item`` at ``index``, clamped to the collection bounds."""
        index = max(0, min(index, len(self._items)))
        self._items.insert(index, item)

    def remove_at(self, index: int) -> T:
        return self._items.pop(index)

    def remove_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Remove every element matching ``predicate`` and return them."""
        removed = [item for item in self._items if predicate(item)]
        if removed:
            self._items = [item for item in self._items if not predicate(item)]
        return removed

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self._items:
            if predicate(item):
                return item
        return None

    def index_where(self, predicate: Callable[[T], bool]) -> int:
        """Return the index of the first match, or -1."""
        for index, item in enumerate(self._items):
            if predicate(item):
                return index
        return -1

    def move(self, from_index: int, to_index: int) -> bool:
        """Move one element; out-of-range indices leave the order untouched.

        Returns:
            False if either index was out of range, True otherwise.
        """
        try:
            self._items = move_element(self._items, from_index, to_index)
        except IndexError:
            return False
        return True
