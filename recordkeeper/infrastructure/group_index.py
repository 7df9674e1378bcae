"""Foreign-key grouping over a repository snapshot."""

from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class GroupIndex(Generic[T]):
    """
    Read-only mapping from a foreign key to the entities referencing it.

    Built in one pass from a snapshot and never updated afterwards; rebuild it
    whenever the source repository changes. Keys appear in first-seen order and
    each group keeps source order. A key with no entities is absent, so there
    are no empty groups.
    """

    def __init__(self, groups: Optional[Dict[object, Tuple[T, ...]]] = None):
        self._groups: Dict[object, Tuple[T, ...]] = dict(groups or {})

    @classmethod
    def build(cls, entities: Iterable[T], key: Callable[[T], object]) -> "GroupIndex[T]":
        """
        Group entities by key.

        Args:
            entities: Source snapshot, usually a repository's list_all()
            key: Extracts the foreign key from an entity

        Returns:
            A new GroupIndex
        """
        buckets: Dict[object, List[T]] = {}
        for entity in entities:
            group_key = key(entity)
            if group_key not in buckets:
                buckets[group_key] = []
            buckets[group_key].append(entity)
        return cls({group_key: tuple(group) for group_key, group in buckets.items()})

    def lookup(self, group_key) -> Optional[Tuple[T, ...]]:
        """Return the group for group_key, or None when no entity references it."""
        return self._groups.get(group_key)

    def members(self, group_key) -> Tuple[T, ...]:
        return self._groups.get(group_key, ())

    def keys(self) -> List[object]:
        return list(self._groups)

    def items(self) -> List[Tuple[object, Tuple[T, ...]]]:
        return list(self._groups.items())

    def __contains__(self, group_key) -> bool:
        return group_key in self._groups

    def __len__(self) -> int:
        return len(self._groups)
