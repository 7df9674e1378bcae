"""In-memory entity repositories."""

import dataclasses
import logging
from typing import Callable, Dict, Generic, Iterator, List, TypeVar

from recordkeeper.domain.errors import ErrorKind, RecordError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository(Generic[T]):
    """
    Unindexed repository backed by an ordered list.

    Duplicate ids are permitted; lookups by id return the first match.
    """

    def __init__(self):
        self._items: List[T] = []

    def add(self, item: T):
        self._items.append(item)

    def get_by_id(self, entity_id) -> T:
        """
        Get the first entity with the given id.

        Raises:
            RecordError: NOT_FOUND if no entity has that id
        """
        return self.find_first(lambda item: item.id == entity_id, entity_id)

    def find_first(self, predicate: Callable[[T], bool], label=None) -> T:
        """
        Linear scan for the first entity matching predicate.

        Args:
            predicate: Filter applied to each entity in insertion order
            label: Value reported in the NOT_FOUND error

        Raises:
            RecordError: NOT_FOUND if nothing matches
        """
        for item in self._items:
            if predicate(item):
                return item
        raise RecordError.not_found(label)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items if predicate(item)]

    def remove(self, entity_id):
        self.remove_first(lambda item: item.id == entity_id, entity_id)

    def remove_first(self, predicate: Callable[[T], bool], label=None):
        """Delete the first entity matching predicate, NOT_FOUND if none does."""
        for index, item in enumerate(self._items):
            if predicate(item):
                del self._items[index]
                return
        raise RecordError.not_found(label)

    def list_all(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.list_all())

    def __contains__(self, entity_id) -> bool:
        return any(item.id == entity_id for item in self._items)


class IndexedRepository(Generic[T]):
    """
    Repository keyed by entity id.

    Ids are unique; iteration follows insertion order.
    """

    def __init__(self):
        self._items: Dict[object, T] = {}

    def add(self, item: T):
        """
        Add an entity.

        Raises:
            RecordError: DUPLICATE_KEY if the id is already stored
        """
        if item.id in self._items:
            raise RecordError.duplicate_key(item.id)
        self._items[item.id] = item

    def get_by_id(self, entity_id) -> T:
        if entity_id not in self._items:
            raise RecordError.not_found(entity_id)
        return self._items[entity_id]

    def find_first(self, predicate: Callable[[T], bool], label=None) -> T:
        """Linear scan for the first entity matching predicate."""
        for item in self._items.values():
            if predicate(item):
                return item
        raise RecordError.not_found(label)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items.values() if predicate(item)]

    def remove(self, entity_id):
        if entity_id not in self._items:
            raise RecordError.not_found(entity_id)
        del self._items[entity_id]

    def remove_first(self, predicate: Callable[[T], bool], label=None):
        item = self.find_first(predicate, label)
        del self._items[item.id]

    def list_all(self) -> List[T]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.list_all())

    def __contains__(self, entity_id) -> bool:
        return entity_id in self._items


class InventoryRepository(IndexedRepository[T]):
    """Indexed repository for entities carrying a quantity field."""

    def update_quantity(self, entity_id, new_quantity: int) -> T:
        """
        Replace the stored entity with a copy holding new_quantity.

        Args:
            entity_id: Id of the stored entity
            new_quantity: Non-negative quantity

        Returns:
            The updated entity

        Raises:
            RecordError: INVALID_ARGUMENT for a negative quantity,
                NOT_FOUND if the id is absent
        """
        if new_quantity < 0:
            raise RecordError(
                ErrorKind.INVALID_ARGUMENT,
                "Quantity cannot be negative.",
                details={"id": entity_id, "field": "quantity", "value": new_quantity},
            )
        current = self.get_by_id(entity_id)
        updated = dataclasses.replace(current, quantity=new_quantity)
        self._items[entity_id] = updated
        logger.debug(f"Quantity for item {entity_id} set to {new_quantity}")
        return updated
