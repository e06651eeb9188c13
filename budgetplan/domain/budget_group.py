"""Budget groups: named, always-sorted collections of budget items."""

import logging
from collections.abc import Iterator

from budgetplan.domain.budget_item import BudgetItem
from budgetplan.domain.models import GroupName
from budgetplan.errors import IndexOutOfRangeError

logger = logging.getLogger(__name__)


class BudgetGroup:
    """Named collection of budget items kept in ascending item order.

    Duplicates are allowed. Indices handed out by enumerate() are only
    valid until the next add() or remove().
    """

    def __init__(self, name: str) -> None:
        self._name = GroupName(name)
        self._items: list[BudgetItem] = []

    @property
    def name(self) -> GroupName:
        return self._name

    @property
    def items(self) -> tuple[BudgetItem, ...]:
        """Snapshot of the items in sorted order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BudgetItem]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"BudgetGroup(name={self._name!r}, items={len(self._items)})"

    def enumerate(self) -> Iterator[tuple[int, BudgetItem]]:
        """Iterate (index, item) pairs in the current sorted order.

        The pairs reflect the group as it was when enumerate() was called;
        mutating the group while iterating does not affect them.
        """
        return enumerate(self.items)

    def add(self, item: BudgetItem) -> None:
        """Add an item and re-sort the group.

        Args:
            item: Item to add. Items equal to existing ones are kept too.
        """
        self._items.append(item)
        self._items.sort()
        logger.debug("Added %r to group %r (%d items)", item.name, self._name, len(self._items))

    def remove(self, index: int) -> BudgetItem:
        """Remove the item at index.

        Args:
            index: Position from the most recent enumerate().

        Returns:
            The removed item.

        Raises:
            IndexOutOfRangeError: If index is negative or >= len(group). The
                group is left unchanged.
        """
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))

        item = self._items.pop(index)
        self._items.sort()
        logger.debug("Removed %r from group %r (%d items)", item.name, self._name, len(self._items))
        return item
