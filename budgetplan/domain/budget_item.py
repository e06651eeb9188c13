"""Budget items: single income or expense lines.

An item's identity is its (name, period, kind) triple. The amount is
stored unsigned and only gets its sign when the monthly contribution is
computed.
"""

import logging
from dataclasses import dataclass
from functools import total_ordering

from budgetplan.domain.models import ItemKind, ItemName, Period, parse_period
from budgetplan.errors import InvalidAmountError, ItemSpecError

logger = logging.getLogger(__name__)


@total_ordering
@dataclass(frozen=True, eq=False)
class BudgetItem:
    """Immutable income or expense line.

    Items compare and hash on (name, period, kind); two items differing
    only in amount are equal and sort next to each other.
    """

    name: ItemName
    period: Period
    kind: ItemKind
    amount: float

    def __post_init__(self) -> None:
        # `not >` also rejects NaN
        if not self.amount > 0:
            raise InvalidAmountError(self.amount)

    @property
    def sort_key(self) -> tuple[str, int, int]:
        return (self.name, self.period.months, self.kind.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BudgetItem):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BudgetItem):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def monthly_contribution(self) -> float:
        """Amount per month, negative for expenses.

        Returns:
            The amount divided by the period length in months.
        """
        monthly = self.amount / self.period.months
        if self.kind is ItemKind.EXPENSE:
            return -monthly
        return monthly


def create_income(name: str, amount: float, period: Period) -> BudgetItem:
    """Create an income item.

    Raises:
        InvalidAmountError: If amount is not positive.
    """
    item = BudgetItem(ItemName(name), period, ItemKind.INCOME, amount)
    logger.debug("Created income %r: %s every %d month(s)", name, amount, period.months)
    return item


def create_expense(name: str, amount: float, period: Period) -> BudgetItem:
    """Create an expense item.

    Raises:
        InvalidAmountError: If amount is not positive.
    """
    item = BudgetItem(ItemName(name), period, ItemKind.EXPENSE, amount)
    logger.debug("Created expense %r: %s every %d month(s)", name, amount, period.months)
    return item


def parse_item_spec(spec: str, kind: ItemKind) -> BudgetItem:
    """Parse a NAME:AMOUNT[:PERIOD] specification into an item.

    Amount and period are split off from the right, so a name may contain
    colons as long as the period is given explicitly. Period defaults to
    monthly.

    Args:
        spec: Item specification, e.g. "Rent:950" or "Insurance:240:yearly".
        kind: Whether to build an income or an expense.

    Returns:
        The parsed BudgetItem.

    Raises:
        ItemSpecError: If the specification is malformed.
        InvalidAmountError: If the amount is not positive.
    """
    parts = spec.rsplit(":", 2)
    if len(parts) < 2:
        raise ItemSpecError(f"Expected NAME:AMOUNT[:PERIOD], got '{spec}'")

    if len(parts) == 3:
        name, amount_str, period_str = parts
        period = parse_period(period_str)
    else:
        name, amount_str = parts
        period = Period.EVERY_1_MONTH

    name = name.strip()
    if not name:
        raise ItemSpecError(f"Missing item name in '{spec}'")

    try:
        amount = float(amount_str)
    except ValueError:
        raise ItemSpecError(f"Invalid amount '{amount_str.strip()}' in '{spec}'") from None

    if kind is ItemKind.INCOME:
        return create_income(name, amount, period)
    return create_expense(name, amount, period)
