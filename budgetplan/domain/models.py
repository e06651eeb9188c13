"""Domain type definitions for budgetplan.

- ItemName: Name of a budget item (e.g. "Rent")
- GroupName: Label of a budget group (e.g. "Household")
- Period: How often a budget item recurs
- ItemKind: Whether a budget item is income or an expense
"""

from enum import Enum
from typing import NewType

from budgetplan.errors import ItemSpecError

ItemName = NewType("ItemName", str)

GroupName = NewType("GroupName", str)


class Period(Enum):
    """Recurrence interval of a budget item, valued in months."""

    EVERY_1_MONTH = 1
    EVERY_2_MONTHS = 2
    EVERY_3_MONTHS = 3
    EVERY_6_MONTHS = 6
    EVERY_12_MONTHS = 12

    @property
    def months(self) -> int:
        """Length of the interval in months."""
        return self.value

    @property
    def label(self) -> str:
        return _PERIOD_LABELS[self]


class ItemKind(Enum):
    """Income or expense. Declaration order is the sort order."""

    INCOME = 0
    EXPENSE = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()


_PERIOD_LABELS: dict[Period, str] = {
    Period.EVERY_1_MONTH: "Monthly",
    Period.EVERY_2_MONTHS: "Bimonthly",
    Period.EVERY_3_MONTHS: "Quarterly",
    Period.EVERY_6_MONTHS: "Half-yearly",
    Period.EVERY_12_MONTHS: "Yearly",
}

PERIOD_ALIASES: dict[str, Period] = {
    "monthly": Period.EVERY_1_MONTH,
    "bimonthly": Period.EVERY_2_MONTHS,
    "quarterly": Period.EVERY_3_MONTHS,
    "half-yearly": Period.EVERY_6_MONTHS,
    "semiannual": Period.EVERY_6_MONTHS,
    "yearly": Period.EVERY_12_MONTHS,
    "annual": Period.EVERY_12_MONTHS,
}


def parse_period(text: str) -> Period:
    """Parse a period from a month count or a name.

    Args:
        text: Month count ("1", "3", "12", ...) or name ("monthly", "yearly", ...).

    Returns:
        The matching Period.

    Raises:
        ItemSpecError: If the text matches no period.
    """
    normalized = text.strip().lower()

    if normalized.isdigit():
        try:
            return Period(int(normalized))
        except ValueError:
            pass
    elif normalized in PERIOD_ALIASES:
        return PERIOD_ALIASES[normalized]

    raise ItemSpecError(f"Unknown period '{text}'")
