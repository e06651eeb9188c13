"""Exceptions raised by budgetplan."""


class BudgetPlanError(Exception):
    """Base class for all budgetplan errors."""


class InvalidAmountError(BudgetPlanError, ValueError):
    """Raised when a budget item is constructed with a non-positive amount."""

    def __init__(self, amount: float) -> None:
        self.amount = amount
        super().__init__(f"Amount must be positive (got {amount!r})")


class IndexOutOfRangeError(BudgetPlanError, IndexError):
    """Raised when removing from a budget group with an invalid index."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for group of {length} item(s)")


class ItemSpecError(BudgetPlanError, ValueError):
    """Raised when an item specification or period name can't be parsed."""


class ConfigError(BudgetPlanError):
    """Raised when the config file is malformed or holds an invalid value."""
