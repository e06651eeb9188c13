"""Domain models and types for budgetplan.

This package contains the functional core:
- No I/O operations
- Items are immutable values, groups are plain in-memory containers
- Easy to test
"""

from budgetplan.domain.budget_group import BudgetGroup
from budgetplan.domain.budget_item import BudgetItem, create_expense, create_income
from budgetplan.domain.models import GroupName, ItemKind, ItemName, Period

__all__ = [
    "BudgetGroup",
    "BudgetItem",
    "GroupName",
    "ItemKind",
    "ItemName",
    "Period",
    "create_expense",
    "create_income",
]
