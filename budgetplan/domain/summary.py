"""Pure functions for monthly budget totals.

This module contains the aggregation over budget groups:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations

All amounts are monthly equivalents; expenses are negative.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from budgetplan.domain.budget_group import BudgetGroup
from budgetplan.domain.budget_item import BudgetItem
from budgetplan.domain.models import GroupName, ItemKind, ItemName, Period


@dataclass(frozen=True)
class ItemLine:
    """Immutable display line for a single item."""

    index: int
    name: ItemName
    kind: ItemKind
    period: Period
    amount: float
    monthly: float


@dataclass(frozen=True)
class GroupSummary:
    """Immutable monthly summary of a budget group."""

    name: GroupName
    lines: list[ItemLine]
    income: float
    expenses: float  # Negative or zero
    net: float


@dataclass(frozen=True)
class BudgetSummary:
    """Immutable monthly summary across budget groups."""

    groups: list[GroupSummary]
    income: float
    expenses: float
    net: float


def calculate_monthly_total(items: Iterable[BudgetItem]) -> float:
    """Sum the monthly contributions of items.

    Args:
        items: Budget items.

    Returns:
        Net monthly amount (negative if expenses outweigh income).
    """
    return sum((item.monthly_contribution() for item in items), 0.0)


def annual_total(monthly: float) -> float:
    """Scale a monthly amount to a year."""
    return monthly * 12


def create_item_line(index: int, item: BudgetItem) -> ItemLine:
    return ItemLine(
        index=index,
        name=item.name,
        kind=item.kind,
        period=item.period,
        amount=item.amount,
        monthly=item.monthly_contribution(),
    )


def summarize_group(group: BudgetGroup) -> GroupSummary:
    """Create a monthly summary of a group.

    Args:
        group: Budget group to summarize.

    Returns:
        GroupSummary with one line per item, in group order.
    """
    lines = [create_item_line(index, item) for index, item in group.enumerate()]
    income = sum((line.monthly for line in lines if line.kind is ItemKind.INCOME), 0.0)
    expenses = sum((line.monthly for line in lines if line.kind is ItemKind.EXPENSE), 0.0)

    return GroupSummary(
        name=group.name,
        lines=lines,
        income=income,
        expenses=expenses,
        net=income + expenses,
    )


def summarize_budget(groups: Sequence[BudgetGroup]) -> BudgetSummary:
    """Create a monthly summary across groups.

    Args:
        groups: Budget groups to combine. May be empty.

    Returns:
        BudgetSummary with per-group summaries and overall totals.
    """
    summaries = [summarize_group(group) for group in groups]
    income = sum((s.income for s in summaries), 0.0)
    expenses = sum((s.expenses for s in summaries), 0.0)

    return BudgetSummary(
        groups=summaries,
        income=income,
        expenses=expenses,
        net=income + expenses,
    )
