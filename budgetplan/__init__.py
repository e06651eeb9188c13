"""budgetplan - a small budget planner core.

Budget items (income or expense lines) are collected into budget groups,
which keep them sorted and report their monthly contribution.
"""

__version__ = "0.1.0"
