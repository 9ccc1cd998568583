from __future__ import annotations

from typing import Dict, Tuple

# Canonical transaction columns. The forecast engine reads ONLY these;
# everything else a store supplies (title, notes, due date...) rides along untouched.
TRANSACTION_COLUMNS: Tuple[str, ...] = (
    "id",
    "amount",
    "type",
    "category",
    "date",
    "is_recurring",
)

TRANSACTION_TYPES: Tuple[str, ...] = ("income", "expense")

INCOME_CATEGORIES: Tuple[str, ...] = (
    "salary",
    "investment",
    "bonus",
    "other_income",
)

EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "housing",
    "transportation",
    "food",
    "utilities",
    "healthcare",
    "entertainment",
    "education",
    "debt",
    "savings",
    "personal",
    "other_expense",
)

CATEGORY_LABELS: Dict[str, str] = {
    # income
    "salary": "Salary",
    "investment": "Investments",
    "bonus": "Bonus",
    "other_income": "Other Income",
    # expense
    "housing": "Housing",
    "transportation": "Transportation",
    "food": "Food",
    "utilities": "Utilities",
    "healthcare": "Healthcare",
    "entertainment": "Entertainment",
    "education": "Education",
    "debt": "Debt",
    "savings": "Savings",
    "personal": "Personal",
    "other_expense": "Other Expenses",
}

MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# One row per projected month, in this column order.
PROJECTION_COLUMNS: Tuple[str, ...] = (
    "month_index",
    "date",
    "month_label",
    "income",
    "expense",
    "balance",
    "accumulated_balance",
    "accumulated_savings",
)


def category_name(category: str) -> str:
    """Display label for a category key; unknown keys are returned as-is."""
    return CATEGORY_LABELS.get(category, category)
