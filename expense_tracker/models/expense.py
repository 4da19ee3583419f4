"""
Core Data Model for Expense Tracker

An Expense is the only entity the tracker knows about. The model is the
schema for both the in-memory representation and the on-disk JSON objects:

    {"id": 1, "description": "Coffee", "amount": 3.5}

DESIGN DECISION: Types are checked strictly (no "1" for 1, no true for 1),
but beyond that nothing is validated. Descriptions are
free text and amounts may be zero or negative.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Expense(BaseModel):
    """
    A single recorded expense.
    
    The id is always assigned by the tracker (see next_expense_id),
    never supplied by the user when the expense is created.
    """
    model_config = ConfigDict(strict=True)
    
    id: int = Field(
        ...,
        ge=0,
        description="Unique identifier within the datastore"
    )
    description: str = Field(
        ...,
        description="Free-form description of the expense"
    )
    amount: float = Field(
        ...,
        description="Monetary amount, no currency attached"
    )


# Codec for the whole datastore: a JSON array of Expense objects
ExpenseList = TypeAdapter(list[Expense])


def next_expense_id(expenses: list[Expense]) -> int:
    """
    Compute the id for a new expense: highest existing id plus one.
    
    An empty datastore starts at 1. Deleting the highest id makes it
    available again for the next expense.
    """
    return max((expense.id for expense in expenses), default=0) + 1


def format_amount(amount: float) -> str:
    """Format an amount with exactly two decimal places."""
    return f"{amount:.2f}"
