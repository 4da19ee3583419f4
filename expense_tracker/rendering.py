"""
Terminal rendering of expenses.

The list command shows a table with one row per expense, in
datastore order, and every amount with two decimal places.
"""

from rich import box
from rich.table import Table
from rich.text import Text

from expense_tracker.models.expense import Expense, format_amount


TABLE_HEADERS = ("ID", "Description", "Amount")


def build_expense_table(expenses: list[Expense]) -> Table:
    """Build a rich Table for the given expenses."""
    table = Table(box=box.ASCII, show_lines=False, highlight=False)
    
    table.add_column(TABLE_HEADERS[0], justify="right")
    table.add_column(TABLE_HEADERS[1], overflow="fold")
    table.add_column(TABLE_HEADERS[2], justify="right")
    
    for expense in expenses:
        table.add_row(
            str(expense.id),
            Text(expense.description),
            format_amount(expense.amount),
        )
    
    return table
