#!/usr/bin/env python3
"""
Expense CLI - Add, list, update, delete, and summarize expenses

Each command loads the expense document from the configured data directory,
applies one operation, and reports the outcome.
"""

import click

from ..core.config import get_config
from ..core.dates import month_name
from ..core.money import Money
from ..tracker.datastore import ExpenseStore
from ..tracker.operations import (
    add_expense,
    delete_expense,
    list_expenses,
    summarize_month,
    update_expense,
)
from ..tracker.options import AddOptions, DeleteOptions, ListOptions, SummaryOptions, UpdateOptions
from ..tracker.report import monthly_breakdown, render_breakdown, render_table
from .errors import reported_errors
from .params import AMOUNT, MONTH

NO_EXPENSES = "No expenses found"


def _datastore(ctx: click.Context) -> ExpenseStore:
    config = (ctx.obj or {}).get("config") or get_config()
    return ExpenseStore(config.store_path)


@click.command()
@click.option("--description", help="What the money was spent on")
@click.option("--amount", type=AMOUNT, help="Amount spent, e.g. 12.50")
@click.pass_context
def add(ctx: click.Context, description: str | None, amount: Money | None) -> None:
    """
    Record a new expense dated today.

    Example:
      expenses add --description "Lunch" --amount 20
    """
    with reported_errors():
        expense = add_expense(_datastore(ctx), AddOptions(description=description, amount=amount))

    click.echo(f"Expense added successfully (ID: {expense.id})")


@click.command("list")
@click.option("--month", type=MONTH, help="Only show expenses from this month (1-12)")
@click.option("--year", type=int, help="Only show expenses from this year")
@click.pass_context
def list_command(ctx: click.Context, month: int | None, year: int | None) -> None:
    """
    List expenses, most recent first.

    Example:
      expenses list
    """
    with reported_errors():
        expenses = list_expenses(_datastore(ctx), ListOptions(month=month, year=year))

    if not expenses:
        click.echo(NO_EXPENSES)
        return

    click.echo(render_table(expenses))


@click.command()
@click.option("--id", "expense_id", type=int, help="ID of the expense to update")
@click.option("--amount", type=AMOUNT, help="New amount")
@click.option("--description", help="New description")
@click.pass_context
def update(ctx: click.Context, expense_id: int | None, amount: Money | None, description: str | None) -> None:
    """
    Change the amount and/or description of an expense.

    Example:
      expenses update --id 1 --amount 25
    """
    with reported_errors():
        expense = update_expense(
            _datastore(ctx), UpdateOptions(id=expense_id, amount=amount, description=description)
        )

    click.echo(f"Expense updated successfully (ID: {expense.id})")


@click.command()
@click.option("--id", "expense_id", type=int, help="ID of the expense to delete")
@click.pass_context
def delete(ctx: click.Context, expense_id: int | None) -> None:
    """
    Delete an expense.

    Deleting an ID that does not exist still succeeds.

    Example:
      expenses delete --id 2
    """
    with reported_errors():
        removed = delete_expense(_datastore(ctx), DeleteOptions(id=expense_id))

    if ctx.obj and ctx.obj.get("verbose") and not removed:
        click.echo(f"No expense with ID {expense_id} existed")
    click.echo(f"Expense deleted successfully (ID: {expense_id})")


@click.command()
@click.option("--month", type=MONTH, help="Month to total (1-12)")
@click.option("--year", type=int, help="Restrict the total to one year")
@click.pass_context
def summary(ctx: click.Context, month: int | None, year: int | None) -> None:
    """
    Total the expenses of one month.

    Without --year, the month is totalled across all years.

    Example:
      expenses summary --month 8
    """
    with reported_errors():
        total = summarize_month(_datastore(ctx), SummaryOptions(month=month, year=year))

    if total is None:
        click.echo(NO_EXPENSES)
        return

    period = month_name(month) if year is None else f"{month_name(month)} {year}"
    click.echo(f"Total expenses for {period}: {total}")


@click.command()
@click.pass_context
def breakdown(ctx: click.Context) -> None:
    """
    Show expense count and total for every month on record.

    Example:
      expenses breakdown
    """
    with reported_errors():
        expenses = list_expenses(_datastore(ctx))

    if not expenses:
        click.echo(NO_EXPENSES)
        return

    click.echo(render_breakdown(monthly_breakdown(expenses)))


commands = [add, list_command, update, delete, summary, breakdown]
