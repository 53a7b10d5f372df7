"""Command-line interface for the personal finance tracker."""
import json
import re
import sys
from datetime import date
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config.settings import STORAGE_FILE, BUDGET_FILE
from .errors import FinanceTrackerError
from .exporters import ExcelExporter
from .models import ExpenseCategory, IncomeCategory, Notification, Severity, TransactionKind
from .storage import JsonStore
from .tracker import FinanceTracker, SORT_KEYS
from .utils import setup_logger, format_currency, format_date
from .validators import ValidationResult, compile_search_pattern

console = Console()
logger = setup_logger()

CATEGORY_CHOICES = sorted({c.value for c in ExpenseCategory} | {c.value for c in IncomeCategory})
TYPE_CHOICES = [k.value for k in TransactionKind]


def print_notification(notification: Notification) -> None:
    """Print a dashboard notification in a colour matching its severity."""
    colours = {
        Severity.ERROR: "red",
        Severity.WARNING: "yellow",
        Severity.SUCCESS: "green",
        Severity.INFO: "cyan",
    }
    colour = colours.get(notification.severity, "white")
    console.print(f"[{colour}]! {notification.message}[/{colour}]")


def print_validation_errors(result: ValidationResult) -> None:
    """Print every field error."""
    console.print("[red]✗ Validation Error:[/red]")
    for field_name, error in result.errors.items():
        console.print(f"  [red]{field_name}[/red]: {error.message}")


@click.group()
@click.version_option(version="0.1.0")
@click.option('--data-file', type=click.Path(dir_okay=False), default=str(STORAGE_FILE),
              show_default=True, help='JSON file holding the records')
@click.option('--budget-file', type=click.Path(dir_okay=False), default=str(BUDGET_FILE),
              show_default=True, help='JSON file holding the budget')
@click.pass_context
def cli(ctx, data_file, budget_file):
    """Personal Finance Tracker - Record income and expenses, track a monthly budget."""
    ctx.ensure_object(dict)
    store = JsonStore(Path(data_file), Path(budget_file))
    ctx.obj['tracker'] = FinanceTracker(store, notifier=print_notification)


@cli.command()
@click.option('--description', '-d', required=True, help='Letters and single spaces only')
@click.option('--amount', '-a', required=True, help='Non-negative, max 2 decimals')
@click.option('--date', 'date_', default=lambda: date.today().isoformat(), help='YYYY-MM-DD (default today)')
@click.option('--category', '-c', required=True, help=f"One of: {', '.join(CATEGORY_CHOICES)}")
@click.option('--type', 'type_', type=click.Choice(TYPE_CHOICES), default='expense', show_default=True)
@click.pass_context
def add(ctx, description, amount, date_, category, type_):
    """Add a transaction."""
    tracker: FinanceTracker = ctx.obj['tracker']

    result, txn = tracker.add({
        'description': description.strip(),
        'amount': amount.strip(),
        'date': date_,
        'category': category,
        'type': type_,
    })

    if not result.accepted:
        print_validation_errors(result)
        sys.exit(1)

    console.print(f"[green]✓ Transaction added![/green] {txn.id}")


@cli.command(name='list')
@click.option('--search', '-s', help='Regex or text to match description, amount or category')
@click.option('--sort', 'sort_key', type=click.Choice(list(SORT_KEYS)), default='date-desc', show_default=True)
@click.pass_context
def list_transactions(ctx, search, sort_key):
    """List transactions."""
    tracker: FinanceTracker = ctx.obj['tracker']

    records = tracker.sort(tracker.search(search), sort_key)
    if not records:
        console.print("No transactions found.")
        return

    pattern = compile_search_pattern(search)

    table = Table(title="Transactions")
    table.add_column("ID")
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Category")
    table.add_column("Type")
    table.add_column("Amount", justify="right")

    for txn in records:
        description = Text(txn.description)
        if isinstance(pattern, re.Pattern):
            for match in pattern.finditer(txn.description):
                description.stylize("reverse", match.start(), match.end())

        amount = format_currency(txn.signed_amount)
        table.add_row(
            txn.id,
            format_date(txn.date),
            description,
            txn.category,
            txn.type.value if txn.type else "-",
            f"[red]{amount}[/red]" if txn.is_expense else f"[green]{amount}[/green]",
        )

    console.print(table)


@cli.command()
@click.argument('transaction_id')
@click.option('--description', '-d', help='New description')
@click.option('--amount', '-a', help='New amount')
@click.option('--date', 'date_', help='New date (YYYY-MM-DD)')
@click.option('--category', '-c', help='New category')
@click.option('--type', 'type_', type=click.Choice(TYPE_CHOICES), help='New type')
@click.pass_context
def edit(ctx, transaction_id, description, amount, date_, category, type_):
    """Edit a transaction. Fields not given keep their current value."""
    tracker: FinanceTracker = ctx.obj['tracker']

    current = tracker.start_edit(transaction_id).to_candidate()
    candidate = {
        'description': description.strip() if description is not None else current['description'],
        'amount': amount.strip() if amount is not None else current['amount'],
        'date': date_ if date_ is not None else current['date'],
        'category': category if category is not None else current['category'],
        # legacy records get a type on their first edit
        'type': type_ or current['type'] or TransactionKind.EXPENSE.value,
    }

    result, _ = tracker.update(transaction_id, candidate)
    if not result.accepted:
        tracker.cancel_edit()
        print_validation_errors(result)
        sys.exit(1)

    console.print(f"[green]✓ Transaction updated![/green] {transaction_id}")


@cli.command()
@click.argument('transaction_id')
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def delete(ctx, transaction_id, yes):
    """Delete a transaction."""
    tracker: FinanceTracker = ctx.obj['tracker']

    txn = tracker.get(transaction_id)
    if not yes and not click.confirm(f"Delete '{txn.description}'?"):
        console.print("[yellow]Cancelled[/yellow]")
        return

    tracker.delete(transaction_id)
    console.print("Transaction deleted.")


@cli.command()
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def clear(ctx, yes):
    """Delete ALL transactions."""
    tracker: FinanceTracker = ctx.obj['tracker']

    if not yes and not click.confirm("Delete ALL data? This cannot be undone."):
        console.print("[yellow]Cancelled[/yellow]")
        return

    count = tracker.delete_all()
    console.print(f"All data deleted ({count} transactions).")


@cli.command(context_settings={'ignore_unknown_options': True})
@click.argument('amount', required=False)
@click.pass_context
def budget(ctx, amount):
    """Show the monthly budget, or set it to AMOUNT."""
    tracker: FinanceTracker = ctx.obj['tracker']

    if amount is None:
        console.print(f"Monthly budget: {format_currency(tracker.budget)}")
        return

    try:
        value = tracker.set_budget(amount)
    except ValueError as e:
        console.print(f"[red]Invalid budget: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]✓ Budget set to {format_currency(value)}[/green]")


@cli.command()
@click.option('--json', 'as_json', is_flag=True, help='Print raw figures as JSON')
@click.pass_context
def dashboard(ctx, as_json):
    """Show balance, monthly spending, budget forecast and 7-day trend."""
    tracker: FinanceTracker = ctx.obj['tracker']
    stats = tracker.dashboard()

    if as_json:
        click.echo(json.dumps(stats.to_dict(), indent=2))
        return

    console.print("\n[bold blue]Dashboard[/bold blue]\n")
    console.print(f"  Balance: {format_currency(stats.net_balance)}")
    console.print(f"  Volume: {format_currency(stats.gross_volume)}")
    console.print(f"  Records: {stats.record_count}")
    console.print(f"  Top category: {stats.top_category}")
    console.print(f"  Spent this month: {format_currency(stats.monthly_expense)}")

    if stats.budget_percent is not None:
        console.print(f"  Budget: {format_currency(stats.budget)} ({stats.budget_percent:.0f}% used)")
        console.print(f"  Remaining: {format_currency(stats.budget_remaining)}")
    console.print(f"  Forecast: {stats.forecast.message}")

    table = Table(title="Last 7 Days")
    table.add_column("Day")
    table.add_column("Spent", justify="right")
    for point in stats.daily_trend:
        table.add_row(point.label, format_currency(point.total))
    console.print(table)


@cli.command()
@click.argument('output', type=click.Path(dir_okay=False))
@click.option('--format', '-f', 'export_format', type=click.Choice(['json', 'xlsx']), default='json', show_default=True)
@click.pass_context
def export(ctx, output, export_format):
    """Export transactions to OUTPUT."""
    tracker: FinanceTracker = ctx.obj['tracker']
    output_path = Path(output)

    if export_format == 'xlsx':
        ExcelExporter().export(tracker.transactions, tracker.dashboard(notify=False), output_path)
    else:
        output_path.write_text(tracker.export_json(), encoding='utf-8')

    console.print(f"[green]✓ Exported {len(tracker.transactions)} transactions to {output_path}[/green]")


@cli.command(name='import')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--merge', is_flag=True, help='Merge by id instead of replacing all records')
@click.pass_context
def import_transactions(ctx, input_file, merge):
    """Import transactions from a JSON export."""
    tracker: FinanceTracker = ctx.obj['tracker']

    text = Path(input_file).read_text(encoding='utf-8')
    count = tracker.import_json(text, replace=not merge)
    console.print(f"[green]✓ Imported {count} transactions[/green]")


def main():
    """Main entry point."""
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except FinanceTrackerError as e:
        console.print(f"\n[red]Error: {e}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Error: {e}[/red]")
        logger.exception("Unhandled exception")
        sys.exit(1)


if __name__ == '__main__':
    main()
