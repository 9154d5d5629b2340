"""Billing report commands."""

import click
from billtrack.domain.report import ReportService


def _money(amount) -> str:
    return f"${amount:,.2f}"


@click.group()
def report_group():
    """Billing reports."""
    pass


@report_group.command("payments")
@click.pass_context
def client_payments(ctx):
    """Total paid by each client."""
    db = ctx.obj["db"]
    rows = ReportService(db).client_payments()
    if not rows:
        click.echo("No clients found.")
        return

    click.echo("\nPayments by client:")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Client':<30} {'Email':<30} {'Paid':>14} {'Invoices':>8}")
    click.echo("-" * 90)
    for r in rows:
        click.echo(
            f"{r.client_id:<6} {r.name[:30]:<30} {(r.email or '')[:30]:<30} "
            f"{_money(r.total_paid):>14} {r.total_invoices:>8}"
        )


@report_group.command("pending")
@click.pass_context
def pending_invoices(ctx):
    """Invoices that are pending, partially paid or overdue."""
    db = ctx.obj["db"]
    rows = ReportService(db).pending_invoices()
    if not rows:
        click.echo("No pending invoices.")
        return

    click.echo(f"\nFound {len(rows)} pending invoice(s):")
    click.echo("=" * 90)
    for inv in rows:
        click.echo(f"\nInvoice: {inv.invoice_number} (ID: {inv.invoice_id})")
        click.echo(f"  Client: {inv.customer_name}")
        if inv.email:
            click.echo(f"  Email: {inv.email}")
        if inv.phone:
            click.echo(f"  Phone: {inv.phone}")
        click.echo(f"  Total: {_money(inv.total_amount)}")
        click.echo(f"  Paid: {_money(inv.paid_amount)}")
        click.echo(f"  Pending: {_money(inv.pending_amount)}")
        if inv.due_date:
            click.echo(f"  Due: {inv.due_date}")
        if inv.recent_transactions:
            payments = "; ".join(
                f"{name}: {_money(amount)}" for name, amount in inv.recent_transactions
            )
            click.echo(f"  Payments: {payments}")
        click.echo("-" * 90)


@report_group.command("transactions")
@click.option("--platform", help="Only show transactions made through this platform")
@click.pass_context
def transactions_by_platform(ctx, platform: str | None):
    """Transactions with their platform, client and invoice."""
    db = ctx.obj["db"]
    rows = ReportService(db).transactions_by_platform(platform_name=platform)
    if not rows:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(rows)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'Reference':<16} {'Date':<12} {'Amount':>12} {'Status':<10} "
        f"{'Platform':<14} {'Invoice':<12} {'Client':<30}"
    )
    click.echo("-" * 110)
    for t in rows:
        click.echo(
            f"{t.reference[:16]:<16} {(t.transaction_date or ''):<12} {_money(t.amount):>12} "
            f"{t.status[:10]:<10} {t.platform_name[:14]:<14} {t.invoice_number[:12]:<12} "
            f"{t.customer_name[:30]:<30}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
