"""Bulk CSV load command."""

import json

import click
from billtrack.cli.error_handling import handle_domain_error, handle_infrastructure_error
from billtrack.domain.bulk_load import BulkLoadService
from billtrack.domain.errors import InfrastructureError


@click.command("load")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--remove-after",
    is_flag=True,
    help="Delete the CSV file when done, whether or not the load succeeded",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def load_csv(ctx, csv_file: str, remove_after: bool, as_json: bool):
    """Load clients, invoices and transactions from a CSV file.

    Rows are matched to existing data by client email (or document number),
    invoice number and transaction reference, so loading the same file twice
    creates nothing new. Rows that fail validation are listed and skipped.

    Examples:
        billtrack load billing.csv
        billtrack load upload.csv --remove-after --json
    """
    db = ctx.obj["db"]
    service = BulkLoadService(db)

    try:
        result = service.load_csv(csv_file_path=csv_file, remove_file=remove_after)
    except InfrastructureError as e:
        handle_infrastructure_error(ctx, e)
        return
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    summary = result.summary
    click.echo("\nLoad complete:")
    click.echo(f"  Processed: {result.processed} rows")
    if summary is not None:
        click.echo(f"  Clients created: {summary.clients_created}")
        click.echo(f"  Invoices created: {summary.invoices_created}")
        click.echo(f"  Transactions created: {summary.transactions_created}")
    if result.errors:
        click.echo(f"  Errors: {result.errors}")
        for error in result.error_details:
            click.echo(f"    Row {error.row_number}: {error.message}", err=True)


def register_commands(cli):
    """Register load command with main CLI."""
    cli.add_command(load_csv)
