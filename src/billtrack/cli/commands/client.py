"""Client commands."""

import click
from billtrack.cli.error_handling import handle_domain_error
from billtrack.domain.client import ClientService


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("delete")
@click.argument("client_id", type=int)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_client(ctx, client_id: int, yes: bool):
    """Delete a client with all of its invoices and transactions."""
    db = ctx.obj["db"]
    service = ClientService(db)

    client_obj = service.get_client(client_id)
    if client_obj is None:
        click.echo(f"Error: Client {client_id} not found", err=True)
        ctx.exit(1)
        return

    if not yes and not click.confirm(
        f"Delete client '{client_obj.name}' (ID: {client_id}) and all of its invoices?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        invoices, transactions = service.delete_client(client_id)
        click.echo(
            f"Deleted client '{client_obj.name}' with {invoices} invoice(s) "
            f"and {transactions} transaction(s)"
        )
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
