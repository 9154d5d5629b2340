"""CLI error handling helpers."""

import click

from billtrack.domain.errors import DomainError, InfrastructureError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_infrastructure_error(ctx: click.Context, error: InfrastructureError) -> None:
    """Render a storage failure; nothing from the operation was saved."""
    click.echo(f"Error: {error}", err=True)
    click.echo("No changes were saved.", err=True)
    ctx.exit(1)
