"""Payment platform commands."""

import click
from billtrack.cli.error_handling import handle_domain_error
from billtrack.domain.platform import PlatformService


@click.group()
def platform_group():
    """Manage payment platforms."""
    pass


@platform_group.command("add")
@click.argument("name")
@click.pass_context
def add_platform(ctx, name: str):
    """Register a payment platform.

    Examples:
        billtrack platform add "Nequi"
    """
    db = ctx.obj["db"]
    service = PlatformService(db)

    try:
        platform_id = service.create_platform(name)
        click.echo(f"Created platform '{name.strip()}' (ID: {platform_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@platform_group.command("list")
@click.pass_context
def list_platforms(ctx):
    """List all payment platforms."""
    db = ctx.obj["db"]
    service = PlatformService(db)

    platforms = service.list_platforms()
    if not platforms:
        click.echo("No platforms found. Run 'init-platforms' to create default platforms.")
        return

    click.echo("\nPlatforms:")
    click.echo("-" * 40)
    for p in platforms:
        click.echo(f"ID: {p.id:3d} | {p.name}")


def register_commands(cli):
    """Register platform commands with main CLI."""
    cli.add_command(platform_group, name="platform")
