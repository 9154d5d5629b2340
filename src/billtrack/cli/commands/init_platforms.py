"""Initialize default payment platforms."""

import click
from billtrack.domain.platform import PlatformService


DEFAULT_PLATFORMS = [
    "Nequi",
    "Daviplata",
    "PayPal",
    "Bank Transfer",
    "Cash",
]


@click.command("init-platforms")
@click.option("--force", is_flag=True, help="Add defaults even if platforms already exist")
@click.pass_context
def init_platforms(ctx, force: bool):
    """Initialize database with the default payment platforms."""
    db = ctx.obj["db"]
    service = PlatformService(db)

    existing = service.list_platforms()
    if existing and not force:
        click.echo("Platforms already exist. Use --force to add missing defaults.")
        return

    created = 0
    for name in DEFAULT_PLATFORMS:
        if service.get_platform_by_name(name) is not None:
            continue
        try:
            service.create_platform(name)
            created += 1
        except ValueError as e:
            click.echo(f"Warning: Could not create platform '{name}': {e}", err=True)

    click.echo(f"Successfully created {created} platforms.")


def register_commands(cli):
    """Register init-platforms command with main CLI."""
    cli.add_command(init_platforms)
