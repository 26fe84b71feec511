# tenant_registry/cli/main_cli.py
import typer
from . import tenant_cli

app = typer.Typer(
    name="tenant-registry",
    help="Tenant Registry Command Line Interface.",
    no_args_is_help=True
)

app.add_typer(tenant_cli.app, name="tenant")


@app.callback()
def main_callback():
    """
    Tenant Registry CLI.
    Use 'tenant-registry tenant --help' for tenant commands.
    """
    pass


def cli_entry_point():
    """Entry point function for console script registration in pyproject.toml"""
    app()


if __name__ == "__main__":
    cli_entry_point()
