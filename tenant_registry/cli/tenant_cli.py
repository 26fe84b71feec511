# tenant_registry/cli/tenant_cli.py
import typer
from typing import Optional
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="tenant",
    help="Manage tenants via the Tenant Registry API.",
    no_args_is_help=True
)


@app.command("create")
def create_tenant(
    name: Annotated[
        str,
        typer.Option(prompt="Tenant Name", help="Display name for the tenant.")
    ],
    domain: Annotated[
        Optional[str],
        typer.Option(help="Optional domain for the tenant (e.g., acme.com).")
    ] = None
):
    """Register a new tenant."""
    payload = {"name": name}
    if domain:
        payload["domain"] = domain
    make_api_request("POST", "/api/tenants", json_payload=payload, expected_status=201)


@app.command("get")
def get_tenant(
    tenant_id: Annotated[
        int,
        typer.Argument(help="The numeric id of the tenant to retrieve.", min=1)
    ]
):
    """Get details for a specific tenant."""
    make_api_request("GET", f"/api/tenants/{tenant_id}")


@app.command("list")
def list_tenants():
    """List all tenants."""
    make_api_request("GET", "/api/tenants")


if __name__ == "__main__":
    app()
