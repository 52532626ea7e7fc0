"""
EMT CLI — `emt` command.

Commands:
  emt ping                 Check the API is up
  emt whoami               Log in and verify the token
  emt stop <stop-id>       Lines and arrival estimates at a stop
"""

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install emt-api[cli]")

from emt_api.auth import Credentials
from emt_api.client import EmtClient
from emt_api.transport.http import DEFAULT_BASE_URL, HttpClient
from emt_api.session import Session
from emt_api.cli.output import console, handle_errors


def _get_client(ctx: click.Context) -> EmtClient:
    cfg = ctx.obj
    if not cfg.get("client_id") or not cfg.get("pass_key"):
        console.print("[red]Missing credentials. Pass --client-id/--pass-key or set EMT_CLIENT_ID/EMT_PASS_KEY.[/red]")
        raise SystemExit(1)
    return EmtClient(
        Credentials(client_id=cfg["client_id"], pass_key=cfg["pass_key"]),
        base_url=cfg["base_url"],
        zero_pad_dates=cfg.get("zero_pad_dates", False),
    )


@click.group()
@click.version_option("0.1.0")
@click.option("--client-id", envvar="EMT_CLIENT_ID", default=None, help="MobilityLabs client id")
@click.option("--pass-key", envvar="EMT_PASS_KEY", default=None, help="MobilityLabs pass key")
@click.option("--base-url", envvar="EMT_BASE_URL", default=DEFAULT_BASE_URL, show_default=True)
@click.option("--zero-pad-dates", is_flag=True, help="Send the arrivals date as strict YYYYMMDD")
@click.pass_context
def main(ctx, client_id, pass_key, base_url, zero_pad_dates):
    """EMT Madrid bus arrivals from the command line."""
    ctx.obj = {
        "client_id": client_id,
        "pass_key": pass_key,
        "base_url": base_url,
        "zero_pad_dates": zero_pad_dates,
    }


@main.command("ping")
@click.pass_context
@handle_errors
def ping(ctx):
    """Check whether the API answers."""
    http = HttpClient(base_url=ctx.obj["base_url"])
    try:
        up = Session(http).is_server_up()
    finally:
        http.close()
    if up:
        console.print("[green]API is up.[/green]")
    else:
        console.print("[yellow]API answered but is not healthy.[/yellow]")
        raise SystemExit(1)


@main.command("whoami")
@click.pass_context
@handle_errors
def whoami(ctx):
    """Log in and check the access token."""
    with _get_client(ctx) as client:
        client.is_token_active()
    console.print(f"[green]Logged in as {ctx.obj['client_id']}, token active.[/green]")


# Register subcommands from separate modules
from emt_api.cli.stops import stop_cmd

main.add_command(stop_cmd)


if __name__ == "__main__":
    main()
