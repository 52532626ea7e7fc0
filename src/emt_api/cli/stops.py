"""CLI: emt stop <stop-id>"""

import json

import click
from rich.table import Table

from emt_api.cli.output import console, handle_errors
from emt_api.models.stop import Stop


def _get_client(ctx):
    from emt_api.cli.main import _get_client
    return _get_client(ctx)


def _minutes(seconds: float) -> str:
    return "now" if seconds < 60 else f"{int(seconds // 60)} min"


def stop_to_dict(stop: Stop) -> dict:
    return {
        "id": stop.id,
        "lines": [
            {
                "id": line.id,
                "direction": line.direction,
                "min_freq_minutes": int(line.min_freq.total_seconds() // 60),
                "max_freq_minutes": int(line.max_freq.total_seconds() // 60),
                "arrivals_seconds": [int(t.total_seconds()) for t in line.arrival_times],
            }
            for line in stop.lines
        ],
    }


@click.command("stop")
@click.argument("stop_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
@handle_errors
def stop_cmd(ctx, stop_id, json_output):
    """Show the lines serving a stop and their next arrivals."""
    with _get_client(ctx) as client:
        stop = client.get_stop(stop_id)

    if json_output:
        click.echo(json.dumps(stop_to_dict(stop), indent=2))
        return

    table = Table(title=f"Stop {stop.id} ({len(stop.lines)} lines)")
    table.add_column("Line", style="bold")
    table.add_column("Direction")
    table.add_column("Frequency")
    table.add_column("Arrivals")
    for line, raw in zip(stop.lines, stop_to_dict(stop)["lines"]):
        freq = f"{raw['min_freq_minutes']}-{raw['max_freq_minutes']} min"
        arrivals = ", ".join(_minutes(t.total_seconds()) for t in line.arrival_times) or "-"
        table.add_row(line.id, line.direction, freq, arrivals)
    console.print(table)
