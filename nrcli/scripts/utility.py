from pathlib import Path

import typer

from nrcli import config as nrconfig
from nrcli.click_helpers import nrcli_error_handler

app = typer.Typer(add_completion=False)


@app.callback()
def utility_callback():
    """
    Helpers for preparing the files the other commands rely on.
    """
    pass


@app.command()
@nrcli_error_handler
def init_config(
    destination: Path = typer.Option(
        ...,
        "--output", "-o",
        writable=True, dir_okay=False,
        help="Location where the configuration will be written",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an already existing configuration"),
):
    """
    Write a configuration file with the New Relic API key and the alert policy id.

    The API key is read with a hidden prompt so it doesn't end up in the shell history.
    """
    if destination.exists() and not force:
        raise typer.BadParameter(f"destination {destination} already exists, please try again with --force to "
                                 f"proceed irregardless", param_hint="--output")

    api_key = typer.prompt("New Relic API key", hide_input=True)
    policy_id = typer.prompt("Alert policy ID")

    nrconfig.save_config(destination, nrconfig.Configuration(api_key=api_key, alert_policy_id=policy_id))
    typer.echo(f"Configuration written to {destination}")
