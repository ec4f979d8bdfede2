# Copyright 2021 Dynatrace LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path

import click
import typer  # noqa:I201
from click_aliases import ClickAliasedGroup  # noqa: I201,I100

import nrcli.constants as const
from nrcli import __version__
from nrcli import config as nrconfig
from nrcli import conditions as nrconditions
from nrcli import csv_export, utils
from nrcli.api import NewRelicAPIClient
from nrcli.click_helpers import compose_click_decorators_2, mk_click_callback, nrcli_error_handler
from nrcli.scripts.utility import app as utility_app


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    callback=mk_click_callback(Path),
    default=const.DEFAULT_CONFIG_PATH,
    show_default=True,
    help="JSON (or YAML) file holding apiKey and alertPolicyID",
)

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=const.DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds to wait for the New Relic API before giving up",
)

fetch_options = compose_click_decorators_2(config_option, timeout_option)


def _load_and_fetch(config_path, timeout):
    configuration = nrconfig.load_config(config_path)
    client = NewRelicAPIClient(configuration.api_key, timeout=timeout)
    conditions = nrconditions.fetch_nrql_conditions(client, configuration.alert_policy_id)
    nrconditions.print_conditions(configuration.alert_policy_id, conditions, echo=click.echo)
    return configuration, conditions


@click.group(context_settings=CONTEXT_SETTINGS, cls=ClickAliasedGroup)
@click.version_option(version=__version__)
def main():
    """
    New Relic CLI is a command line utility for exporting alert policy configuration.
    """
    pass


@main.group(cls=ClickAliasedGroup, aliases=["alert", "nrql"])
def alerts():
    """
    Utilities for NRQL alert conditions of a single alert policy.

    Example flow:
        1. (optional) Create a configuration file

           $ nr utility init-config -o config.json

        2. Export the conditions of the configured policy to <alertPolicyID>.csv

           $ nr alerts export --config config.json
    """
    pass


@alerts.command(aliases=["exp"])
@fetch_options
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Location where the CSV file will be written  [default: ./<alertPolicyID>.csv]",
)
@nrcli_error_handler
def export(config_path, timeout, output):
    """
    Fetch NRQL alert conditions of the configured policy and save them as CSV.

    One row is written per condition term.
    """
    configuration, conditions = _load_and_fetch(config_path, timeout)

    csv_path = output if output is not None else csv_export.default_output_path(configuration.alert_policy_id)
    utils.check_file_exists(csv_path, utils.FileWriteError, warn=lambda msg: click.echo(f"Warning: {msg}", err=True))
    csv_export.save_conditions_as_csv(csv_path, conditions)
    click.echo("CSV file saved successfully")


@alerts.command()
@fetch_options
@nrcli_error_handler
def show(config_path, timeout):
    """
    Print NRQL alert conditions of the configured policy without writing any file.
    """
    _load_and_fetch(config_path, timeout)


main.add_command(typer.main.get_command(utility_app), "utility")
