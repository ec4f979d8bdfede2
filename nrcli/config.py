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

import json
from dataclasses import dataclass
from pathlib import Path

import yaml

from nrcli import constants as const
from nrcli import utils
from nrcli.validate_schema import validate_config


@dataclass(frozen=True)
class Configuration:
    api_key: str
    alert_policy_id: str

    @classmethod
    def from_dict(cls, d: dict) -> "Configuration":
        return cls(api_key=d["apiKey"], alert_policy_id=d["alertPolicyID"])

    def as_dict(self) -> dict:
        return {"apiKey": self.api_key, "alertPolicyID": self.alert_policy_id}


def _parse(path: Path, content: str):
    if path.suffix.lower() in const.YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise utils.ConfigParseError(f"{path} is not valid YAML: {e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise utils.ConfigParseError(f"{path} is not valid JSON: {e}") from e


def load_config(config_path) -> Configuration:
    """
    Load the API key and the alert policy id from a configuration file.

    Both `apiKey` and `alertPolicyID` are required and have to be strings, other keys are ignored.
    Files ending with .yaml or .yml are read as YAML, anything else as JSON.
    """
    path = Path(config_path)
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise utils.ConfigParseError(f"{path} is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise utils.ConfigReadError(f"Unable to read configuration {path}: {e.strerror or e}") from e

    data = _parse(path, content)

    errors = validate_config(data)
    if errors:
        raise utils.ConfigParseError(
            f"{path} has invalid configuration:\n{utils.format_violations(errors)}"
        )

    return Configuration.from_dict(data)


def save_config(config_path, configuration: Configuration):
    path = Path(config_path)
    utils.require_is_not_dir(path, utils.FileWriteError)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(configuration.as_dict(), f, indent=4)
            f.write("\n")
    except OSError as e:
        raise utils.FileWriteError(f"Unable to write configuration {path}: {e.strerror or e}") from e
