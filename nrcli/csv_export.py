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

import csv
from typing import Iterable, Iterator, List

from nrcli import constants as const
from nrcli import utils
from nrcli.conditions import Condition


CSV_HEADER = ["Condition Name", "Duration", "Operator", "Threshold", "Time Function", "Priority", "Active"]


def default_output_path(policy_id: str) -> str:
    return f"{policy_id}{const.CSV_EXTENSION}"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def condition_rows(conditions: Iterable[Condition]) -> Iterator[List[str]]:
    for condition in conditions:
        for term in condition.terms:
            yield [
                condition.name,
                term.duration,
                term.operator,
                term.threshold,
                term.time_function,
                term.priority,
                _format_bool(condition.enabled),
            ]


def save_conditions_as_csv(csv_path, conditions: Iterable[Condition]) -> int:
    """Writes header and one row per term, truncating any existing file. Returns the number of data rows."""
    utils.require_is_not_dir(csv_path, utils.FileWriteError)

    written = 0
    try:
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for row in condition_rows(conditions):
                writer.writerow(row)
                written += 1
    except OSError as e:
        raise utils.FileWriteError(f"Unable to write {csv_path}: {e.strerror or e}") from e

    return written
