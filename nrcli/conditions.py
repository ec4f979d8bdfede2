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

import math
from dataclasses import dataclass
from typing import Callable, List

from nrcli import constants as const
from nrcli import utils
from nrcli.api import NewRelicAPIClient
from nrcli.validate_schema import validate_nrql_conditions


@dataclass(frozen=True)
class Term:
    duration: str
    operator: str
    threshold: str
    time_function: str
    priority: str


@dataclass(frozen=True)
class Condition:
    name: str
    terms: List[Term]
    enabled: bool


def format_threshold(value: str) -> str:
    """
    Normalize a threshold to a decimal string without fractional digits.

    The value is rounded to the nearest integer the way default float formatting does it,
    so "7.4" becomes "7" and "7.5" becomes "8" (ties go to the even neighbour).
    """
    try:
        f = float(value)
    except ValueError as e:
        raise utils.ThresholdFormatError(f"threshold {value!r} is not a number") from e

    if not math.isfinite(f):
        raise utils.ThresholdFormatError(f"threshold {value!r} is not a finite number")

    return f"{f:.0f}"


def _build_term(term: dict, location: str) -> Term:
    try:
        threshold = format_threshold(term["threshold"])
    except utils.ThresholdFormatError as e:
        raise utils.ThresholdFormatError(
            f"{location}.threshold: {e}",
            violations=[{"path": f"{location}.threshold", "cause": str(e)}],
        ) from e

    return Term(
        duration=term["duration"],
        operator=term["operator"],
        threshold=threshold,
        time_function=term["time_function"],
        priority=term["priority"],
    )


def parse_conditions(data) -> List[Condition]:
    errors = validate_nrql_conditions(data)
    if errors:
        raise utils.ResponseShapeError(
            f"Unexpected NRQL conditions response:\n{utils.format_violations(errors)}",
            violations=errors,
        )

    conditions = []
    for i, c in enumerate(data[const.NRQL_CONDITIONS_KEY]):
        terms = [
            _build_term(t, f"{const.NRQL_CONDITIONS_KEY}.{i}.terms.{j}")
            for j, t in enumerate(c["terms"])
        ]
        conditions.append(Condition(name=c["name"], terms=terms, enabled=c["enabled"]))

    return conditions


def fetch_nrql_conditions(client: NewRelicAPIClient, policy_id: str) -> List[Condition]:
    return parse_conditions(client.acquire_nrql_conditions(policy_id))


def format_conditions(policy_id: str, conditions: List[Condition]) -> str:
    lines = [f"NRQL Alert Conditions for Policy ID {policy_id}:"]
    for condition in conditions:
        lines.append(f"Name: {condition.name}")
        lines.append("Terms:")
        for term in condition.terms:
            lines.append(f"  Duration: {term.duration}")
            lines.append(f"  Operator: {term.operator}")
            lines.append(f"  Threshold: {term.threshold}")
            lines.append(f"  Time Function: {term.time_function}")
            lines.append(f"  Priority: {term.priority}")
        lines.append("")
    return "\n".join(lines)


def print_conditions(policy_id: str, conditions: List[Condition], echo: Callable[[str], None] = print):
    echo(format_conditions(policy_id, conditions))
