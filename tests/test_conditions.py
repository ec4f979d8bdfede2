import pytest

from nrcli import conditions, utils
from nrcli.conditions import Condition, Term


@pytest.mark.parametrize("value,expected", [
    ("7.4", "7"),
    ("7.5", "8"),
    ("8.5", "8"),
    ("10", "10"),
    ("0.0", "0"),
    ("-2.6", "-3"),
    ("1e3", "1000"),
])
def test_format_threshold(value, expected):
    assert conditions.format_threshold(value) == expected


@pytest.mark.parametrize("value", ["abc", "", "7,5", "nan", "inf"])
def test_format_threshold_rejects(value):
    with pytest.raises(utils.ThresholdFormatError):
        conditions.format_threshold(value)


def test_parse_conditions(nrql_payload):
    parsed = conditions.parse_conditions(nrql_payload)

    assert [c.name for c in parsed] == ["High error rate", "Throughput drop", "Slow responses"]
    assert parsed[0] == Condition(
        name="High error rate",
        terms=[
            Term(duration="5", operator="above", threshold="7", time_function="all", priority="critical"),
            Term(duration="10", operator="above", threshold="2", time_function="any", priority="warning"),
        ],
        enabled=True,
    )
    assert parsed[2].terms[0].threshold == "8"


def test_condition_without_terms(nrql_payload):
    parsed = conditions.parse_conditions(nrql_payload)
    assert parsed[1] == Condition(name="Throughput drop", terms=[], enabled=False)


def test_missing_conditions_key():
    with pytest.raises(utils.ResponseShapeError, match="'nrql_conditions' is a required property"):
        conditions.parse_conditions({})


def test_conditions_of_wrong_type():
    with pytest.raises(utils.ResponseShapeError, match="is not of type 'array'"):
        conditions.parse_conditions({"nrql_conditions": {"name": "x"}})


def test_all_violations_are_reported(nrql_payload):
    nrql_payload["nrql_conditions"][0]["name"] = None
    del nrql_payload["nrql_conditions"][2]["terms"][0]["duration"]

    with pytest.raises(utils.ResponseShapeError) as e:
        conditions.parse_conditions(nrql_payload)

    assert [v["path"] for v in e.value.violations] == ["nrql_conditions.0.name", "nrql_conditions.2.terms.0"]
    assert "'duration' is a required property" in str(e.value)


def test_bad_threshold_names_its_location(nrql_payload):
    nrql_payload["nrql_conditions"][2]["terms"][0]["threshold"] = "abc"

    with pytest.raises(utils.ThresholdFormatError, match=r"nrql_conditions\.2\.terms\.0\.threshold") as e:
        conditions.parse_conditions(nrql_payload)
    assert isinstance(e.value, utils.ResponseShapeError)


def test_fetch_nrql_conditions(mocker, nrql_payload):
    client = mocker.Mock()
    client.acquire_nrql_conditions.return_value = nrql_payload

    parsed = conditions.fetch_nrql_conditions(client, "42")

    client.acquire_nrql_conditions.assert_called_once_with("42")
    assert len(parsed) == 3


def test_format_conditions(nrql_payload):
    text = conditions.format_conditions("42", conditions.parse_conditions(nrql_payload)[:2])
    assert text == (
        "NRQL Alert Conditions for Policy ID 42:\n"
        "Name: High error rate\n"
        "Terms:\n"
        "  Duration: 5\n"
        "  Operator: above\n"
        "  Threshold: 7\n"
        "  Time Function: all\n"
        "  Priority: critical\n"
        "  Duration: 10\n"
        "  Operator: above\n"
        "  Threshold: 2\n"
        "  Time Function: any\n"
        "  Priority: warning\n"
        "\n"
        "Name: Throughput drop\n"
        "Terms:\n"
    )
