import pytest


@pytest.fixture
def nrql_payload():
    return {
        "nrql_conditions": [
            {
                "id": 1001,
                "name": "High error rate",
                "enabled": True,
                "terms": [
                    {
                        "duration": "5",
                        "operator": "above",
                        "threshold": "7.4",
                        "time_function": "all",
                        "priority": "critical",
                    },
                    {
                        "duration": "10",
                        "operator": "above",
                        "threshold": "2.5",
                        "time_function": "any",
                        "priority": "warning",
                    },
                ],
                "nrql": {"query": "SELECT count(*) FROM TransactionError", "since_value": "3"},
            },
            {
                "name": "Throughput drop",
                "enabled": False,
                "terms": [],
            },
            {
                "name": "Slow responses",
                "enabled": True,
                "terms": [
                    {
                        "duration": "15",
                        "operator": "below",
                        "threshold": "7.5",
                        "time_function": "all",
                        "priority": "critical",
                    },
                ],
            },
        ]
    }
