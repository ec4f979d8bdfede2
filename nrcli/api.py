import requests as _requests_impl

from nrcli import constants as const
from nrcli import utils


class NewRelicAPIClient:
    def __init__(self, api_key, url_base=const.DEFAULT_API_URL, requests=None, timeout=const.DEFAULT_TIMEOUT):
        self.url_base = url_base.rstrip("/")
        self.headers = {const.API_KEY_HEADER: api_key}
        self.requests = requests if requests is not None else _requests_impl
        self.timeout = timeout

    def acquire_nrql_conditions(self, policy_id: str) -> dict:
        url = self.url_base + const.NRQL_CONDITIONS_ENDPOINT
        try:
            r = self.requests.get(url, headers=self.headers, params={"policy_id": policy_id}, timeout=self.timeout)
        except _requests_impl.exceptions.RequestException as e:
            raise utils.NetworkError(f"Tried url: {url}\n{e}") from e

        try:
            r.raise_for_status()
        except _requests_impl.exceptions.HTTPError as e:
            raise utils.NetworkError(
                f"Request for policy {policy_id} failed with status {r.status_code}: {r.text}"
            ) from e

        try:
            return r.json()
        except ValueError as e:
            raise utils.ResponseShapeError(f"Response for policy {policy_id} is not valid JSON: {e}") from e
