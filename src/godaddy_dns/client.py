"""HTTP client for the GoDaddy domain-records API."""

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from godaddy_dns._logging import Timer, get_challenge_extra, get_logger
from godaddy_dns.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from godaddy_dns.exceptions import ApiError, DecodeError, InvalidInputError, TransportError
from godaddy_dns.models import DNSRecord, DNSRecordList

logger = get_logger(__name__)


class GoDaddyClient:
    """Authenticated access to TXT records through the GoDaddy REST API.

    The client holds only credentials and an ``httpx.Client``; it can be
    shared between threads.

    Args:
        api_key: GoDaddy API key.
        api_secret: GoDaddy API secret.
        base_url: API base URL, optionally with a path prefix.
        timeout: HTTP request timeout in seconds (default: 30).
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        _http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"sso-key {api_key}:{api_secret}",
        }
        if _http_client is None:
            self._http = httpx.Client(base_url=self.base_url, headers=headers, timeout=timeout)
        else:
            # Injected clients keep their transport and any base URL of their own
            self._http = _http_client
            self._http.headers.update(headers)
            if not str(self._http.base_url):
                self._http.base_url = self.base_url

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()

    def __enter__(self) -> "GoDaddyClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @staticmethod
    def _record_path(domain: str, record_name: str) -> str:
        """Build the TXT record resource path.

        Raises:
            InvalidInputError: If a segment is empty or could escape the path.
        """
        for label, segment in (("domain", domain), ("record name", record_name)):
            if not segment:
                raise InvalidInputError(f"{label} cannot be empty")
            if "/" in segment or segment in (".", ".."):
                raise InvalidInputError(f"invalid {label}: {segment!r}")

        return f"/v1/domains/{quote(domain, safe='')}/records/TXT/{quote(record_name, safe='@')}"

    def _request(self, method: str, path: str, json: list | None = None) -> httpx.Response:
        """Send a request to the API.

        Raises:
            TransportError: If the request could not be completed.
        """
        try:
            with Timer() as timer:
                response = self._http.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.error(
                "GoDaddy API request failed",
                extra={"method": method, "path": path, "error": str(e), **get_challenge_extra()},
            )
            raise TransportError(f"{method} {path} failed: {e}") from e

        logger.debug(
            "GoDaddy API request",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "elapsed_ms": timer.elapsed_ms,
                **get_challenge_extra(),
            },
        )
        return response

    def _api_error(
        self, response: httpx.Response, action: str, domain: str, record_name: str
    ) -> ApiError:
        error = ApiError.from_response(response, action, domain, record_name)
        logger.error(
            "GoDaddy API error",
            extra={
                "domain": domain,
                "record_name": record_name,
                "status_code": error.status_code,
                "detail": error.detail,
            },
        )
        return error

    def get_txt_record(self, domain: str, record_name: str) -> DNSRecord | None:
        """Fetch the TXT record named ``record_name`` in ``domain``.

        Args:
            domain: The zone name (e.g. "example.com").
            record_name: Record name relative to the zone (e.g. "_acme-challenge").

        Returns:
            The record whose name matches exactly, or None if there is none.

        Raises:
            InvalidInputError: If record_name is empty.
            ApiError: If the API returns a status other than 200.
            DecodeError: If the response body is not a list of records.
        """
        if not record_name:
            raise InvalidInputError("record name cannot be empty")

        response = self._request("GET", self._record_path(domain, record_name))
        if response.status_code != httpx.codes.OK:
            raise self._api_error(response, "get", domain, record_name)

        try:
            records = DNSRecordList.validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"failed to decode record {record_name} for domain {domain}: {e}"
            ) from e

        for record in records:
            if record.name == record_name:
                return record
        return None

    def set_txt_record(self, domain: str, record_name: str, record: DNSRecord) -> None:
        """Create or replace the TXT record named ``record_name`` in ``domain``.

        The API replaces every TXT record with that name by the submitted list,
        which here always holds the single given record.

        Raises:
            ApiError: If the API returns a status other than 200.
        """
        path = self._record_path(domain, record_name)
        response = self._request("PUT", path, json=[record.to_wire()])
        if response.status_code != httpx.codes.OK:
            raise self._api_error(response, "create", domain, record_name)

    def delete_txt_record(self, domain: str, record_name: str) -> None:
        """Delete the TXT record named ``record_name`` in ``domain``.

        A record that does not exist (404) counts as deleted.

        Raises:
            ApiError: If the API returns a status other than 204 or 404.
        """
        path = self._record_path(domain, record_name)
        response = self._request("DELETE", path)
        if response.status_code not in (httpx.codes.NO_CONTENT, httpx.codes.NOT_FOUND):
            raise self._api_error(response, "delete", domain, record_name)
