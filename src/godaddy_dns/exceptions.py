"""Exceptions raised by the GoDaddy DNS-01 solver."""

import httpx
from pydantic import ValidationError

from godaddy_dns.models import ApiErrorBody


class GoDaddyDnsError(Exception):
    """Base exception for all godaddy_dns errors."""


class InvalidInputError(GoDaddyDnsError, ValueError):
    """A record name or domain cannot be used to address a record."""


class MissingCredentialsError(GoDaddyDnsError):
    """API key or secret was not supplied."""

    def __init__(self, detail: str = "godaddy: missing credentials"):
        super().__init__(detail)


class ZoneResolutionError(GoDaddyDnsError):
    """The authoritative zone for an FQDN could not be determined."""


class TransportError(GoDaddyDnsError):
    """The HTTP request itself failed (connection error, timeout)."""


class DecodeError(GoDaddyDnsError):
    """A successful response carried a body that could not be decoded."""


class ApiError(GoDaddyDnsError):
    """The GoDaddy API answered with an unexpected status code.

    Carries the provider's error code and message when the response body
    is a GoDaddy error document, otherwise the raw body text.
    """

    def __init__(
        self,
        action: str,
        domain: str,
        record_name: str,
        status_code: int,
        body: str = "",
        code: str | None = None,
        message: str | None = None,
    ):
        self.action = action
        self.domain = domain
        self.record_name = record_name
        self.status_code = status_code
        self.body = body
        self.code = code
        self.message = message
        super().__init__(
            f"failed to {action} record {record_name} for domain {domain}: {self.detail}"
        )

    @property
    def detail(self) -> str:
        """Provider 'code message' when known, else the raw body."""
        parsed = " ".join(part for part in (self.code, self.message) if part)
        if parsed:
            return parsed
        return self.body or f"HTTP {self.status_code}"

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        action: str,
        domain: str,
        record_name: str,
    ) -> "ApiError":
        """Create an ApiError from an error response.

        Args:
            response: The HTTP response with an unexpected status.
            action: Verb describing the failed operation ("get", "create", "delete").
            domain: Zone the record belongs to.
            record_name: Record name relative to the zone.

        Returns:
            ApiError populated from the parsed error body, if any.
        """
        body = response.text
        try:
            error = ApiErrorBody.model_validate_json(body)
        except ValidationError:
            error = ApiErrorBody()

        return cls(
            action=action,
            domain=domain,
            record_name=record_name,
            status_code=response.status_code,
            body=body,
            code=error.code,
            message=error.message,
        )
