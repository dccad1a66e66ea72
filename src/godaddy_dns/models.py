"""Pydantic models for the GoDaddy domain-records API."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, TypeAdapter


class RecordType(StrEnum):
    """DNS record types accepted by the GoDaddy records API."""

    A = "A"
    AAAA = "AAAA"
    CAA = "CAA"
    CNAME = "CNAME"
    MX = "MX"
    NS = "NS"
    SOA = "SOA"
    SRV = "SRV"
    TXT = "TXT"


class DNSRecord(BaseModel):
    """A DNS record as exchanged with the GoDaddy API.

    Only ``data`` is always sent; unset fields are omitted from the wire.
    """

    name: str | None = None
    type: str | None = None
    data: str = ""
    ttl: int | None = None
    priority: int | None = None
    port: int | None = None
    protocol: str | None = None
    service: str | None = None
    weight: int | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize for a request body, dropping unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


class ApiErrorBody(BaseModel):
    """Error document returned by the GoDaddy API on failure."""

    code: str | None = None
    message: str | None = None
    fields: list[dict[str, Any]] | None = None


DNSRecordList = TypeAdapter(list[DNSRecord])
