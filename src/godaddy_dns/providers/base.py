"""Abstract base class for DNS-01 challenge providers."""

from abc import ABC, abstractmethod
from typing import Self


class ChallengeProvider(ABC):
    """Abstract interface for DNS-01 challenge providers.

    Challenge providers publish and remove the TXT record an ACME server
    queries to validate a DNS-01 challenge.
    """

    @abstractmethod
    def present(self, domain: str, fqdn: str, value: str) -> None:
        """Publish the challenge TXT record.

        Calling present again with the same arguments must leave the
        record unchanged.

        Args:
            domain: The domain the certificate is requested for.
            fqdn: Fully qualified name of the TXT record
                (e.g. "_acme-challenge.example.com.").
            value: The challenge token value to publish.
        """
        ...

    @abstractmethod
    def cleanup(self, domain: str, fqdn: str, value: str) -> None:
        """Remove the challenge TXT record.

        Removing a record that is already gone must succeed.

        Args:
            domain: The domain the certificate is requested for.
            fqdn: Fully qualified name of the TXT record.
            value: The challenge token value (for providers that need it).
        """
        ...

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
