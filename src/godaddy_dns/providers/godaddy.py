"""GoDaddy provider for ACME DNS-01 challenges."""

from collections.abc import Callable, Mapping, Sequence

from godaddy_dns._logging import challenge_context, get_logger
from godaddy_dns.client import GoDaddyClient
from godaddy_dns.config import GoDaddyConfig, load_config
from godaddy_dns.dns_util import RECURSIVE_NAMESERVERS, find_zone_by_fqdn, un_fqdn
from godaddy_dns.models import DNSRecord, RecordType
from godaddy_dns.providers.base import ChallengeProvider

logger = get_logger(__name__)

ZoneResolver = Callable[[str, list[str]], str]


def extract_record_name(fqdn: str, zone: str) -> str:
    """Return the name of ``fqdn`` relative to ``zone``.

    Falls back to the whole name (without trailing dot) when the zone
    suffix does not occur in it.

    >>> extract_record_name("_acme-challenge.example.com.", "example.com")
    '_acme-challenge'
    """
    name = un_fqdn(fqdn)
    idx = name.find("." + zone)
    if idx != -1:
        return name[:idx]
    return name


class GoDaddyDnsProvider(ChallengeProvider):
    """DNS-01 challenge provider for domains hosted on GoDaddy DNS.

    Args:
        config: Credentials and connection settings.
        client: Pre-built API client; built from ``config`` when omitted.
        zone_resolver: Callable mapping (fqdn, nameservers) to the
            authoritative zone (default: DNS SOA lookup).
    """

    def __init__(
        self,
        config: GoDaddyConfig,
        client: GoDaddyClient | None = None,
        zone_resolver: ZoneResolver = find_zone_by_fqdn,
    ):
        self.config = config
        self.nameservers = list(config.nameservers)
        self.client = client or GoDaddyClient(
            api_key=config.api_key,
            api_secret=config.api_secret,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        self._zone_resolver = zone_resolver

    @classmethod
    def from_credentials(
        cls,
        api_key: str,
        api_secret: str,
        nameservers: Sequence[str] = RECURSIVE_NAMESERVERS,
    ) -> "GoDaddyDnsProvider":
        """Create a provider from an API key and secret.

        Raises:
            MissingCredentialsError: If the key or secret is empty.
        """
        config = GoDaddyConfig(
            api_key=api_key,
            api_secret=api_secret,
            nameservers=tuple(nameservers),
        )
        return cls(config)

    @classmethod
    def from_env(
        cls,
        nameservers: Sequence[str] = RECURSIVE_NAMESERVERS,
        environ: Mapping[str, str] | None = None,
    ) -> "GoDaddyDnsProvider":
        """Create a provider from GODADDY_API_KEY and GODADDY_API_SECRET.

        Raises:
            MissingCredentialsError: If either variable is unset or empty.
        """
        return cls(load_config(nameservers=nameservers, environ=environ))

    def _resolve(self, fqdn: str) -> tuple[str, str]:
        """Resolve ``fqdn`` to (zone name, record name) for the API."""
        zone = self._zone_resolver(fqdn, self.nameservers)
        zone_name = un_fqdn(zone)
        record_name = extract_record_name(fqdn, zone_name)
        logger.debug(
            "Resolved challenge record",
            extra={"fqdn": fqdn, "zone": zone_name, "record_name": record_name},
        )
        return zone_name, record_name

    def present(self, domain: str, fqdn: str, value: str) -> None:
        """Create the TXT record, or update it if it holds another value.

        Raises:
            ZoneResolutionError: If the authoritative zone cannot be found.
            ApiError: If the GoDaddy API rejects a request.
            TransportError: If the API cannot be reached.
        """
        with challenge_context(domain, fqdn):
            zone_name, record_name = self._resolve(fqdn)

            record = self.client.get_txt_record(zone_name, record_name)

            if record is None:
                self.client.set_txt_record(
                    zone_name,
                    record_name,
                    DNSRecord(name=record_name, type=RecordType.TXT, data=value),
                )
                logger.info(
                    "TXT record created",
                    extra={"zone": zone_name, "record_name": record_name},
                )
                return

            if record.data != value:
                record.data = value
                self.client.set_txt_record(zone_name, record_name, record)
                logger.info(
                    "TXT record updated",
                    extra={"zone": zone_name, "record_name": record_name},
                )
                return

            logger.debug(
                "TXT record already up to date",
                extra={"zone": zone_name, "record_name": record_name},
            )

    def cleanup(self, domain: str, fqdn: str, value: str) -> None:
        """Delete the TXT record, whatever value it currently holds.

        Raises:
            ZoneResolutionError: If the authoritative zone cannot be found.
            ApiError: If the GoDaddy API rejects the deletion.
            TransportError: If the API cannot be reached.
        """
        with challenge_context(domain, fqdn):
            zone_name, record_name = self._resolve(fqdn)
            self.client.delete_txt_record(zone_name, record_name)
            logger.info(
                "TXT record deleted",
                extra={"zone": zone_name, "record_name": record_name},
            )

    def close(self) -> None:
        """Close the underlying API client."""
        self.client.close()
