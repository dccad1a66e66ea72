"""DNS helpers: FQDN normalisation and authoritative zone discovery."""

import dns.exception
import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdatatype

from godaddy_dns._logging import get_logger
from godaddy_dns.exceptions import ZoneResolutionError

logger = get_logger(__name__)

RECURSIVE_NAMESERVERS = ["8.8.8.8:53", "8.8.4.4:53"]

_DNS_PORT = 53
_QUERY_TIMEOUT = 10.0
_MAX_CNAME_HOPS = 10


def to_fqdn(name: str) -> str:
    """Return ``name`` with a trailing dot."""
    if name.endswith("."):
        return name
    return name + "."


def un_fqdn(name: str) -> str:
    """Return ``name`` without its trailing dot."""
    if name.endswith("."):
        return name[:-1]
    return name


def _split_nameserver(nameserver: str) -> tuple[str, int]:
    """Split ``host[:port]`` (IPv6 as ``[addr]:port``) into host and port.

    Raises:
        ZoneResolutionError: If the port is not a number.
    """
    host, port = nameserver, ""
    if nameserver.startswith("["):
        host, _, port = nameserver[1:].partition("]")
        port = port.lstrip(":")
    elif nameserver.count(":") == 1:
        host, port = nameserver.split(":")

    try:
        return host, int(port or _DNS_PORT)
    except ValueError:
        raise ZoneResolutionError(f"invalid nameserver address: {nameserver!r}") from None


def _query_soa(domain: str, nameservers: list[str]) -> dns.message.Message:
    """Send an SOA query for ``domain``, trying each nameserver in turn.

    Raises:
        ZoneResolutionError: If no nameserver gives a usable answer.
    """
    request = dns.message.make_query(domain, dns.rdatatype.SOA)
    errors = []
    for nameserver in nameservers:
        host, port = _split_nameserver(nameserver)
        try:
            response = dns.query.udp(request, host, timeout=_QUERY_TIMEOUT, port=port)
        except (OSError, dns.exception.DNSException) as e:
            logger.debug(
                "SOA query failed",
                extra={"domain": domain, "nameserver": nameserver, "error": str(e)},
            )
            errors.append(f"{nameserver}: {e}")
            continue

        rcode = response.rcode()
        if rcode in (dns.rcode.NOERROR, dns.rcode.NXDOMAIN):
            return response
        errors.append(f"{nameserver}: {dns.rcode.to_text(rcode)}")

    raise ZoneResolutionError(
        f"could not find the start of authority for {domain}: {'; '.join(errors) or 'no nameservers'}"
    )


def find_zone_by_fqdn(fqdn: str, nameservers: list[str]) -> str:
    """Find the authoritative zone for ``fqdn``.

    Walks up the labels of the name, querying for an SOA record at each
    level. CNAMEs owned by a candidate restart the walk at their target.

    Args:
        fqdn: Fully qualified name, e.g. ``_acme-challenge.example.com.``.
        nameservers: Recursive nameservers as ``host[:port]`` strings.

    Returns:
        The zone name with a trailing dot, e.g. ``example.com.``.

    Raises:
        ZoneResolutionError: If no zone is found or the nameservers fail.
    """
    try:
        name = dns.name.from_text(to_fqdn(fqdn))
    except dns.exception.DNSException as e:
        raise ZoneResolutionError(f"invalid domain name {fqdn!r}: {e}") from e
    hops = 0

    while name != dns.name.root:
        candidate = name.to_text()
        response = _query_soa(candidate, nameservers)

        target = None
        for rrset in response.answer:
            if rrset.name != name:
                continue
            if rrset.rdtype == dns.rdatatype.SOA:
                logger.debug("Zone found", extra={"fqdn": fqdn, "zone": candidate})
                return candidate
            if rrset.rdtype == dns.rdatatype.CNAME:
                target = rrset[0].target

        if target is not None:
            hops += 1
            if hops > _MAX_CNAME_HOPS:
                raise ZoneResolutionError(f"too many CNAME redirections resolving {fqdn}")
            logger.debug(
                "Following CNAME",
                extra={"fqdn": fqdn, "from": candidate, "to": target.to_text()},
            )
            name = target
            continue

        name = name.parent()

    raise ZoneResolutionError(f"could not find the start of authority for {fqdn}")
