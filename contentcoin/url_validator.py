"""
URL Validator - Check scrape targets before any request is made.

A scrape URL must be an absolute http(s) URL with a hostname, and must not
point at the server's own network:
- localhost and cluster-internal hostnames
- private, loopback and link-local IP ranges (including cloud metadata)
"""

import ipaddress
import socket
from urllib.parse import urlparse

from fastapi import HTTPException


class InvalidURLError(Exception):
    """Raised when a URL can't be scraped."""
    pass


BLOCKED_IP_RANGES = [
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("169.254.0.0/16"),
    ipaddress.ip_network("0.0.0.0/8"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
]

BLOCKED_HOSTNAMES = {
    "localhost",
    "localhost.localdomain",
    "metadata",
    "metadata.google.internal",
}

BLOCKED_SUFFIXES = (".local", ".internal", ".localhost")

ALLOWED_SCHEMES = {"http", "https"}


def is_ip_blocked(ip_str: str) -> bool:
    """Check if an IP address is in a blocked range."""
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        return False
    return any(ip in network for network in BLOCKED_IP_RANGES)


def _check_resolved_addresses(hostname: str, port: int) -> None:
    try:
        addrinfo = socket.getaddrinfo(hostname, port, proto=socket.IPPROTO_TCP)
    except (socket.gaierror, UnicodeError):
        # Unresolvable hosts fail at fetch time as a connection error
        return
    for _, _, _, _, sockaddr in addrinfo:
        if is_ip_blocked(sockaddr[0]):
            raise InvalidURLError(
                f"Hostname '{hostname}' resolves to blocked IP address '{sockaddr[0]}'"
            )


def validate_url(url: str, resolve_dns: bool = True) -> str:
    """
    Validate a URL before scraping it.

    Args:
        url: The URL to validate
        resolve_dns: Whether to resolve the hostname and check its addresses

    Returns:
        The URL, stripped of surrounding whitespace

    Raises:
        InvalidURLError: If the URL is malformed or targets a blocked host
    """
    if not isinstance(url, str):
        raise InvalidURLError("Invalid URL format: URL must be a string")
    url = url.strip()

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
        port = parsed.port
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL format: {e}") from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidURLError("Invalid URL format: use an absolute http or https URL")

    if not hostname:
        raise InvalidURLError("Invalid URL format: URL must include a hostname")

    hostname = hostname.lower()
    if hostname in BLOCKED_HOSTNAMES or hostname.endswith(BLOCKED_SUFFIXES):
        raise InvalidURLError(f"Access to '{hostname}' is not allowed")

    if is_ip_blocked(hostname):
        raise InvalidURLError(f"Access to IP address '{hostname}' is not allowed")

    if resolve_dns:
        _check_resolved_addresses(hostname, port or 80)

    return url


def validate_url_or_raise_http(url: str, resolve_dns: bool = True) -> str:
    """
    Validate a URL, raising HTTPException(400) on failure.

    Convenience wrapper for use in FastAPI route handlers.
    """
    try:
        return validate_url(url, resolve_dns=resolve_dns)
    except InvalidURLError as e:
        raise HTTPException(status_code=400, detail=str(e))
