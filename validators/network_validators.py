"""
validators/network_validators.py

Primitive classifiers used to check firewall alias entries:
- is_port
- is_ip_address
- is_domain
- is_subnet

Each classifier returns True or False and never raises; the caller
decides how to report a rejected value.
"""

import ipaddress
import re

# decimal port number, ASCII digits only
_PORT_RE = re.compile(r"[0-9]{1,5}")

# port range separators accepted in alias content (80:443 or 80-443)
_PORT_RANGE_SPLIT_RE = re.compile(r"[:-]")

# single DNS label: letters, digits, hyphen; no leading/trailing hyphen
_LABEL_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")

_SUBNET_MAX_PREFIX = {4: 32, 6: 128}


# ----------------------------------------------------------------------
# Ports
# ----------------------------------------------------------------------
def _is_single_port(value: str) -> bool:
    if not _PORT_RE.fullmatch(value):
        return False
    return 1 <= int(value) <= 65535


def is_port(value: str, allow_ranges: bool = False) -> bool:
    """
    Check for a port number (1-65535) or, with allow_ranges, a range of
    two ports joined by ':' or '-' where the first is not above the second.
    """
    if not isinstance(value, str):
        return False

    parts = _PORT_RANGE_SPLIT_RE.split(value)
    if len(parts) == 1:
        return _is_single_port(value)
    if not allow_ranges or len(parts) != 2:
        return False

    low, high = parts
    if not (_is_single_port(low) and _is_single_port(high)):
        return False
    return int(low) <= int(high)


# ----------------------------------------------------------------------
# Addresses
# ----------------------------------------------------------------------
def is_ip_address(value: str) -> bool:
    """Check for a bare IPv4 or IPv6 address (no mask, no zone id)."""
    if not isinstance(value, str) or "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
        return True
    except ValueError:
        return False


def is_subnet(value: str) -> bool:
    """
    Check for CIDR notation: address/prefix where the prefix length fits
    the address family (0-32 for IPv4, 0-128 for IPv6). Host bits may be set.
    """
    if not isinstance(value, str):
        return False

    parts = value.split("/")
    if len(parts) != 2:
        return False

    address, prefix = parts
    if not is_ip_address(address) or not prefix.isascii() or not prefix.isdigit():
        return False

    version = ipaddress.ip_address(address).version
    return int(prefix) <= _SUBNET_MAX_PREFIX[version]


# ----------------------------------------------------------------------
# Hostnames
# ----------------------------------------------------------------------
def is_domain(value: str) -> bool:
    """
    Check for a dotted host or domain name (example.com, www.example.org).

    A name whose first and last labels are both numeric is rejected, as a
    valid host name is never made of digits only (RFC 1123, 2.1).
    """
    if not isinstance(value, str) or len(value) > 253 or "." not in value:
        return False

    labels = value.split(".")
    if labels[0].isdigit() and labels[-1].isdigit():
        return False

    return all(_LABEL_RE.fullmatch(label) for label in labels)
