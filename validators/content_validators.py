"""
content_validators.py
=====================

Rule sets for the content of firewall aliases, one per alias type:
- validate_port_content:    port numbers and port ranges
- validate_host_content:    IP addresses and host names
- validate_network_content: addresses, CIDR subnets and address ranges
- validate_country_content: ISO 3166 country codes

Every validator checks all entries and returns a list of messages, one per
invalid entry in input order. An empty list means the content is valid.

Any entry (except for country aliases) may also be the name of another
alias known to the given AliasRegistry.
"""

from typing import List, Optional

from core.country_codes import CountryCodeTable, default_table
from core.tokenizer import DEFAULT_SEPARATOR, iter_items
from validators.alias_validators import AliasRegistry, is_alias
from validators.network_validators import is_domain, is_ip_address, is_port, is_subnet

PORT_MESSAGE = 'Entry "{}" is not a valid port number.'
HOST_MESSAGE = 'Entry "{}" is not a valid hostname or IP address.'
COUNTRY_MESSAGE = 'Entry "{}" is not a valid country code.'


def validate_port_content(
    data: str,
    aliases: Optional[AliasRegistry] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    messages = []
    for port in iter_items(data, separator):
        if not is_alias(port, aliases) and not is_port(port, allow_ranges=True):
            messages.append(PORT_MESSAGE.format(port))
    return messages


def validate_host_content(
    data: str,
    aliases: Optional[AliasRegistry] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    messages = []
    for host in iter_items(data, separator):
        if not is_alias(host, aliases) and not is_ip_address(host) and not is_domain(host):
            messages.append(HOST_MESSAGE.format(host))
    return messages


def _is_address_range(value: str) -> bool:
    """
    Check for exactly two addresses joined by '-' (10.0.0.1-10.0.0.50).

    Parts that are empty after stripping are ignored, any other part that is
    not an address disqualifies the entry. Address order is not checked.
    """
    ipaddr_count = 0
    domain_alias_count = 0
    for part in value.split("-"):
        if is_ip_address(part):
            ipaddr_count += 1
        elif part.strip() != "":
            domain_alias_count += 1
    return ipaddr_count == 2 and domain_alias_count == 0


def validate_network_content(
    data: str,
    aliases: Optional[AliasRegistry] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    # host names are not accepted here, only in host aliases
    messages = []
    for network in iter_items(data, separator):
        if (
            not is_alias(network, aliases)
            and not is_ip_address(network)
            and not is_subnet(network)
            and not _is_address_range(network)
        ):
            messages.append(HOST_MESSAGE.format(network))
    return messages


def validate_country_content(
    data: str,
    country_table: Optional[CountryCodeTable] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    """
    Check every entry against the known country codes (exact, case-sensitive).
    Raises if the country table cannot be read.
    """
    codes = (country_table or default_table()).codes()
    messages = []
    for country in iter_items(data, separator):
        if country not in codes:
            messages.append(COUNTRY_MESSAGE.format(country))
    return messages
