"""
alias_field.py
===============
The alias content field: picks the rule set matching the alias type and
exposes the content as a list of selectable options.

Responsibilities:
    - Map the alias 'type' value onto an AliasKind
    - Run the matching content validator (validate)
    - Project the content into (value, selected) options (project_options)
    - Bundle both behind AliasContentField for the hosting model
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from core.country_codes import CountryCodeTable
from core.tokenizer import DEFAULT_SEPARATOR, iter_items
from validators import content_validators
from validators.alias_validators import AliasRegistry

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "alias name required"

Validator = Callable[[str], List[str]]


class AliasKind(Enum):
    PORT = "port"
    HOST = "host"
    NETWORK = "network"
    GEOIP = "geoip"
    OTHER = "other"

    @classmethod
    def from_type(cls, alias_type: Optional[Union[str, "AliasKind"]]) -> "AliasKind":
        """Resolve an alias type value; anything unrecognized is OTHER."""
        if isinstance(alias_type, AliasKind):
            return alias_type
        for kind in cls:
            if kind is not cls.OTHER and kind.value == alias_type:
                return kind
        return cls.OTHER


def _kind_validator(
    kind: AliasKind,
    aliases: Optional[AliasRegistry],
    country_table: Optional[CountryCodeTable],
    separator: str,
) -> Optional[Validator]:
    dispatch: Dict[AliasKind, Validator] = {
        AliasKind.PORT: lambda data: content_validators.validate_port_content(
            data, aliases, separator
        ),
        AliasKind.HOST: lambda data: content_validators.validate_host_content(
            data, aliases, separator
        ),
        AliasKind.NETWORK: lambda data: content_validators.validate_network_content(
            data, aliases, separator
        ),
        AliasKind.GEOIP: lambda data: content_validators.validate_country_content(
            data, country_table, separator
        ),
    }
    return dispatch.get(kind)


def validate(
    kind: Union[str, AliasKind, None],
    raw_value: Optional[str],
    aliases: Optional[AliasRegistry] = None,
    country_table: Optional[CountryCodeTable] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    """
    Validate alias content against the rules of its kind.
    Returns one message per invalid entry; empty content and unknown
    kinds are always valid.
    """
    if not raw_value:
        return []

    alias_kind = AliasKind.from_type(kind)
    validator = _kind_validator(alias_kind, aliases, country_table, separator)
    if validator is None:
        logger.debug(f"No content validation for alias type {kind!r}")
        return []

    messages = validator(raw_value)
    logger.debug(f"Validated {alias_kind.value} alias content: {len(messages)} invalid entries")
    return messages


def project_options(
    raw_value: Optional[str], separator: str = DEFAULT_SEPARATOR
) -> List[Tuple[str, bool]]:
    """
    Return every entry of raw_value as a selected option, in order.
    An empty string is one empty entry; only a missing value has no options.
    """
    if raw_value is None:
        return []
    return [(item, True) for item in iter_items(raw_value, separator)]


class AliasContentField:
    """
    Content field of an alias record.

    The alias type is read from the sibling 'type' field of the same record
    and decides which rule set applies to the content.
    """

    def __init__(
        self,
        value: Optional[str],
        alias_type: Optional[str],
        aliases: Optional[AliasRegistry] = None,
        country_table: Optional[CountryCodeTable] = None,
        separator: str = DEFAULT_SEPARATOR,
        required: bool = False,
        validation_message: str = REQUIRED_MESSAGE,
    ):
        self.value = value
        self.alias_type = alias_type
        self.aliases = aliases
        self.country_table = country_table
        self.separator = separator
        self.required = required
        self.validation_message = validation_message

    @property
    def kind(self) -> AliasKind:
        return AliasKind.from_type(self.alias_type)

    # ----------------------------------------------------------------------
    def get_validators(self) -> List[Validator]:
        """
        Validators applying to the current value. Each takes the raw value
        and returns a list of messages.
        """
        validators: List[Validator] = []
        if self.required:
            validators.append(
                lambda data: [] if data else [self.validation_message]
            )
        if self.value:
            kind_validator = _kind_validator(
                self.kind, self.aliases, self.country_table, self.separator
            )
            if kind_validator is not None:
                validators.append(kind_validator)
        return validators

    # ----------------------------------------------------------------------
    def validate(self) -> List[str]:
        messages: List[str] = []
        for validator in self.get_validators():
            messages.extend(validator(self.value or ""))
        return messages

    def is_valid(self) -> bool:
        return not self.validate()

    # ----------------------------------------------------------------------
    def get_node_data(self) -> List[Tuple[str, bool]]:
        """Content as (value, selected) options for rendering."""
        return project_options(self.value, self.separator)
