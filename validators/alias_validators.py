"""
alias_validators.py
====================
Registry of defined alias names and the is_alias check.

An alias entry may reference another alias by name instead of listing
addresses or ports directly; is_alias decides whether a token is such a
reference.
"""

from typing import Iterable, List, Optional


class AliasRegistry:
    """
    Set of alias names known to the firewall configuration.
    Names are matched exactly (case-sensitive).
    """

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names = frozenset(names or ())

    # ----------------------------------------------------------------------
    @classmethod
    def from_definitions(cls, definitions: List[dict]) -> "AliasRegistry":
        """Build a registry from loaded alias records (see AliasLoader)."""
        return cls(record["name"] for record in definitions)

    # ----------------------------------------------------------------------
    def is_alias(self, name: str) -> bool:
        if not name or not isinstance(name, str):
            return False
        return name in self._names

    def __contains__(self, name: str) -> bool:
        return self.is_alias(name)

    def __len__(self) -> int:
        return len(self._names)


def is_alias(name: str, registry: Optional[AliasRegistry] = None) -> bool:
    """Check whether name references a defined alias (False without a registry)."""
    if registry is None:
        return False
    return registry.is_alias(name)
