"""
country_codes.py
=================
Known ISO 3166 two-letter country codes, read from a tzdata style
iso3166.tab file (code, TAB, name; '#' starts a comment line).

The table is read once per process. Later changes to the file are not
picked up. A failed read raises and leaves the table unloaded.
"""

import logging
import os
import threading
from typing import FrozenSet, Optional

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", "iso3166.tab"
)


def parse_country_codes(text: str) -> FrozenSet[str]:
    """Extract the codes from the text of an iso3166.tab file."""
    codes = set()
    for line in text.split("\n"):
        line = line.strip()
        if len(line) > 3 and not line.startswith("#"):
            codes.add(line[:2])
    return frozenset(codes)


class CountryCodeTable:
    """
    Lazily loaded, read-only set of country codes.
    Concurrent first access reads the file exactly once.
    """

    def __init__(self, path: str = DEFAULT_TABLE_PATH):
        self.path = path
        self._codes: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    # ----------------------------------------------------------------------
    def _load(self) -> FrozenSet[str]:
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"[ERROR] Country code table not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            codes = parse_country_codes(f.read())

        if not codes:
            raise ValueError(f"[ERROR] Country code table {self.path} contains no codes")

        logger.debug(f"Loaded {len(codes)} country codes from {self.path}")
        return codes

    # ----------------------------------------------------------------------
    def codes(self) -> FrozenSet[str]:
        """Return the code set, reading the table on first use."""
        codes = self._codes
        if codes is None:
            with self._lock:
                if self._codes is None:
                    self._codes = self._load()
                codes = self._codes
        return codes

    @property
    def loaded(self) -> bool:
        return self._codes is not None

    def __contains__(self, code: str) -> bool:
        return code in self.codes()


_default_table = CountryCodeTable()


def default_table() -> CountryCodeTable:
    """Process-wide table backed by the bundled iso3166.tab."""
    return _default_table
