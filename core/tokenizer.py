"""
tokenizer.py
=============
Splits the raw content of an alias into its individual entries.

The raw value is stored as one string with entries separated by a single
character (newline by default). Entries are returned exactly as stored:
no trimming and no dropping of empty entries.
"""

from typing import Iterator

DEFAULT_SEPARATOR = "\n"


def iter_items(data: str, separator: str = DEFAULT_SEPARATOR) -> Iterator[str]:
    """
    Yield every entry of data, split on separator.

    Each call returns a fresh generator, so callers can walk the same
    content more than once.
    :param data: Raw alias content
    :param separator: Entry separator (single character)
    """
    if not separator:
        raise ValueError("Separator cannot be empty.")

    for item in data.split(separator):
        yield item
