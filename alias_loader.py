"""
alias_loader.py
================
This module handles the loading and validation of YAML alias definition files.
Each file lists firewall aliases (name, type, content) whose content is later
checked by the Engine.

Responsibilities:
    - Load and parse YAML content safely
    - Validate the structure of every alias record
    - Normalize content given as a list into a single separated string
    - Return the alias records for further processing

Example file:
    aliases:
      - name: webservers
        type: host
        content:
          - 10.0.0.10
          - www.example.com
      - name: blocked_countries
        type: geoip
        content: "NL\\nBE"
"""

import logging
import os
from typing import List

import yaml

from core.tokenizer import DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)


class StringLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps every plain scalar as the text written in the file.
    Otherwise NO would load as False and 1:59 as the base-60 number 119.
    """


# only the merge key (<<) keeps its implicit resolver
StringLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == "tag:yaml.org,2002:merge"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class AliasLoader:
    """
    Loads and validates YAML alias definitions.
    """

    def __init__(self, path: str, separator: str = DEFAULT_SEPARATOR):
        """
        :param path: YAML file containing an 'aliases' list
        :param separator: Separator used to join list-style content
        """
        self.path = path
        self.separator = separator

    # ----------------------------------------------------------------------
    def _normalize_record(self, record, index: int) -> dict:
        """
        Validate a single alias record and return it with string content.
        """
        if not isinstance(record, dict):
            raise ValueError(
                f"[ERROR] Alias #{index} in '{self.path}' must be a mapping, got {type(record).__name__}"
            )

        for key in ("name", "type"):
            if not record.get(key) or not isinstance(record[key], str):
                raise ValueError(
                    f"[ERROR] Alias #{index} in '{self.path}' missing required key: '{key}'"
                )

        content = record.get("content")
        if content is None:
            content = ""
        elif isinstance(content, list):
            if not all(isinstance(item, str) for item in content):
                raise ValueError(
                    f"[ERROR] Alias '{record['name']}' in '{self.path}': 'content' entries must be plain values"
                )
            content = self.separator.join(content)
        elif not isinstance(content, str):
            raise ValueError(
                f"[ERROR] Alias '{record['name']}' in '{self.path}': 'content' must be a string or a list"
            )

        return {
            "name": record["name"],
            "type": record["type"],
            "content": content,
            "description": record.get("description", ""),
        }

    # ----------------------------------------------------------------------
    def load(self) -> List[dict]:
        """
        Load all alias records from the file, in file order.
        """
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"[ERROR] Alias file not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as file:
            try:
                data = yaml.load(file, Loader=StringLoader)
            except yaml.YAMLError as e:
                raise ValueError(f"[ERROR] Invalid YAML format in {self.path}: {e}")

        if not isinstance(data, dict) or not isinstance(data.get("aliases"), list):
            raise ValueError(
                f"[ERROR] Alias file '{self.path}' missing required key: 'aliases' (list)"
            )

        records = []
        seen = set()
        for index, raw_record in enumerate(data["aliases"], 1):
            record = self._normalize_record(raw_record, index)
            if record["name"] in seen:
                raise ValueError(
                    f"[ERROR] Duplicate alias name '{record['name']}' in {self.path}"
                )
            seen.add(record["name"])
            records.append(record)

        logger.debug(f"Loaded {len(records)} aliases from {self.path}")
        return records
