from typing import Dict, List, Optional

from alias_loader import AliasLoader
from core.alias_field import AliasContentField
from core.config import load_config
from core.country_codes import DEFAULT_TABLE_PATH, CountryCodeTable, default_table
from core.logger import get_logger as Logger
from validators.alias_validators import AliasRegistry


class Engine:
    """
    Core engine for the alias checker.
    Coordinates configuration, alias loading and content validation.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config = load_config(config_path)
        self.logger = Logger(
            "AliasCheck",
            log_dir=self.config["log_dir"],
            level=self.config["log_level"],
        )
        self.separator = self.config["separator"]
        self.country_table = self._country_table(self.config["country_table"])

    # -------------------------------
    # Utility Methods
    # -------------------------------
    def _country_table(self, path: str) -> CountryCodeTable:
        # the bundled table is shared process-wide
        if path == DEFAULT_TABLE_PATH:
            return default_table()
        return CountryCodeTable(path)

    # -------------------------------
    # Validation Layer
    # -------------------------------
    def check_alias(self, record: dict, registry: Optional[AliasRegistry] = None) -> List[str]:
        """
        Validate the content of one alias record, returning its messages.
        """
        field = AliasContentField(
            record.get("content"),
            record.get("type"),
            aliases=registry,
            country_table=self.country_table,
            separator=self.separator,
        )
        messages = field.validate()
        if messages:
            self.logger.info(f"Alias '{record.get('name')}' has {len(messages)} invalid entries")
        return messages

    def check_file(self, path: str) -> Dict[str, List[str]]:
        """
        Load an alias definition file and validate every alias in it.
        Aliases may reference each other by name.
        Returns {alias name: messages} in file order.
        """
        records = AliasLoader(path, self.separator).load()
        self.logger.info(f"Loaded {len(records)} aliases from {path}")

        registry = AliasRegistry.from_definitions(records)
        return {record["name"]: self.check_alias(record, registry) for record in records}
