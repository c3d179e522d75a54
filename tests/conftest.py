import pytest

from core.country_codes import CountryCodeTable
from validators.alias_validators import AliasRegistry

SAMPLE_TABLE = """\
# ISO 3166 alpha-2 country codes
#
#country-
#code\tname of country
BE\tBelgium
DE\tGermany
NL\tNetherlands
US\tUnited States
"""


@pytest.fixture
def table_file(tmp_path):
    path = tmp_path / "iso3166.tab"
    path.write_text(SAMPLE_TABLE, encoding="utf-8")
    return path


@pytest.fixture
def country_table(table_file):
    return CountryCodeTable(str(table_file))


@pytest.fixture
def registry():
    return AliasRegistry(["myalias", "webservers", "web_ports"])
