"""Tests for alias type dispatch, option projection and the content field."""

import pytest

from core.alias_field import (
    REQUIRED_MESSAGE,
    AliasContentField,
    AliasKind,
    project_options,
    validate,
)


class TestAliasKind:
    @pytest.mark.parametrize(
        "alias_type, kind",
        [("port", AliasKind.PORT), ("host", AliasKind.HOST), ("network", AliasKind.NETWORK),
         ("geoip", AliasKind.GEOIP), ("urltable", AliasKind.OTHER), ("Port", AliasKind.OTHER),
         ("other", AliasKind.OTHER), (None, AliasKind.OTHER)],
    )
    def test_from_type(self, alias_type, kind):
        assert AliasKind.from_type(alias_type) is kind

    def test_passes_kind_through(self):
        assert AliasKind.from_type(AliasKind.HOST) is AliasKind.HOST


class TestValidate:
    def test_network_end_to_end(self):
        messages = validate("network", "1.1.1.1-2.2.2.2\n10.0.0.0/8\nbadtoken")
        assert messages == ['Entry "badtoken" is not a valid hostname or IP address.']

    @pytest.mark.parametrize("kind", ["port", "host", "network", "geoip", "bogus"])
    @pytest.mark.parametrize("raw_value", [None, ""])
    def test_empty_value_is_valid(self, kind, raw_value):
        assert validate(kind, raw_value) == []

    @pytest.mark.parametrize("kind", ["url", "bogus", None, AliasKind.OTHER])
    def test_unrecognized_kind_is_valid(self, kind):
        assert validate(kind, "anything at all\n!!!") == []

    def test_dispatches_by_kind(self, registry, country_table):
        assert validate(AliasKind.PORT, "abc") == ['Entry "abc" is not a valid port number.']
        assert validate("host", "example.com") == []
        assert validate("network", "example.com") == [
            'Entry "example.com" is not a valid hostname or IP address.'
        ]
        assert validate("geoip", "NL\nZZ", country_table=country_table) == [
            'Entry "ZZ" is not a valid country code.'
        ]
        assert validate("host", "myalias", aliases=registry) == []

    def test_custom_separator(self):
        assert validate("port", "80,443,x", separator=",") == [
            'Entry "x" is not a valid port number.'
        ]

    def test_geoip_with_missing_table_raises(self, tmp_path):
        from core.country_codes import CountryCodeTable

        table = CountryCodeTable(str(tmp_path / "missing.tab"))
        with pytest.raises(FileNotFoundError):
            validate("geoip", "NL", country_table=table)

    def test_other_kind_does_not_load_table(self, tmp_path):
        from core.country_codes import CountryCodeTable

        table = CountryCodeTable(str(tmp_path / "missing.tab"))
        assert validate("port", "80", country_table=table) == []
        assert not table.loaded


class TestProjectOptions:
    def test_one_selected_option_per_entry(self):
        assert project_options("a\nb\na") == [("a", True), ("b", True), ("a", True)]

    def test_no_trimming_or_filtering(self):
        assert project_options(" a\n\nb") == [(" a", True), ("", True), ("b", True)]

    def test_missing_value_has_no_options(self):
        assert project_options(None) == []

    def test_empty_string_is_one_empty_entry(self):
        assert project_options("") == [("", True)]
        assert AliasContentField("", "host").get_node_data() == [("", True)]


class TestAliasContentField:
    def test_validate(self, registry):
        field = AliasContentField("80\nweb_ports\nabc", "port", aliases=registry)
        assert field.kind is AliasKind.PORT
        assert field.validate() == ['Entry "abc" is not a valid port number.']
        assert not field.is_valid()

    def test_no_validators_for_empty_value(self):
        assert AliasContentField("", "port").get_validators() == []
        assert AliasContentField(None, "host").validate() == []

    def test_no_validators_for_unknown_type(self):
        field = AliasContentField("whatever", "urltable")
        assert field.get_validators() == []
        assert field.is_valid()

    def test_required_empty_value(self):
        field = AliasContentField("", "host", required=True)
        assert field.validate() == [REQUIRED_MESSAGE]

    def test_required_with_value(self):
        field = AliasContentField("10.0.0.1", "host", required=True)
        assert len(field.get_validators()) == 2
        assert field.validate() == []

    def test_get_node_data(self):
        field = AliasContentField("NL\nBE", "geoip")
        assert field.get_node_data() == [("NL", True), ("BE", True)]
