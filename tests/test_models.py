"""Tests for the item data models.

Covers:
- Structural resolution of the two details shapes
- The password accessor for both shapes
- Decoding errors for malformed items
- Round trips through the wire representation
"""

import itertools

import pytest

from opwrap.errors import ItemSchemaError
from opwrap.models import (
    FieldsDetails,
    Item,
    ItemField,
    ItemOverview,
    PasswordDetails,
    details_from_dict,
)


def _item(details) -> Item:
    return Item(
        uuid="u1",
        vault_uuid="v1",
        changer_uuid="c1",
        overview=ItemOverview(ainfo="a", title="t"),
        details=details,
    )


class TestDetailsResolution:
    """Test how the details shape is inferred from its keys."""

    def test_password_shape(self):
        assert details_from_dict({"password": "x"}) == PasswordDetails("x")

    def test_fields_shape(self):
        details = details_from_dict(
            {"fields": [{"name": "n", "type": "T", "value": "v"}]}
        )
        assert details == FieldsDetails([ItemField("n", "T", "v")])

    def test_password_shape_wins_when_both_present(self):
        details = details_from_dict({"password": "x", "fields": []})
        assert isinstance(details, PasswordDetails)

    def test_falls_back_to_fields_when_password_not_a_string(self):
        details = details_from_dict({"password": None, "fields": []})
        assert details == FieldsDetails([])

    def test_unknown_keys_are_ignored(self):
        details = details_from_dict({"password": "x", "sections": [{}]})
        assert details == PasswordDetails("x")

    def test_neither_shape_raises(self):
        with pytest.raises(ItemSchemaError):
            details_from_dict({"notesPlain": "hello"})

    def test_non_object_raises(self):
        with pytest.raises(ItemSchemaError):
            details_from_dict(["password"])

    def test_malformed_field_raises(self):
        with pytest.raises(ItemSchemaError):
            details_from_dict({"fields": [{"name": "n", "value": "v"}]})

    def test_designation_may_be_null(self):
        details = details_from_dict(
            {"fields": [{"designation": None, "name": "n", "type": "T", "value": "v"}]}
        )
        assert details.fields[0].designation is None


class TestPasswordAccessor:
    """Test Item.password() for both shapes."""

    def test_direct_password(self):
        assert _item(PasswordDetails("secret")).password() == "secret"

    def test_empty_direct_password_is_returned(self):
        assert _item(PasswordDetails("")).password() == ""

    def test_designated_field(self, login_item_data):
        item = Item.from_dict(login_item_data)
        assert item.password() == "GitHubToken456!"

    def test_no_designated_field(self):
        fields = [
            ItemField("username", "T", "dev", designation="username"),
            ItemField("password", "P", "hunter2"),
        ]
        assert _item(FieldsDetails(fields)).password() is None

    def test_empty_field_list(self):
        assert _item(FieldsDetails([])).password() is None

    def test_first_match_wins(self):
        fields = [
            ItemField("first", "P", "one", designation="password"),
            ItemField("second", "P", "two", designation="password"),
        ]
        assert _item(FieldsDetails(fields)).password() == "one"

    def test_designation_is_case_sensitive(self):
        fields = [ItemField("pw", "P", "x", designation="Password")]
        assert _item(FieldsDetails(fields)).password() is None

    @pytest.mark.parametrize("include_password", [True, False])
    def test_any_field_order(self, include_password):
        fields = [
            ItemField("username", "T", "dev", designation="username"),
            ItemField("pin", "P", "1234"),
            ItemField("notes", "T", "n", designation="notes"),
        ]
        if include_password:
            fields.append(ItemField("password", "P", "pw", designation="password"))

        expected = "pw" if include_password else None
        for order in itertools.permutations(fields):
            assert _item(FieldsDetails(list(order))).password() == expected


class TestItemDecoding:
    """Test Item.from_dict against the wire schema."""

    def test_decodes_all_fields(self, password_item_data):
        item = Item.from_dict(password_item_data)

        assert item.uuid == "u1"
        assert item.vault_uuid == "v1"
        assert item.changer_uuid == "c1"
        assert item.overview == ItemOverview(ainfo="a", title="t")
        assert item.title == "t"
        assert item.details == PasswordDetails("secret")

    def test_ignores_unknown_top_level_keys(self, password_item_data):
        password_item_data["templateUuid"] = "001"
        password_item_data["trashed"] = "N"
        assert Item.from_dict(password_item_data).uuid == "u1"

    @pytest.mark.parametrize(
        "key", ["uuid", "vaultUuid", "changerUuid", "overview", "details"]
    )
    def test_missing_required_key(self, password_item_data, key):
        del password_item_data[key]
        with pytest.raises(ItemSchemaError):
            Item.from_dict(password_item_data)

    def test_missing_overview_title(self, password_item_data):
        del password_item_data["overview"]["title"]
        with pytest.raises(ItemSchemaError):
            Item.from_dict(password_item_data)

    def test_wrong_type(self, password_item_data):
        password_item_data["uuid"] = 42
        with pytest.raises(ItemSchemaError):
            Item.from_dict(password_item_data)

    def test_schema_error_is_value_error(self):
        with pytest.raises(ValueError):
            Item.from_dict([])


class TestRoundTrip:
    """Test that encoding and decoding reproduce the same item."""

    def test_password_shape(self, password_item_data):
        item = Item.from_dict(password_item_data)
        assert Item.from_dict(item.to_dict()) == item
        assert item.to_dict() == password_item_data

    def test_fields_shape(self, login_item_data):
        item = Item.from_dict(login_item_data)
        assert Item.from_dict(item.to_dict()) == item

    def test_field_type_uses_wire_name(self):
        field_dict = ItemField("n", "P", "v").to_dict()
        assert field_dict["type"] == "P"
        assert "field_type" not in field_dict
