"""Data models for items returned by `op get item`."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .errors import ItemSchemaError

PASSWORD_DESIGNATION = "password"


def _require_str(data: dict, key: str) -> str:
    """Fetch a required string value or raise ItemSchemaError."""
    if key not in data:
        raise ItemSchemaError(f"missing field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ItemSchemaError(f"field '{key}' must be a string")
    return value


def _require_dict(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ItemSchemaError(f"{what} must be a JSON object")
    return data


@dataclass
class ItemOverview:
    """Display information for an item."""

    ainfo: str
    title: str

    def to_dict(self) -> dict:
        return {"ainfo": self.ainfo, "title": self.title}

    @classmethod
    def from_dict(cls, data: dict) -> "ItemOverview":
        data = _require_dict(data, "overview")
        return cls(ainfo=_require_str(data, "ainfo"), title=_require_str(data, "title"))


@dataclass
class ItemField:
    """A named field of a login-style item."""

    name: str
    field_type: str
    value: str
    designation: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to the wire representation (`type` key, nullable designation)."""
        return {
            "designation": self.designation,
            "name": self.name,
            "type": self.field_type,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ItemField":
        data = _require_dict(data, "field")
        designation = data.get("designation")
        if designation is not None and not isinstance(designation, str):
            raise ItemSchemaError("field 'designation' must be a string or null")
        return cls(
            name=_require_str(data, "name"),
            field_type=_require_str(data, "type"),
            value=_require_str(data, "value"),
            designation=designation,
        )


@dataclass
class PasswordDetails:
    """Details shape carrying the password directly."""

    password: str

    def to_dict(self) -> dict:
        return {"password": self.password}

    def get_password(self) -> Optional[str]:
        return self.password


@dataclass
class FieldsDetails:
    """Details shape carrying a list of named fields."""

    fields: List[ItemField] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"fields": [f.to_dict() for f in self.fields]}

    def get_password(self) -> Optional[str]:
        """Value of the first field designated as the password."""
        for item_field in self.fields:
            if item_field.designation == PASSWORD_DESIGNATION:
                return item_field.value
        return None


ItemDetails = Union[PasswordDetails, FieldsDetails]


def details_from_dict(data: dict) -> ItemDetails:
    """Resolve the details shape from the keys present.

    The password shape is tried first, then the field list. Keys belonging to
    neither shape are ignored.

    Raises:
        ItemSchemaError: If the payload matches neither shape
    """
    data = _require_dict(data, "details")

    if isinstance(data.get("password"), str):
        return PasswordDetails(password=data["password"])

    fields = data.get("fields")
    if isinstance(fields, list):
        return FieldsDetails(fields=[ItemField.from_dict(f) for f in fields])

    raise ItemSchemaError(
        "details match neither the password nor the fields shape"
    )


@dataclass
class Item:
    """A single item as reported by the op tool."""

    uuid: str
    vault_uuid: str
    changer_uuid: str
    overview: ItemOverview
    details: ItemDetails

    @property
    def title(self) -> str:
        return self.overview.title

    def password(self) -> Optional[str]:
        """Return the item's password, or None if it has none."""
        return self.details.get_password()

    def to_dict(self) -> dict:
        """Convert to the camelCase JSON structure `op` emits."""
        return {
            "uuid": self.uuid,
            "vaultUuid": self.vault_uuid,
            "changerUuid": self.changer_uuid,
            "overview": self.overview.to_dict(),
            "details": self.details.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        """Create Item from the decoded JSON structure.

        Raises:
            ItemSchemaError: If a required key is missing or has the wrong type
        """
        data = _require_dict(data, "item")
        if "overview" not in data:
            raise ItemSchemaError("missing field 'overview'")
        if "details" not in data:
            raise ItemSchemaError("missing field 'details'")

        return cls(
            uuid=_require_str(data, "uuid"),
            vault_uuid=_require_str(data, "vaultUuid"),
            changer_uuid=_require_str(data, "changerUuid"),
            overview=ItemOverview.from_dict(data["overview"]),
            details=details_from_dict(data["details"]),
        )
