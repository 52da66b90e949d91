"""
Customer details collected on the checkout form.

Field names on the wire are camelCase (``firstName``, ``postalCode``),
matching the form inputs and the user profile returned by the API.
"""

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DEFAULT_COUNTRY = "Finland"

REQUIRED_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "address",
    "postalCode",
    "city",
    "country",
)


class CustomerInfo(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    address: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = DEFAULT_COUNTRY
    phone: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True
    )

    @classmethod
    def field_names(cls) -> List[str]:
        """Form field names (camelCase)"""
        return [field.alias for field in cls.model_fields.values()]

    @classmethod
    def from_user(cls, user: Optional[Mapping[str, Any]]) -> "CustomerInfo":
        """Pre-fill from a user profile; missing values become empty strings."""
        user = user or {}
        values = {
            name: str(user[name]) if user.get(name) is not None else ""
            for name in cls.field_names()
        }
        values["country"] = values["country"] or DEFAULT_COUNTRY
        return cls.model_validate(values)

    def get(self, name: str) -> str:
        return getattr(self, self._attribute(name))

    def update(self, name: str, value: str) -> None:
        """Set one field by its form name."""
        setattr(self, self._attribute(name), value if value is not None else "")

    def missing_fields(self) -> List[str]:
        """Required fields left empty, in form order."""
        return [name for name in REQUIRED_FIELDS if not self.get(name)]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)

    @classmethod
    def _attribute(cls, name: str) -> str:
        for attr, field in cls.model_fields.items():
            if name in (attr, field.alias):
                return attr
        raise KeyError(f"Unknown customer field: {name}")
