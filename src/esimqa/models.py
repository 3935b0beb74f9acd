"""
Pydantic models for the data the suite reads and sends.

This module defines the package detail record read from the storefront,
the order form posted to the partner API, and the slices of API
responses the suite parses instead of indexing raw JSON.
"""

from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Field name -> label used in soft assertion failure lines, in check order.
PACKAGE_FIELD_LABELS: dict[str, str] = {
    "title": "Package Title",
    "coverage": "Package Coverage",
    "data": "Package Data",
    "validity": "Package Validity",
    "price": "Package Price",
}


class PackageDetails(BaseModel):
    """Package Detail Record shown in the storefront's package panel."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Operator/package title")
    coverage: str = Field(..., description="Covered country or region")
    data: str = Field(..., description="Data allowance, e.g. '1 GB'")
    validity: str = Field(..., description="Validity period, e.g. '7 Days'")
    price: str = Field(..., description="Price without currency code")

    def labelled(self) -> Iterator[tuple[str, str, str]]:
        """Yield (field, label, value) in check order."""
        for field, label in PACKAGE_FIELD_LABELS.items():
            yield field, label, getattr(self, field)


class OrderRequest(BaseModel):
    """Form body for POST orders.

    Extra keyword fields are kept and sent as-is, which is how the
    malformed-request cases add fields the API does not accept.
    """

    model_config = ConfigDict(extra="allow")

    quantity: str | int = Field(..., description="Number of eSIMs")
    package_id: str = Field(..., description="Package slug")
    type: str = Field(default="sim", description="Order type")
    description: Optional[str] = Field(None, description="Free-text note")

    def to_form(self) -> dict[str, str]:
        """Serialize to form fields; None is sent as an empty value."""
        form: dict[str, str] = {}
        for key, value in self.model_dump().items():
            form[key] = "" if value is None else str(value)
        return form


class TokenData(BaseModel):
    """Access token payload."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    token_type: Optional[str] = None
    expires_in: Optional[int] = None


class TokenResponse(BaseModel):
    """Body of a successful POST token call."""

    model_config = ConfigDict(extra="ignore")

    data: TokenData


class SimRecord(BaseModel):
    """One entry from GET sims; only the fields the suite inspects."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    iccid: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> Any:
        """Accept 'YYYY-MM-DD HH:MM:SS' and treat naive times as UTC."""
        if isinstance(v, str):
            v = datetime.fromisoformat(v)
        if isinstance(v, datetime) and v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v


def _sim_items(body: dict[str, Any]) -> list[Any]:
    # data is a list, or an object keyed by index on some pages.
    data = body.get("data") or []
    return list(data.values()) if isinstance(data, dict) else list(data)


def sim_count(body: dict[str, Any]) -> int:
    """Number of entries in the ``data`` collection of a GET sims body."""
    return len(_sim_items(body))


def sim_records(body: dict[str, Any]) -> list[SimRecord]:
    """Parse the ``data`` collection of a GET sims body into records."""
    return [SimRecord.model_validate(item) for item in _sim_items(body)]
