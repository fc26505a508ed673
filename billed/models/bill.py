from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel

from billed.constants import DEFAULT_PCT
from billed.dates import parse_iso


class BillStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class Bill(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    email: str = ""
    type: str = ""
    name: str = Field(min_length=1)
    date: str  # 'YYYY-MM-DD'
    amount: int = Field(default=0, ge=0)
    vat: float = Field(default=0, ge=0)
    pct: float = Field(default=DEFAULT_PCT, ge=0)
    commentary: str = ""
    file_url: str | None = None
    file_name: str | None = None
    status: BillStatus = BillStatus.PENDING

    @model_validator(mode="after")
    def _file_reference_is_complete(self) -> Bill:
        if (self.file_url is None) != (self.file_name is None):
            raise ValueError("fileUrl and fileName must be set together")
        return self

    @property
    def is_draft(self) -> bool:
        return self.id is None

    def to_payload(self) -> dict:
        """Wire form sent to the Store (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BillForm(BaseModel):
    """Fields of the new-bill form, as typed by the employee."""

    type: str
    name: str = Field(min_length=1)
    date: str
    amount: int = Field(ge=0)
    vat: float = Field(default=0, ge=0)
    pct: float = Field(default=DEFAULT_PCT, ge=0, le=100)
    commentary: str = ""

    @field_validator("vat", "pct", mode="before")
    @classmethod
    def _blank_means_default(cls, value: object, info: ValidationInfo) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("date")
    @classmethod
    def _canonical_date(cls, value: str) -> str:
        return parse_iso(value).isoformat()

    @field_validator("commentary", mode="before")
    @classmethod
    def _none_commentary(cls, value: object) -> object:
        return "" if value is None else value
