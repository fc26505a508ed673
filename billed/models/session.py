"""Identity of the signed-in employee.

The login flow writes the serialized ``{"email": ..., "type": ...}`` record
into a key-value store under ``settings.session_key``; logout removes it.
Between the two the record is read-only, and components receive the parsed
:class:`SessionContext` through their constructors instead of reading the
store themselves.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from billed.settings import settings


class SessionContext(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    email: str = ""
    type: str = ""

    @classmethod
    def from_storage(cls, storage: Mapping[str, str], key: str | None = None) -> SessionContext:
        raw = storage.get(key or settings.session_key)
        if raw is None:
            raise LookupError("No active session")
        return cls.model_validate_json(raw)
