"""User identity as seen by the authorizer."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class User(BaseModel):
    """An authenticated user. Ids are compared as text."""

    model_config = {"frozen": True}

    id: str
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> str:
        if isinstance(value, bool) or value is None:
            msg = "user id must be a string or integer"
            raise ValueError(msg)
        if isinstance(value, int):
            return str(value)
        return value  # type: ignore[return-value]
