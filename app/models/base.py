"""Shared base for models decoded from JSON with zero-value defaults."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ZeroValueModel(BaseModel):
    """Strictly typed model where JSON nulls fall back to field defaults.

    A null object decodes to all defaults and a null field keeps its default.
    Scalar fields use the Strict* types so mistyped values are rejected
    rather than coerced.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
