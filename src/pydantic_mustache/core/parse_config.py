"""Parse configuration for template construction.

This module provides configuration options for parsing including the initial
delimiter pair, source encoding, and partial resolution settings.
"""

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator


class ParseConfig(BaseModel):
    """Configuration for template parsing.

    Attributes:
        open_delimiter: Delimiter opening a tag until a directive replaces it.
            Default is ``{{``.
        close_delimiter: Delimiter closing a tag. Default is ``}}``.
        encoding: Encoding used to decode byte sources and template files.
            Default is ``utf-8``.
        partial_extension: Suffix retried when a partial cannot be read under
            its bare name. An empty string disables the retry.
        max_partial_depth: Maximum nesting of partial inclusion before raising
            PartialRecursionError. Default is 64.

    """

    model_config = {"frozen": True}

    open_delimiter: str = Field(default="{{", min_length=1)
    close_delimiter: str = Field(default="}}", min_length=1)
    encoding: str = Field(default="utf-8")
    partial_extension: str = Field(default=".mustache")
    max_partial_depth: int = Field(
        default=64,
        ge=1,
        description="Maximum nesting of partial inclusion",
    )

    @field_validator("open_delimiter", "close_delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if " " in value or "=" in value:
            msg = f"Delimiter must not contain spaces or '=': {value!r}"
            raise ValueError(msg)
        return value
