"""Tunable settings for the formatter engine."""

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormatterSettings(BaseModel):
    """Settings shared by the converters.

    Converters read these from the ``settings`` context key passed through
    ``apply()``. When none is given, the defaults below apply.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    json_indent: int = Field(default=2, ge=0, description="Indent for formatted JSON output")
    xml_indent: int = Field(default=2, ge=0, description="Indent per level for re-indented XML")
    max_depth: int = Field(
        default=128, ge=1, description="Deepest nesting accepted by the PHP serialize decoder"
    )
    base64_charset: str = Field(
        default="latin-1",
        description="Charset used to turn Base64 bytes into text and back",
    )

    @field_validator("base64_charset")
    @classmethod
    def check_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown charset: {value}")
        return value


DEFAULT_SETTINGS = FormatterSettings()


def resolve_settings(context: dict) -> FormatterSettings:
    """Return the settings carried in a converter context, or the defaults."""
    settings = context.get("settings")
    if settings is None:
        return DEFAULT_SETTINGS
    if not isinstance(settings, FormatterSettings):
        raise TypeError(
            f"settings must be a FormatterSettings instance, got {type(settings).__name__}"
        )
    return settings


__all__ = ["FormatterSettings", "DEFAULT_SETTINGS", "resolve_settings"]
