"""
Path Info Decoder Settings
==========================

Validates the options that control how a PATH_INFO string is split.

For Developers:
    - Use PathInfoSettings.from_options() to build settings from a plain
      mapping; option names are matched case-insensitively
    - The classic CGI::PathInfo option names (SplitOn, Eq,
      StripLeadingSlash, StripTrailingSlash) are accepted as aliases
    - Settings are frozen; a store keeps the instance it was built with

    Defaults split pairs on '/' and names from values on '-', with leading
    and trailing '/' ignored:

        /yesterday-monday/tomorrow-wednesday
        → yesterday: monday, tomorrow: wednesday

    Setting a separator to a letter or digit is almost never what you want:
    url_encode leaves those characters unescaped.

Security Notes:
    - Rejected option names are sanitized before logging
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.path_params.errors import ConfigurationError
from src.path_params.utils.logging_utils import sanitize_for_log

# Structured logging
logger = logging.getLogger(__name__)

DEFAULT_PAIR_SEPARATOR = "/"
DEFAULT_KEY_VALUE_SEPARATOR = "-"

# Lower-cased option name -> settings field
SETTING_ALIASES = {
    "pair_separator": "pair_separator",
    "pairseparator": "pair_separator",
    "spliton": "pair_separator",
    "key_value_separator": "key_value_separator",
    "keyvalueseparator": "key_value_separator",
    "eq": "key_value_separator",
    "strip_leading_separator": "strip_leading_separator",
    "stripleadingseparator": "strip_leading_separator",
    "stripleadingslash": "strip_leading_separator",
    "strip_trailing_separator": "strip_trailing_separator",
    "striptrailingseparator": "strip_trailing_separator",
    "striptrailingslash": "strip_trailing_separator",
}

Separator = str | re.Pattern


class PathInfoSettings(BaseModel):
    """Separators and stripping rules for one path-info store.

    A separator given as a str is matched literally. A compiled
    ``re.Pattern`` is matched as a regular expression.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pair_separator: Separator = Field(
        DEFAULT_PAIR_SEPARATOR, description="Splits the input into tuples"
    )
    key_value_separator: Separator = Field(
        DEFAULT_KEY_VALUE_SEPARATOR, description="Splits a tuple into name and value"
    )
    strip_leading_separator: bool = True
    strip_trailing_separator: bool = True

    @field_validator("pair_separator", "key_value_separator", mode="plain")
    @classmethod
    def validate_separator(cls, value: Any) -> Separator:
        """Separators must be a non-empty str or a non-empty compiled pattern."""
        if isinstance(value, re.Pattern):
            if isinstance(value.pattern, bytes):
                raise ValueError("separator pattern must be compiled from a str")
            if not value.pattern:
                raise ValueError("separator pattern must not be empty")
            return value
        if isinstance(value, str):
            if not value:
                raise ValueError("separator must not be empty")
            return value
        raise ValueError(
            f"separator must be a str or compiled pattern, got {type(value).__name__}"
        )

    def pair_pattern(self) -> re.Pattern:
        """Regular expression matching one pair separator."""
        return as_pattern(self.pair_separator)

    def key_value_pattern(self) -> re.Pattern:
        """Regular expression matching one key/value separator."""
        return as_pattern(self.key_value_separator)

    @classmethod
    def from_options(
        cls, options: "Mapping[str, Any] | PathInfoSettings | None" = None
    ) -> "PathInfoSettings":
        """
        Build settings from caller-supplied options.

        Args:
            options: None for defaults, an existing PathInfoSettings, or a
                mapping of option names (any case) to values

        Returns:
            Validated, frozen PathInfoSettings

        Raises:
            ConfigurationError: If options is not a mapping, an option name
                is not recognized, two names set the same option, or a value
                fails validation

        Example:
            >>> PathInfoSettings.from_options({"SplitOn": "&", "Eq": "="})
            PathInfoSettings(pair_separator='&', key_value_separator='=', ...)
        """
        if options is None:
            return cls()
        if isinstance(options, PathInfoSettings):
            return options
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"Settings must be a mapping, got {type(options).__name__}"
            )

        fields: dict[str, Any] = {}
        for key, value in options.items():
            field_name = None
            if isinstance(key, str):
                field_name = SETTING_ALIASES.get(key.lower())
            if field_name is None:
                logger.warning(
                    "Rejected unknown path info setting",
                    extra={"setting": sanitize_for_log(key)},
                )
                raise ConfigurationError(
                    f"Setting name '{key}' is not valid here", key=str(key)
                )
            if field_name in fields:
                logger.warning(
                    "Rejected duplicate path info setting",
                    extra={"setting": sanitize_for_log(key), "field": field_name},
                )
                raise ConfigurationError(
                    f"Setting '{key}' repeats another name for {field_name}",
                    key=field_name,
                )
            fields[field_name] = value

        try:
            settings = cls(**fields)
        except ValidationError as e:
            bad_fields = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
            logger.warning(
                "Rejected invalid path info setting value",
                extra={"fields": bad_fields},
            )
            raise ConfigurationError(
                f"Invalid path info settings: {', '.join(bad_fields) or 'unknown'}",
                key=bad_fields[0] if bad_fields else None,
            ) from e

        logger.debug(
            "Path info settings loaded",
            extra={
                "pair_separator": sanitize_for_log(settings.pair_separator),
                "key_value_separator": sanitize_for_log(settings.key_value_separator),
                "strip_leading_separator": settings.strip_leading_separator,
                "strip_trailing_separator": settings.strip_trailing_separator,
            },
        )
        return settings


def as_pattern(separator: Separator) -> re.Pattern:
    """Compile a separator, escaping it when given as a literal str."""
    if isinstance(separator, re.Pattern):
        return separator
    return re.compile(re.escape(separator))
