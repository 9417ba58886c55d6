"""
Path Info Parameters
====================

Decodes extra path information into ordered, multi-value fields, so that
``/yesterday-monday/tomorrow-wednesday`` can be read like the query string
``?yesterday=monday&tomorrow=wednesday``.

For Developers:
    - get() returns the first value for a name, get_list() returns all
    - names() lists field names in the order they first appeared
    - set_one(), set_many() and set_pairs() replace a field's values as if
      they had been found in the path; they never touch other stores
    - Decoding never fails on request content: tuples without a key/value
      separator are dropped, broken %-escapes are kept literally

Example:
    >>> params = PathInfoParams("/a-1/b-2/b-3")
    >>> params.names()
    ['a', 'b']
    >>> params.get("b")
    '2'
    >>> params.get_list("b")
    ['2', '3']
"""

import logging
import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from src.path_params.codec import url_decode
from src.path_params.config import PathInfoSettings
from src.path_params.errors import ConfigurationError
from src.path_params.utils.event_helpers import PathInfoSource
from src.path_params.utils.logging_utils import sanitize_for_log

# Structured logging
logger = logging.getLogger(__name__)

Value = str | int | float
Values = Value | Sequence[Value]


class PathInfoParams:
    """Ordered multi-value fields decoded from a path-info string."""

    __slots__ = ("_settings", "_pair_re", "_kv_re", "_fields")

    def __init__(
        self,
        path_info: str | None = "",
        settings: Mapping[str, Any] | PathInfoSettings | None = None,
    ) -> None:
        self._settings = PathInfoSettings.from_options(settings)
        self._pair_re = self._settings.pair_pattern()
        self._kv_re = self._settings.key_value_pattern()
        # dict insertion order is the first-seen field order
        self._fields: dict[str, list[str]] = {}
        self.decode(path_info)

    @classmethod
    def from_source(
        cls,
        source: PathInfoSource,
        settings: Mapping[str, Any] | PathInfoSettings | None = None,
    ) -> "PathInfoParams":
        """Decode the path info a source provides, read exactly once."""
        return cls(source.get_path_info(), settings)

    @property
    def settings(self) -> PathInfoSettings:
        return self._settings

    def decode(self, path_info: str | None) -> None:
        """
        Replace all fields with those decoded from path_info.

        Args:
            path_info: Raw path information (e.g., "/a-1/b-2"); None is empty
        """
        buffer = path_info or ""
        tuples = list(_split(self._pair_re, buffer)) if buffer else []

        # A run of separators at either end leaves only empty tuples there
        start, end = 0, len(tuples)
        if self._settings.strip_leading_separator:
            while start < end and not tuples[start]:
                start += 1
        if self._settings.strip_trailing_separator:
            while end > start and not tuples[end - 1]:
                end -= 1

        fields: dict[str, list[str]] = {}
        dropped = 0
        for pair in tuples[start:end]:
            match = self._kv_re.search(pair)
            if match is None:
                dropped += 1
                continue
            name = url_decode(pair[: match.start()])
            value = url_decode(pair[match.end() :])
            fields.setdefault(name, []).append(value)

        self._fields = fields

        logger.debug(
            "Decoded path info",
            extra={
                "path_info": sanitize_for_log(buffer),
                "field_count": len(fields),
                "dropped_tuples": dropped,
            },
        )

    def names(self) -> list[str]:
        """Field names in first-seen order."""
        return list(self._fields)

    def get(self, name: str, default: str | None = None) -> str | None:
        """First value for name, or default."""
        values = self._fields.get(name)
        return values[0] if values else default

    def get_list(self, name: str) -> list[str]:
        """All values for name in stored order; empty list when absent."""
        values = self._fields.get(name)
        return list(values) if values else []

    def items(self) -> list[tuple[str, str]]:
        """All name/value pairs, flattened, in field order."""
        return [(k, v) for k, vals in self._fields.items() for v in vals]

    def to_dict(self) -> dict[str, list[str]]:
        """Copy of every field and its values."""
        return {k: list(vals) for k, vals in self._fields.items()}

    def set_one(self, name: str, value: Values) -> None:
        """
        Replace the values of one field.

        A scalar becomes a single value; a list or tuple is copied. A new
        name is appended to the field order, an existing name keeps its
        position.

        Raises:
            ConfigurationError: If name is not a str or value has an
                unsupported shape
        """
        self.set_many({name: value})

    def set_many(self, assignments: Mapping[str, Values]) -> None:
        """
        Replace the values of several fields at once.

        Every assignment is validated before any is applied, so a bad value
        leaves the store untouched.

        Raises:
            ConfigurationError: If assignments is not a mapping or any
                name/value has an unsupported shape
        """
        if not isinstance(assignments, Mapping):
            raise ConfigurationError(
                f"Assignments must be a mapping, got {type(assignments).__name__}"
            )

        staged = [
            (name, _normalize_values(name, value))
            for name, value in assignments.items()
        ]
        for name, values in staged:
            self._fields[name] = values

    def set_pairs(self, *flat: Any) -> None:
        """
        Replace field values from a flat name, value, name, value... list.

        Raises:
            ConfigurationError: On an odd number of arguments, or as set_many
        """
        if len(flat) % 2 == 1:
            raise ConfigurationError(
                f"Odd number of arguments passed ({len(flat)}); "
                "names and values must pair up"
            )
        assignments: dict[str, Values] = {}
        for i in range(0, len(flat), 2):
            name = flat[i]
            if not isinstance(name, str):
                raise ConfigurationError(
                    f"Field name must be a str, got {type(name).__name__}"
                )
            assignments[name] = flat[i + 1]
        self.set_many(assignments)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathInfoParams):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            equivalent: dict[str, str | list[str]] = {
                k: v[0] if len(v) == 1 else v for k, v in self._fields.items()
            }
            return equivalent == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"PathInfoParams({self._fields!r})"


def _split(pattern: re.Pattern, text: str) -> Iterator[str]:
    """Split text on pattern, ignoring capture groups and empty matches."""
    start = 0
    for match in pattern.finditer(text):
        if match.end() == match.start():
            continue
        yield text[start : match.start()]
        start = match.end()
    yield text[start:]


def _normalize_values(name: Any, value: Any) -> list[str]:
    """Turn one assigned value into a fresh list of strings."""
    if not isinstance(name, str):
        raise ConfigurationError(
            f"Field name must be a str, got {type(name).__name__}", key=str(name)
        )
    if _is_scalar(value):
        return [str(value)]
    if isinstance(value, list | tuple):
        if not value:
            raise ConfigurationError(
                f"Field '{name}' must be given at least one value", key=name
            )
        bad = [type(v).__name__ for v in value if not _is_scalar(v)]
        if bad:
            raise ConfigurationError(
                f"Field '{name}' has values of illegal type '{bad[0]}'", key=name
            )
        return [str(v) for v in value]
    raise ConfigurationError(
        f"Field '{name}' has illegal data type of '{type(value).__name__}'", key=name
    )


def _is_scalar(value: Any) -> bool:
    return isinstance(value, str | int | float) and not isinstance(value, bool)
