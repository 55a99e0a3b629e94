"""Field extraction helpers for gallery configuration parsing.

The embedded configuration is rendered, not validated: leaf values such as
names, dataset labels and statistic values are taken as they are and only
converted to text. Errors are reserved for the structure the gallery
cannot work without (the root mapping, the class count and the lists it
iterates).
"""

from __future__ import annotations

from typing import Any

from cl_gallery.config.exceptions import ConfigurationError

__all__ = ["FieldValidator", "as_text"]


def as_text(value: Any) -> str | None:
    """Render a leaf value as display text, keeping None as None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


class FieldValidator:
    """Extracts fields from one configuration mapping.

    Every error message names the mapping through ``context`` so nested
    failures read like "Invalid 'stat': expected list, got str in
    method[1] in benchmark[0] in embedded configuration".

    Example:
        v = FieldValidator(data, "benchmark[0]")
        name = v.text("name")
        methods = v.records("cil_methods")

    """

    def __init__(self, data: Any, context: str) -> None:
        self._data = data
        self._context = context

    def require_mapping(self) -> dict[str, Any]:
        """Return the data, raising if it is not a mapping."""
        if not isinstance(self._data, dict):
            raise ConfigurationError(
                f"Invalid structure: expected mapping, "
                f"got {type(self._data).__name__} in {self._context}"
            )
        return self._data

    def _missing(self, field: str) -> ConfigurationError:
        return ConfigurationError(f"Missing required field '{field}' in {self._context}")

    def _wrong_type(self, field: str, expected: str, value: Any) -> ConfigurationError:
        return ConfigurationError(
            f"Invalid '{field}': expected {expected}, "
            f"got {type(value).__name__} in {self._context}"
        )

    def count(self, field: str) -> int:
        """Extract a required non-negative integer (booleans are rejected)."""
        value = self._data.get(field)
        if value is None:
            raise self._missing(field)
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._wrong_type(field, "int", value)
        if value < 0:
            raise ConfigurationError(f"Invalid '{field}': must be >= 0 in {self._context}")
        return value

    def sequence(self, field: str) -> list[Any]:
        """Extract an optional list of arbitrary items; absent means empty."""
        value = self._data.get(field)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self._wrong_type(field, "list", value)
        return value

    def records(self, field: str, *, required: bool = False) -> list[dict[str, Any]]:
        """Extract a list of mappings the gallery iterates over.

        Raises:
            ConfigurationError: If the field is required and absent, is not a
                list, or holds an item that is not a mapping.

        """
        if required and self._data.get(field) is None:
            raise self._missing(field)
        items = self.sequence(field)
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise ConfigurationError(
                    f"Invalid '{field}[{index}]': expected mapping, "
                    f"got {type(item).__name__} in {self._context}"
                )
        return items

    def text(self, field: str) -> str | None:
        """Extract a display value as text, or None when absent."""
        return as_text(self._data.get(field))

    def require_text(self, field: str) -> str:
        """Extract a value that must be present, as text."""
        value = as_text(self._data.get(field))
        if value is None:
            raise self._missing(field)
        return value

    def scalar(self, field: str) -> int | float | str | None:
        """Extract a number or string as-is; anything else becomes text."""
        value = self._data.get(field)
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return as_text(value)
        return value
