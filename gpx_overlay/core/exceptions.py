"""Unified exception taxonomy.

Every domain exception inherits from ``GpxOverlayError`` and carries
structured context fields (stage, code) so that callers can log and
report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``  : bad input document, point or configuration.
- ``PermanentError``   : unrecoverable failure (e.g. unknown map surface).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.

An empty document is deliberately *not* an error: it is handled by the
fallback viewport in ``gpx_overlay.geometry.bounds``.
"""

from __future__ import annotations


class GpxOverlayError(Exception):
    """Base exception for all gpx_overlay errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"parse_gpx"``, ``"config"``, ``"surface"``).
        code: Machine-readable error code (e.g. ``"GPX_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GpxOverlayError):
    """Input document, point or configuration validation failure."""


class PermanentError(GpxOverlayError):
    """Unrecoverable failure outside the input data."""


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class GpxParseError(ValidationError):
    """Raised when a GPX document cannot be loaded or parsed."""

    default_stage = "parse_gpx"
    default_code = "GPX_PARSE_FAILED"


class MalformedPointError(GpxParseError):
    """Raised when a point element has a missing or non-numeric coordinate.

    Attributes:
        tag: Local tag name of the offending element (``"wpt"``, ``"trkpt"``).
        attribute: The coordinate attribute that failed (``"lat"`` or ``"lon"``).
        raw_value: The raw attribute value, or ``None`` when absent.
    """

    default_code = "GPX_POINT_MALFORMED"

    def __init__(self, tag: str, attribute: str, raw_value: str | None) -> None:
        self.tag = tag
        self.attribute = attribute
        self.raw_value = raw_value
        if raw_value is None:
            detail = "is missing"
        else:
            detail = f"is not a finite number ({raw_value!r})"
        super().__init__(f"<{tag}> attribute '{attribute}' {detail}")


class InvalidConfigError(ValidationError):
    """Raised when a configuration value is out of its valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


class SurfaceError(PermanentError):
    """Raised when a map surface cannot be created or driven.

    Attributes:
        surface: Name of the map surface involved.
    """

    default_stage = "surface"
    default_code = "SURFACE_ERROR"

    def __init__(self, surface: str, message: str) -> None:
        self.surface = surface
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.surface}] {self.message}"
