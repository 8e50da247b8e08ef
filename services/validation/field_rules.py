# -*- coding: utf-8 -*-
"""
Field Rules - Strategy interface for single-field validation.

Each rule normalizes one candidate value and reports at most one error
code. Error codes are translation keys; turning them into user-facing text
is left to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple
import math
import re

from models.event import ImageAsset


RuleOutcome = Tuple[Any, Optional[str]]

_POSTAL_CODE_RE = re.compile(r"\d{5}", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class FieldRule(ABC):
    """
    Abstract base class for field validation strategies.
    """

    required: bool = True

    @abstractmethod
    def validate(self, value: Any) -> RuleOutcome:
        """
        Validate a candidate value.

        Args:
            value: Raw value from the input widget (None when absent)

        Returns:
            Tuple of (normalized value, error code or None)
        """
        pass

    def is_valid(self, value: Any) -> bool:
        """Check if value passes the rule."""
        return self.validate(value)[1] is None


class RequiredText(FieldRule):
    """Non-empty string; surrounding whitespace is stripped."""

    def __init__(self, message_key: str):
        self.message_key = message_key

    def validate(self, value: Any) -> RuleOutcome:
        if not isinstance(value, str) or _is_blank(value):
            return None, self.message_key
        return value.strip(), None


class OptionalText(FieldRule):
    """Free string that may be left empty (normalized to None)."""

    required = False

    def validate(self, value: Any) -> RuleOutcome:
        if _is_blank(value):
            return None, None
        return str(value).strip(), None


class PostalCode(FieldRule):
    """Exactly five digits, e.g. "75001"."""

    def __init__(self, message_key: str):
        self.message_key = message_key

    def validate(self, value: Any) -> RuleOutcome:
        if not isinstance(value, str) or not _POSTAL_CODE_RE.fullmatch(value):
            return None, self.message_key
        return value, None


class Price(FieldRule):
    """
    Decimal amount accepting "." or "," as separator.

    "12,50" and "12.50" both normalize to 12.5. Unparsable input reports
    `type_key`; values under `minimum` report `min_key`.
    """

    def __init__(self, type_key: str, min_key: str, minimum: float = 0):
        self.type_key = type_key
        self.min_key = min_key
        self.minimum = minimum

    def parse(self, value: Any) -> Optional[float]:
        """Parse a candidate into a float, None when it is not a number."""
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            normalized = value.strip().replace(",", ".")
            if not _DECIMAL_RE.fullmatch(normalized):
                return None
            number = float(normalized)
        else:
            return None
        if not math.isfinite(number):
            return None
        return number

    def validate(self, value: Any) -> RuleOutcome:
        number = self.parse(value)
        if number is None:
            return None, self.type_key
        if number < self.minimum:
            return None, self.min_key
        return number, None


class ImageFile(FieldRule):
    """
    Poster file: required, must be a binary asset, must have an allowed type.

    The three checks are independent; the type check on its own accepts an
    absent value, so emptiness is only ever reported by the required check.
    """

    def __init__(self, required_key: str, not_file_key: str, type_key: str,
                 allowed_types: Iterable[str]):
        self.required_key = required_key
        self.not_file_key = not_file_key
        self.type_key = type_key
        self.allowed_types = frozenset(allowed_types)

    @staticmethod
    def is_file(value: Any) -> bool:
        return isinstance(value, ImageAsset) and isinstance(value.data, (bytes, bytearray))

    def has_allowed_type(self, value: Any) -> bool:
        if not value:
            return True
        return getattr(value, "content_type", None) in self.allowed_types

    def validate(self, value: Any) -> RuleOutcome:
        if value is None or value == "":
            return None, self.required_key
        if not self.is_file(value):
            return None, self.not_file_key
        if not self.has_allowed_type(value):
            return None, self.type_key
        return value, None
