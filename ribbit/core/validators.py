#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization for frontmatter values.

Values come straight out of yaml.safe_load, so they are already typed
(date, bool, str, dict, ...). Normalizers are strict: they accept the
expected type and return None for anything else, leaving the caller to
decide whether that is an error.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional

from .exceptions import ValidationError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DataValidator:
    """Centralized validation for journal frontmatter."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: Iterable[str]
    ) -> None:
        """
        Validate that required fields are present.

        Presence is all that is checked: ``False`` is a legitimate value
        for a habit flag.

        Args:
            data: Data dictionary to validate
            required_fields: Required field names

        Raises:
            ValidationError: If a field is missing or null
        """
        for field in required_fields:
            if data.get(field) is None:
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize a frontmatter date to a calendar date.

        Accepts date objects (YAML parses unquoted ``2024-01-15`` as one)
        and ISO ``YYYY-MM-DD`` strings. Datetimes are rejected: an entry
        date is a day, not a timestamp.

        Args:
            date_value: Value read from YAML

        Returns:
            Normalized date object or None

        Examples:
            >>> DataValidator.normalize_date("2024-01-15")
            datetime.date(2024, 1, 15)
            >>> DataValidator.normalize_date("15/01/2024") is None
            True
        """
        # datetime is a subclass of date
        if isinstance(date_value, datetime):
            return None
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            text = date_value.strip()
            if not ISO_DATE_RE.match(text):
                return None
            try:
                return date.fromisoformat(text)
            except ValueError:
                return None
        return None

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize a string value.

        Args:
            value: Value to normalize

        Returns:
            The string unchanged, or None for non-strings
        """
        return value if isinstance(value, str) else None

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Accept only real booleans.

        YAML already maps true/false/yes/no to bool, so strings and numbers
        reaching this point are treated as invalid rather than coerced.

        Args:
            value: Value to check

        Returns:
            Boolean value or None
        """
        return value if isinstance(value, bool) else None
