"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Exceptions raised by the fitness calculator.

    FitnessCalcError
    ├── InvalidArgument      bad numeric input (client error)
    └── MissingData          a required field is absent
        └── IncompleteProfile
"""

from __future__ import annotations

from typing import Iterable


class FitnessCalcError(Exception):
    """Base class for everything the calculator raises."""


class InvalidArgument(FitnessCalcError, ValueError):
    pass


class MissingData(FitnessCalcError):
    def __init__(self, fields: Iterable[str], message: str | None = None) -> None:
        self.fields = list(fields)
        super().__init__(message or f"Missing required data: {', '.join(self.fields)}")


class IncompleteProfile(MissingData):
    def __init__(self, fields: Iterable[str]) -> None:
        fields = list(fields)
        super().__init__(
            fields,
            "Profile must be complete to generate recommendations "
            f"(missing: {', '.join(fields)})",
        )
