"""Validation of device identifiers and measurement bodies.

Everything here is pure: no database access, no logging. The request
handler decides what to do with the collected errors.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from airgradient_api.schemas import CHIP_ID_MAX_LENGTH, FIELD_RANGES, Reading, SensorDataModel

CHIP_ID_REQUIRED = "ChipId is required and cannot be empty."
CHIP_ID_TOO_LONG = f"ChipId must be {CHIP_ID_MAX_LENGTH} characters or less."

_RANGE_ERROR_TYPES = {"greater_than_equal", "less_than_equal"}


@dataclass(frozen=True)
class ValidationResult:
    reading: Optional[Reading] = None
    chip_id_errors: List[str] = field(default_factory=list)
    field_errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.reading is not None and not self.chip_id_errors and not self.field_errors


def validate_chip_id(chip_id: Optional[str]) -> List[str]:
    if chip_id is None or not chip_id.strip():
        return [CHIP_ID_REQUIRED]
    if len(chip_id) > CHIP_ID_MAX_LENGTH:
        return [CHIP_ID_TOO_LONG]
    return []


def format_errors(exc) -> Dict[str, List[str]]:
    """Group pydantic errors by field, swapping range errors for the unit-aware messages."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        name = loc[0] if loc else "body"

        if error.get("type") in _RANGE_ERROR_TYPES and name in FIELD_RANGES:
            message = FIELD_RANGES[name][2]
        else:
            message = error.get("msg", "Invalid value")

        messages = errors.setdefault(name, [])
        if message not in messages:
            messages.append(message)
    return errors


def validate_reading(chip_id: Optional[str], payload: Any) -> ValidationResult:
    """Check the identifier and every body field, collecting all violations."""
    chip_id_errors = validate_chip_id(chip_id)

    if not isinstance(payload, dict):
        return ValidationResult(
            chip_id_errors=chip_id_errors,
            field_errors={"body": ["Request body must be a JSON object"]},
        )

    try:
        body = SensorDataModel.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(chip_id_errors=chip_id_errors, field_errors=format_errors(exc))

    if chip_id_errors:
        return ValidationResult(chip_id_errors=chip_id_errors)

    return ValidationResult(reading=Reading(chip_id=chip_id, **body.model_dump()))
