# bmicalc/engine.py
"""
BMI engine: parse the raw text from the form, validate it, convert the
height to metres, compute BMI and classify it.

- compute_bmi_metric(height_cm, weight_kg):                          height in cm
- compute_bmi_imperial_height(height_feet, height_inches, weight_kg): height in ft + in
- compute_bmi(height, weight_kg):                                     shared engine on parsed values

The two text-facing functions never raise for bad input; they return a
BmiOutcome holding either a BmiResult or the error.
"""

import logging
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .rules import classify_bmi

logger = logging.getLogger(__name__)

CM_PER_METRE = 100.0
INCHES_PER_FOOT = 12
METRES_PER_INCH = 0.0254


class ErrorKind(str, Enum):
    MISSING_INPUT = "MISSING_INPUT"
    INVALID_HEIGHT = "INVALID_HEIGHT"
    INVALID_WEIGHT = "INVALID_WEIGHT"


MISSING_BOTH_MESSAGE = "Please enter both height and weight."
MISSING_ALL_MESSAGE = "Please enter all required fields."

ERROR_MESSAGES = {
    ErrorKind.MISSING_INPUT: MISSING_ALL_MESSAGE,
    ErrorKind.INVALID_HEIGHT: "Height must be a positive number.",
    ErrorKind.INVALID_WEIGHT: "Weight must be a positive number.",
}


class BmiInputError(ValueError):
    """Raised by the engine when an input cannot produce a BMI."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or ERROR_MESSAGES[kind]
        super().__init__(self.message)


@dataclass(frozen=True)
class Direct:
    """Height entered directly in centimetres."""

    cm: float

    def to_metres(self) -> float:
        return self.cm / CM_PER_METRE


@dataclass(frozen=True)
class FeetInches:
    """Height entered as feet plus inches."""

    feet: float
    inches: float

    def to_metres(self) -> float:
        total_inches = self.feet * INCHES_PER_FOOT + self.inches
        return total_inches * METRES_PER_INCH


HeightEntry = Union[Direct, FeetInches]


@dataclass(frozen=True)
class BmiResult:
    bmi: str  # one decimal place, e.g. "24.2"
    category: str


@dataclass(frozen=True)
class BmiOutcome:
    """Either a result or an error, never both."""

    result: Optional[BmiResult] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, result: BmiResult) -> "BmiOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, exc: BmiInputError) -> "BmiOutcome":
        return cls(error=exc.kind, message=exc.message)


def _is_missing(value: Optional[str]) -> bool:
    return value is None or value == ""


def parse_measurement(text: str, kind: ErrorKind) -> float:
    """
    Strict text -> float. Anything that is not a finite number
    ("abc", "nan", "inf", "12kg") raises BmiInputError(kind).
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise BmiInputError(kind) from None
    if not math.isfinite(value):
        raise BmiInputError(kind)
    return value


def _checked_height_squared(height: HeightEntry) -> float:
    """
    Height in metres, squared. A height that is not positive, or whose
    square over- or underflows, raises INVALID_HEIGHT.
    """
    height_m = height.to_metres()
    if not height_m > 0:
        raise BmiInputError(ErrorKind.INVALID_HEIGHT)
    height_squared = height_m * height_m
    if not (sys.float_info.min <= height_squared < math.inf):
        raise BmiInputError(ErrorKind.INVALID_HEIGHT)
    return height_squared


def compute_bmi(height: HeightEntry, weight_kg: float) -> BmiResult:
    """
    Shared engine for both height entry modes.
    Height is checked before weight, so a bad height wins.
    """
    height_squared = _checked_height_squared(height)
    if not weight_kg > 0:
        raise BmiInputError(ErrorKind.INVALID_WEIGHT)

    bmi = weight_kg / height_squared
    if not (0 < bmi < math.inf):
        # blame whichever value is further from 1 in magnitude
        if abs(math.log(weight_kg)) >= abs(math.log(height_squared)):
            raise BmiInputError(ErrorKind.INVALID_WEIGHT)
        raise BmiInputError(ErrorKind.INVALID_HEIGHT)
    # classify the unrounded value, round only for display
    return BmiResult(bmi=f"{bmi:.1f}", category=classify_bmi(bmi))


def _run(fields, build_height, weight_text, missing_message) -> BmiOutcome:
    try:
        if any(_is_missing(f) for f in fields):
            raise BmiInputError(ErrorKind.MISSING_INPUT, missing_message)
        height = build_height()
        _checked_height_squared(height)
        weight_kg = parse_measurement(weight_text, ErrorKind.INVALID_WEIGHT)
        result = compute_bmi(height, weight_kg)
    except BmiInputError as exc:
        logger.debug("BMI input rejected: %s", exc.kind.value)
        return BmiOutcome.failure(exc)
    return BmiOutcome.success(result)


def compute_bmi_metric(height_cm: Optional[str], weight_kg: Optional[str]) -> BmiOutcome:
    """Metric variant: height in centimetres, weight in kilograms."""

    def build_height() -> HeightEntry:
        return Direct(parse_measurement(height_cm, ErrorKind.INVALID_HEIGHT))

    return _run(
        (height_cm, weight_kg),
        build_height,
        weight_kg,
        MISSING_BOTH_MESSAGE,
    )


def compute_bmi_imperial_height(
    height_feet: Optional[str],
    height_inches: Optional[str],
    weight_kg: Optional[str],
) -> BmiOutcome:
    """Imperial height entry (feet + inches), weight still in kilograms."""

    def build_height() -> HeightEntry:
        return FeetInches(
            feet=parse_measurement(height_feet, ErrorKind.INVALID_HEIGHT),
            inches=parse_measurement(height_inches, ErrorKind.INVALID_HEIGHT),
        )

    return _run(
        (height_feet, height_inches, weight_kg),
        build_height,
        weight_kg,
        MISSING_ALL_MESSAGE,
    )
