# bmicalc/state.py
"""
Display state held by whoever renders the form.

The engine is pure; this record is what a caller keeps between
calculations: the text in the inputs, the last result and the error line.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .engine import BmiOutcome, BmiResult, compute_bmi_imperial_height, compute_bmi_metric

METRIC = "metric"
IMPERIAL = "imperial"
MODES = (METRIC, IMPERIAL)


def normalize_mode(mode: Optional[str], default: str = METRIC) -> str:
    mode = (mode or "").strip().lower()
    if mode in MODES:
        return mode
    return default if default in MODES else METRIC


@dataclass(frozen=True)
class FormState:
    mode: str = METRIC
    height: str = ""          # cm in metric mode, feet in imperial mode
    height_inches: str = ""   # imperial mode only
    weight: str = ""
    result: Optional[BmiResult] = None
    error: str = ""

    def calculate(self) -> BmiOutcome:
        if self.mode == IMPERIAL:
            return compute_bmi_imperial_height(self.height, self.height_inches, self.weight)
        return compute_bmi_metric(self.height, self.weight)

    def after(self, outcome: BmiOutcome, clear_result_on_error: bool = False) -> "FormState":
        """
        New state after one calculation.
        Success replaces the result and clears the error. Failure sets the
        error and keeps the previous result unless clear_result_on_error.
        """
        if outcome.ok:
            return replace(self, result=outcome.result, error="")
        result = None if clear_result_on_error else self.result
        return replace(self, result=result, error=outcome.message)
