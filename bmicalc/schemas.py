# bmicalc/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class MetricInput(BaseModel):
    """
    Input for /api/bmi/metric.
    Values are kept as text, exactly as typed into the form; JSON numbers
    are accepted and turned into their text form.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    height_cm: Optional[str] = Field(None, description="Height in centimetres, e.g. \"170\"")
    weight_kg: Optional[str] = Field(None, description="Weight in kg, e.g. \"70\"")


class ImperialInput(BaseModel):
    """
    Input for /api/bmi/imperial (height in feet + inches, weight in kg)
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    height_feet: Optional[str] = Field(None, description="Feet part of the height, e.g. \"5\"")
    height_inches: Optional[str] = Field(None, description="Inches part of the height, e.g. \"7\"")
    weight_kg: Optional[str] = Field(None, description="Weight in kg, e.g. \"70\"")


class BmiResponse(BaseModel):
    """
    Result format returned to the frontend
    """
    bmi: str
    category: str


class ErrorResponse(BaseModel):
    detail: str
    error_code: str
