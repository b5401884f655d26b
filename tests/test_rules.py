"""
Tests for BMI category thresholds
"""
import pytest

from bmicalc.rules import BMI_CATEGORIES, classify_bmi


@pytest.mark.parametrize(
    "bmi, expected",
    [
        (12.0, "Underweight"),
        (18.49, "Underweight"),
        (18.5, "Normal"),
        (24.99, "Normal"),
        (25.0, "Overweight"),
        (29.99, "Overweight"),
        (30.0, "Obese"),
        (45.0, "Obese"),
    ],
)
def test_classify_bmi_bands(bmi, expected):
    assert classify_bmi(bmi) == expected


def test_categories_are_in_ascending_order():
    assert BMI_CATEGORIES == ["Underweight", "Normal", "Overweight", "Obese"]
    labels = [classify_bmi(b) for b in (15, 20, 27, 35)]
    assert labels == BMI_CATEGORIES
