# bmicalc/rules.py
"""
Rule-based part of the calculator:
- BMI classification (WHO adult thresholds, four bands)
"""

from typing import List

UNDERWEIGHT = "Underweight"
NORMAL = "Normal"
OVERWEIGHT = "Overweight"
OBESE = "Obese"

# ascending order, same as the thresholds below
BMI_CATEGORIES: List[str] = [UNDERWEIGHT, NORMAL, OVERWEIGHT, OBESE]


def classify_bmi(bmi: float) -> str:
    """
    Map a BMI value to its category label.
    Bands are half-open: 18.5 is Normal, 25 is Overweight, 30 is Obese.
    """
    if bmi < 18.5:
        return UNDERWEIGHT
    elif bmi < 25:
        return NORMAL
    elif bmi < 30:
        return OVERWEIGHT
    else:
        return OBESE
