"""Static decision constants - loan bounds, segments, age limits"""

from types import MappingProxyType
from typing import Mapping

# Loan bounds (EUR, months)
MINIMUM_LOAN_AMOUNT = 2000
MAXIMUM_LOAN_AMOUNT = 10000
MINIMUM_LOAN_PERIOD = 12
MAXIMUM_LOAN_PERIOD = 48

# Requested terms pass when credit score >= this threshold
CREDIT_SCORE_THRESHOLD = 0.1

# Credit modifiers per segment
DEBT_CREDIT_MODIFIER = 0
SEGMENT_1_CREDIT_MODIFIER = 100
SEGMENT_2_CREDIT_MODIFIER = 300
SEGMENT_3_CREDIT_MODIFIER = 1000

# Lowest last-four-digit selector of Segment 1, 2 and 3; anything below is Debt
SEGMENT_LOWER_BOUNDS = (2500, 5000, 7500)

# Age limits
MINIMUM_AGE = 18
DEFAULT_LIFE_EXPECTANCY = 82
LIFE_EXPECTANCY_BY_COUNTRY: Mapping[str, int] = MappingProxyType(
    {
        "estonia": 78,
        "latvia": 75,
        "lithuania": 76,
    }
)

# First digit of the personal code -> century base year
CENTURY_BY_GENDER_DIGIT: Mapping[str, int] = MappingProxyType(
    {
        "1": 1800,
        "2": 1800,
        "3": 1900,
        "4": 1900,
        "5": 2000,
        "6": 2000,
    }
)

PERSONAL_CODE_LENGTH = 11
