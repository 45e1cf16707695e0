"""Estonian personal code parsing - birth date, risk segment and checksum"""

from bisect import bisect_right
from datetime import date

from loan_gateway.domain.constants import (
    CENTURY_BY_GENDER_DIGIT,
    PERSONAL_CODE_LENGTH,
    SEGMENT_LOWER_BOUNDS,
)
from loan_gateway.domain.exceptions import InvalidIdentityCodeError
from loan_gateway.domain.models import Segment

_SEGMENTS_BY_BOUND = (Segment.DEBT, Segment.SEGMENT_1, Segment.SEGMENT_2, Segment.SEGMENT_3)

FIRST_STAGE_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_STAGE_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


def segment_selector(code: str) -> int:
    """Last four characters of the code as an integer"""
    tail = code[-4:]
    if len(code) < 4 or not (tail.isascii() and tail.isdigit()):
        raise InvalidIdentityCodeError("Invalid personal ID code.")
    return int(tail)


def resolve_segment(code: str) -> Segment:
    """
    Map the code's last four digits to a risk segment.

    Debt      - 0000...2499
    Segment 1 - 2500...4999
    Segment 2 - 5000...7499
    Segment 3 - 7500...9999
    """
    return _SEGMENTS_BY_BOUND[bisect_right(SEGMENT_LOWER_BOUNDS, segment_selector(code))]


def birth_date(code: str) -> date:
    """
    Extract the birth date encoded in digits 1-7 (century digit + YYMMDD).

    Raises:
        InvalidIdentityCodeError: Unknown century digit or impossible calendar date
    """
    century = CENTURY_BY_GENDER_DIGIT.get(code[:1])
    if century is None:
        raise InvalidIdentityCodeError("Invalid personal ID format.")

    digits = code[1:7]
    if len(digits) != 6 or not (digits.isascii() and digits.isdigit()):
        raise InvalidIdentityCodeError("Invalid personal ID format.")

    year = century + int(digits[0:2])
    month = int(digits[2:4])
    day = int(digits[4:6])
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidIdentityCodeError("Invalid personal ID format.") from e


def calculate_check_digit(code: str) -> int:
    """
    Check digit over the first 10 digits.

    Algorithm:
    - Weighted sum with weights 1..9,1, modulo 11
    - If the remainder is 10, repeat with weights 3..9,1,2,3
    - If it is still 10, the check digit is 0
    """
    body = [int(c) for c in code[:10]]
    for weights in (FIRST_STAGE_WEIGHTS, SECOND_STAGE_WEIGHTS):
        remainder = sum(d * w for d, w in zip(body, weights)) % 11
        if remainder < 10:
            return remainder
    return 0


def is_valid_personal_code(code: str) -> bool:
    """Format, birth date and checksum validation of an Estonian personal code"""
    if len(code) != PERSONAL_CODE_LENGTH or not (code.isascii() and code.isdigit()):
        return False

    try:
        birth_date(code)
    except InvalidIdentityCodeError:
        return False

    return int(code[-1]) == calculate_check_digit(code)
