"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum

from loan_gateway.domain.constants import (
    DEBT_CREDIT_MODIFIER,
    SEGMENT_1_CREDIT_MODIFIER,
    SEGMENT_2_CREDIT_MODIFIER,
    SEGMENT_3_CREDIT_MODIFIER,
)


class Segment(Enum):
    """Risk tier derived from the last four digits of the personal code"""

    DEBT = "debt"
    SEGMENT_1 = "segment_1"
    SEGMENT_2 = "segment_2"
    SEGMENT_3 = "segment_3"

    @property
    def credit_modifier(self) -> int:
        return _CREDIT_MODIFIERS[self]


_CREDIT_MODIFIERS = {
    Segment.DEBT: DEBT_CREDIT_MODIFIER,
    Segment.SEGMENT_1: SEGMENT_1_CREDIT_MODIFIER,
    Segment.SEGMENT_2: SEGMENT_2_CREDIT_MODIFIER,
    Segment.SEGMENT_3: SEGMENT_3_CREDIT_MODIFIER,
}


@dataclass(frozen=True)
class Decision:
    """Approved loan terms; rejections are raised as domain exceptions"""

    approved_amount: int
    approved_period: int
    from_alternative_search: bool = False
