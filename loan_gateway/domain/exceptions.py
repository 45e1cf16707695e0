"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidIdentityCodeError(DomainException):
    """Personal code is malformed, fails its checksum or has an unknown century digit"""

    pass


class InvalidLoanAmountError(DomainException):
    """Requested loan amount is outside the allowed bounds"""

    pass


class InvalidLoanPeriodError(DomainException):
    """Requested loan period is outside the allowed bounds"""

    pass


class InvalidAgeError(DomainException):
    """Applicant is underage or too old for the requested period"""

    pass


class NoValidLoanError(DomainException):
    """Applicant has debt or no period in range yields a passing score"""

    pass


class DecisionFaultError(DomainException):
    """Unexpected internal failure while evaluating a decision"""

    pass
