"""Age restrictions - minimum age and country-adjusted maximum age"""

from datetime import date

from loan_gateway.domain.constants import (
    DEFAULT_LIFE_EXPECTANCY,
    LIFE_EXPECTANCY_BY_COUNTRY,
    MINIMUM_AGE,
)
from loan_gateway.domain.exceptions import InvalidAgeError
from loan_gateway.utils.date_utils import whole_years_between


def life_expectancy(country: str) -> int:
    """Expected lifetime in years; unknown countries fall back to the default"""
    return LIFE_EXPECTANCY_BY_COUNTRY.get(country.lower(), DEFAULT_LIFE_EXPECTANCY)


def max_acceptable_age(country: str, loan_period: int) -> int:
    """Oldest age at which the loan still ends within the country's life expectancy"""
    return life_expectancy(country) - loan_period // 12


def check_age(birth_date: date, loan_period: int, country: str, today: date) -> int:
    """
    Verify the applicant's age for the requested period.

    Returns:
        Applicant age in whole years

    Raises:
        InvalidAgeError: Younger than 18 or older than the country-adjusted maximum
    """
    age = whole_years_between(birth_date, today)
    if age < MINIMUM_AGE:
        raise InvalidAgeError("Customer is underage and cannot receive a loan.")

    if age > max_acceptable_age(country, loan_period):
        raise InvalidAgeError("Customer is too old to receive a loan for this period.")

    return age
