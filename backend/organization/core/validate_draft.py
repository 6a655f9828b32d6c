"""Draft Validation — turns free-text form input into an EmployeeDraft.

Invariants:
    - Checks run in fixed order: name, position, salary — first failure wins
    - Error messages are user-facing and stable (the form shows them verbatim)
    - Salary parsing is locale-invariant: '.' is the only decimal separator,
      ',' is only accepted as a thousands separator in groups of three
    - Salary carries at most SALARY_PLACES decimal places, the precision the
      store keeps, so the value validated is the value persisted
    - Salary must parse AND be strictly greater than zero

Design Decisions:
    - Regex gate before Decimal(): Decimal() alone accepts 'NaN', 'Infinity' and
      exponents, none of which a salary field should take
    - Extra decimal places are rejected, not rounded: "0.001" would otherwise
      be stored as 0.00
"""

import re
from decimal import Decimal, InvalidOperation

from organization.core.employee import EmployeeDraft
from organization.core.errors import FormValidationError

NAME_REQUIRED = "Name is required."
POSITION_REQUIRED = "Position is required."
SALARY_INVALID = "Salary must be a positive number."

# Matches the scale of the employees.salary column
SALARY_PLACES = 2

_SALARY_PATTERN = re.compile(
    r"^[+-]?(?:\d{1,3}(?:,\d{3})+|\d+)?(?:\.\d{0,%d})?$" % SALARY_PLACES, re.ASCII,
)


def parse_salary(text: str) -> Decimal | None:
    """Parse a salary typed by the user.

    None when the text is not a number or has more decimal places than the
    store keeps.
    """
    candidate = text.strip()
    if not candidate or not any(ch.isdigit() for ch in candidate):
        return None
    if not _SALARY_PATTERN.match(candidate):
        return None
    try:
        return Decimal(candidate.replace(",", ""))
    except InvalidOperation:
        return None


def validate_draft(name: str, position: str, salary_text: str) -> EmployeeDraft:
    """Validate the three draft fields. Raises FormValidationError on the first failure."""
    if not name.strip():
        raise FormValidationError(NAME_REQUIRED, "name")
    if not position.strip():
        raise FormValidationError(POSITION_REQUIRED, "position")
    salary = parse_salary(salary_text)
    if salary is None or salary <= 0:
        raise FormValidationError(SALARY_INVALID, "salary")
    return EmployeeDraft(
        name=name.strip(), position=position.strip(), salary=salary,
    )


def format_salary(salary: Decimal) -> str:
    """Render a salary back into the draft field (plain digits, '.' separator)."""
    return format(salary, "f")
