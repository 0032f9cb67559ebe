"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateFormat(DomainException):
    """Purchase date cannot be read as a plain YYYY-MM-DD civil date"""

    pass


class InvalidInstallmentCount(DomainException):
    """Installment count is zero, negative or not an integer"""

    pass


class UnresolvableCardReference(DomainException):
    """Purchase references a card that is not in the card collection (strict mode only)"""

    pass
