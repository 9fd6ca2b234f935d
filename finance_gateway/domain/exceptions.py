"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Numeric input is non-positive, negative where it must not be, or not finite"""

    pass


class NonAmortizingPaymentError(DomainException):
    """Monthly payment does not cover the interest charge, so the debt never shrinks"""

    pass


class PayoffHorizonExceededError(DomainException):
    """Debt is still outstanding after the maximum number of simulated months"""

    pass


class AuthenticationError(DomainException):
    """Credentials or access token are missing, invalid, or expired"""

    pass


class DuplicateUserError(DomainException):
    """A user with this email is already registered"""

    pass


class EntryNotFoundError(DomainException):
    """Income or expense entry does not exist for this user"""

    pass
