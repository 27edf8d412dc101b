"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanInputError(DomainException):
    """Amount, term or income is missing, non-finite or not positive"""

    pass


class PersistenceError(DomainException):
    """Application store is unavailable or rejected the write"""

    pass
