class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a calculator receives an argument it cannot accept (e.g. negative salary)."""


class MalformedRecordError(ValidationError):
    """Raised when an attendance or employee row has unparseable or missing fields."""


class UnknownEmployeeError(DomainError):
    """Raised when an employee number is not present in the directory."""

    def __init__(self, employee_number: str):
        super().__init__(f"Employee not found for Employee #: {employee_number}")
        self.employee_number = employee_number


class UnsupportedFileFormatError(DomainError):
    """Raised when an input file is neither .csv nor .xlsx."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
