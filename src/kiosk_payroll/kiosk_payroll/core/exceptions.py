class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRangeError(ValidationError):
    """Raised when a report date range ends before it starts."""


class MissingPolicyError(DomainError):
    """Raised when a punch references an employee with no resolvable policy."""

    def __init__(self, employee_id: str):
        super().__init__(f"No policy found for employee {employee_id}")
        self.employee_id = employee_id
