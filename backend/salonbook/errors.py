"""
Error taxonomy for availability queries.

Every error carries the HTTP status the route layer answers with:
- ValidationError  → 400 (caller-fixable input)
- NotFoundError    → 404 (vendor/staff does not resolve)
- RateLimitError   → 429
- DependencyError  → 500 (store read failed or timed out)
"""


class AvailabilityError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AvailabilityError):
    status_code = 400
    default_message = "Invalid input data"


class FormatError(ValidationError):
    """Malformed "HH:MM" time string."""
    default_message = "Time must be in HH:MM format"


class NotFoundError(AvailabilityError):
    status_code = 404
    default_message = "Resource not found"


class RateLimitError(AvailabilityError):
    status_code = 429
    default_message = "Rate limit exceeded"

    def __init__(self, message: str | None = None, retry_after: int | None = None):
        super().__init__(message)
        self.retry_after = retry_after


class DependencyError(AvailabilityError):
    """Store read failed. The message never carries driver details."""
    status_code = 500
    default_message = "Failed to fetch availability"
