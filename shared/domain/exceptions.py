"""
Domain Exceptions

Error taxonomy shared by the booking, review and coupon contexts.
Every error is recoverable: the API layer turns them into user-facing
responses (see ``shared.api.exceptions``).
"""


class DomainError(Exception):
    """Base class for expected, user-facing domain failures."""

    code = 'domain_error'

    def __init__(self, message: str = ''):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or (self.__class__.__doc__ or '').strip()


class NotFound(DomainError):
    """Referenced record does not exist."""

    code = 'not_found'


class Forbidden(DomainError):
    """Actor is not allowed to perform this action."""

    code = 'forbidden'


class InvalidTransition(DomainError):
    """Action is not permitted from the current booking state."""

    code = 'invalid_transition'


class ConcurrentModification(InvalidTransition):
    """Booking was modified by another request."""

    code = 'concurrent_modification'


class InvalidRating(DomainError):
    """Rating must be an integer between 1 and 5."""

    code = 'invalid_rating'


class DuplicateReview(DomainError):
    """Reviewer has already reviewed this booking."""

    code = 'duplicate_review'


class ValidationError(DomainError):
    """Malformed input."""

    code = 'validation_error'
