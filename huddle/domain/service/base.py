"""Base service class for domain services."""

from huddle.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def _check_length(field: str, value: str, max_length: int) -> None:
        """Reject text longer than the model and column allow.

        Raises:
            ValidationError: If value exceeds max_length characters
        """
        if len(value) > max_length:
            raise ValidationError(
                f"The {field} must be at most {max_length} characters long"
            )
