"""Domain-specific exceptions — framework-independent."""

from app.domain.validation import ValidationErrors


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class CatValidationError(Exception):
    """Raised when a cat candidate breaks one or more field rules.

    Nothing has been persisted when this is raised.
    """

    def __init__(self, errors: ValidationErrors):
        self.errors = errors
        super().__init__(
            "Cat rejected: " + ", ".join(sorted(errors.keys()))
        )


class GatewayError(Exception):
    """Raised by the client when the transport fails or a response is unusable."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")


class SubmissionInProgressError(Exception):
    """Raised when a second submission is started before the first resolves."""

    def __init__(self) -> None:
        super().__init__("A cat submission is already in progress")
