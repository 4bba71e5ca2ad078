"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ValidationError(ValueError):
    """User input rejected before any state change. Message is user-facing."""


class ArticleValidationError(ValidationError):
    """Missing required article field or a length limit exceeded."""


class ImageValidationError(ValidationError):
    """Selected file is not an image, is too large, or cannot be decoded."""


class AuthenticationRequiredError(Exception):
    """Raised when an operation needs a signed-in user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NewsApiError(Exception):
    """Raised when the news API answers with a non-2xx status.

    ``message`` is the server's ``error`` string, shown to the user as-is.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class UnknownActionError(KeyError):
    """Raised when dispatching an action name that has no handler."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(action)
