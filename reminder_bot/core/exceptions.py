"""Custom exceptions for the application."""


class ApiException(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(ApiException):
    """Input validation error."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(422, message, details)


class ExternalServiceError(ApiException):
    """External service (GitHub, Google Chat, etc.) error."""

    def __init__(self, service: str, message: str, details: dict | None = None) -> None:
        super().__init__(502, f"{service} error: {message}", details)


class InvalidRepositoryError(ValidationError):
    """Repository reference is not in owner/name form."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid repository format: {value}. Expected format: owner/repo",
            {"repository": value},
        )


class RepositoryFetchError(ExternalServiceError):
    """Fetching pull requests for one repository failed."""

    def __init__(self, repository: str, message: str) -> None:
        super().__init__("GitHub", f"{repository}: {message}", {"repository": repository})
        self.repository = repository


class WebhookDeliveryError(ExternalServiceError):
    """Posting a message to the chat webhook failed."""

    def __init__(
        self,
        message: str,
        response_status: int | None = None,
        response_body: str | None = None,
    ) -> None:
        details = {}
        if response_status is not None:
            details["status"] = response_status
        if response_body:
            details["body"] = response_body
        super().__init__("Google Chat", message, details)
        self.response_status = response_status
        self.response_body = response_body
