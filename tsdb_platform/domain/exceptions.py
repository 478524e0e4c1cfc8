"""Domain exceptions for the platform.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PlatformException(Exception):
    """Base exception for all platform errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConflictException(PlatformException):
    """Raised when the operation conflicts with current state (e.g. onboarding already done)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFLICT", details)


class EmptyValueException(PlatformException):
    """Raised when a required value is blank.

    Only the first empty field found is reported.
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        """Initialize with the offending field.

        Args:
            field: Name of the empty field (e.g. 'password').
            message: Optional message; defaults to '<field> is empty'.
        """
        super().__init__(message or f"{field} is empty", "EMPTY_VALUE", {"field": field})


class InvalidException(PlatformException):
    """Raised when a value is present but not acceptable (format, range, unknown kind)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "INVALID", details)


class ResourceNotFoundException(PlatformException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'organization', 'notification_endpoint').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(ConflictException):
    """Raised when creating a user whose name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"user with name '{name}' already exists", {"name": name})


class OrganizationAlreadyExistsException(ConflictException):
    """Raised when creating an organization whose name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"organization with name '{name}' already exists", {"name": name}
        )


class BucketAlreadyExistsException(ConflictException):
    """Raised when an organization already has a bucket with the given name."""

    def __init__(self, name: str, org_id: str) -> None:
        super().__init__(
            f"bucket with name '{name}' already exists",
            {"name": name, "org_id": org_id},
        )


class InvalidNotificationEndpointTypeException(PlatformException):
    """Raised when a notification endpoint document carries an unknown type tag."""

    def __init__(self, endpoint_type: str | None) -> None:
        super().__init__(
            "unknown notification endpoint type",
            "INVALID",
            {"type": endpoint_type},
        )


class NotificationDeliveryException(PlatformException):
    """Raised when a third-party sink rejects a delivery attempt."""

    def __init__(self, endpoint_type: str, status_code: int, body: str = "") -> None:
        """Initialize with the sink's response.

        Args:
            endpoint_type: Type tag of the endpoint that was called.
            status_code: HTTP status returned by the sink.
            body: Response body excerpt (truncated to 512 chars).
        """
        super().__init__(
            f"{endpoint_type} notification failed with status {status_code}",
            "NOTIFICATION_DELIVERY_FAILED",
            {"type": endpoint_type, "status_code": status_code, "body": body[:512]},
        )


class SqlNotConfiguredException(PlatformException):
    """Raised when an operation requires Postgres but the backend is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
