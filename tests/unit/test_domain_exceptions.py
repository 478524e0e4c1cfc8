"""Tests for domain exceptions (error_code, message, details)."""

from tsdb_platform.domain.exceptions import (
    BucketAlreadyExistsException,
    ConflictException,
    EmptyValueException,
    InvalidException,
    InvalidNotificationEndpointTypeException,
    NotificationDeliveryException,
    OrganizationAlreadyExistsException,
    PlatformException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserAlreadyExistsException,
)


def test_platform_exception_default_error_code() -> None:
    """Base PlatformException uses class name as error_code when not provided."""
    exc = PlatformException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PlatformException"
    assert exc.details == {}


def test_platform_exception_to_dict() -> None:
    exc = PlatformException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}
    assert str(exc) == "Oops"


def test_conflict_exception() -> None:
    exc = ConflictException("onboarding has already been completed")
    assert exc.error_code == "CONFLICT"
    assert exc.message == "onboarding has already been completed"


def test_empty_value_exception_names_field() -> None:
    exc = EmptyValueException("password", "password is empty")
    assert exc.error_code == "EMPTY_VALUE"
    assert exc.message == "password is empty"
    assert exc.details == {"field": "password"}


def test_empty_value_exception_default_message() -> None:
    assert EmptyValueException("bucket").message == "bucket is empty"


def test_invalid_exception_field_optional() -> None:
    assert InvalidException("bad").details == {}
    assert InvalidException("bad", field="x").details == {"field": "x"}
    assert InvalidException("bad").error_code == "INVALID"


def test_resource_not_found_details() -> None:
    exc = ResourceNotFoundException("organization", "o1")
    assert exc.error_code == "NOT_FOUND"
    assert exc.details == {"resource_type": "organization", "resource_id": "o1"}
    assert "o1" in exc.message


def test_already_exists_exceptions_are_conflicts() -> None:
    for exc in (
        UserAlreadyExistsException("admin"),
        OrganizationAlreadyExistsException("acme"),
        BucketAlreadyExistsException("default", "o1"),
    ):
        assert isinstance(exc, ConflictException)
        assert exc.error_code == "CONFLICT"
    assert BucketAlreadyExistsException("default", "o1").details == {
        "name": "default",
        "org_id": "o1",
    }


def test_invalid_endpoint_type() -> None:
    exc = InvalidNotificationEndpointTypeException("carrier-pigeon")
    assert exc.message == "unknown notification endpoint type"
    assert exc.details == {"type": "carrier-pigeon"}


def test_delivery_exception_truncates_body() -> None:
    exc = NotificationDeliveryException("slack", 500, "x" * 2000)
    assert exc.error_code == "NOTIFICATION_DELIVERY_FAILED"
    assert exc.details["status_code"] == 500
    assert len(exc.details["body"]) == 512


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"
