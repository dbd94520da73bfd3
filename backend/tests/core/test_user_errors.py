"""Error Taxonomy: each kind maps to exactly one wire outcome.

Tests:
    - Validation -> 400, NotFound -> 404, Storage -> 500, Startup -> no status
    - to_response() is always {"error": message}
    - StorageError.wrap keeps the driver message without inspecting the type
"""

import pytest

from userapi.core.errors import (
    ErrorKind, UserApiError, UserValidationError, UserNotFoundError,
    StorageError, StartupError,
)


@pytest.mark.parametrize("error,kind,status", [
    (UserValidationError("Name must not be empty"), ErrorKind.VALIDATION, 400),
    (UserNotFoundError(7), ErrorKind.NOT_FOUND, 404),
    (StorageError("disk I/O error"), ErrorKind.STORAGE, 500),
    (StartupError("cannot bind"), ErrorKind.STARTUP, None),
])
def test_kind_and_status(error, kind, status):
    assert isinstance(error, UserApiError)
    assert error.kind is kind
    assert error.http_status == status


def test_not_found_message_is_fixed():
    error = UserNotFoundError(999)
    assert error.to_response() == {"error": "Not found"}
    assert error.user_id == 999


def test_validation_response_carries_message():
    error = UserValidationError("Name must not be empty", field="name")
    assert error.to_response() == {"error": "Name must not be empty"}
    assert error.field == "name"


def test_error_kinds_are_exactly_four():
    assert {k.value for k in ErrorKind} == {
        "validation", "not_found", "storage", "startup",
    }


def test_storage_wrap_prefers_driver_message():
    class _DriverError(Exception):
        pass

    class _WrappedError(Exception):
        def __init__(self, orig):
            super().__init__(f"(wrapped) {orig}")
            self.orig = orig

    error = StorageError.wrap(_WrappedError(_DriverError("database is locked")))
    assert error.message == "database is locked"
    assert error.to_response() == {"error": "database is locked"}


def test_storage_wrap_falls_back_to_exception_text():
    error = StorageError.wrap(ConnectionRefusedError("connection refused"))
    assert error.message == "connection refused"
    assert error.kind is ErrorKind.STORAGE
