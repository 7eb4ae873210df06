"""Error Hierarchy: verifies codes, statuses, and the REST envelope."""

from roomfinder.core.errors import (
    DatabaseError, ErrorCategory, IdConflictError, ResourceNotFoundError,
    RoomFinderError, RoomValidationError,
)


def test_validation_error_is_400_with_field():
    err = RoomValidationError("roomName must not be null", "roomName")

    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.to_response()["error"]["context"]["field"] == "roomName"


def test_id_conflict_is_400_and_carries_headers():
    err = IdConflictError("room", headers={"X-roomfinderApp-error": "error.idexists"})

    assert err.http_status == 400
    assert err.code == "ID_EXISTS"
    assert err.category is ErrorCategory.CONFLICT
    assert err.message == "A new room cannot already have an ID"
    assert err.headers == {"X-roomfinderApp-error": "error.idexists"}


def test_not_found_is_404():
    err = ResourceNotFoundError("Room", "9")

    assert err.http_status == 404
    assert err.message == "Room '9' not found"
    assert err.to_response()["error"]["context"]["resource_id"] == "9"


def test_database_error_is_503():
    err = DatabaseError("Connection or operational error", "execute")

    assert err.http_status == 503
    assert err.operation == "execute"


def test_all_errors_share_base():
    for err in (
        RoomValidationError("m", "f"),
        IdConflictError("room"),
        ResourceNotFoundError("Room", "1"),
        DatabaseError("m", "query"),
    ):
        assert isinstance(err, RoomFinderError)


def test_envelope_shape():
    envelope = ResourceNotFoundError("Room", "1").to_response()["error"]

    assert set(envelope) == {
        "code", "message", "category", "severity", "timestamp", "context",
    }
    assert envelope["category"] == "resource_not_found"
    assert envelope["severity"] == "error"
