"""Error Hierarchy — envelopes, statuses, categories.

Tests:
    - Every error renders the flat {"error": message} envelope
    - Expected failures carry 200, unexpected ones 500
"""

from exercise_tracker.core.errors import (
    DatabaseError, ErrorCategory, ExerciseTrackerError, FieldRequiredError,
    InvalidFieldError, MalformedIdError, ResourceNotFoundError,
)


def test_field_required_message():
    err = FieldRequiredError("username")
    assert err.to_response() == {"error": "Username is required"}
    assert err.http_status == 200
    assert err.expected
    assert err.category == ErrorCategory.VALIDATION


def test_resource_not_found_hides_id_from_message():
    err = ResourceNotFoundError("User", "abc")
    assert err.message == "User not found"
    assert err.context.debug_info == {"resource_id": "abc"}
    assert err.http_status == 200


def test_invalid_field():
    err = InvalidFieldError("date", "Invalid date")
    assert err.field == "date"
    assert err.expected


def test_unexpected_errors_are_500():
    for err in (MalformedIdError("xyz"), DatabaseError("boom", "query")):
        assert err.http_status == 500
        assert not err.expected
        assert set(err.to_response()) == {"error"}


def test_database_error_message():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.message == "Database execute failed: Connection or operational error"


def test_all_errors_share_base():
    assert issubclass(MalformedIdError, ExerciseTrackerError)
    assert isinstance(FieldRequiredError("x"), Exception)
