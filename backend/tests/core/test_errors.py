"""Error Hierarchy — tests for status codes and the error envelope.

Tests cover:
    - Each error class carries its HTTP status and category
    - to_response() yields {"error": message} for client errors
    - Server errors never expose their message in to_response()
"""

from chirpy.core.errors import (
    INTERNAL_SERVER_MESSAGE,
    ChirpTooLongError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    ForbiddenError,
    InvalidIdentityError,
    ResourceNotFoundError,
)


def test_chirp_too_long_envelope():
    err = ChirpTooLongError(141, 140)
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"error": "Chirp is too long"}


def test_invalid_identity_is_400():
    err = InvalidIdentityError("chirp_id", "abc")
    assert err.http_status == 400
    assert err.to_response() == {"error": "Invalid chirp_id"}


def test_forbidden_is_403():
    err = ForbiddenError("nope")
    assert err.http_status == 403
    assert err.to_response() == {"error": "nope"}


def test_not_found_records_resource_id():
    err = ResourceNotFoundError("Chirp", "123")
    assert err.http_status == 404
    assert err.context.resource_id == "123"
    assert err.to_response() == {"error": "Chirp not found"}


def test_database_error_hides_detail():
    err = DatabaseError(
        "Integrity constraint violated", "create_user",
        ErrorContext(debug_info={"cause": "duplicate key value"}),
    )
    assert err.http_status == 500
    assert "create_user" in err.message
    assert err.to_response() == {"error": INTERNAL_SERVER_MESSAGE}
