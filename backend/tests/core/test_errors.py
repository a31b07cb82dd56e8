"""Error hierarchy tests — codes, HTTP status and REST envelope.

Tests cover:
    - Each error maps to its code / status
    - ValidationFailedError lists every violation in details
    - DuplicateKeyError is a PersistenceError (counted per-item by sync)
    - SyncAbortedError keeps its cause
"""

from holocron.core.errors import (
    AuthenticationError,
    DuplicateKeyError,
    FieldViolation,
    PermissionDeniedError,
    PersistenceError,
    ResourceNotFoundError,
    SourceUnavailableError,
    SyncAbortedError,
    ValidationFailedError,
)


def test_validation_error_envelope_lists_details():
    err = ValidationFailedError([
        FieldViolation("title", "field is required"),
        FieldViolation("episode_id", "must be an integer"),
    ])
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == [
        {"field": "title", "message": "field is required"},
        {"field": "episode_id", "message": "must be an integer"},
    ]


def test_not_found_is_404():
    err = ResourceNotFoundError("Film", "abc")
    assert err.http_status == 404
    assert err.message == "Film 'abc' not found"


def test_duplicate_key_is_a_persistence_error():
    err = DuplicateKeyError("1")
    assert isinstance(err, PersistenceError)
    assert err.http_status == 409
    assert err.code == "DUPLICATE_KEY"
    assert err.to_response()["error"]["context"]["uid"] == "1"


def test_sync_aborted_wraps_source_error():
    cause = SourceUnavailableError("timeout", url="http://swapi.test/api/films")
    err = SyncAbortedError(cause)
    assert err.cause is cause
    assert err.code == "SYNC_ABORTED"
    assert "timeout" in err.message


def test_auth_errors_status():
    assert AuthenticationError().http_status == 401
    denied = PermissionDeniedError("user", ["admin"])
    assert denied.http_status == 403
    assert "admin" in denied.message
