"""Error Hierarchy — codes, statuses and response bodies."""

from bookbrainz_api.core.errors import (
    BookBrainzError,
    DatabaseError,
    EntityNotFoundError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidRelationRequestError,
)


def test_not_found_renders_bare_message_body():
    err = EntityNotFoundError("Edition not found")
    assert err.http_status == 404
    assert err.severity is ErrorSeverity.INFO
    assert err.to_response() == {"message": "Edition not found"}


def test_database_error_is_distinct_from_not_found():
    err = DatabaseError("Connection or operational error", "execute")
    assert not isinstance(err, EntityNotFoundError)
    assert err.http_status == 503
    assert err.category is ErrorCategory.DATABASE
    body = err.to_response()["error"]
    assert body["code"] == "DATABASE_ERROR"
    assert body["message"] == "Database execute failed: Connection or operational error"


def test_invalid_relation_request_records_path():
    err = InvalidRelationRequestError(
        "alias_set.aliases", "not loaded", ErrorContext(entity_kind="Edition"),
    )
    assert err.relation_path == "alias_set.aliases"
    assert err.context.relation_path == "alias_set.aliases"
    assert err.context.entity_kind == "Edition"
    assert err.http_status == 500
    assert err.code == "INVALID_RELATION_REQUEST"


def test_all_errors_share_base():
    for err in (
        EntityNotFoundError("x"),
        DatabaseError("x", "query"),
        InvalidRelationRequestError("a", "b"),
    ):
        assert isinstance(err, BookBrainzError)
