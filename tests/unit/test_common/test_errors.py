from restful_crud.common.errors import (
    CountNotFoundError,
    NotFoundError,
    UnsupportedApiVersionError,
)


def test_not_found_to_dict():
    err = NotFoundError(message="Book with id 1 not found", code="books_not_found", details={"id": 1})
    assert err.status_code == 404
    assert err.to_dict() == {
        "error": {
            "message": "Book with id 1 not found",
            "type": "not_found_error",
            "code": "books_not_found",
            "details": {"id": 1},
        }
    }


def test_to_dict_can_hide_details():
    err = CountNotFoundError(details={"value": "abc"})
    assert "details" not in err.to_dict(include_details=False)["error"]


def test_unsupported_api_version():
    err = UnsupportedApiVersionError("9", ["1"])
    assert err.status_code == 400
    assert err.details == {"supported_versions": ["1"]}
