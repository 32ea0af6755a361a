import pytest

from taskboard.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TaskboardError,
    UnauthorizedError,
)


@pytest.mark.parametrize("error_cls, code", [
    (BadRequestError, 400),
    (UnauthorizedError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
])
def test_status_codes(error_cls, code):
    err = error_cls("boom")
    assert isinstance(err, TaskboardError)
    assert err.status_code == code
    assert str(err) == "boom"


def test_to_dict_shape():
    body = NotFoundError("Task not found").to_dict()
    assert body["statusCode"] == 404
    assert body["message"] == "Task not found"
    assert body["timestamp"].endswith("+00:00")


def test_repr():
    assert repr(ForbiddenError("nope")) == "ForbiddenError(403: nope)"
