import pytest
from pydantic import TypeAdapter, ValidationError

from brackets.errors import (
    APIError,
    DecodingError,
    DecodingIssue,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
)


def test_every_error_is_an_api_error() -> None:
    for error in (
        InvalidURLError(),
        InvalidResponseError(status_code=500),
        DecodingError([]),
        NetworkError(TimeoutError()),
    ):
        assert isinstance(error, APIError)


def test_messages() -> None:
    assert str(InvalidURLError()) == "Invalid URL"
    assert str(InvalidResponseError()) == "Invalid response from server"
    assert str(InvalidResponseError(status_code=404)) == "Invalid response from server (status 404)"
    assert str(NetworkError(TimeoutError())) == "Network error: TimeoutError"
    assert str(NetworkError(OSError("refused"))) == "Network error: refused"


def test_dotted_path_formats_keys_and_indexes() -> None:
    issue = DecodingIssue(kind="type_mismatch", path=("games", 0, "team_stats"), message="x")

    assert issue.dotted_path == "games[0].team_stats"
    assert DecodingIssue(kind="data_corrupted", path=(), message="x").dotted_path == "<root>"
    assert DecodingIssue(kind="key_not_found", path=(2, "id"), message="x").dotted_path == "[2].id"


def test_decoding_error_summarizes_extra_issues() -> None:
    issues = [
        DecodingIssue(kind="key_not_found", path=("a",), message="Field required"),
        DecodingIssue(kind="type_mismatch", path=("b",), message="bad"),
    ]

    error = DecodingError(issues)

    assert str(error) == "Failed to decode response: key_not_found at a: Field required (+1 more)"
    assert error.kinds == {"key_not_found", "type_mismatch"}


def test_from_validation_error_maps_pydantic_error_types() -> None:
    adapter = TypeAdapter(dict[str, int])
    with pytest.raises(ValidationError) as excinfo:
        adapter.validate_python({"a": None, "b": "x"})

    error = DecodingError.from_validation_error(excinfo.value, prefix=("stats",))

    by_path = {issue.path: issue for issue in error.issues}
    assert by_path[("stats", "a")].kind == "value_not_found"
    assert by_path[("stats", "b")].kind == "type_mismatch"
    assert by_path[("stats", "b")].found == "x"
