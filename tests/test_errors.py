"""Tests for home.errors: exception hierarchy and error data."""

import pytest

from home.errors import (
    BindError,
    ConfigurationError,
    ExpectedError,
    HomeError,
    NotFound,
)


class TestHierarchy:
    def test_expected_error_is_home_error(self) -> None:
        assert issubclass(ExpectedError, HomeError)

    def test_not_found_is_expected_error(self) -> None:
        assert issubclass(NotFound, ExpectedError)

    def test_configuration_error_is_home_error(self) -> None:
        assert issubclass(ConfigurationError, HomeError)

    def test_bind_error_is_home_error(self) -> None:
        assert issubclass(BindError, HomeError)


class TestExpectedError:
    def test_message_and_status(self) -> None:
        err = ExpectedError("Sensor offline", 503)
        assert err.message == "Sensor offline"
        assert err.status_code == 503

    def test_default_status_is_500(self) -> None:
        assert ExpectedError("boom").status_code == 500

    def test_str(self) -> None:
        assert str(ExpectedError("Bad input", 400)) == "400: Bad input"

    def test_frozen(self) -> None:
        err = ExpectedError("Bad input", 400)
        with pytest.raises(AttributeError):
            err.status_code = 500  # type: ignore[misc]

    def test_to_dict(self) -> None:
        assert ExpectedError("Bad input", 400).to_dict() == {
            "message": "Bad input",
            "status_code": 400,
        }

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(ExpectedError) as exc_info:
            raise ExpectedError("Gone", 410)
        assert exc_info.value.status_code == 410


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound("/missing")
        assert err.status_code == 404
        assert err.message == "Page Not Found"
        assert err.path == "/missing"

    def test_custom_message(self) -> None:
        err = NotFound("/x", "No such widget")
        assert err.message == "No such widget"

    def test_to_dict_includes_path(self) -> None:
        assert NotFound("/missing").to_dict() == {
            "message": "Page Not Found",
            "status_code": 404,
            "path": "/missing",
        }
