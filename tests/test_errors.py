from common_date_formats.errors import (
    ConfigError,
    InvalidDateError,
    UnknownFormatError,
    UnknownTimezoneError,
    to_error_payload,
)


def test_payload_codes() -> None:
    assert to_error_payload(InvalidDateError("bad", {"value": "x"})) == {
        "code": "INVALID_DATE",
        "message": "bad",
        "details": {"value": "x"},
    }
    assert to_error_payload(UnknownTimezoneError("tz"))["code"] == "UNKNOWN_TIMEZONE"
    assert to_error_payload(UnknownFormatError("style"))["code"] == "UNKNOWN_FORMAT"
    assert to_error_payload(ConfigError("env"))["code"] == "CONFIG_ERROR"


def test_payload_omits_empty_details() -> None:
    assert "details" not in to_error_payload(UnknownFormatError("style"))


def test_generic_exception_payload() -> None:
    assert to_error_payload(RuntimeError("boom")) == {"code": "INTERNAL", "message": "boom"}


def test_str_is_message() -> None:
    assert str(InvalidDateError("Expected YYYY-MM-DD")) == "Expected YYYY-MM-DD"
