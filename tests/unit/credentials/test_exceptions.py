from credential_sdk.common.error_codes import CREDENTIAL_ERRORS
from credential_sdk.credentials.exceptions import (
    CredentialError,
    CredentialResolutionError,
    CredentialValidationError,
    IncompleteInteractiveInputError,
    SourceUnavailableError,
)


def test_error_code_format():
    code = CREDENTIAL_ERRORS["SOURCE_UNAVAILABLE_ERROR"]
    assert code.code == "Atlan-Credentials-404-00"
    assert str(code) == "Atlan-Credentials-404-00: Credential source unavailable"


def test_message_is_prefixed_with_code():
    error = SourceUnavailableError("AWS_SESSION_TOKEN not set")
    assert error.message == "AWS_SESSION_TOKEN not set"
    assert str(error) == "Atlan-Credentials-404-00: AWS_SESSION_TOKEN not set"


def test_base_error_has_no_code():
    assert str(CredentialError("plain")) == "plain"


def test_incomplete_input_lists_missing_slots():
    error = IncompleteInteractiveInputError(missing=["aws_secret_access_key", "aws_session_token"])
    assert error.missing == ["aws_secret_access_key", "aws_session_token"]
    assert "aws_secret_access_key, aws_session_token" in str(error)
    assert isinstance(error, CredentialError)


def test_validation_error_keeps_errors():
    error = CredentialValidationError("invalid", errors=["aws_session_token is required"])
    assert error.errors == ["aws_session_token is required"]
    assert CredentialValidationError("invalid").errors == []


def test_hierarchy():
    for error_class in (
        SourceUnavailableError,
        IncompleteInteractiveInputError,
        CredentialValidationError,
        CredentialResolutionError,
    ):
        assert issubclass(error_class, CredentialError)
