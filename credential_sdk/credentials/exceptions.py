"""Custom exceptions for credential resolution.

These exceptions provide specific error handling for the different failure
modes of the source chain and the interactive collector.
"""

from typing import List, Optional

from credential_sdk.common.error_codes import CREDENTIAL_ERRORS, ErrorCode


class CredentialError(Exception):
    """Base exception for credential operations.

    All credential-related exceptions inherit from this class,
    allowing for broad exception handling when needed.
    """

    error_code: Optional[ErrorCode] = None

    def __init__(self, message: str):
        self.message = message
        if self.error_code is not None:
            message = f"{self.error_code.code}: {message}"
        super().__init__(message)


class SourceUnavailableError(CredentialError):
    """Raised when a non-interactive source cannot supply complete values.

    This can occur when:
    - One of the environment variables is missing or empty
    - The credentials file is missing, unreadable or incomplete

    Providers turn this into a failed attempt; it is never shown to the
    operator.
    """

    error_code = CREDENTIAL_ERRORS["SOURCE_UNAVAILABLE_ERROR"]


class IncompleteInteractiveInputError(CredentialError):
    """Raised when console input ends before all three slots are filled.

    Attributes:
        missing: Names of the slots that were still empty.

    Example:
        >>> raise IncompleteInteractiveInputError(
        ...     missing=["aws_session_token"]
        ... )
    """

    error_code = CREDENTIAL_ERRORS["INCOMPLETE_INTERACTIVE_INPUT_ERROR"]

    def __init__(self, message: Optional[str] = None, missing: Optional[List[str]] = None):
        self.missing = missing or []
        if message is None:
            message = f"input ended with missing values: {', '.join(self.missing)}"
        super().__init__(message)


class CredentialValidationError(CredentialError):
    """Raised when a credential set is used before it is complete.

    Attributes:
        errors: List of specific validation errors.
    """

    error_code = CREDENTIAL_ERRORS["CREDENTIAL_VALIDATION_ERROR"]

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class CredentialResolutionError(CredentialError):
    """Raised when resolution gives up without a valid credential set."""

    error_code = CREDENTIAL_ERRORS["CREDENTIAL_RESOLUTION_ERROR"]


class UnsupportedProviderError(CredentialError):
    """Raised when a provider name is not registered with the factory."""

    error_code = CREDENTIAL_ERRORS["UNSUPPORTED_PROVIDER_ERROR"]
