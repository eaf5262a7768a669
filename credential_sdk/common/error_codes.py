"""
Error codes for the credential-sdk.

Error codes follow the format: Atlan-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Credentials: Credential resolution errors
- AWS: AWS utility errors
"""


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"Atlan-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Credential Resolution Errors
CREDENTIAL_ERRORS = {
    "SOURCE_UNAVAILABLE_ERROR": ErrorCode(
        "Credentials", "404", "00", "Credential source unavailable"
    ),
    "INCOMPLETE_INTERACTIVE_INPUT_ERROR": ErrorCode(
        "Credentials", "400", "00", "Interactive input ended before all credentials were entered"
    ),
    "CREDENTIAL_VALIDATION_ERROR": ErrorCode(
        "Credentials", "422", "00", "Credential validation failed"
    ),
    "CREDENTIAL_RESOLUTION_ERROR": ErrorCode(
        "Credentials", "401", "00", "Credential resolution failed"
    ),
    "UNSUPPORTED_PROVIDER_ERROR": ErrorCode(
        "Credentials", "400", "01", "Unsupported credential provider"
    ),
}

# Common Utility Errors
COMMON_ERRORS = {
    "AWS_REGION_ERROR": ErrorCode("AWS", "400", "00", "AWS region error"),
}
