"""Global test configuration and fixtures."""

from typing import AsyncIterator, Iterable

import pytest
from hypothesis import HealthCheck, settings

# Autouse isolation fixtures are function scoped and shared by all examples
settings.register_profile(
    "credential_sdk", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("credential_sdk")

AWS_VARIABLES = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_DEFAULT_REGION",
)


@pytest.fixture(autouse=True)
def isolated_aws_environment(monkeypatch, tmp_path):
    """Keep tests away from the real AWS environment variables and credentials file."""
    for name in AWS_VARIABLES:
        # setenv first so teardown also removes values a test exported
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    credentials_file = tmp_path / "aws" / "credentials"
    monkeypatch.setattr(
        "credential_sdk.credentials.providers.credentials_file.CREDENTIALS_FILE_PATH",
        str(credentials_file),
    )
    yield credentials_file


async def async_lines(lines: Iterable[str]) -> AsyncIterator[str]:
    for line in lines:
        yield line


@pytest.fixture
def console_lines():
    """Build an async line source from a list, like a closed stdin pipe."""
    return async_lines
