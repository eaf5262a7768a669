from credential_sdk.credentials.providers.console import (
    ConsoleCredentialProvider,
    InteractiveCollector,
)
from credential_sdk.credentials.providers.credentials_file import (
    CredentialsFileProvider,
)
from credential_sdk.credentials.providers.environment import (
    EnvironmentCredentialProvider,
)

__all__ = [
    "ConsoleCredentialProvider",
    "CredentialsFileProvider",
    "EnvironmentCredentialProvider",
    "InteractiveCollector",
]
