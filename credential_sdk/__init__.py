"""Resolve temporary AWS credentials from the environment, the shared
credentials file, or pasted console input."""

from credential_sdk.credentials import CredentialResolver, CredentialSet

__version__ = "0.1.0"

__all__ = ["CredentialResolver", "CredentialSet", "__version__"]
