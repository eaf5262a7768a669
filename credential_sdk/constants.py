import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Environment variables holding the credential triple
AWS_ACCESS_KEY_ID_ENV = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY_ENV = "AWS_SECRET_ACCESS_KEY"
AWS_SESSION_TOKEN_ENV = "AWS_SESSION_TOKEN"

# Key names used in the credentials file and in pasted console input
AWS_ACCESS_KEY_ID_KEY = "aws_access_key_id"
AWS_SECRET_ACCESS_KEY_KEY = "aws_secret_access_key"
AWS_SESSION_TOKEN_KEY = "aws_session_token"

# Canonical slot order for unlabeled console input
CREDENTIAL_KEYS = (
    AWS_ACCESS_KEY_ID_KEY,
    AWS_SECRET_ACCESS_KEY_KEY,
    AWS_SESSION_TOKEN_KEY,
)

# Source labels
UNKNOWN_SOURCE = "unknown source"
ENVIRONMENT_SOURCE = "environment variables"
CREDENTIALS_FILE_SOURCE = "credentials file"
CONSOLE_SOURCE = "console input"

# Credentials file
CREDENTIALS_FILE_PATH = os.path.expanduser(
    os.getenv("AWS_SHARED_CREDENTIALS_FILE", os.path.join("~", ".aws", "credentials"))
)

# Resolution
DEFAULT_PROVIDER_CHAIN = ("environment", "credentials_file")
MAX_RESOLUTION_ROUNDS = int(os.getenv("CREDENTIAL_SDK_MAX_RESOLUTION_ROUNDS", "10"))
CONSOLE_PROMPT = "Paste AWS credentials (not shown) then press enter:"

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <level>{level: <8}</level> "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)
