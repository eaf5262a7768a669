import argparse
import asyncio
import os
import shlex
import sys
from typing import List, Optional

from credential_sdk.common.aws_utils import validate_region
from credential_sdk.constants import MAX_RESOLUTION_ROUNDS
from credential_sdk.credentials import CredentialError, CredentialResolver
from credential_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

REGION_ENV = "AWS_DEFAULT_REGION"


def format_exports(variables: dict) -> str:
    return "\n".join(
        f"export {name}={shlex.quote(value)}" for name, value in variables.items()
    )


async def run(output_format: str, region: Optional[str] = None) -> int:
    resolver = CredentialResolver()

    try:
        credentials = await resolver.resolve(max_rounds=MAX_RESOLUTION_ROUNDS)
        variables = credentials.to_environment()
    except CredentialError as e:
        logger.error(f"Could not resolve credentials: {e}")
        return 1

    if region is not None:
        variables[REGION_ENV] = region

    os.environ.update(variables)
    logger.info(f"Credentials set from {credentials.source}")

    if output_format == "shell":
        print(format_exports(variables))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Resolve temporary AWS credentials from the environment, "
        "~/.aws/credentials, or pasted console input"
    )
    parser.add_argument(
        "--format",
        choices=["shell", "none"],
        help="Print export statements for the resolved credentials, or nothing",
        default="shell",
    )
    parser.add_argument(
        "--region",
        help="AWS region to export alongside the credentials, e.g. us-east-1",
        default=None,
    )

    args = parser.parse_args(argv)

    region = None
    if args.region is not None:
        try:
            region = validate_region(args.region)
        except ValueError as e:
            parser.error(str(e))

    return asyncio.run(run(args.format, region))


if __name__ == "__main__":
    sys.exit(main())
