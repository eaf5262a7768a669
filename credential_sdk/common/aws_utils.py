import re

from credential_sdk.common.error_codes import COMMON_ERRORS

REGION_PATTERN = re.compile(r"[a-z]+(?:-[a-z]+)*-\d+")


def is_valid_region(region: str) -> bool:
    """
    Check that a string looks like an AWS region name.
    Example: us-east-1, eu-central-2, us-gov-west-1

    Args:
        region (str): The region name entered by the operator

    Returns:
        bool: True if the name is well formed
    """
    return bool(REGION_PATTERN.fullmatch(region))


def validate_region(region: str) -> str:
    """
    Return the region with surrounding whitespace removed.

    Raises:
        ValueError: If the region name is malformed
    """
    region = region.strip()
    if not is_valid_region(region):
        raise ValueError(f"{COMMON_ERRORS['AWS_REGION_ERROR']}: invalid region {region!r}")
    return region
