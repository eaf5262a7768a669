import pytest

from credential_sdk.common.aws_utils import is_valid_region, validate_region


@pytest.mark.parametrize(
    "region",
    ["us-east-1", "eu-central-2", "ap-southeast-10", "us-gov-west-1", "cn-north-1"],
)
def test_valid_regions(region):
    assert is_valid_region(region)


@pytest.mark.parametrize(
    "region",
    ["", "us-east", "US-EAST-1", "us_east_1", "us-east-1a", "-east-1", "us--east-1", "us-east-1\n"],
)
def test_invalid_regions(region):
    assert not is_valid_region(region)


def test_validate_region_strips_whitespace():
    assert validate_region("  us-west-2 ") == "us-west-2"


def test_validate_region_error():
    with pytest.raises(ValueError, match="Atlan-AWS-400-00"):
        validate_region("nowhere")
