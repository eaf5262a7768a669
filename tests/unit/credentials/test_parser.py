import pytest
from hypothesis import given
from hypothesis import strategies as st

from credential_sdk.credentials.parser import parse_console_input
from credential_sdk.credentials.results import ParsedLine

# Strategy for secret-like values: word characters plus the base64 extras
secret_value_strategy = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_+=/",
    min_size=1,
    max_size=64,
)

variable_name_strategy = st.sampled_from(
    ["AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN"]
)

prefix_strategy = st.sampled_from(["", "export ", "SET ", "$Env:"])


class TestParseConsoleInput:
    def test_posix_export(self):
        assert parse_console_input("export AWS_ACCESS_KEY_ID=AKIA123") == ParsedLine(
            key="aws_access_key_id", value="AKIA123"
        )

    def test_powershell_quoted(self):
        result = parse_console_input('$Env:AWS_SESSION_TOKEN="abc+/=="')
        assert result.key == "aws_session_token"
        assert result.value == "abc+/=="

    def test_windows_set(self):
        result = parse_console_input("SET AWS_SECRET_ACCESS_KEY=wJalr/XUtn+FEMI")
        assert result == ("aws_secret_access_key", "wJalr/XUtn+FEMI")

    def test_bare_value(self):
        result = parse_console_input("AKIAABCDEF1234567890")
        assert result.key is None
        assert result.value == "AKIAABCDEF1234567890"

    @pytest.mark.parametrize(
        "line",
        [
            "aws_access_key_id = AKIA123",
            "aws_access_key_id= AKIA123",
            "aws_access_key_id =AKIA123",
        ],
    )
    def test_single_space_around_equals(self, line):
        assert parse_console_input(line) == ("aws_access_key_id", "AKIA123")

    def test_two_spaces_is_not_an_assignment(self):
        line = "aws_access_key_id  =  AKIA123"
        assert parse_console_input(line) == (None, line)

    def test_lowercase_export_prefix_only(self):
        line = "EXPORT AWS_ACCESS_KEY_ID=AKIA123"
        assert parse_console_input(line).key is None

    def test_trailing_carriage_return(self):
        assert parse_console_input("export AWS_SESSION_TOKEN=TOK\r") == (
            "aws_session_token",
            "TOK",
        )

    def test_unrecognized_characters_keep_raw_line(self):
        line = "export AWS_ACCESS_KEY_ID=AKIA-123"
        assert parse_console_input(line) == (None, line)

    @given(prefix=prefix_strategy, name=variable_name_strategy, value=secret_value_strategy)
    def test_assignment_lowercases_key(self, prefix, name, value):
        result = parse_console_input(f'{prefix}{name}="{value}"')
        assert result.key == name.lower()
        assert result.value == value

    @given(value=st.from_regex(r"[A-Z0-9/+]{1,40}", fullmatch=True))
    def test_values_without_equals_are_bare(self, value):
        assert parse_console_input(value) == (None, value)
