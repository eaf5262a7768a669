"""Parsing of pasted console input.

Operators usually paste credentials exported for their shell, so a line may
look like any of::

    export AWS_ACCESS_KEY_ID=AKIA...
    SET AWS_SECRET_ACCESS_KEY=...
    $Env:AWS_SESSION_TOKEN="..."

or just be the raw value on its own line.
"""

import re

from credential_sdk.credentials.results import ParsedLine

CONSOLE_INPUT_PATTERN = re.compile(
    r'^(?:export |SET |\$Env:)?([a-zA-Z_]+) ?= ?"?([\w+=/]+)"?$'
)


def parse_console_input(line: str) -> ParsedLine:
    """
    Split one line of console input into an optional key and a value.

    Args:
        line (str): Raw line as received from the console.

    Returns:
        ParsedLine: The lower-cased key and unquoted value when the line is a
            variable assignment, otherwise no key and the line unchanged.
    """
    line = line.rstrip("\r\n")
    match = CONSOLE_INPUT_PATTERN.match(line)
    if not match:
        return ParsedLine(key=None, value=line)

    return ParsedLine(key=match.group(1).lower(), value=match.group(2))
