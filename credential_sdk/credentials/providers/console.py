"""Interactive console credential provider.

Reached only after every non-interactive provider has failed. The operator
pastes the three values, either as shell exports or as bare lines, and the
collector places them into slots one line at a time.
"""

import asyncio
import sys
from contextlib import contextmanager
from typing import AsyncIterator, Dict, Iterator, List, Optional, TextIO

from credential_sdk.constants import (
    AWS_ACCESS_KEY_ID_KEY,
    AWS_SECRET_ACCESS_KEY_KEY,
    AWS_SESSION_TOKEN_KEY,
    CONSOLE_PROMPT,
    CONSOLE_SOURCE,
    CREDENTIAL_KEYS,
)
from credential_sdk.credentials.exceptions import IncompleteInteractiveInputError
from credential_sdk.credentials.parser import parse_console_input
from credential_sdk.credentials.results import AttemptResult
from credential_sdk.credentials.types import CredentialSet
from credential_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


@contextmanager
def echo_disabled(stream: TextIO) -> Iterator[None]:
    """
    Turn terminal echo off for the duration of the block.

    Settings are changed with TCSANOW so input that is already queued, such
    as the rest of a pasted block, is kept. Streams that are not terminals
    are left alone.

    Args:
        stream (TextIO): The input stream, usually ``sys.stdin``.
    """
    if sys.platform == "win32" or not stream.isatty():
        yield
        return

    import termios

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    muted_settings = termios.tcgetattr(fd)
    muted_settings[3] &= ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSANOW, muted_settings)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old_settings)


async def terminal_lines(
    prompt: str = CONSOLE_PROMPT, stream: Optional[TextIO] = None
) -> AsyncIterator[str]:
    """
    Yield lines typed or pasted into the terminal, without echoing them.

    The prompt is printed once and echo stays off for the whole session.
    Iteration stops when the input is closed; close the generator to
    restore echo early.

    Args:
        prompt (str): Instruction shown to the operator before reading.
        stream (Optional[TextIO]): Input to read. Defaults to ``sys.stdin``.
    """
    if stream is None:
        stream = sys.stdin

    print(prompt, file=sys.stderr, flush=True)
    loop = asyncio.get_running_loop()
    with echo_disabled(stream):
        while True:
            line = await loop.run_in_executor(None, stream.readline)
            if not line:
                return
            yield line.rstrip("\r\n")


class InteractiveCollector:
    """Accumulates the three credential slots from individual lines.

    A labeled line writes its slot directly, so a repeated label overwrites
    the earlier value. An unlabeled line goes to the first empty slot in
    canonical order: access key id, secret access key, session token.

    Example:
        >>> collector = InteractiveCollector()
        >>> collector.feed("aws_session_token=TOK")
        False
        >>> collector.feed("AKIA1")
        False
        >>> collector.feed("SECRET2")
        True
        >>> collector.slots["aws_secret_access_key"]
        'SECRET2'
    """

    def __init__(self) -> None:
        self.slots: Dict[str, Optional[str]] = {key: None for key in CREDENTIAL_KEYS}

    @property
    def complete(self) -> bool:
        return all(self.slots.values())

    @property
    def missing(self) -> List[str]:
        return [key for key, value in self.slots.items() if not value]

    def feed(self, line: str) -> bool:
        """
        Place one line of input into a slot.

        Args:
            line (str): Raw console line.

        Returns:
            bool: True once all three slots are filled.
        """
        key, value = parse_console_input(line)
        if not value.strip():
            return self.complete

        if key is None:
            key = next((slot for slot in CREDENTIAL_KEYS if self.slots[slot] is None), None)
        elif key not in self.slots:
            logger.debug(f"Ignoring unrecognized key {key}")
            return self.complete

        if key is not None:
            self.slots[key] = value

        return self.complete


class ConsoleCredentialProvider:
    """Provider for credentials pasted by the operator at the console."""

    name = "console"
    source = CONSOLE_SOURCE

    def __init__(
        self,
        lines: Optional[AsyncIterator[str]] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Args:
            lines (Optional[AsyncIterator[str]]): Source of input lines.
                Defaults to the terminal with echo disabled.
            stream (Optional[TextIO]): Terminal input used when ``lines`` is
                not given. Defaults to ``sys.stdin``.
        """
        self._lines = lines
        self._stream = stream

    async def attempt(self, credentials: CredentialSet) -> AttemptResult:
        """
        Read lines until all three slots are filled, then set the credentials.

        Raises:
            IncompleteInteractiveInputError: If the input ends first. The
                credential set is left untouched.
        """
        owns_lines = self._lines is None
        lines = terminal_lines(stream=self._stream) if owns_lines else self._lines
        collector = InteractiveCollector()

        try:
            async for line in lines:
                if collector.feed(line):
                    break
        finally:
            if owns_lines:
                # restores terminal echo
                await lines.aclose()

        if not collector.complete:
            raise IncompleteInteractiveInputError(missing=collector.missing)

        credentials.set_credentials(
            collector.slots[AWS_ACCESS_KEY_ID_KEY],
            collector.slots[AWS_SECRET_ACCESS_KEY_KEY],
            collector.slots[AWS_SESSION_TOKEN_KEY],
            self.source,
        )
        return AttemptResult(success=True, source=self.source)
