"""
Console Input Handler - Terminal prompt/display capability

Thin I/O wrapper used by the Session Engine and main.py. No decision logic.

Interrupt handling:
- Ctrl+C (KeyboardInterrupt) or end of input (EOFError) while waiting in
  prompt() prints a goodbye, closes the handler and exits with status 0.
"""

import logging
import sys

logger = logging.getLogger(__name__)


class ConsoleInputHandler:
    """Prompt/display capability backed by stdin, stdout and stderr."""

    GOODBYE_MESSAGE = "\n\nGoodbye!"
    ERROR_MARKER = "❌"

    def __init__(self, stdin=None, stdout=None, stderr=None):
        """
        Args:
            stdin: Input stream (default: sys.stdin)
            stdout: Output stream for prompts and messages (default: sys.stdout)
            stderr: Output stream for errors (default: sys.stderr)
        """
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.closed = False

    def prompt(self, message: str) -> str:
        """
        Display a message and wait for one line of input.

        Args:
            message: Prompt text (written without trailing newline)

        Returns:
            Raw line without its line terminator (not trimmed)
        """
        self.stdout.write(message)
        self.stdout.flush()

        try:
            line = self.stdin.readline()
            if line == "":
                raise EOFError
        except (KeyboardInterrupt, EOFError):
            logger.info("Input interrupted, shutting down gracefully")
            self.display(self.GOODBYE_MESSAGE)
            self.close()
            sys.exit(0)

        return line.rstrip("\r\n")

    def display(self, message: str) -> None:
        """Display a general message to the user"""
        print(message, file=self.stdout)

    def display_error(self, message: str) -> None:
        """Display an error message to the user"""
        print(f"{self.ERROR_MARKER} {message}", file=self.stderr)

    def close(self) -> None:
        """Release the channel. Safe to call more than once."""
        if self.closed:
            return
        self.closed = True
        self.stdout.flush()
        logger.debug("Console input handler closed")
