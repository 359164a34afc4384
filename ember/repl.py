"""
Interactive read-evaluate-write loop.

Each input line is read into one datum, passed through the evaluator and
written back. A string literal left open at the end of a line pulls further
lines from the same input stream until it is closed.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ember import LineSource, LispValue, SExpression
from ember import config
from ember.errors import ReaderError
from ember.evaluation.evaluator import evaluate
from ember.reader.cursor import CharCursor
from ember.reader.parser import Reader
from ember.registry import SingletonRegistry
from ember.writer import write

logger = logging.getLogger(__name__)


class Repl:
    """
    Drives the reader, evaluator and writer for one session.
    The session's SingletonRegistry is shared by every read.
    """

    def __init__(
        self,
        registry: Optional[SingletonRegistry] = None,
        *,
        prompt: Optional[str] = None,
        on_error: Optional[str] = None,
    ):
        self.registry = registry if registry is not None else SingletonRegistry()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.on_error = on_error if on_error is not None else config.get_on_error()

    def read(self, line: str, line_source: Optional[LineSource] = None) -> SExpression:
        return Reader(CharCursor(line, line_source), self.registry).read()

    def evaluate(self, value: SExpression) -> LispValue:
        return evaluate(value)

    def write(self, value: LispValue) -> str:
        return write(value)

    def rep(self, line: str, line_source: Optional[LineSource] = None) -> Optional[str]:
        """Read, evaluate and write the first datum on `line`; None for a blank line."""
        reader = Reader(CharCursor(line.rstrip("\r\n") + "\n", line_source), self.registry)
        if reader.at_end():
            return None
        return self.write(self.evaluate(reader.read()))

    def run(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> int:
        """Loop until end of input; returns the process exit status."""
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        stderr = stderr if stderr is not None else sys.stderr

        def next_line() -> Optional[str]:
            line = stdin.readline()
            return line if line else None

        stdout.write(self.prompt)
        stdout.flush()
        while (line := next_line()) is not None:
            try:
                result = self.rep(line, next_line)
            except ReaderError as err:
                logger.info("read failed at %d:%d: %s", err.line + 1, err.column + 1, err)
                stderr.write(f"{err}\n")
                stderr.flush()
                if self.on_error == "exit":
                    return err.status
            else:
                if result is not None:
                    stdout.write(result + "\n")
            stdout.write(self.prompt)
            stdout.flush()
        stdout.write("\n")
        return 0
