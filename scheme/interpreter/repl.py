"""Interactive read-eval-print loop.

Each top-level form is evaluated on its own: a SchemeError is reported and
the session continues with the definitions made so far. Input that ends in
the middle of a form is continued on the next line.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from scheme.debug_utils.pprint import pprint_expr
from scheme.errors import SchemeError, SchemeIncompleteInput
from scheme.interpreter import Interpreter
from scheme.reader.parser import read

logger = logging.getLogger(__name__)

PROMPT = "scheme> "
CONTINUATION_PROMPT = "...     "


class Repl:
    def __init__(
        self,
        interp: Interpreter,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
        color: bool = False,
    ):
        self.interp = interp
        self.stdin = stdin
        self.stdout = stdout
        self.color = color

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def run(self) -> None:
        buffer = ""
        while True:
            self._write(CONTINUATION_PROMPT if buffer else PROMPT)
            line = self.stdin.readline()
            if not line:
                self._write("\n")
                break
            buffer += line
            if not self.feed(buffer):
                continue
            buffer = ""

    def feed(self, source: str) -> bool:
        """Evaluate every form in `source`, printing results.

        Returns False when `source` stops in the middle of a form and more
        input is needed.
        """
        try:
            forms = read(source)
        except SchemeIncompleteInput:
            return False
        except SchemeError as e:
            self._report(e)
            return True

        for form in forms:
            try:
                result = self.interp.eval_form(form)
            except SchemeError as e:
                self._report(e)
                continue
            self._write(pprint_expr(result, color=self.color) + "\n")
        return True

    def _report(self, error: SchemeError) -> None:
        logger.info("%s: %s", type(error).__name__, error)
        self._write(f"error: {error}\n")
