from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from scheme import LispValue, SExpression
from scheme.config import get_prelude_files, get_recursion_limit
from scheme.errors import SchemeRecursionError
from scheme.evaluation.evaluator import Evaluator
from scheme.reader.parser import TokenStream, lex
from scheme.types.environment import Environment
from scheme.types.expr import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating source text.
    Maintains the global Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.evaluator = Evaluator()
        self.env: Environment = self.evaluator.global_env

        # Evaluation recurses on the host stack; give it room
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            for path in get_prelude_files():
                try:
                    self.load(path)
                except FileNotFoundError:
                    # Be permissive: missing prelude file -> proceed
                    logger.debug("prelude file %s not found", path)
        elif prelude:
            self.eval_all(prelude)

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one parsed top-level form in the global frame."""
        logger.debug("eval %s", expr)
        try:
            return self.evaluator.eval_exp(expr, self.env)
        except RecursionError as e:
            raise SchemeRecursionError(
                "Maximum recursion depth exceeded (no tail-call elimination)"
            ) from e

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`, returning each result."""
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_form(expr))
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form (Nil if empty)."""
        results = self.eval_all(code)
        if not results:
            return Nil
        return results[-1]

    def load(self, path: str | Path) -> LispValue:
        """Evaluate a source file into the global frame."""
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("loading %s", path)
        return self.eval(source)
