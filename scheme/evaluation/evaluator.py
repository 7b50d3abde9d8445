"""Core evaluator.

Implements the recursive dispatch: self-evaluating atoms, variable lookup,
special forms by keyword, and procedure application. There is no tail-call
elimination; every nested form costs a host stack frame.
"""

from __future__ import annotations

from scheme import SExpression, LispValue
from scheme.builtin.env_builtin import register
from scheme.evaluation.apply import apply, eval_values
from scheme.evaluation.special_forms import SPECIAL_FORMS
from scheme.types.environment import Environment
from scheme.types.expr import OK, Pair, Sym


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    if expr.is_self():
        return expr

    if isinstance(expr, Sym):
        return env.lookup(expr)

    if isinstance(expr, Pair):
        head = expr.car()
        # --- Special forms handling ---
        if isinstance(head, Sym) and head.name in SPECIAL_FORMS:
            return SPECIAL_FORMS[head.name](expr.cdr(), env, evaluate)

        # --- Application: operator first, then operands left to right ---
        fn = evaluate(head, env)
        args = eval_values(expr.cdr(), env, evaluate)
        return apply(fn, args, evaluate)

    # The empty list and procedure values used as code
    return OK


class Evaluator:
    """Owns the global frame, pre-populated with the builtin procedures."""

    def __init__(self) -> None:
        self.global_env: Environment = Environment()
        register(self.global_env)

    def eval_exp(self, expr: SExpression, env: Environment | None = None) -> LispValue:
        """Evaluate one top-level form, in the global frame unless `env` is given."""
        return evaluate(expr, env if env is not None else self.global_env)
