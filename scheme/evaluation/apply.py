"""Application engine.

Centralizes procedure application for the evaluator:
- Native procedures (Proc) receive the evaluated argument list directly.
- Closures (CompProc) get a new frame extending their *captured*
  environment, and their body is evaluated there as an implicit begin.

The caller's frame is never touched: the new frame is only reachable from
this call (and from any closure created inside it), so returning simply
drops it.
"""

import logging

from scheme import LispValue, EvaluatorFn
from scheme.errors import SchemeTypeMismatch
from scheme.evaluation.form_util import operands
from scheme.evaluation.special_forms.progn_form import eval_sequence
from scheme.types.environment import Environment
from scheme.types.expr import CompProc, Proc, from_list

logger = logging.getLogger(__name__)


def eval_values(exprs: LispValue, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate each element of an operand list, left to right, into a new list."""
    return from_list([evaluate_fn(e, env) for e in operands(exprs, "application")])


def apply_lambda(fn: CompProc, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Raises SchemeArityError when the argument count does not match the
    formal parameters.
    """
    frame = fn.env.extend(fn.formals, args)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("call %s with %s at depth %d", fn.formals, args, frame.depth())
    return eval_sequence(fn.body, frame, evaluate_fn, "lambda")


def apply(fn: LispValue, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a closure or a native procedure."""
    if isinstance(fn, CompProc):
        return apply_lambda(fn, args, evaluate_fn)
    if isinstance(fn, Proc):
        return fn.as_proc()(args)
    raise SchemeTypeMismatch(f"Cannot apply non-procedure {fn}")
