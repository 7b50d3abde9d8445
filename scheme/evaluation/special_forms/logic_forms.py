from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment
from scheme.types.expr import TRUE


def and_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a false value
    (#f or the empty list) is found, which is returned immediately. Otherwise
    returns the value of the last operand. With zero operands, returns #t.
    """
    exprs = operands(tail, "and")
    if not exprs:
        return TRUE

    for expr in exprs[:-1]:
        val = evaluate_fn(expr, env)
        if val.is_false():
            return val
    return evaluate_fn(exprs[-1], env)


def or_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    true value. Otherwise returns the value of the last operand. With zero
    operands, returns #t (not #f as in standard Scheme).
    """
    exprs = operands(tail, "or")
    if not exprs:
        return TRUE

    for expr in exprs[:-1]:
        val = evaluate_fn(expr, env)
        if val.is_true():
            return val
    return evaluate_fn(exprs[-1], env)
