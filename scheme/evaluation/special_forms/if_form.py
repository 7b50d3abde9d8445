from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment
from scheme.types.expr import FALSE


def if_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(if test consequent [alternative])

    Only #f and the empty list are false. An empty-list test answers #f
    directly, without evaluating the alternative.
    """
    operands(tail, "if", 2, 3)

    test = evaluate_fn(tail.car(), env)
    if test.is_true():
        return evaluate_fn(tail.c("da"), env)
    if test.is_empty():
        return FALSE

    alternative = tail.c("dd")
    if alternative.is_empty():
        return FALSE  # default "false" if no else
    return evaluate_fn(alternative.car(), env)
