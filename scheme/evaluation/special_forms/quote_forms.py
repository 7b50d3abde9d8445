from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment


def quote_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    operands(tail, "quote", 1, 1)
    return tail.car()
