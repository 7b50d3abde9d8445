from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment


def eval_sequence(
    body: SExpression, env: Environment, evaluate_fn: EvaluatorFn, form: str = "begin"
) -> LispValue:
    """Evaluate each form of `body` in order and return the last value."""
    forms = operands(body, form, 1)
    for e in forms[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(forms[-1], env)


def begin_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return eval_sequence(tail, env, evaluate_fn, "begin")
