from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.errors import SchemeMalformedForm
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment
from scheme.types.expr import CompProc, Sym


def lambda_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda (params...) body...): one or more body forms, evaluated as an
    # implicit begin when the closure is called.
    operands(tail, "lambda", 2)

    formals = tail.car()
    for param in operands(formals, "lambda parameter list"):
        if not isinstance(param, Sym):
            raise SchemeMalformedForm(f"lambda parameter must be a symbol, got {param}")

    return CompProc(formals, tail.cdr(), env)
