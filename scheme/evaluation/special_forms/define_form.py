from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.errors import SchemeMalformedForm
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment
from scheme.types.expr import OK, Pair, Sym


def define_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  ; shorthand for (define name (lambda (params...) body...))
    """
    operands(tail, "define", 2)

    target = tail.car()
    if isinstance(target, Sym):
        operands(tail, "define", 2, 2)
        env.define(target, evaluate_fn(tail.c("da"), env))
        return OK

    if isinstance(target, Pair) and isinstance(target.car(), Sym):
        procedure = evaluate_fn(target.cdr().make_lambda(tail.cdr()), env)
        env.define(target.car(), procedure)
        return OK

    raise SchemeMalformedForm(f"define expects a symbol or (name params...), got {target}")
