from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.errors import SchemeMalformedForm
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment
from scheme.types.expr import OK, Sym


def set_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # Binds in the active frame; an outer binding of the same name is shadowed, not mutated.
    var_sym, val_expr = operands(tail, "set!", 2, 2)
    if not isinstance(var_sym, Sym):
        raise SchemeMalformedForm(f"set! first operand must be a symbol, got {var_sym}")
    env.define(var_sym, evaluate_fn(val_expr, env))
    return OK
