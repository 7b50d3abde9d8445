import logging

from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.errors import SchemeMalformedForm
from scheme.evaluation.form_util import operands
from scheme.types.environment import Environment
from scheme.types.expr import Pair, Sym, from_list

logger = logging.getLogger(__name__)


def let_to_application(tail: SExpression) -> SExpression:
    """Rewrite the operands of (let ((n1 v1) (n2 v2) ...) body...)
    into ((lambda (n1 n2 ...) body...) v1 v2 ...).
    """
    operands(tail, "let", 2)

    names: list[SExpression] = []
    values: list[SExpression] = []
    for binding in operands(tail.car(), "let bindings"):
        if not isinstance(binding, Pair):
            raise SchemeMalformedForm(f"let binding must be a (name value) list, got {binding}")
        name, value = operands(binding, "let binding", 2, 2)
        if not isinstance(name, Sym):
            raise SchemeMalformedForm(f"let binding name must be a symbol, got {name}")
        names.append(name)
        values.append(value)

    procedure = from_list(names).make_lambda(tail.cdr())
    return Pair(procedure, from_list(values))


def let_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    application = let_to_application(tail)
    logger.debug("let rewritten to %s", application)
    return evaluate_fn(application, env)
