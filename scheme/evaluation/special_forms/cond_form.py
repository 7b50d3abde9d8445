from scheme import EvaluatorFn
from scheme import SExpression, LispValue
from scheme.errors import SchemeMalformedForm
from scheme.evaluation.form_util import operands
from scheme.evaluation.special_forms.progn_form import eval_sequence
from scheme.types.environment import Environment
from scheme.types.expr import ELSE, TRUE, Pair


def cond_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (test expr...) ...).

    For each clause in order:
    - If the test is the symbol `else`, the clause matches without evaluating it.
    - Otherwise evaluate the test; a true value (not #f, not the empty list) matches.
    A matching clause evaluates its body sequentially and returns the last value;
    a clause with only a test returns the test's value.
    If no clause matches, returns #t.
    """
    for clause in operands(tail, "cond"):
        if not isinstance(clause, Pair):
            raise SchemeMalformedForm(f"cond clause must be a list, got {clause}")
        test = clause.car()
        body = clause.cdr()

        if test == ELSE:
            return eval_sequence(body, env, evaluate_fn, "cond") if not body.is_empty() else TRUE

        test_val = evaluate_fn(test, env)
        if test_val.is_true():
            if body.is_empty():
                return test_val
            return eval_sequence(body, env, evaluate_fn, "cond")

    # No clause matched
    return TRUE
