"""Registry of special forms for the evaluator.

Maps keywords to handler functions that implement non-standard evaluation
rules. The evaluator consults this table, by the symbol in head position,
before ordinary procedure application. Every handler takes the operand list
of the form, the active environment and the evaluator function.
"""

from scheme.evaluation.special_forms.quote_forms import quote_form
from scheme.evaluation.special_forms.set_form import set_form
from scheme.evaluation.special_forms.define_form import define_form
from scheme.evaluation.special_forms.progn_form import begin_form
from scheme.evaluation.special_forms.if_form import if_form
from scheme.evaluation.special_forms.lambda_form import lambda_form
from scheme.evaluation.special_forms.logic_forms import and_form, or_form
from scheme.evaluation.special_forms.cond_form import cond_form
from scheme.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "set!": set_form,
    "define": define_form,
    "begin": begin_form,
    "if": if_form,
    "lambda": lambda_form,
    "and": and_form,
    "or": or_form,
    "cond": cond_form,
    "let": let_form,
}
