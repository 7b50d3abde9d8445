# Core type aliases for the evaluator's data model.
# Code and data share one representation: every form handed to the evaluator
# and every value it produces is an Expr (see scheme.types.expr).
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to Expr and are interchangeable.

from typing import Callable

from scheme.types.expr import Expr

# Runtime value alias
LispValue = Expr
# Forms alias (code-as-data)
SExpression = Expr

# Evaluator function type: the recursive evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
