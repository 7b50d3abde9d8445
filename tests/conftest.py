import pytest

from scheme.builtin.env_builtin import register
from scheme.evaluation.evaluator import evaluate
from scheme.interpreter import Interpreter
from scheme.reader.parser import TokenStream, lex
from scheme.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global frame with the builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without the prelude, so only the builtins are bound."""
    return Interpreter(prelude=None)


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`; return the last value."""
    def _run(source):
        result = None
        for expr in TokenStream(lex(source)).parse_all():
            result = evaluate(expr, env)
        return result
    return _run
