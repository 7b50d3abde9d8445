import pytest

from scheme.builtin.env_builtin import BUILTINS, DIVISION_BY_ZERO
from scheme.errors import SchemeArityError, SchemeTypeMismatch
from scheme.types.expr import Bool, Int, Nil, Pair, Proc, Sym, from_list


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 1)", Int(2)),
        ("(+ 1 1 1)", Int(3)),
        ("(+ 1 1 -1 -1)", Int(0)),
        ("(+)", Int(0)),
        ("(*)", Int(1)),
        ("(- 10 3 2)", Int(5)),
        ("(- 5)", Int(5)),
        ("(* 2 3 4)", Int(24)),
        ("(/ 12 3)", Int(4)),
        ("(/ 7 2)", Int(3)),
        ("(/ -7 2)", Int(-3)),
        ("(/ 7 -2)", Int(-3)),
        ("(/ 100 5 2)", Int(10)),
        ("(- (+ 3 (* 8 5)) 1)", Int(42)),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", Int(57)),
        ("(/ 2 0)", DIVISION_BY_ZERO),
        ("(/ 2 1 0)", DIVISION_BY_ZERO),
        ("(< 1 2)", Bool(True)),
        ("(< 2 1)", Bool(False)),
        ("(< 1 2 3)", Bool(True)),
        ("(> 3 2 2)", Bool(False)),
        ("(> 2 1)", Bool(True)),
        ("(= 1 1)", Bool(True)),
        ("(= 1 2)", Bool(False)),
        ("(eq? 'a 'a)", Bool(True)),
        ("(eq? '(1 2) '(1 2))", Bool(True)),
        ("(eq? '(1) 1)", Bool(False)),
        ("(= '(1 2) '(1))", Bool(False)),
        ("(eq? \"a\" 'a)", Bool(False)),
    ],
)
def test_arithmetic_and_comparison(run, source, expected):
    assert run(source) == expected


def test_division_by_zero_is_a_symbol():
    assert DIVISION_BY_ZERO == Sym("divide-by-zero")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(null? '())", Bool(True)),
        ("(null? '(1))", Bool(False)),
        ("(boolean? #f)", Bool(True)),
        ("(boolean? 0)", Bool(False)),
        ("(symbol? 'a)", Bool(True)),
        ("(symbol? \"a\")", Bool(False)),
        ("(string? \"a\")", Bool(True)),
        ("(string? #\\a)", Bool(False)),
        ("(char? #\\a)", Bool(True)),
        ("(integer? 42)", Bool(True)),
        ("(integer? 'x)", Bool(False)),
        ("(pair? '(1 2))", Bool(True)),
        ("(pair? '())", Bool(True)),
        ("(pair? 1)", Bool(False)),
    ],
)
def test_predicates(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (cons 1 2))", Int(1)),
        ("(cdr (cons 1 2))", Int(2)),
        ("(cons 1 2)", Pair(Int(1), Int(2))),
        ("(cons 1 '())", from_list([Int(1)])),
        ("(car '(1 2))", Int(1)),
        ("(cdr '(1 2))", from_list([Int(2)])),
        ("(cdr '(1))", Nil),
        ("(car (cdr '(1 2 3)))", Int(2)),
    ],
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+ 1 'a)", SchemeTypeMismatch),
        ("(< 1 \"2\")", SchemeTypeMismatch),
        ("(car 1)", SchemeTypeMismatch),
        ("(car '())", SchemeTypeMismatch),
        ("(cdr '())", SchemeTypeMismatch),
        ("(cons 1)", SchemeArityError),
        ("(null? 1 2)", SchemeArityError),
        ("(-)", SchemeArityError),
        ("(/)", SchemeArityError),
    ],
)
def test_builtin_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_builtins_are_registered_as_procedures(env):
    expected = {
        "null?", "boolean?", "symbol?", "string?", "char?", "integer?", "pair?",
        "+", "-", "*", "/", "<", ">", "=", "eq?", "car", "cdr", "cons",
    }
    assert set(BUILTINS) == expected
    for name in expected:
        proc = env.lookup(name)
        assert isinstance(proc, Proc)
        assert proc.name == name


def test_builtin_called_with_argument_list():
    add = BUILTINS["+"]
    assert add(from_list([Int(2), Int(3)])) == Int(5)
    assert add(Nil) == Int(0)
