import pytest

from scheme.errors import (
    SchemeArityError, SchemeMalformedForm, SchemeTypeMismatch, SchemeUnboundVariable,
)
from scheme.evaluation.special_forms import SPECIAL_FORMS
from scheme.evaluation.special_forms.let_form import let_to_application
from scheme.reader.parser import read
from scheme.types.expr import Bool, Int, Nil, OK, Str, Sym, from_list

T = Bool(True)
F = Bool(False)


def test_special_form_keywords():
    assert set(SPECIAL_FORMS) == {
        "quote", "define", "set!", "and", "or", "if", "lambda", "cond", "let", "begin",
    }


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", Int(1)),
        ("(if #f 1 2)", Int(2)),
        ("(if #f 1)", F),
        ("(if '() 1)", F),
        ("(if '() 1 2)", F),
        ("(if 0 'yes 'no)", Sym("yes")),
        ("(if \"\" 'yes 'no)", Sym("yes")),
        ("(if (< 1 2) (+ 1 1) undefined-variable)", Int(2)),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


# ------------------ and / or ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and #t #t)", T),
        ("(and #t #f)", F),
        ("(and)", T),
        ("(and 1 2 3)", Int(3)),
        ("(and 1 '() 3)", Nil),
        ("(and #f undefined-variable)", F),
        ("(or #f #f)", F),
        ("(or #t #f)", T),
        ("(or #t #t)", T),
        ("(or)", T),
        ("(or #f 7)", Int(7)),
        ("(or 5 undefined-variable)", Int(5)),
        ("(or #f '())", Nil),
    ],
)
def test_and_or(run, source, expected):
    assert run(source) == expected


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond (#f 1) (#t 2))", Int(2)),
        ("(cond ((< 2 1) 'a) ((> 2 1) 'b) (else 'c))", Sym("b")),
        ("(cond (#f 1) (else 'fallback))", Sym("fallback")),
        ("(cond (#f 1))", T),
        ("(cond)", T),
        ("(cond (42))", Int(42)),
        ("(cond ('() 1) (#t 2))", Int(2)),
        ("(cond (#t 1 2 3))", Int(3)),
        ("(cond (#t 1) (undefined-variable 2))", Int(1)),
    ],
)
def test_cond(run, source, expected):
    assert run(source) == expected


def test_cond_does_not_evaluate_else(run):
    # `else` is never looked up, so it need not be bound
    assert run("(cond (else 1))") == Int(1)


# ------------------ quote / begin ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("'a", Sym("a")),
        ("'(1 2)", from_list([Int(1), Int(2)])),
        ("(quote (+ 1 2))", from_list([Sym("+"), Int(1), Int(2)])),
        ("'()", Nil),
        ("(begin 1 2 3)", Int(3)),
        ("(begin (define a 10) (define b 20) (+ a b))", Int(30)),
    ],
)
def test_quote_and_begin(run, source, expected):
    assert run(source) == expected


# ------------------ define / set! ------------------

def test_define_binds_and_returns_ok(run, env):
    assert run("(define x 10)").as_str() == "OK"
    assert run("(define x 10)") == OK
    assert env.lookup("x") == Int(10)
    assert run("x") == Int(10)


def test_define_overwrites(run):
    assert run("(define x 1) (define x 2) x") == Int(2)


def test_define_procedure_shorthand(run):
    assert run("(define (square n) (* n n)) (square 7)") == Int(49)


def test_define_procedure_with_several_body_forms(run):
    source = """
    (define (f n)
      (define doubled (* 2 n))
      (+ doubled 1))
    (f 20)
    """
    assert run(source) == Int(41)


def test_set_binds_in_current_frame(run, env):
    assert run("(set! a 1)") == OK
    assert env.lookup("a") == Int(1)


def test_set_inside_closure_shadows_outer_binding(run):
    source = """
    (define counter 1)
    (define (bump) (set! counter 99) counter)
    (bump)
    """
    assert run(source) == Int(99)
    assert run("counter") == Int(1)


# ------------------ lambda / application ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("((lambda (x y) (+ x y)) 1 2)", Int(3)),
        ("((lambda () 5))", Int(5)),
        ("((lambda (x) (define y 2) (* x y)) 21)", Int(42)),
        ("(((lambda (x) (lambda (y) (+ x y))) 3) 4)", Int(7)),
    ],
)
def test_lambda_application(run, source, expected):
    assert run(source) == expected


def test_self_applying_factorial(run):
    source = """
    ((lambda (f n) (f f n))
     (lambda (self n) (if (= n 0) 1 (* n (self self (- n 1)))))
     5)
    """
    assert run(source) == Int(120)


def test_recursive_define(run):
    source = """
    (define (fact n) (if (< n 2) 1 (* n (fact (- n 1)))))
    (fact 10)
    """
    assert run(source) == Int(3628800)


def test_closures_capture_their_defining_frame(run):
    source = """
    (define (make-adder n) (lambda (x) (+ x n)))
    (define add5 (make-adder 5))
    (define add10 (make-adder 10))
    (cons (add5 1) (add10 1))
    """
    assert run(source) == run("(cons 6 11)")


def test_lexical_not_dynamic_scope(run):
    source = """
    (define n 1)
    (define (get-n) n)
    (define (shadow n) (get-n))
    (shadow 99)
    """
    assert run(source) == Int(1)


def test_locals_do_not_leak_between_sibling_calls(run):
    run("(define (f a) (define local a) local)")
    assert run("(f 1)") == Int(1)
    with pytest.raises(SchemeUnboundVariable):
        run("local")
    with pytest.raises(SchemeUnboundVariable):
        run("a")


def test_closure_arity_mismatch(run):
    with pytest.raises(SchemeArityError):
        run("((lambda (x y) x) 1)")
    with pytest.raises(SchemeArityError):
        run("((lambda (x) x) 1 2)")


def test_calling_a_non_procedure(run):
    with pytest.raises(SchemeTypeMismatch):
        run("(1 2 3)")


# ------------------ let ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(let ((a 1) (b 2)) (> a b))", F),
        ("(let ((a 1) (b 2)) (< a b))", T),
        ("(let () 5)", Int(5)),
        ("(let ((x 2)) (let ((y 3)) (* x y)))", Int(6)),
        ("(let ((s \"hi\")) s)", Str("hi")),
        ("(let ((x 1)) (define y 2) (+ x y))", Int(3)),
    ],
)
def test_let(run, source, expected):
    assert run(source) == expected


def test_let_does_not_leak_bindings(run):
    run("(let ((a 1) (b 2)) (+ a b))")
    with pytest.raises(SchemeUnboundVariable):
        run("a")


def test_let_values_see_enclosing_scope(run):
    assert run("(define x 10) (let ((x 1) (y x)) y)") == Int(10)


def test_let_desugars_to_lambda_application():
    (form,) = read("(let ((a 1) (b 2)) (+ a b))")
    (expected,) = read("((lambda (a b) (+ a b)) 1 2)")
    assert let_to_application(form.cdr()) == expected


# ------------------ malformed forms ------------------

@pytest.mark.parametrize(
    "source",
    [
        "(quote)",
        "(quote 1 2)",
        "(if)",
        "(if #t)",
        "(if #t 1 2 3)",
        "(define)",
        "(define x)",
        "(define x 1 2)",
        "(define 1 2)",
        "(define (1 x) x)",
        "(set! x)",
        "(set! 1 2)",
        "(begin)",
        "(lambda (x))",
        "(lambda (1) 1)",
        "(lambda x x)",
        "(cond 1)",
        "(let ((a)) a)",
        "(let ((1 2)) 1)",
        "(let (a) a)",
        "(let ((a 1)))",
        "(and . 1)",
    ],
)
def test_malformed_forms(run, source):
    with pytest.raises(SchemeMalformedForm):
        run(source)
