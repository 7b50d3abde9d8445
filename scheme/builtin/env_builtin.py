"""Built-in procedures for the global environment.

Every builtin is a plain function taking the evaluated argument list (a Pair
chain) and returning an Expr. `register` wraps each one in a Proc and binds
it in the root frame under its fixed name.
"""
from __future__ import annotations

from typing import Callable

from scheme import LispValue
from scheme.errors import SchemeArityError, SchemeTypeMismatch
from scheme.types.environment import Environment
from scheme.types.expr import Bool, Expr, Int, Pair, Proc, Sym, TRUE, FALSE

# Returned by `/` when a divisor is zero
DIVISION_BY_ZERO = Sym("divide-by-zero")


def _arguments(name: str, args: LispValue, count: int | None = None) -> list[LispValue]:
    """Unpack the argument list, checking the count when one is required."""
    values = args.collect()
    if count is not None and len(values) != count:
        raise SchemeArityError(
            f"{name} requires exactly {count} argument{'s' if count != 1 else ''}, got {len(values)}"
        )
    return values


def _predicate(name: str, test: Callable[[Expr], bool]) -> Callable[[LispValue], LispValue]:
    def check(args: LispValue) -> LispValue:
        (value,) = _arguments(name, args, 1)
        return Bool(test(value))
    check.__name__ = name
    return check


# -------------------------------
# Type predicates
# -------------------------------
is_null = _predicate("null?", lambda e: e.is_empty())
is_boolean = _predicate("boolean?", lambda e: e.is_bool())
is_symbol = _predicate("symbol?", lambda e: e.is_sym())
is_string = _predicate("string?", lambda e: e.is_str())
is_char = _predicate("char?", lambda e: e.is_char())
is_integer = _predicate("integer?", lambda e: e.is_int())
# The empty list counts as a pair, matching Expr.is_pair
is_pair = _predicate("pair?", lambda e: e.is_pair())


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: LispValue) -> LispValue:
    """Sum of all arguments; 0 with none."""
    result = 0
    for x in _arguments("+", args):
        result += x.as_int()
    return Int(result)


def sub(args: LispValue) -> LispValue:
    """Subtract all subsequent integers from the first."""
    values = _arguments("-", args)
    if not values:
        raise SchemeArityError("- requires at least 1 argument")
    result = values[0].as_int()
    for x in values[1:]:
        result -= x.as_int()
    return Int(result)


def mul(args: LispValue) -> LispValue:
    """Product of all arguments; 1 with none."""
    result = 1
    for x in _arguments("*", args):
        result *= x.as_int()
    return Int(result)


def _quotient(n: int, d: int) -> int:
    # Integer division truncating toward zero
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def div(args: LispValue) -> LispValue:
    """Divide the first integer by each of the rest in turn.

    A zero divisor yields the symbol `divide-by-zero` rather than an error.
    """
    values = _arguments("/", args)
    if not values:
        raise SchemeArityError("/ requires at least 1 argument")
    result = values[0].as_int()
    for x in values[1:]:
        d = x.as_int()
        if d == 0:
            return DIVISION_BY_ZERO
        result = _quotient(result, d)
    return Int(result)


# -------------------------------
# Comparison
# -------------------------------
def lt(args: LispValue) -> LispValue:
    values = [x.as_int() for x in _arguments("<", args)]
    return Bool(all(a < b for a, b in zip(values, values[1:])))


def gt(args: LispValue) -> LispValue:
    values = [x.as_int() for x in _arguments(">", args)]
    return Bool(all(a > b for a, b in zip(values, values[1:])))


def equals(args: LispValue) -> LispValue:
    """Return #t if all arguments are structurally equal (or zero/one arg), else #f."""
    values = _arguments("=", args)
    if len(values) <= 1:
        return TRUE
    first = values[0]
    for other in values[1:]:
        if first != other:
            return FALSE
    return TRUE


# -------------------------------
# List operations
# -------------------------------
def cons(args: LispValue) -> LispValue:
    head, tail = _arguments("cons", args, 2)
    return Pair(head, tail)


def car(args: LispValue) -> LispValue:
    (lst,) = _arguments("car", args, 1)
    if lst.is_empty():
        raise SchemeTypeMismatch("car: cannot take the car of the empty list")
    return lst.car()


def cdr(args: LispValue) -> LispValue:
    (lst,) = _arguments("cdr", args, 1)
    if lst.is_empty():
        raise SchemeTypeMismatch("cdr: cannot take the cdr of the empty list")
    return lst.cdr()


BUILTINS: dict[str, Callable[[LispValue], LispValue]] = {
    'null?': is_null,
    'boolean?': is_boolean,
    'symbol?': is_symbol,
    'string?': is_string,
    'char?': is_char,
    'integer?': is_integer,
    'pair?': is_pair,
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '<': lt,
    '>': gt,
    '=': equals,
    'eq?': equals,
    'car': car,
    'cdr': cdr,
    'cons': cons,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({name: Proc(name, fn) for name, fn in BUILTINS.items()})
