"""Expression data model.

Code and values share a single representation: a closed family of Expr
variants. Lists are right-nested chains of Pair cells terminated by Nil, so
a program like ``(+ 1 2)`` is the same kind of object a procedure returns
from ``(cons 1 2)``.

Every variant answers every predicate (``is_pair``, ``is_sym``, ...). Typed
accessors (``as_int``, ``car``, ...) are only valid on the matching variant
and raise SchemeTypeMismatch otherwise; the evaluator checks a predicate
before calling an accessor, so in well-formed programs a mismatch reveals
malformed input.
"""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, TYPE_CHECKING

from scheme.errors import SchemeTypeMismatch

if TYPE_CHECKING:
    from scheme.types.environment import Environment


class Expr:
    """Base of all expression variants."""

    __slots__ = ()

    # --- Variant predicates ---
    def is_int(self) -> bool:
        return False

    def is_str(self) -> bool:
        return False

    def is_sym(self) -> bool:
        return False

    def is_bool(self) -> bool:
        return False

    def is_char(self) -> bool:
        return False

    def is_pair(self) -> bool:
        """True for Pair cells and for Nil, so "rest of list" checks are uniform."""
        return False

    def is_empty(self) -> bool:
        return False

    def is_proc(self) -> bool:
        return False

    def is_cproc(self) -> bool:
        return False

    def is_self(self) -> bool:
        """Self-evaluating: Int, Str, Bool and Char."""
        return False

    # --- Truthiness ---
    def is_false(self) -> bool:
        """#f and the empty list are false; everything else is true."""
        return False

    def is_true(self) -> bool:
        return not self.is_false()

    # --- Typed accessors ---
    def as_int(self) -> int:
        raise SchemeTypeMismatch(f"Expected an integer, got {self}")

    def as_bool(self) -> bool:
        raise SchemeTypeMismatch(f"Expected a boolean, got {self}")

    def as_str(self) -> str:
        raise SchemeTypeMismatch(f"Expected a string or symbol, got {self}")

    def as_char(self) -> str:
        raise SchemeTypeMismatch(f"Expected a character, got {self}")

    def as_proc(self) -> Callable[[Expr], Expr]:
        raise SchemeTypeMismatch(f"Expected a primitive procedure, got {self}")

    # --- Structural accessors ---
    def car(self) -> Expr:
        raise SchemeTypeMismatch(f"car: expected a pair, got {self}")

    def cdr(self) -> Expr:
        raise SchemeTypeMismatch(f"cdr: expected a pair, got {self}")

    def c(self, path: str) -> Expr:
        """Walk `path` left to right: 'a' takes the car, 'd' the cdr.

        ``form.c("dda")`` is the third element of `form`.
        """
        cur: Expr = self
        for step in path:
            if step == "a":
                cur = cur.car()
            elif step == "d":
                cur = cur.cdr()
            else:
                raise ValueError(f"Invalid path step {step!r} in {path!r}")
        return cur

    def is_last(self) -> bool:
        """True when the receiver is the final cell of a list."""
        return isinstance(self, Pair) and self.cdr().is_empty()

    def collect(self) -> list[Expr]:
        """Flatten a Pair chain into its elements (display helper).

        An improper tail is not included; see Pair.tail().
        """
        items: list[Expr] = []
        cur: Expr = self
        while isinstance(cur, Pair):
            items.append(cur.car())
            cur = cur.cdr()
        return items

    def length(self) -> int:
        """Number of elements of a proper list."""
        n = 0
        cur: Expr = self
        while isinstance(cur, Pair):
            n += 1
            cur = cur.cdr()
        if cur is not Nil:
            raise SchemeTypeMismatch(f"Expected a proper list, got {self}")
        return n

    # --- Special-form recognisers ---
    def is_tagged(self, tag: Sym) -> bool:
        return isinstance(self, Pair) and self.car() == tag

    def is_quote(self) -> bool:
        return self.is_tagged(QUOTE)

    def is_assign(self) -> bool:
        return self.is_tagged(SET)

    def is_def(self) -> bool:
        return self.is_tagged(DEFINE)

    def is_begin(self) -> bool:
        return self.is_tagged(BEGIN)

    def is_if(self) -> bool:
        return self.is_tagged(IF)

    def is_lambda(self) -> bool:
        return self.is_tagged(LAMBDA)

    def is_and(self) -> bool:
        return self.is_tagged(AND)

    def is_or(self) -> bool:
        return self.is_tagged(OR)

    def is_cond(self) -> bool:
        return self.is_tagged(COND)

    def is_let(self) -> bool:
        return self.is_tagged(LET)

    def make_lambda(self, body: Expr) -> Expr:
        """Build ``(lambda <self> . body)`` with the receiver as the parameter list.

        `body` is the list of body forms, as found after the bindings of a `let`.
        """
        return Pair(LAMBDA, Pair(self, body))

    def __str__(self) -> str:
        from scheme.debug_utils.pprint import pprint_expr
        return pprint_expr(self)


class Int(Expr):
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def is_int(self) -> bool:
        return True

    def is_self(self) -> bool:
        return True

    def as_int(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Int) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Int, self.value))

    def __repr__(self) -> str:
        return f"Int({self.value!r})"


class Str(Expr):
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def is_str(self) -> bool:
        return True

    def is_self(self) -> bool:
        return True

    def as_str(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Str) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Str, self.value))

    def __repr__(self) -> str:
        return f"Str({self.value!r})"


class Sym(Expr):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def is_sym(self) -> bool:
        return True

    def as_str(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sym) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Sym({self.name!r})"


class Bool(Expr):
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def is_bool(self) -> bool:
        return True

    def is_self(self) -> bool:
        return True

    def is_false(self) -> bool:
        return not self.value

    def as_bool(self) -> bool:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Bool) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Bool, self.value))

    def __repr__(self) -> str:
        return f"Bool({self.value!r})"


class Char(Expr):
    __slots__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise SchemeTypeMismatch(f"A character holds exactly one code point, got {value!r}")
        self.value = value

    def is_char(self) -> bool:
        return True

    def is_self(self) -> bool:
        return True

    def as_char(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Char, self.value))

    def __repr__(self) -> str:
        return f"Char({self.value!r})"


class Pair(Expr):
    __slots__ = ("_car", "_cdr")

    def __init__(self, car: Expr, cdr: Expr):
        self._car = car
        self._cdr = cdr

    def is_pair(self) -> bool:
        return True

    def car(self) -> Expr:
        return self._car

    def cdr(self) -> Expr:
        return self._cdr

    def tail(self) -> Expr:
        """The terminator of the chain: Nil for a proper list."""
        cur: Expr = self
        while isinstance(cur, Pair):
            cur = cur.cdr()
        return cur

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        a: Expr = self
        b = other
        # Walk the spine iteratively; recurse only into the cars
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a.car() != b.car():
                return False
            a, b = a.cdr(), b.cdr()
        # One side ran out first, or `other` was never a Pair
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pair({self._car!r}, {self._cdr!r})"


class NilType(Expr):
    """The empty list. There is exactly one instance: Nil."""

    __slots__ = ()
    _instance: Optional[NilType] = None

    def __new__(cls) -> NilType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_pair(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return True

    def is_false(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NilType)

    def __hash__(self) -> int:
        return hash(NilType)

    def __repr__(self) -> str:
        return "Nil"


Nil = NilType()


class Proc(Expr):
    """A native procedure. Its function receives the evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Expr], Expr]):
        self.name = name
        self.fn = fn

    def is_proc(self) -> bool:
        return True

    def as_proc(self) -> Callable[[Expr], Expr]:
        return self.fn

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Proc) and self.fn is other.fn

    def __hash__(self) -> int:
        return id(self.fn)

    def __repr__(self) -> str:
        return f"Proc({self.name!r})"


class CompProc(Expr):
    """A closure: formal parameters, body forms and the defining frame.

    Compared by identity only.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: Expr, body: Expr, env: Environment):
        self.formals = formals
        self.body = body
        self.env = env

    def is_cproc(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"CompProc({self.formals})"


def from_list(items: Iterable[Expr], tail: Expr = Nil) -> Expr:
    """Build a Pair chain from `items`, ending in `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


TRUE = Bool(True)
FALSE = Bool(False)

# Returned by define/set! and by the evaluator's fallback branch
OK = Sym("OK")

QUOTE = Sym("quote")
SET = Sym("set!")
DEFINE = Sym("define")
BEGIN = Sym("begin")
IF = Sym("if")
LAMBDA = Sym("lambda")
AND = Sym("and")
OR = Sym("or")
COND = Sym("cond")
LET = Sym("let")
ELSE = Sym("else")
