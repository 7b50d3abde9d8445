"""Runtime environment.

An Environment is one frame of the lexical scope chain: a mapping from
variable names to evaluated values plus a link to the enclosing frame.
Closures keep a reference to the frame they were created in, so a frame may
be shared by several closures and outlives the call that created it for as
long as one of them is reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from scheme import LispValue, SExpression
from scheme.errors import SchemeArityError, SchemeMalformedForm, SchemeUnboundVariable
from scheme.types.expr import Pair, Sym


class Environment:
    """Hierarchical mapping from variable names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str | Sym, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only; an existing binding is replaced."""
        if isinstance(name, Sym):
            name = name.name
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str | Sym) -> LispValue:
        """Look up the value bound to `name`, searching outwards.

        Raises SchemeUnboundVariable if no frame binds it.
        """
        if isinstance(name, Sym):
            name = name.name
        env = self.find(name)
        if env is None:
            raise SchemeUnboundVariable(f"Unbound variable: {name}")
        return env.vars[name]

    def parent(self) -> Optional[Environment]:
        return self.outer

    def extend(self, formals: SExpression, args: LispValue) -> Environment:
        """Return a child frame binding each formal to the matching argument.

        `formals` and `args` are proper lists of equal length.
        """
        child = Environment(outer=self)
        params, values = formals, args
        while isinstance(params, Pair) and isinstance(values, Pair):
            param = params.car()
            if not isinstance(param, Sym):
                raise SchemeMalformedForm(f"Formal parameter must be a symbol, got {param}")
            child.vars[param.name] = values.car()
            params, values = params.cdr(), values.cdr()
        if params.is_empty() and values.is_empty():
            return child
        if not params.is_pair():
            raise SchemeMalformedForm(f"Formal parameters must be a list, got {formals}")
        raise SchemeArityError(
            f"Expected {_count(formals)} argument(s), got {_count(args)}"
        )

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the root."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Frame sizes along the chain; the root holds the builtins."""
        sizes = []
        env: Optional[Environment] = self
        while env is not None:
            sizes.append(str(len(env.vars)))
            env = env.outer
        return f"<Environment chain: {' -> '.join(sizes)}>"


def _count(lst: LispValue) -> int:
    n = 0
    while isinstance(lst, Pair):
        n += 1
        lst = lst.cdr()
    return n
