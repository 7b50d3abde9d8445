"""Shape checks shared by the special forms."""

from __future__ import annotations

from scheme import SExpression
from scheme.errors import SchemeMalformedForm
from scheme.types.expr import Nil, Pair


def operands(
    tail: SExpression, form: str, minimum: int = 0, maximum: int | None = None
) -> list[SExpression]:
    """Return the operands of a special form as a Python list.

    Raises SchemeMalformedForm when the operand list is improper or its
    length falls outside [minimum, maximum].
    """
    items: list[SExpression] = []
    cur = tail
    while isinstance(cur, Pair):
        items.append(cur.car())
        cur = cur.cdr()
    if cur is not Nil:
        raise SchemeMalformedForm(f"{form}: operands must form a proper list")
    if len(items) < minimum:
        raise SchemeMalformedForm(f"{form} requires at least {minimum} operand(s), got {len(items)}")
    if maximum is not None and len(items) > maximum:
        raise SchemeMalformedForm(f"{form} accepts at most {maximum} operand(s), got {len(items)}")
    return items
