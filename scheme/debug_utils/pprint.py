from __future__ import annotations

from typing import Optional

from scheme.types.expr import (
    Bool,
    Char,
    CompProc,
    Expr,
    Int,
    NilType,
    Pair,
    Proc,
    Str,
    Sym,
)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_LAMBDA = "\033[92m"
COLOR_PROC = "\033[95m"
COLOR_STRING = "\033[93m"
COLOR_SPECIAL_FORM = "\033[90m"

SPECIAL_FORMS = {"quote", "define", "set!", "begin", "if", "lambda", "and", "or", "cond", "let"}

CHAR_NAMES: dict[str, str] = {
    " ": "space",
    "\n": "newline",
    "\t": "tab",
    "\r": "return",
}

STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _paint(text: str, color: Optional[str]) -> str:
    return f"{color}{text}{RESET}" if color else text


# ----------------- Atom rendering -----------------
def render_atom(obj: Expr, color: bool = False) -> str:
    if isinstance(obj, Int):
        return str(obj.value)
    if isinstance(obj, Bool):
        return "#t" if obj.value else "#f"
    if isinstance(obj, Str):
        text = '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in obj.value) + '"'
        return _paint(text, COLOR_STRING if color else None)
    if isinstance(obj, Char):
        return "#\\" + CHAR_NAMES.get(obj.value, obj.value)
    if isinstance(obj, Sym):
        if not color:
            return obj.name
        return _paint(obj.name, COLOR_SPECIAL_FORM if obj.name in SPECIAL_FORMS else COLOR_SYMBOL)
    if isinstance(obj, NilType):
        return "()"
    if isinstance(obj, Proc):
        return _paint(f"#<procedure {obj.name}>", COLOR_PROC if color else None)
    if isinstance(obj, CompProc):
        return _paint("#<compound-procedure>", COLOR_LAMBDA if color else None)
    return repr(obj)


# ----------------- Pretty printer -----------------
def pprint_expr(obj: Expr, color: bool = False) -> str:
    """Render `obj` as source text: lists in parentheses, elements space separated.

    An improper tail is written after a dot: ``(1 . 2)``.
    """
    if not isinstance(obj, Pair):
        return render_atom(obj, color)

    parts = [pprint_expr(item, color) for item in obj.collect()]
    tail = obj.tail()
    if not tail.is_empty():
        parts.append(".")
        parts.append(pprint_expr(tail, color))
    return "(" + " ".join(parts) + ")"


def print_expr(obj: Expr, color: bool = False) -> None:
    print(pprint_expr(obj, color=color))
