"""
  Reader: lexer and parser

- Streaming, lazy parsing: `TokenStream.parse_expr` returns one form at a
  time and None at end of input.
- Emits Expr trees:

    - integers -> Int
    - "strings" -> Str (backslash escapes \\n \\t \\" \\\\)
    - #t / #f -> Bool
    - #\\a, #\\space, #\\newline, #\\tab -> Char
    - symbols -> Sym
    - (a b c) -> Pair chain ending in Nil
    - (a . b) -> dotted Pair
    - 'x -> (quote x)
    - ; comments run to end of line
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from scheme import SExpression
from scheme.errors import SchemeIncompleteInput, SchemeRecursionError, SchemeSyntaxError
from scheme.types.expr import Bool, Char, Int, QUOTE, Str, Sym, from_list


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>#\\(?:newline|space|tab|return|.)(?![^\s()\'\";]))"  # character literals, named or single-char
    r"|(?P<boolean>#[tf](?![^\s()\'\";]))"  # #t / #f
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "tab": "\t",
    "return": "\r",
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos:].strip() == "":
                break
            if source[pos:].lstrip().startswith('"'):
                raise SchemeIncompleteInput("Unterminated string literal")
            raise SchemeSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        for name in TOKEN_RE.groupindex:
            if m.group(name) is not None:
                if name != "comment":
                    yield name, m.group(name)
                break


def _unescape(body: str) -> str:
    out: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            if nxt not in STRING_ESCAPES:
                raise SchemeSyntaxError(f"Unknown string escape \\{nxt}")
            out.append(STRING_ESCAPES[nxt])
        else:
            out.append(ch)
    return "".join(out)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Read the next form, or None at end of input."""
        try:
            return self._parse_form()
        except RecursionError as e:
            raise SchemeRecursionError("Input is nested too deeply to read") from e

    def _parse_form(self) -> Optional[SExpression]:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            if tok_val.startswith("#"):
                raise SchemeSyntaxError(f"Bad syntax: {tok_val}")
            if INT_RE.match(tok_val):
                return Int(int(tok_val))
            return Sym(tok_val)

        if tok_type == "boolean":
            self.advance()
            return Bool(tok_val == "#t")

        # Quote form
        if tok_type == "quote":
            self.advance()
            expr = self._parse_form()
            if expr is None:
                raise SchemeIncompleteInput("Expected an expression after quote")
            return from_list([QUOTE, expr])

        # List or dotted list
        if tok_type == "lparen":
            self.advance()
            items: list[SExpression] = []
            while True:
                tok_type, tok_val = self.peek()
                if tok_type == "rparen":
                    self.advance()
                    return from_list(items)
                if tok_type is None:
                    raise SchemeIncompleteInput("Unmatched '('")
                if tok_type == "symbol" and tok_val == ".":
                    if not items:
                        raise SchemeSyntaxError("Expected an expression before '.'")
                    self.advance()
                    cdr_expr = self._parse_form()
                    if cdr_expr is None or self.peek()[0] != "rparen":
                        raise SchemeSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    return from_list(items, cdr_expr)
                items.append(self._parse_form())

        if tok_type == "rparen":
            raise SchemeSyntaxError("Unexpected ')'")

        if tok_type == "char":
            self.advance()
            val = tok_val[2:]  # strip off "#\"
            return Char(NAMED_CHARS.get(val, val))

        # String
        if tok_type == "string":
            self.advance()
            return Str(_unescape(tok_val[1:-1]))

        raise SchemeSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def read(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
