"""
Recursive descent parser for the calcula expression language.

Grammar (precedence low to high):
    expr        → add_expr
    add_expr    → mul_expr (("+"|"-") mul_expr)*
    mul_expr    → pow_expr (("*"|"/") pow_expr)*
    pow_expr    → unary (("^") unary)*
    unary       → "-" unary | term
    term        → NUMBER | constant | call | "(" expr ")" | "[" expr "]"
    constant    → "pi" | "e"
    call        → FUNC ( "(" expr ")" | "[" expr "]" | pow_expr )

All binary operators fold to the left, "^" included: 2^3^2 is (2^3)^2.
A function followed by a bracket takes the bracketed group as its argument;
otherwise its argument is one pow_expr, so "sin pi^2" is sin(pi^2) and
"sin pi + 1" is sin(pi) + 1.
"""

from __future__ import annotations

import logging

from calcula.core.errors import ExpressionParseError
from calcula.core.expression_lang.functions import ConstantEntry, lookup
from calcula.core.expression_lang.tokenizer import Lexer, Token, TokenKind
from calcula.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Call,
    Constant,
    Expr,
    Number,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

_ADD_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MUL_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}

_CLOSERS: dict[TokenKind, TokenKind] = {
    TokenKind.LPAREN: TokenKind.RPAREN,
    TokenKind.LBRACKET: TokenKind.RBRACKET,
}


class Parser:
    """Recursive descent parser over a Lexer's lookahead token.

    Every ``parse_*`` method expects ``lexer.current`` to be the first token
    of its production and leaves it on the first token after it.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer

    @property
    def current(self) -> Token:
        return self.lexer.current

    @property
    def at_end(self) -> bool:
        """True once the lexer has run out of tokens."""
        return self.current.kind == TokenKind.INVALID

    def advance(self) -> Token:
        """Consume the current token and fetch the next one."""
        tok = self.current
        if not self.lexer.next_token():
            self._check_lexer()
        return tok

    def _check_lexer(self) -> None:
        """Raise the lexer's failure as a parse error, if it has one."""
        err = self.lexer.error
        if err is not None:
            raise ExpressionParseError(err.message, err.pos) from err

    def expect(self, kind: TokenKind) -> Token:
        if self.current.kind != kind:
            raise self._error(f"Expected '{kind.display}', got {self._describe(self.current)}")
        return self.advance()

    # -- Entry points --

    def parse(self) -> Expr:
        """Parse a whole line: an expression followed by end of input."""
        expr = self.parse_expr()
        if not self.at_end:
            raise self._error(f"Unexpected token after expression: {self._describe(self.current)}")
        return expr

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """Top-level: add_expr.

        A lexer primed by the caller may already hold a failed token.
        """
        if self.at_end:
            self._check_lexer()
        return self.parse_add()

    def parse_add(self) -> Expr:
        """mul_expr (('+' | '-') mul_expr)*"""
        left = self.parse_mul()
        while self.current.kind in _ADD_OPS:
            op = _ADD_OPS[self.advance().kind]
            right = self.parse_mul()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_mul(self) -> Expr:
        """pow_expr (('*' | '/') pow_expr)*"""
        left = self.parse_pow()
        while self.current.kind in _MUL_OPS:
            op = _MUL_OPS[self.advance().kind]
            right = self.parse_pow()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_pow(self) -> Expr:
        """unary ('^' unary)*"""
        left = self.parse_unary()
        while self.current.kind == TokenKind.CARET:
            self.advance()
            right = self.parse_unary()
            left = BinaryExpr(op=BinaryOp.POW, left=left, right=right)
        return left

    def parse_unary(self) -> Expr:
        """'-' unary | term"""
        if self.current.kind == TokenKind.MINUS:
            self.advance()
            operand = self.parse_unary()
            return UnaryExpr(op=UnaryOp.NEG, operand=operand)
        return self.parse_term()

    def parse_term(self) -> Expr:
        """NUMBER | constant | call | '(' expr ')' | '[' expr ']'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Number(value=tok.value)

        if tok.kind == TokenKind.NAME:
            return self._parse_name()

        if tok.kind in _CLOSERS:
            self.advance()
            expr = self.parse_expr()
            self.expect(_CLOSERS[tok.kind])
            return expr

        raise self._error(f"Unexpected {self._describe(tok)}")

    def _parse_name(self) -> Expr:
        """Resolve an identifier to a constant or a call."""
        tok = self.current
        name = tok.text(self.lexer.source)
        entry = lookup(name)
        if entry is None:
            raise self._error(f"Unknown name '{name}'")
        self.advance()

        if isinstance(entry, ConstantEntry):
            return Constant(name=name, value=entry.value)

        if self.current.kind in _CLOSERS:
            arg = self.parse_term()
        else:
            arg = self.parse_pow()
        return Call(name=name, arg=arg)

    # -- Error helpers --

    def _describe(self, tok: Token) -> str:
        if tok.kind == TokenKind.INVALID:
            return "end of input"
        if tok.kind in (TokenKind.NAME, TokenKind.NUMBER):
            return f"{tok.kind.display.lower()} '{tok.text(self.lexer.source)}'"
        return f"'{tok.kind.display}'"

    def _error(self, message: str) -> ExpressionParseError:
        pos = len(self.lexer.source) if self.at_end else self.current.start
        logger.debug("Parse error at %d in %r: %s", pos, self.lexer.source, message)
        return ExpressionParseError(message, pos)


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "sin pi/2 + 12/3")

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionParseError: If the expression is invalid, including
            lexical errors reported by the tokenizer.
    """
    lexer = Lexer(source)
    parser = Parser(lexer)
    parser.advance()
    return parser.parse()
