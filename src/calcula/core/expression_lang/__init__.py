"""
calcula expression language.

Tokenizer, parser, evaluator and name table for single-line arithmetic
with + - * / ^, unary minus, ( ) and [ ] grouping, the constants pi and e,
and unary functions such as sin, ln, log and lb.

Usage:
    from calcula.core.expression_lang import calculate, parse_expr, evaluate

    expr = parse_expr("2 + 3 * 4")
    evaluate(expr)                   # 14.0
    calculate("(2 + 3").error        # "Expected ')', got end of input"
"""

from calcula.core.expression_lang.calculator import (
    CalcResult,
    calculate,
    evaluate_lexer,
    evaluate_line,
)
from calcula.core.expression_lang.evaluator import evaluate
from calcula.core.expression_lang.parser import Parser, parse_expr
from calcula.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize

__all__ = [
    "CalcResult",
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "calculate",
    "evaluate",
    "evaluate_lexer",
    "evaluate_line",
    "parse_expr",
    "tokenize",
]
