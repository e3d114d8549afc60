"""
Lexical tokenizer for C-like source code.

Produces typed tokens in one left-to-right pass. Comments and whitespace are
skipped, literal values are normalized to STR/NUM markers, and characters
that fit no token class are dropped.
"""
import logging
from collections import namedtuple
from enum import Enum

import config
from errors import InputTooLargeError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    KEYWORD = 'keyword'
    IDENTIFIER = 'identifier'
    OPERATOR = 'operator'
    LITERAL = 'literal'
    SEPARATOR = 'separator'
    COMMENT = 'comment'
    WHITESPACE = 'whitespace'
    UNKNOWN = 'unknown'


Token = namedtuple('Token', ['kind', 'lexeme'])

STRING_MARKER = "STR"
NUMBER_MARKER = "NUM"

KEYWORDS = frozenset([
    "auto", "break", "case", "char", "const", "continue",
    "default", "do", "double", "else", "enum", "extern",
    "float", "for", "goto", "if", "int", "long", "register",
    "return", "short", "signed", "sizeof", "static", "struct",
    "switch", "typedef", "union", "unsigned", "void", "volatile",
    "while", "inline",
])

OPERATOR_CHARS = frozenset("+-*/%=<>!&|^~.")
SEPARATOR_CHARS = frozenset("(){}[];,:")

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_WORD_START = _LETTERS | {"_"}
_WORD_CHARS = _WORD_START | _DIGITS
_NUMBER_CHARS = _DIGITS | {"."}


def tokenize(text, max_tokens=None, max_lexeme_length=None):
    """
    Split source text into a sequence of typed tokens.

    Args:
        text (str): Source code
        max_tokens (int, optional): Token limit, defaults to config.MAX_TOKENS
        max_lexeme_length (int, optional): Identifier length limit,
            defaults to config.MAX_LEXEME_LENGTH

    Returns:
        tuple: Token instances in source order

    Raises:
        InputTooLargeError: If the text yields more tokens than allowed or
            contains an overly long identifier
    """
    if max_tokens is None:
        max_tokens = config.MAX_TOKENS
    if max_lexeme_length is None:
        max_lexeme_length = config.MAX_LEXEME_LENGTH

    tokens = []
    length = len(text)
    idx = 0

    def emit(kind, lexeme):
        if len(tokens) >= max_tokens:
            raise InputTooLargeError('tokens', max_tokens, len(tokens) + 1)
        tokens.append(Token(kind, lexeme))

    while idx < length:
        ch = text[idx]
        nxt = text[idx + 1] if idx + 1 < length else ""

        if ch in _WHITESPACE:
            idx += 1
            continue

        if ch == '/' and nxt == '/':
            end = text.find('\n', idx + 2)
            idx = length if end == -1 else end
            continue

        if ch == '/' and nxt == '*':
            end = text.find('*/', idx + 2)
            # Unterminated comment runs to end of input
            idx = length if end == -1 else end + 2
            continue

        if ch == '"' or ch == "'":
            idx += 1
            while idx < length and text[idx] != ch:
                if text[idx] == '\\':
                    idx += 1
                idx += 1
            idx = min(idx + 1, length)
            emit(TokenKind.LITERAL, STRING_MARKER)
            continue

        if ch in _DIGITS:
            while idx < length and text[idx] in _NUMBER_CHARS:
                idx += 1
            emit(TokenKind.LITERAL, NUMBER_MARKER)
            continue

        if ch in _WORD_START:
            start = idx
            while idx < length and text[idx] in _WORD_CHARS:
                idx += 1
            word = text[start:idx]
            if len(word) > max_lexeme_length:
                raise InputTooLargeError('lexeme', max_lexeme_length, len(word))
            kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
            emit(kind, word)
            continue

        if ch in OPERATOR_CHARS:
            if nxt and nxt in OPERATOR_CHARS:
                emit(TokenKind.OPERATOR, ch + nxt)
                idx += 2
            else:
                emit(TokenKind.OPERATOR, ch)
                idx += 1
            continue

        if ch in SEPARATOR_CHARS:
            emit(TokenKind.SEPARATOR, ch)
            idx += 1
            continue

        # Noise such as '#', '@' or non-ASCII characters
        idx += 1

    logger.debug("Tokenized %d characters into %d tokens", length, len(tokens))
    return tuple(tokens)
