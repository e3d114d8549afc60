"""Reduce token sequences to their control-structure skeleton."""
from tokenizer import TokenKind

BLOCK_START = "BLOCK_START"
BLOCK_END = "BLOCK_END"
PAREN_OPEN = "PAREN_OPEN"
PAREN_CLOSE = "PAREN_CLOSE"
OP = "OP"

SEPARATOR_SYMBOLS = {
    '{': BLOCK_START,
    '}': BLOCK_END,
    '(': PAREN_OPEN,
    ')': PAREN_CLOSE,
}


def extract_structure(tokens):
    """
    Map tokens to structural symbols.

    Keywords are kept as-is, braces and parentheses become block/paren
    markers, every operator becomes OP. Identifiers, literals and the other
    separators are dropped.

    Args:
        tokens: Sequence of Token

    Returns:
        tuple: Structural symbols (str) in source order
    """
    structure = []
    for token in tokens:
        if token.kind is TokenKind.KEYWORD:
            structure.append(token.lexeme)
        elif token.kind is TokenKind.SEPARATOR:
            symbol = SEPARATOR_SYMBOLS.get(token.lexeme)
            if symbol:
                structure.append(symbol)
        elif token.kind is TokenKind.OPERATOR:
            structure.append(OP)
    return tuple(structure)
