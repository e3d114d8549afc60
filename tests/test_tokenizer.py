"""
Unit tests for tokenizer.py and structure.py
Tests token classification, literal normalization and structure extraction
"""
import unittest
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from errors import InputTooLargeError
from structure import extract_structure
from tokenizer import Token, TokenKind, tokenize

K = TokenKind.KEYWORD
I = TokenKind.IDENTIFIER
O = TokenKind.OPERATOR
L = TokenKind.LITERAL
S = TokenKind.SEPARATOR


class TestTokenize(unittest.TestCase):
    """Test token classification"""

    def test_empty_string(self):
        self.assertEqual(tokenize(""), ())

    def test_whitespace_only(self):
        self.assertEqual(tokenize("  \t\n\r\n "), ())

    def test_declaration_with_line_comment(self):
        result = tokenize("int x = 5; // comment")
        self.assertEqual(list(result), [
            Token(K, "int"),
            Token(I, "x"),
            Token(O, "="),
            Token(L, "NUM"),
            Token(S, ";"),
        ])

    def test_returns_tuple(self):
        self.assertIsInstance(tokenize("int x;"), tuple)

    def test_keyword_prefix_is_identifier(self):
        result = tokenize("integer returned")
        self.assertEqual([t.kind for t in result], [I, I])

    def test_identifier_with_digits_and_underscores(self):
        result = tokenize("_tmp2 count_1")
        self.assertEqual(list(result), [Token(I, "_tmp2"), Token(I, "count_1")])

    def test_string_literal_normalized(self):
        result = tokenize('char *s = "hello world";')
        self.assertEqual(list(result), [
            Token(K, "char"),
            Token(O, "*"),
            Token(I, "s"),
            Token(O, "="),
            Token(L, "STR"),
            Token(S, ";"),
        ])

    def test_escaped_quote_inside_string(self):
        result = tokenize('"a\\"b" x')
        self.assertEqual(list(result), [Token(L, "STR"), Token(I, "x")])

    def test_char_literal(self):
        result = tokenize("c = '\\n';")
        self.assertEqual(list(result), [Token(I, "c"), Token(O, "="), Token(L, "STR"), Token(S, ";")])

    def test_literal_content_ignored(self):
        self.assertEqual(tokenize('x = "abc";'), tokenize('x = "something else";'))
        self.assertEqual(tokenize("x = 1;"), tokenize("x = 42.5;"))

    def test_number_with_multiple_dots(self):
        result = tokenize("3.14.15")
        self.assertEqual(list(result), [Token(L, "NUM")])

    def test_hex_number_splits(self):
        # No hex grammar: '0' is a number, 'x1F' an identifier
        result = tokenize("0x1F")
        self.assertEqual(list(result), [Token(L, "NUM"), Token(I, "x1F")])

    def test_two_character_operators(self):
        result = tokenize("a += b == c")
        self.assertEqual([t.lexeme for t in result if t.kind is O], ["+=", "=="])

    def test_operator_greedy_pairing(self):
        result = tokenize("x=-1")
        self.assertEqual(list(result), [Token(I, "x"), Token(O, "=-"), Token(L, "NUM")])

    def test_arrow_and_dot(self):
        result = tokenize("p->next.value")
        self.assertEqual(list(result), [
            Token(I, "p"),
            Token(O, "->"),
            Token(I, "next"),
            Token(O, "."),
            Token(I, "value"),
        ])

    def test_separators(self):
        result = tokenize("()[]{};,:")
        self.assertEqual([t.lexeme for t in result], list("()[]{};,:"))
        self.assertTrue(all(t.kind is S for t in result))

    def test_block_comment_skipped(self):
        result = tokenize("a /* b c\n d */ e")
        self.assertEqual(list(result), [Token(I, "a"), Token(I, "e")])

    def test_unterminated_block_comment(self):
        result = tokenize("int /* never closed x = 1;")
        self.assertEqual(list(result), [Token(K, "int")])

    def test_unterminated_string(self):
        result = tokenize('x = "no end; int y;')
        self.assertEqual(list(result), [Token(I, "x"), Token(O, "="), Token(L, "STR")])

    def test_line_comment_at_end_without_newline(self):
        result = tokenize("x // trailing")
        self.assertEqual(list(result), [Token(I, "x")])

    def test_division_not_comment(self):
        result = tokenize("a / b")
        self.assertEqual(list(result), [Token(I, "a"), Token(O, "/"), Token(I, "b")])

    def test_noise_characters_dropped(self):
        result = tokenize("#include <stdio.h>")
        self.assertEqual(list(result), [
            Token(I, "include"),
            Token(O, "<"),
            Token(I, "stdio"),
            Token(O, "."),
            Token(I, "h"),
            Token(O, ">"),
        ])

    def test_non_ascii_dropped(self):
        result = tokenize("café @ $")
        self.assertEqual(list(result), [Token(I, "caf")])


class TestTokenizeLimits(unittest.TestCase):
    """Test explicit size limits"""

    def test_token_limit_exceeded(self):
        with self.assertRaises(InputTooLargeError) as ctx:
            tokenize("a b c", max_tokens=2)
        self.assertEqual(ctx.exception.what, 'tokens')
        self.assertEqual(ctx.exception.limit, 2)

    def test_token_limit_exact(self):
        self.assertEqual(len(tokenize("a b", max_tokens=2)), 2)

    def test_lexeme_limit_exceeded(self):
        with self.assertRaises(InputTooLargeError) as ctx:
            tokenize("abcdef", max_lexeme_length=5)
        self.assertEqual(ctx.exception.what, 'lexeme')
        self.assertEqual(ctx.exception.actual, 6)

    def test_limit_error_is_value_error(self):
        with self.assertRaises(ValueError):
            tokenize("a b c", max_tokens=1)


class TestExtractStructure(unittest.TestCase):
    """Test structure sequence extraction"""

    def test_if_statement(self):
        structure = extract_structure(tokenize("if (a == b) { return 1; }"))
        self.assertEqual(list(structure), [
            "if", "PAREN_OPEN", "OP", "PAREN_CLOSE", "BLOCK_START", "return", "BLOCK_END",
        ])

    def test_drops_identifiers_literals_and_other_separators(self):
        structure = extract_structure(tokenize('x; y, "s" [1]:'))
        self.assertEqual(structure, ())

    def test_empty(self):
        self.assertEqual(extract_structure(()), ())

    def test_all_operators_become_op(self):
        structure = extract_structure(tokenize("a + b -> c <<= d"))
        self.assertEqual(set(structure), {"OP"})

    def test_renamed_identifiers_same_structure(self):
        code1 = "int f(int x) { while (x > 0) { x = x - 1; } return x; }"
        code2 = code1.replace("x", "y")
        self.assertEqual(extract_structure(tokenize(code1)), extract_structure(tokenize(code2)))


if __name__ == '__main__':
    unittest.main(verbosity=2)
