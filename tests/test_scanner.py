"""
Test suite for the fable scanner.

Tests cover:
- Structural tokens, symbols, integers and operators
- Whitespace handling (plain spaces only)
- Error detection and diagnostics
- Rendering tokens back to text
"""

import unittest
import sys
import os
import random
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from fable.scanner.scanner import Scanner, scan, scan_file, unscan
from fable.scanner.tokens import (
    Token, TokenType, OPEN, CLOSE, OPERATOR_CHARS, symbol, integer, operator
)
from fable.scanner.errors import ScanError, ScanErrorKind


def random_runs(rng, alphabet, count):
    """Random maximal runs drawn from `alphabet`, joined by single spaces."""
    runs = ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12))) for _ in range(count)]
    return runs, " ".join(runs)


class TestScanner(unittest.TestCase):
    """Test cases for well-formed input."""

    def test_empty_input(self):
        """Empty text scans to no tokens."""
        self.assertEqual(scan(""), [])

    def test_simple_list(self):
        self.assertEqual(scan("(a b)"), [OPEN, symbol("a"), symbol("b"), CLOSE])

    def test_integers_separated_by_spaces(self):
        """One INTEGER per digit run, with its base-10 value."""
        tokens = scan("0 7 42 1000000")
        self.assertEqual([t.type for t in tokens], [TokenType.INTEGER] * 4)
        self.assertEqual([t.value for t in tokens], [0, 7, 42, 1000000])

    def test_large_integer_keeps_precision(self):
        digits = "123456789012345678901234567890"
        self.assertEqual(scan(digits), [integer(int(digits))])

    def test_leading_zeros(self):
        """Leading zeros are kept in the lexeme but not in the value."""
        token = scan("007")[0]
        self.assertEqual(token.value, 7)
        self.assertEqual(token.lexeme, "007")
        self.assertEqual(token, integer(7))

    def test_symbols_preserve_text(self):
        tokens = scan("foo Bar bAZ")
        self.assertEqual(tokens, [symbol("foo"), symbol("Bar"), symbol("bAZ")])

    def test_adjacent_runs_split_by_class(self):
        """Letter and digit runs end where the character class changes."""
        self.assertEqual(
            scan("abc123def"),
            [symbol("abc"), integer(123), symbol("def")]
        )

    def test_operator_with_terminator(self):
        self.assertEqual(scan("+ "), [operator("+")])

    def test_every_operator(self):
        for char in sorted(OPERATOR_CHARS):
            with self.subTest(operator=char):
                tokens = scan(char + " ")
                self.assertEqual(tokens, [operator(char)])
                self.assertEqual(tokens[0].type, TokenType.OPERATOR)

    def test_operator_is_not_a_symbol(self):
        self.assertNotEqual(operator("-"), Token(TokenType.SYMBOL, "-", "-"))

    def test_operator_form(self):
        self.assertEqual(
            scan("(+ 1 2)"),
            [OPEN, operator("+"), integer(1), integer(2), CLOSE]
        )

    def test_operator_after_symbol(self):
        """An operator may directly follow a symbol; only the space after it is required."""
        self.assertEqual(scan("a+ b"), [symbol("a"), operator("+"), symbol("b")])

    def test_space_runs(self):
        """Each space is skipped on its own, so runs of spaces are fine."""
        self.assertEqual(scan("   (  a   ) "), [OPEN, symbol("a"), CLOSE])
        self.assertEqual(scan("*   1"), [operator("*"), integer(1)])

    def test_nested_parentheses(self):
        self.assertEqual(
            scan("((x))"),
            [OPEN, OPEN, symbol("x"), CLOSE, CLOSE]
        )

    def test_scanner_is_reusable(self):
        scanner = Scanner("(a)")
        first = scanner.scan()
        second = scanner.scan()
        self.assertEqual(first, second)
        self.assertEqual(len(second), 3)

    def test_tokens_are_immutable(self):
        token = symbol("a")
        with self.assertRaises(Exception):
            token.value = "b"


class TestScannerProperties(unittest.TestCase):
    """Randomized checks over digit-only and letter-only inputs."""

    def test_digit_runs_become_integers(self):
        rng = random.Random(2024)
        for count in range(0, 40, 3):
            runs, text = random_runs(rng, "0123456789", count)
            with self.subTest(text=text):
                tokens = scan(text)
                self.assertEqual([t.type for t in tokens], [TokenType.INTEGER] * count)
                self.assertEqual([t.value for t in tokens], [int(run) for run in runs])
                self.assertEqual([t.lexeme for t in tokens], runs)

    def test_letter_runs_become_symbols(self):
        rng = random.Random(7)
        letters = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
        for count in range(0, 40, 3):
            runs, text = random_runs(rng, letters, count)
            with self.subTest(text=text):
                self.assertEqual(scan(text), [symbol(run) for run in runs])


class TestLongIntegers(unittest.TestCase):
    """Digit runs longer than Python's default int/str conversion limit."""

    def setUp(self):
        self.digits = "9" + "0123456789" * 500

    def test_scan_keeps_every_digit(self):
        tokens = scan("1" * 5000)
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].value, (10 ** 5000 - 1) // 9)
        self.assertEqual(tokens[0].lexeme, "1" * 5000)

    def test_unscan_round_trip(self):
        tokens = scan("(" + self.digits + " x)")
        self.assertEqual(unscan(tokens), "(" + self.digits + " x)")
        self.assertEqual(scan(unscan(tokens)), tokens)

    def test_integer_constructor(self):
        value = scan(self.digits)[0].value
        token = integer(value)
        self.assertEqual(token.lexeme, self.digits)
        self.assertEqual(repr(token), f"Token(INTEGER, {self.digits!r}, {self.digits})")


class TestScannerErrors(unittest.TestCase):
    """Test cases for malformed input."""

    def assertScanError(self, text, kind, offset):
        with self.assertRaises(ScanError) as ctx:
            scan(text)
        self.assertEqual(ctx.exception.kind, kind)
        self.assertEqual(ctx.exception.location.offset, offset)
        return ctx.exception

    def test_operator_at_end_of_input(self):
        error = self.assertScanError("+", ScanErrorKind.MISSING_OPERATOR_TERMINATOR, 1)
        self.assertEqual(error.diagnostic.code, "S002")
        self.assertIn("end of input", str(error))

    def test_operator_followed_by_digit(self):
        error = self.assertScanError("(+1 2)", ScanErrorKind.MISSING_OPERATOR_TERMINATOR, 2)
        self.assertIn("'1'", str(error))

    def test_operator_followed_by_close(self):
        self.assertScanError("(+)", ScanErrorKind.MISSING_OPERATOR_TERMINATOR, 2)

    def test_unrecognized_character(self):
        error = self.assertScanError("(a #)", ScanErrorKind.UNRECOGNIZED_CHARACTER, 3)
        self.assertEqual(error.diagnostic.code, "S001")
        self.assertEqual(error.location.column, 4)
        self.assertIn("<string>:1:4", str(error))

    def test_tab_is_not_whitespace(self):
        error = self.assertScanError("a\tb", ScanErrorKind.UNRECOGNIZED_CHARACTER, 1)
        self.assertIn("tabs and newlines", error.diagnostic.help_text)

    def test_newline_is_not_whitespace(self):
        self.assertScanError("(a\nb)", ScanErrorKind.UNRECOGNIZED_CHARACTER, 2)

    def test_non_ascii_letters_and_digits(self):
        self.assertScanError("café", ScanErrorKind.UNRECOGNIZED_CHARACTER, 3)
        self.assertScanError("x²", ScanErrorKind.UNRECOGNIZED_CHARACTER, 1)

    def test_string_and_quote_syntax_unsupported(self):
        self.assertScanError('"hi"', ScanErrorKind.UNRECOGNIZED_CHARACTER, 0)
        self.assertScanError("'a", ScanErrorKind.UNRECOGNIZED_CHARACTER, 0)

    def test_filename_in_location(self):
        with self.assertRaises(ScanError) as ctx:
            scan("?", filename="demo.fbl")
        self.assertEqual(ctx.exception.location.filename, "demo.fbl")
        self.assertIn("--> demo.fbl:1:1", str(ctx.exception))

    def test_non_printable_character(self):
        with self.assertRaises(ScanError) as ctx:
            scan("\x00")
        self.assertIn("U+0000", str(ctx.exception))


class TestTokenConstructors(unittest.TestCase):

    def test_symbol_rejects_bad_text(self):
        for text in ["", "a1", "a b", "é"]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    symbol(text)

    def test_integer_rejects_bad_values(self):
        for value in [-1, True, 1.5, "3"]:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    integer(value)

    def test_operator_rejects_bad_chars(self):
        for char in ["a", "/", "++", ""]:
            with self.subTest(char=char):
                with self.assertRaises(ValueError):
                    operator(char)

    def test_str_shows_value_only_when_lexeme_differs(self):
        self.assertEqual(str(integer(7)), "INTEGER('7')")
        self.assertEqual(str(scan("007")[0]), "INTEGER('007' -> 7)")
        self.assertEqual(str(symbol("foo")), "SYMBOL('foo')")
        self.assertEqual(str(OPEN), "OPEN('(')")

    def test_repr(self):
        self.assertEqual(repr(symbol("foo")), "Token(SYMBOL, 'foo', 'foo')")
        self.assertEqual(repr(integer(42)), "Token(INTEGER, '42', 42)")
        self.assertEqual(repr(CLOSE), "Token(CLOSE, ')', None)")

    def test_token_flags(self):
        self.assertTrue(OPEN.is_structural)
        self.assertFalse(OPEN.is_atom)
        self.assertTrue(operator("~").is_atom)
        self.assertTrue(integer(3).is_atom)


class TestUnscan(unittest.TestCase):

    def test_renders_canonical_spacing(self):
        text = "(+ 1 (foo bar) 2)"
        self.assertEqual(unscan(scan(text)), text)

    def test_rescans_to_same_tokens(self):
        tokens = [OPEN, operator("<"), symbol("a"), integer(3), CLOSE, operator("!"), OPEN, CLOSE]
        self.assertEqual(scan(unscan(tokens)), tokens)

    def test_adjacent_atoms_stay_separate(self):
        tokens = [symbol("ab"), symbol("cd"), integer(1), integer(2)]
        self.assertEqual(scan(unscan(tokens)), tokens)

    def test_empty(self):
        self.assertEqual(unscan([]), "")


class TestScanFile(unittest.TestCase):

    def _write(self, content):
        handle = tempfile.NamedTemporaryFile("w", suffix=".fbl", delete=False, encoding="utf-8")
        with handle:
            handle.write(content)
        self.addCleanup(os.remove, handle.name)
        return handle.name

    def test_trailing_newline_is_dropped(self):
        path = self._write("(a b)\n")
        self.assertEqual(scan_file(path), [OPEN, symbol("a"), symbol("b"), CLOSE])

    def test_inner_newline_still_rejected(self):
        path = self._write("(a\nb)\n")
        with self.assertRaises(ScanError) as ctx:
            scan_file(path)
        self.assertEqual(ctx.exception.kind, ScanErrorKind.UNRECOGNIZED_CHARACTER)
        self.assertEqual(ctx.exception.location.filename, path)


if __name__ == "__main__":
    unittest.main()
