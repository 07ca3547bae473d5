"""Tests for the lexer phase."""

import langlex.lexer as lexer
import langlex.token_kinds as token_kinds
from langlex.tokens import Token
from tests.test_utils import TestUtils


class LexerTests(TestUtils):
    """Tests the lexer on the token kinds from token_kinds.py."""

    def test_empty(self):
        """Test tokenizing an empty string."""
        self.assertEqual(lexer.tokenize("", ""), [])

    def test_just_whitespace(self):
        """Test tokenizing a string of just whitespace."""
        self.assertEqual(lexer.tokenize("   \n\t \n", ""), [])

    def test_easy_identifier(self):
        """Test tokenizing an identifier with only letters."""
        self.assertEqual(
            lexer.tokenize("identifier", ""),
            [Token(token_kinds.identifier, "identifier")])

    def test_hard_identifier(self):
        """Test tokenizing an identifier with digits and underscores."""
        self.assertEqual(
            lexer.tokenize("_ident123ifier", ""),
            [Token(token_kinds.identifier, "_ident123ifier")])

    def test_keywords(self):
        """Test tokenizing keywords next to identifiers."""
        self.assertEqual(
            lexer.tokenize("pub fn main", ""),
            [Token(token_kinds.pub_kw), Token(token_kinds.fn_kw),
             Token(token_kinds.identifier, "main")])

    def test_keyword_content(self):
        """Test keyword tokens carry their spelling."""
        token, = lexer.tokenize("selftype", "")
        self.assertIs(token.kind, token_kinds.selftype_kw)
        self.assertEqual(token.content, "selftype")

    def test_maximal_munch(self):
        """Test keyword prefixes inside longer identifiers are not split."""
        self.assertEqual(
            lexer.tokenize("iffy if forked fork async2", ""),
            [Token(token_kinds.identifier, "iffy"),
             Token(token_kinds.if_kw),
             Token(token_kinds.identifier, "forked"),
             Token(token_kinds.fork_kw),
             Token(token_kinds.identifier, "async2")])

    def test_case_sensitive(self):
        """Test capitalized keywords are lexed as identifiers."""
        self.assertEqual(
            lexer.tokenize("Self self", ""),
            [Token(token_kinds.identifier, "Self"),
             Token(token_kinds.self_kw)])

    def test_positions(self):
        """Test token ranges carry line and column."""
        tokens = lexer.tokenize("let x\n  while", "a.l")

        self.assertEqual(tokens[0].r.start.file, "a.l")
        self.assertEqual(
            [(t.r.start.line, t.r.start.col, t.r.end.col) for t in tokens],
            [(1, 1, 3), (1, 5, 5), (2, 3, 7)])

    def test_newline_splits_identifiers(self):
        """Test identifiers never continue onto the next line."""
        self.assertEqual(
            lexer.tokenize("let\\\nx", ""),
            [Token(token_kinds.let_kw), Token(token_kinds.identifier, "x")])
        self.assertIssues(["unrecognized character '\\'"])

    def test_token_str(self):
        """Test a token prints as its source text."""
        self.assertEqual(
            [str(t) for t in lexer.tokenize("fn Fn", "")], ["fn", "Fn"])

    def test_bad_identifier(self):
        """Test error on tokenizing an identifier starting with digit."""
        lexer.tokenize("1identifier", "")
        self.assertIssues(["unrecognized token at '1identifier'"])

    def test_bad_identifier_skips_line(self):
        """Test a bad chunk drops its line but not the following ones."""
        self.assertEqual(
            lexer.tokenize("a 2b c\nmatch", ""),
            [Token(token_kinds.match_kw)])
        self.assertIssues(["unrecognized token at '2b'"])

    def test_unrecognized_character(self):
        """Test a symbol splits chunks and is reported."""
        self.assertEqual(
            lexer.tokenize("a+b", ""),
            [Token(token_kinds.identifier, "a"),
             Token(token_kinds.identifier, "b")])
        self.assertIssues(["unrecognized character '+'"])

    def test_error_position(self):
        """Test the error message points at the offending character."""
        lexer.tokenize("in  ;", "f.l")
        self.assertIssues(["f.l:1:5:"])
