"""Tests for syntax.primitives.

Covers character classification (ASCII only), single-character parsers,
literal matching, end of input, and the exact failure message texts.

All ``@given`` tests emit ``event()`` calls for HypoFuzz guidance.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from parselite.syntax.primitives import (
    any_char,
    char_p,
    digit,
    eof,
    is_ascii_digit,
    is_ascii_whitespace,
    non_whitespace_char,
    satisfy,
    string_p,
    whitespace_char,
)
from parselite.syntax.result import Failure, Success
from tests.helpers.result_assertions import assert_failure, assert_success
from tests.strategies import any_text, interesting_text

# ============================================================================
# CHARACTER CLASSIFICATION
# ============================================================================


class TestCharacterClassification:
    """ASCII-only digit and whitespace classification."""

    @pytest.mark.parametrize("ch", list("0123456789"))
    def test_ascii_digits(self, ch: str) -> None:
        """0-9 are digits."""
        assert is_ascii_digit(ch)

    @pytest.mark.parametrize("ch", ["\u00b2", "\u0663", "a", " ", "-"])
    def test_non_digits(self, ch: str) -> None:
        """Unicode digits and other characters are not digits."""
        assert not is_ascii_digit(ch)

    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
    def test_ascii_whitespace(self, ch: str) -> None:
        """The C isspace() set is whitespace."""
        assert is_ascii_whitespace(ch)

    @pytest.mark.parametrize("ch", ["\u00a0", "\u2028", "\u3000", "a", "0"])
    def test_non_whitespace(self, ch: str) -> None:
        """Unicode separators are not whitespace."""
        assert not is_ascii_whitespace(ch)


# ============================================================================
# ANY_CHAR
# ============================================================================


class TestAnyChar:
    """any_char consumes exactly one character of non-empty input."""

    def test_consumes_first_character(self) -> None:
        """First character is the value; the rest remains."""
        assert any_char("abc") == Success("a", "bc")

    def test_empty_input(self) -> None:
        """Empty input fails with the end-of-input message."""
        assert any_char("") == Failure("Unexpected end of input")

    @given(text=any_text)
    def test_consumes_one_or_fails_on_empty(self, text: str) -> None:
        """PROPERTY: any_char succeeds iff input is non-empty, consuming one."""
        result = any_char(text)
        event(f"outcome={'success' if result else 'failure'}")
        if text:
            success = assert_success(result)
            assert success.value == text[0]
            assert success.remaining == text[1:]
        else:
            assert_failure(result)


# ============================================================================
# CHAR_P
# ============================================================================


class TestCharP:
    """char_p matches one specific character."""

    def test_match(self) -> None:
        """Matching first character is consumed."""
        assert char_p("a")("abc") == Success("a", "bc")

    def test_mismatch_message(self) -> None:
        """Mismatch names expected and found characters."""
        assert char_p("a")("xyz") == Failure("Expected 'a', found 'x'")

    def test_eof_message(self) -> None:
        """Empty input reports EOF as found."""
        assert char_p("a")("") == Failure("Expected 'a', found 'EOF'")

    def test_case_sensitive(self) -> None:
        """Matching is exact, not case-insensitive."""
        assert_failure(char_p("a")("A"))

    @pytest.mark.parametrize("bad", ["", "ab"])
    def test_rejects_non_single_character(self, bad: str) -> None:
        """Construction with anything but one character raises ValueError."""
        with pytest.raises(ValueError, match="single character"):
            char_p(bad)

    @given(ch=st.characters(), rest=any_text)
    @example(ch="\n", rest="")
    def test_matches_itself(self, ch: str, rest: str) -> None:
        """PROPERTY: char_p(c) always accepts c and leaves the rest."""
        event(f"rest_empty={not rest}")
        assert char_p(ch)(ch + rest) == Success(ch, rest)


# ============================================================================
# STRING_P
# ============================================================================


class TestStringP:
    """string_p matches a literal prefix."""

    def test_match(self) -> None:
        """Matching prefix is consumed whole."""
        assert string_p("foo")("foobar") == Success("foo", "bar")

    def test_exact_match(self) -> None:
        """Input equal to the literal leaves nothing."""
        assert string_p("foo")("foo") == Success("foo", "")

    def test_mismatch_shows_same_length_prefix(self) -> None:
        """Mismatch shows the input prefix of the literal's length."""
        assert string_p("foo")("barbaz") == Failure('Expected "foo", found "bar"')

    def test_short_input_shows_whole_input(self) -> None:
        """Input shorter than the literal is shown whole."""
        assert string_p("foo")("fo") == Failure('Expected "foo", found "fo"')

    def test_empty_input(self) -> None:
        """Empty input shows an empty found string."""
        assert string_p("foo")("") == Failure('Expected "foo", found ""')

    def test_empty_literal_always_succeeds(self) -> None:
        """The empty literal matches without consuming."""
        assert string_p("")("abc") == Success("", "abc")

    @given(literal=st.text(min_size=1, max_size=5), text=interesting_text)
    def test_success_iff_prefix(self, literal: str, text: str) -> None:
        """PROPERTY: string_p succeeds iff input starts with the literal."""
        result = string_p(literal)(text)
        event(f"outcome={'success' if result else 'failure'}")
        if text.startswith(literal):
            assert result == Success(literal, text[len(literal) :])
        else:
            assert_failure(result)


# ============================================================================
# DIGIT / WHITESPACE_CHAR / NON_WHITESPACE_CHAR
# ============================================================================


class TestDigit:
    """digit accepts one ASCII digit."""

    def test_match(self) -> None:
        """ASCII digit is consumed."""
        assert digit("7up") == Success("7", "up")

    def test_mismatch_message(self) -> None:
        """Non-digit is named in the failure."""
        assert digit("x") == Failure("Expected digit, found 'x'")

    def test_eof_message(self) -> None:
        """Empty input reports EOF."""
        assert digit("") == Failure("Expected digit, found 'EOF'")

    def test_unicode_digit_rejected(self) -> None:
        """Superscript two is not an ASCII digit."""
        assert digit("\u00b2") == Failure("Expected digit, found '\u00b2'")


class TestWhitespaceChar:
    """whitespace_char accepts one ASCII whitespace character."""

    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
    def test_match(self, ch: str) -> None:
        """Each ASCII whitespace character is consumed."""
        assert whitespace_char(ch + "x") == Success(ch, "x")

    def test_mismatch_message(self) -> None:
        """Non-whitespace is named in the failure."""
        assert whitespace_char("x") == Failure("Expected whitespace, found 'x'")

    def test_eof_message(self) -> None:
        """Empty input reports EOF."""
        assert whitespace_char("") == Failure("Expected whitespace, found 'EOF'")

    def test_no_break_space_rejected(self) -> None:
        """U+00A0 is not ASCII whitespace."""
        assert_failure(whitespace_char("\u00a0"))


class TestNonWhitespaceChar:
    """non_whitespace_char accepts anything whitespace_char rejects."""

    def test_match(self) -> None:
        """Ordinary character is consumed."""
        assert non_whitespace_char("ab") == Success("a", "b")

    def test_whitespace_rejected(self) -> None:
        """Whitespace fails."""
        assert non_whitespace_char(" a") == Failure(
            "Expected non-whitespace character, found ' '"
        )

    def test_eof(self) -> None:
        """Empty input fails."""
        assert_failure(non_whitespace_char(""))

    @given(ch=st.characters())
    def test_complements_whitespace_char(self, ch: str) -> None:
        """PROPERTY: exactly one of the two accepts any given character."""
        event(f"whitespace={is_ascii_whitespace(ch)}")
        assert bool(whitespace_char(ch)) != bool(non_whitespace_char(ch))


# ============================================================================
# SATISFY
# ============================================================================


class TestSatisfy:
    """satisfy builds a single-character parser from a predicate."""

    def test_predicate_accepts(self) -> None:
        """Accepted character is consumed."""
        vowel = satisfy(lambda c: c in "aeiou", "vowel")

        assert vowel("apple") == Success("a", "pple")

    def test_description_in_message(self) -> None:
        """The description names what was expected."""
        vowel = satisfy(lambda c: c in "aeiou", "vowel")

        assert vowel("xyz") == Failure("Expected vowel, found 'x'")
        assert vowel.name == "vowel"

    def test_predicate_not_called_on_empty_input(self) -> None:
        """Empty input fails without calling the predicate."""
        calls: list[str] = []

        def predicate(ch: str) -> bool:
            calls.append(ch)
            return True

        assert_failure(satisfy(predicate, "anything")(""))
        assert calls == []


# ============================================================================
# EOF
# ============================================================================


class TestEof:
    """eof succeeds only on empty input."""

    def test_empty(self) -> None:
        """Empty input succeeds with None."""
        assert eof("") == Success(None, "")

    def test_non_empty(self) -> None:
        """Remaining input fails naming the next character."""
        assert eof("xy") == Failure("Expected end of input, found 'x'")


# ============================================================================
# CONSUMPTION CONTRACT
# ============================================================================


class TestConsumptionContract:
    """Primitives consume at most one unit on success and nothing on failure."""

    @given(text=interesting_text)
    def test_single_character_primitives(self, text: str) -> None:
        """PROPERTY: success consumes exactly one character."""
        for parser in (any_char, digit, whitespace_char, non_whitespace_char, char_p("a")):
            result = parser(text)
            if isinstance(result, Success):
                event(f"{parser.name}=success")
                assert result.remaining == text[1:]
