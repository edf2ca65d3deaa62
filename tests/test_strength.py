"""Tests for the password strength rules."""

import pytest

from password_toolkit.core.strength import (
    MIN_STRONG_LENGTH,
    analyze_password,
    check_passwords_list,
    is_strong_password,
)


class TestIsStrongPassword:
    """Tests for single-password checks."""

    def test_too_short(self):
        assert is_strong_password("1234") is False

    def test_missing_uppercase(self):
        assert is_strong_password("abcdef123456") is False

    def test_strong(self):
        assert is_strong_password("AbCdEf123456") is True

    def test_whitespace_makes_weak(self):
        assert is_strong_password("AbCdEf 123456") is False

    def test_tab_counts_as_whitespace(self):
        assert is_strong_password("AbCdEf\t123456") is False

    def test_missing_lowercase(self):
        assert is_strong_password("ABCDEF123456") is False

    def test_missing_digit(self):
        assert is_strong_password("AbCdEfGhIjKl") is False

    def test_empty_string(self):
        assert is_strong_password("") is False

    def test_exact_minimum_length(self):
        assert len("Abcdefghij12") == MIN_STRONG_LENGTH
        assert is_strong_password("Abcdefghij12") is True
        assert is_strong_password("Abcdefghij1") is False

    def test_symbols_only_count_towards_length(self):
        assert is_strong_password("Ab1!!!!!!!!!") is True
        assert is_strong_password("!!!!!!!!!!!!") is False

    def test_non_ascii_letters_and_digits(self):
        assert is_strong_password("Àbcdefghijk1") is True
        # Arabic-Indic digit three is a decimal digit
        assert is_strong_password("Abcdefghijk٣") is True
        # Superscript two is not
        assert is_strong_password("Abcdefghijk²") is False


class TestAnalyzePassword:
    """Tests for the per-character report."""

    def test_flags(self):
        report = analyze_password("Ab 1")
        assert report.length == 4
        assert report.has_upper
        assert report.has_lower
        assert report.has_digit
        assert report.has_whitespace
        assert not report.is_strong

    def test_empty(self):
        report = analyze_password("")
        assert report.length == 0
        assert not (report.has_upper or report.has_lower or report.has_digit or report.has_whitespace)

    def test_report_is_immutable(self):
        report = analyze_password("AbCdEf123456")
        with pytest.raises(AttributeError):
            report.has_upper = False


class TestCheckPasswordsList:
    """Tests for batch checks."""

    def test_sample_passwords(self):
        results = check_passwords_list(["Abc5", "abcdef123456", "AbCdEf123456", "AbCdEf 123456"])
        assert results == {
            "Abc5": False,
            "abcdef123456": False,
            "AbCdEf123456": True,
            "AbCdEf 123456": False,
        }

    def test_duplicates_collapse(self):
        results = check_passwords_list(["AbCdEf123456", "weak", "AbCdEf123456"])
        assert results == {"AbCdEf123456": True, "weak": False}

    def test_empty_input(self):
        assert check_passwords_list([]) == {}

    def test_accepts_any_iterable(self):
        results = check_passwords_list(p for p in ("AbCdEf123456",))
        assert results == {"AbCdEf123456": True}
