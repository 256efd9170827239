import io

import pytest

from minitools.palindrome import is_letter_palindrome, main


@pytest.mark.parametrize(
    "text",
    ["Racecar", "A man, a plan, a canal: Panama", "abba", "Aa", "x", "121", "ab!ba"],
)
def test_palindromes(text):
    assert is_letter_palindrome(text) is True


@pytest.mark.parametrize("text", ["hello", "ab", "12", "abca"])
def test_not_palindromes(text):
    assert is_letter_palindrome(text) is False


def test_reversal_keeps_result():
    for text in ["Step on no pets", "Never odd or even", "python"]:
        assert is_letter_palindrome(text) == is_letter_palindrome(text[::-1])


def test_main_prints_one_answer_per_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abba\nabc\nNoon\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "true\nfalse\ntrue\n"