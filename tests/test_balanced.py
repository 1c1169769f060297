import io

import pytest

from dsakit.balanced import (
    BalanceError,
    ExtraClosingError,
    MismatchError,
    UnclosedError,
    check,
    is_balanced,
    main,
)


@pytest.mark.parametrize(
    "expression",
    ["", "a+b", "(a+b)*[c-{d/e}]", "{[()()]}", "((([])))"],
)
def test_balanced_expressions(expression):
    assert is_balanced(expression) is True


@pytest.mark.parametrize("expression", ["(", ")", "(]", "{[}]", "((a)", "a)b("])
def test_unbalanced_expressions(expression):
    assert is_balanced(expression) is False


def test_extra_closing_reports_position():
    expression = "a+b)"
    with pytest.raises(ExtraClosingError) as excinfo:
        check(expression)
    assert excinfo.value.position == expression.index(")")
    assert excinfo.value.closing == ")"
    assert "Right parentheses are more than left parentheses" in str(excinfo.value)


def test_mismatch_reports_both_brackets():
    with pytest.raises(MismatchError) as excinfo:
        check("(a]")
    assert excinfo.value.opening == "("
    assert excinfo.value.closing == "]"
    assert "( and ]" in str(excinfo.value)


def test_unclosed_lists_open_brackets():
    with pytest.raises(UnclosedError) as excinfo:
        check("{(a)")
    assert excinfo.value.unclosed == "{"
    assert "Left parentheses more than right parentheses" in str(excinfo.value)


@pytest.mark.parametrize("expression", [")", "(]", "("])
def test_all_errors_are_balance_errors(expression):
    with pytest.raises(BalanceError):
        check(expression)
    with pytest.raises(ValueError):
        check(expression)


def test_main_valid_from_argv(capsys):
    assert main(["(a+b)", "*", "[c]"]) == 0
    out = capsys.readouterr().out
    assert "Balanced Parentheses" in out
    assert "Valid expression" in out


def test_main_invalid_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("{[}\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Mismatched parentheses are : [ and }" in out
    assert "Invalid expression" in out