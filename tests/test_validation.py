import pytest

from minishell.environment import Environment
from minishell.validation import (
    check_input,
    check_invalid_chars,
    check_operator_end,
    check_operator_spacing,
    check_syntax,
    has_unclosed_quotes,
)


@pytest.fixture
def env():
    return Environment([])


@pytest.mark.parametrize("line", ['echo "hi', "echo 'hi", '"', "a 'b' \"c"])
def test_unclosed_quotes(line):
    assert has_unclosed_quotes(line) is True


@pytest.mark.parametrize("line", ["echo 'hi'", "a\"b'c\"", "'\"'", "", "plain"])
def test_closed_quotes(line):
    assert has_unclosed_quotes(line) is False


def test_syntax_leading_pipe(env, capsys):
    assert check_syntax("| ls", env) is True
    assert env.exec_flag is True
    assert env.exit_status == 1
    assert capsys.readouterr().out == "Error: syntax error pipes\n"


@pytest.mark.parametrize("line", ["ls >", "< f", "> out", "cat <"])
def test_syntax_redirection_at_edge(env, capsys, line):
    assert check_syntax(line, env) is True
    assert env.exit_status == 1
    assert capsys.readouterr().out == "Error: syntax error redirection\n"


def test_syntax_ok(env, capsys):
    assert check_syntax("ls -l", env) is False
    assert env.exec_flag is False
    assert capsys.readouterr().out == ""


def test_operator_followed_by_whitespace(env, capsys):
    assert check_operator_end("ls >   ", env) is True
    assert env.exec_flag is True
    assert env.exit_status == 1
    assert capsys.readouterr().out == "Error: syntax error operator\n"


def test_operator_followed_by_word(env):
    assert check_operator_end("ls > out", env) is False
    assert env.exec_flag is False


@pytest.mark.parametrize("line", ["ls; pwd", "a && b", "echo *", "(ls)", "echo '{'"])
def test_invalid_chars(env, capsys, line):
    assert check_invalid_chars(line, env) is True
    assert env.exit_status == 1
    assert capsys.readouterr().out == "Error: syntax error\n"


def test_valid_chars(env):
    assert check_invalid_chars("ls -l | wc", env) is False
    assert env.exec_flag is False


def test_spaced_double_operator(env, capsys):
    assert check_operator_spacing("ls | | wc", env) is True
    assert env.exit_status == 1
    assert capsys.readouterr().out == "Error: syntax error\n"


@pytest.mark.parametrize("line", ["ls >>> f", "ls <> f", "ls |< f"])
def test_joined_operators(env, capsys, line):
    assert check_operator_spacing(line, env) is True
    assert env.exit_status == 2
    assert capsys.readouterr().out == "Error: syntax error\n"


@pytest.mark.parametrize("line", ["ls | wc", "cat < in >> out", "echo '||'"])
def test_operator_spacing_ok(env, line):
    assert check_operator_spacing(line, env) is False
    assert env.exec_flag is False


def test_check_input_empty_is_silent(env, capsys):
    env.exit_status = 7
    assert check_input("", env) is True
    assert env.exec_flag is False
    assert env.exit_status == 7
    assert capsys.readouterr().out == ""


def test_check_input_unclosed_quotes(env, capsys):
    assert check_input('echo "x', env) is True
    assert env.exit_status == 2
    assert capsys.readouterr().out == "Error: unclosed quotes\n"


def test_check_input_reports_only_first_error(env, capsys):
    assert check_input("ls |", env) is True
    assert capsys.readouterr().out == "Error: syntax error pipes\n"


def test_check_input_invalid_char(env, capsys):
    assert check_input("ls ;", env) is True
    assert capsys.readouterr().out == "Error: syntax error\n"


def test_check_input_good_line(env, capsys):
    assert check_input("ls -l | wc -l > out", env) is False
    assert env.exec_flag is False
    assert capsys.readouterr().out == ""