import pytest

from minishell.environment import Environment
from minishell.tokenizer import (
    count_tokens,
    cut_token,
    is_operator,
    token_length,
    tokenize,
)


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "USER=tester"])


@pytest.mark.parametrize("token", [">", ">>", "<", "<<", "|"])
def test_is_operator_true(token):
    assert is_operator(token) is True


@pytest.mark.parametrize("token", ["a", "&", ">>>", "||", "", None])
def test_is_operator_false(token):
    assert is_operator(token) is False


def test_plain_words(env):
    assert tokenize("echo hello world", env) == ["echo", "hello", "world"]


def test_pipe(env):
    assert tokenize("ls -l | wc -l", env) == ["ls", "-l", "|", "wc", "-l"]


def test_redirections(env):
    assert tokenize("cat < in > out", env) == ["cat", "<", "in", ">", "out"]


def test_append_operator(env):
    assert tokenize("echo hi >> f", env) == ["echo", "hi", ">>", "f"]


def test_heredoc_without_spaces(env):
    assert tokenize("cat<<EOF", env) == ["cat", "<<", "EOF"]


def test_double_quoted_word(env):
    assert tokenize('echo "hello world"', env) == ["echo", "hello world"]


def test_single_quoted_word(env):
    assert tokenize("echo 'a b'", env) == ["echo", "a b"]


def test_variable_expansion(env):
    assert tokenize("echo $HOME", env) == ["echo", "/home/user"]


def test_exit_status_expansion(env):
    env.exit_status = 42
    assert tokenize("echo $?", env) == ["echo", str(env.exit_status)]


def test_double_quoted_variable_is_expanded(env):
    assert tokenize('echo "$USER"', env) == ["echo", "tester"]


def test_single_quoted_variable_is_kept(env):
    assert tokenize("echo '$HOME'", env) == ["echo", "$HOME"]


def test_unset_variable_ends_the_list(env):
    assert tokenize("echo $NOPE after", env) == ["echo"]


def test_empty_line(env):
    assert tokenize("", env) == []
    assert count_tokens("") == 0


@pytest.mark.parametrize(
    "line",
    [
        "echo hello world",
        "ls -l | wc -l",
        "cat < in > out",
        "cat<<EOF",
        "echo hi >> f",
        'echo "hello world"',
        "echo 'a b'",
        "   spaced    out   ",
    ],
)
def test_count_matches_tokenize(env, line):
    assert count_tokens(line) == len(tokenize(line, env))


def test_token_length_word():
    assert token_length("abc def", 0) == len("abc")


def test_token_length_operators():
    assert token_length(">>x", 0) == len(">>")
    assert token_length("<<x", 0) == len("<<")
    assert token_length("|x", 0) == len("|")


def test_token_length_skips_quoted_part():
    assert token_length('a"b"c', 0) == len("ac")


def test_token_length_stops_at_operator():
    assert token_length("cat|wc", 0) == len("cat")


def test_cut_token():
    assert cut_token("ab cd", 0) == "ab"
    assert cut_token("ab cd", 3) == "cd"
    assert cut_token("$HOME", 0) == "$HOME"