from minishell.environment import Environment, parse_environ


def test_parse_environ_basic_pairs():
    assert parse_environ(["HOME=/home/user", "SHELL=sh"]) == {
        "HOME": "/home/user",
        "SHELL": "sh",
    }


def test_parse_environ_skips_entries_without_value():
    assert parse_environ(["EMPTY=", "NOEQ", "=value"]) == {}


def test_parse_environ_keeps_only_second_piece():
    assert parse_environ(["A=b=c"]) == {"A": "b"}


def test_parse_environ_collapses_repeated_separators():
    assert parse_environ(["A==b"]) == {"A": "b"}


def test_parse_environ_first_occurrence_wins():
    assert parse_environ(["A=first", "A=second"]) == {"A": "first"}


def test_environment_defaults():
    env = Environment(["USER=user"])
    assert env.exit_status == 0
    assert env.exec_flag is False
    assert env.envp == ["USER=user"]
    assert env.get("USER") == "user"


def test_get_missing_returns_none():
    env = Environment([])
    assert env.get("NOPE") is None


def test_set_then_get_round_trip():
    env = Environment([])
    env.set("KEY", "value")
    assert env.get("KEY") == "value"


def test_set_existing_keeps_order():
    env = Environment(["A=1", "B=2"])
    env.set("A", "3")
    assert list(env.items()) == [("A", "3"), ("B", "2")]


def test_set_new_appends():
    env = Environment(["A=1"])
    env.set("Z", "9")
    assert [name for name, _ in env.items()] == ["A", "Z"]


def test_unset_removes_and_ignores_missing():
    env = Environment(["A=1", "B=2"])
    env.unset("A")
    env.unset("MISSING")
    assert dict(env.items()) == {"B": "2"}


def test_report_error_without_message_changes_nothing(capsys):
    env = Environment([])
    env.report_error(None, 2)
    assert env.exec_flag is False
    assert env.exit_status == 0
    assert capsys.readouterr().out == ""


def test_report_error_prints_and_records(capsys):
    env = Environment([])
    env.report_error("Error: unclosed quotes", 2)
    assert env.exec_flag is True
    assert env.exit_status == 2
    assert capsys.readouterr().out == "Error: unclosed quotes\n"