import pytest

from minish.environment import Environment, is_valid_identifier, split_assignment


@pytest.mark.parametrize("name", ["PATH", "_", "_a1", "abc_DEF_9"])
def test_valid_identifiers(name):
    assert is_valid_identifier(name) is True


@pytest.mark.parametrize("name", ["", "1abc", "a-b", "a b", "é", "A=B"])
def test_invalid_identifiers(name):
    assert is_valid_identifier(name) is False


def test_split_assignment_with_value():
    assert split_assignment("HOME=/home/user") == ("HOME", "/home/user")


def test_split_assignment_keeps_later_equals():
    assert split_assignment("A=b=c") == ("A", "b=c")


def test_split_assignment_without_equals():
    assert split_assignment("NAME") == ("NAME", None)


def test_split_assignment_empty_value():
    assert split_assignment("NAME=") == ("NAME", "")


def test_from_strings_skips_oldpwd():
    env = Environment.from_strings(["PATH=/bin", "OLDPWD=/tmp", "HOME=/home/user"])
    assert "OLDPWD" not in env
    assert len(env) == 2
    assert env.get("PATH") == "/bin"


def test_set_keeps_position_on_update():
    env = Environment([("A", "1"), ("B", "2")])
    env.set("A", "3")
    assert env.to_strings() == ["A=3", "B=2"]


def test_set_appends_new_variable():
    env = Environment([("A", "1")])
    env.set("C", "x")
    assert env.to_strings() == ["A=1", "C=x"]


def test_remove_reports_presence():
    env = Environment([("A", "1")])
    assert env.remove("A") is True
    assert env.remove("A") is False
    assert len(env) == 0


def test_variable_without_value():
    env = Environment([("A", None), ("B", "2")])
    assert "A" in env
    assert env.get("A") is None
    assert env.env_lines() == ["B=2"]
    assert env.to_strings() == ["B=2"]


def test_export_lines_format():
    env = Environment([("A", "1"), ("B", None)])
    assert env.export_lines() == ['declare -x A="1"', 'declare -x B=""']


def test_round_trip_through_strings():
    original = ["PATH=/usr/bin:/bin", "HOME=/home/user", "EMPTY="]
    assert Environment.from_strings(original).to_strings() == original


def test_get_missing_is_none():
    assert Environment().get("NOPE") is None