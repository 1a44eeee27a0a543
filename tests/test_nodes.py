import pytest

from minish.nodes import (
    And,
    Command,
    NodeType,
    Or,
    Pipe,
    Redirect,
    RedirectType,
    Subshell,
    run_and,
    run_or,
)


def _runner(statuses):
    calls = []

    def execute(node):
        calls.append(node.argv[0])
        return statuses[node.argv[0]]

    return execute, calls


def test_and_runs_right_after_success():
    execute, calls = _runner({"a": 0, "b": 3})
    status = run_and(And(Command(["a"]), Command(["b"])), execute)
    assert status == 3
    assert calls == ["a", "b"]


def test_and_stops_after_failure():
    execute, calls = _runner({"a": 2, "b": 0})
    status = run_and(And(Command(["a"]), Command(["b"])), execute)
    assert status == 2
    assert calls == ["a"]


def test_or_stops_after_success():
    execute, calls = _runner({"a": 0, "b": 1})
    status = run_or(Or(Command(["a"]), Command(["b"])), execute)
    assert status == 0
    assert calls == ["a"]


def test_or_runs_right_after_failure():
    execute, calls = _runner({"a": 1, "b": 5})
    status = run_or(Or(Command(["a"]), Command(["b"])), execute)
    assert status == 5
    assert calls == ["a", "b"]


def test_nested_and_or():
    execute, calls = _runner({"a": 1, "b": 0, "c": 0})

    def dispatch(node):
        if isinstance(node, Or):
            return run_or(node, dispatch)
        if isinstance(node, And):
            return run_and(node, dispatch)
        return execute(node)

    tree = And(Or(Command(["a"]), Command(["b"])), Command(["c"]))
    assert dispatch(tree) == 0
    assert calls == ["a", "b", "c"]


def test_node_types():
    cmd = Command(["ls"])
    assert cmd.type is NodeType.COMMAND
    assert Pipe(cmd, cmd).type is NodeType.PIPE
    assert And(cmd, cmd).type is NodeType.AND
    assert Or(cmd, cmd).type is NodeType.OR
    assert Subshell(cmd).type is NodeType.SUBSHELL


def test_pipe_fd_starts_unset():
    assert Pipe(Command(["a"]), Command(["b"])).pipe_fd is None


@pytest.mark.parametrize(
    "op, kind, fd",
    [
        ("<", RedirectType.INPUT, 0),
        ("<<", RedirectType.HEREDOC, 0),
        (">", RedirectType.OUTPUT, 1),
        (">>", RedirectType.APPEND, 1),
    ],
)
def test_redirect_from_tokens(op, kind, fd):
    red = Redirect.from_tokens(["cat", op, "file.txt"], 1)
    assert red.kind is kind
    assert red.file == "file.txt"
    assert red.fd == fd


def test_redirect_missing_file():
    with pytest.raises(ValueError):
        Redirect.from_tokens(["cat", ">"], 1)


def test_redirect_unknown_operator():
    with pytest.raises(ValueError):
        Redirect.from_tokens(["cat", "|", "x"], 1)


def test_redirect_index_out_of_range():
    with pytest.raises(IndexError):
        Redirect.from_tokens(["cat"], 4)


def test_command_collects_redirects():
    tokens = ["<", "in", ">>", "out"]
    cmd = Command(["sort"], [Redirect.from_tokens(tokens, 0), Redirect.from_tokens(tokens, 2)])
    assert [r.file for r in cmd.redirects] == ["in", "out"]
    assert [r.fd for r in cmd.redirects] == [0, 1]