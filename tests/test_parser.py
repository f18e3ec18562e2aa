import pytest

from minish.parser import (
    BIN_PREFIX,
    Command,
    CommandKind,
    classify_word,
    is_token,
    parse_line,
)


@pytest.fixture(autouse=True)
def _in_empty_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def _no_input(prompt):
    return None


def test_external_command_gets_bin_prefix():
    commands = parse_line("ls -l", read_line=_no_input, environ={})
    assert len(commands) == 1
    assert commands[0].command == BIN_PREFIX + "ls"
    assert commands[0].kind is CommandKind.BIN
    assert commands[0].parameters == ["-l"]
    assert commands[0].token is None


def test_builtin_keeps_its_name():
    commands = parse_line("echo hi there", read_line=_no_input, environ={})
    assert commands[0].kind is CommandKind.BUILTIN
    assert commands[0].argv() == ["echo", "hi", "there"]


def test_existing_file_is_path_kind(tmp_path):
    script = tmp_path / "prog"
    script.write_text("")
    commands = parse_line(f"{script} arg", read_line=_no_input, environ={})
    assert commands[0].kind is CommandKind.PATH
    assert commands[0].command == str(script)
    assert commands[0].parameters == ["arg"]


def test_pipe_starts_new_command():
    commands = parse_line("echo a | wc -c", read_line=_no_input, environ={})
    assert len(commands) == 2
    assert commands[0].token == "|"
    assert commands[0].argv() == ["echo", "a"]
    assert commands[1].argv() == [BIN_PREFIX + "wc", "-c"]
    assert commands[1].token is None


def test_leading_pipe_is_taken_as_command():
    commands = parse_line("| ls", read_line=_no_input, environ={})
    assert commands[0].command == BIN_PREFIX + "|"
    assert commands[0].parameters == ["ls"]


def test_empty_line_gives_no_commands():
    assert parse_line("", read_line=_no_input, environ={}) == []
    assert parse_line("    ", read_line=_no_input, environ={}) == []
    assert parse_line(None, read_line=_no_input, environ={}) == []


def test_variables_are_expanded():
    commands = parse_line("echo $NAME", read_line=_no_input, environ={"NAME": "val"})
    assert commands[0].parameters == ["val"]


def test_single_quotes_keep_spaces_and_dollars():
    commands = parse_line("echo 'a b $X'", read_line=_no_input, environ={"X": "y"})
    assert commands[0].parameters == ["a b $X"]


def test_unclosed_quote_reads_more_lines():
    lines = iter(["b'"])
    commands = parse_line("echo 'a", read_line=lambda prompt: next(lines), environ={})
    assert commands[0].parameters[0].startswith("a\n")


def test_custom_builtin_list():
    commands = parse_line("pwd", builtins=["pwd"], read_line=_no_input, environ={})
    assert commands[0].kind is CommandKind.BUILTIN
    assert commands[0].command == "pwd"


def test_classify_word_kinds(tmp_path):
    (tmp_path / "here").write_text("")
    assert classify_word("cd") is CommandKind.BUILTIN
    assert classify_word("here") is CommandKind.PATH
    assert classify_word("nothing-here") is CommandKind.BIN
    assert classify_word("") is CommandKind.BIN
    assert classify_word("cd", None) is CommandKind.BIN


def test_is_token():
    assert is_token("|")
    assert not is_token("||")
    assert is_token(">", [">"])


def test_command_argv_puts_command_first():
    command = Command("echo", CommandKind.BUILTIN, ["x", "y"])
    assert command.argv() == ["echo", "x", "y"]
    assert Command("echo", CommandKind.BUILTIN).argv() == ["echo"]