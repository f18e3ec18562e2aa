import io
import os

import pytest

from minish.builtins import (
    ShellExit,
    atoi,
    cd,
    echo,
    env,
    exit_shell,
    is_n_option,
    is_numeric,
    pwd,
)
from minish.environment import Environment


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -17", -17), ("+8", 8), ("12abc", 12), ("abc", 0), ("", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["0", "123", "-5", "+7", "-"])
def test_is_numeric_true(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", None, "1a", "--1", " 1"])
def test_is_numeric_false(text):
    assert is_numeric(text) is False


@pytest.mark.parametrize(
    "arg, expected",
    [("-n", True), ("-nnn", True), ("-", True), ("-na", False), ("n", False), ("", False)],
)
def test_is_n_option(arg, expected):
    assert is_n_option(arg) is expected


def test_echo_plain():
    out = io.StringIO()
    assert echo(["echo", "hello", "world"], out) == 0
    assert out.getvalue() == "hello world\n"


def test_echo_n_flags():
    out = io.StringIO()
    assert echo(["echo", "-n", "-nn", "hi", "-n"], out) == 0
    assert out.getvalue() == "hi -n"


def test_echo_no_args():
    out = io.StringIO()
    echo(["echo"], out)
    assert out.getvalue() == "\n"


def test_pwd_prints_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert pwd(out, io.StringIO()) == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_env_lists_entries():
    entries = ["A=1", "B=2"]
    out = io.StringIO()
    assert env(Environment(entries), out) == 0
    assert out.getvalue().splitlines() == entries


def test_cd_to_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    start = os.getcwd()
    target = tmp_path / "sub"
    target.mkdir()
    environment = Environment([])
    assert cd(environment, ["cd", str(target)], io.StringIO()) == 0
    assert environment.get("OLDPWD") == start
    assert environment.get("PWD") == os.getcwd()
    assert os.path.samefile(os.getcwd(), target)


def test_cd_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    environment = Environment([f"HOME={home}"])
    assert cd(environment, ["cd"], io.StringIO()) == 0
    assert os.path.samefile(os.getcwd(), home)


def test_cd_missing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    err = io.StringIO()
    environment = Environment([])
    assert cd(environment, ["cd", str(tmp_path / "nope")], err) == 1
    assert err.getvalue() == "cd: No such file or directory\n"
    assert environment.get("OLDPWD") is None


def test_cd_without_home_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    err = io.StringIO()
    assert cd(Environment([]), ["cd"], err) == 1
    assert err.getvalue() == "cd: No such file or directory\n"


def test_exit_without_argument():
    out = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_shell(["exit"], out, io.StringIO())
    assert info.value.status == 0
    assert out.getvalue() == "exit\n"


def test_exit_with_number():
    with pytest.raises(ShellExit) as info:
        exit_shell(["exit", "42"], io.StringIO(), io.StringIO())
    assert info.value.status == 42


def test_exit_non_numeric():
    err = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_shell(["exit", "abc"], io.StringIO(), err)
    assert info.value.status == 255
    assert err.getvalue() == "minishell: exit: abc: numeric argument required\n"


def test_exit_status_in_byte_range():
    with pytest.raises(ShellExit) as info:
        exit_shell(["exit", "-1"], io.StringIO(), io.StringIO())
    assert 0 <= info.value.status <= 255
    assert info.value.status == 255