import io
import os

import pytest

from barbiesh.builtins import Shell, builtin_cd, builtin_env, builtin_export, builtin_unset
from barbiesh.utils import ShellError


def test_from_environ_copies_environment():
    shell = Shell.from_environ({"A": "1"})
    assert shell.custom_env == ["A=1"]
    assert shell.envp == {"A": "1"}
    shell.environ["B"] = "2"
    assert "B" not in shell.envp


def test_cd_changes_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "inner").mkdir()
    shell = Shell.from_environ({})
    result = builtin_cd(shell, ["cd", str(sub)])
    assert result is None
    assert os.path.samefile(os.getcwd(), sub)
    # A relative path only resolves if the first cd took effect.
    assert builtin_cd(shell, ["cd", "inner"]) is None
    assert os.path.samefile(os.getcwd(), sub / "inner")


def test_cd_missing_directory_raises(tmp_path):
    missing = str(tmp_path / "missing")
    with pytest.raises(ShellError) as info:
        builtin_cd(Shell.from_environ({}), ["cd", missing])
    assert info.value.message == f"cd: no such file or directory: {missing}"
    assert info.value.exit_code == 1


def test_cd_without_argument_goes_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    result = builtin_cd(Shell.from_environ({"HOME": str(home)}), ["cd"])
    assert result is None
    assert os.path.samefile(os.getcwd(), home)


def test_cd_without_home_raises():
    with pytest.raises(ShellError) as info:
        builtin_cd(Shell.from_environ({}), ["cd"])
    assert info.value.message == "cd: HOME not set"


def test_unset_removes_variable():
    shell = Shell.from_environ({"A": "1", "B": "2"})
    builtin_unset(shell, ["unset", "A"])
    assert "A" not in shell.environ
    assert shell.custom_env == ["B=2"]


def test_unset_requires_argument():
    with pytest.raises(ShellError) as info:
        builtin_unset(Shell.from_environ({}), ["unset"])
    assert info.value.message == "unset: not enough arguments"


def test_unset_does_not_match_prefix():
    shell = Shell.from_environ({"AB": "1"})
    builtin_unset(shell, ["unset", "A"])
    assert shell.environ == {"AB": "1"}
    assert shell.custom_env == ["AB=1"]


def test_export_sets_variable():
    shell = Shell.from_environ({})
    builtin_export(shell, ["export", "FOO=bar"])
    assert shell.environ["FOO"] == "bar"
    assert shell.custom_env == ["FOO=bar"]


def test_export_without_value():
    shell = Shell.from_environ({})
    builtin_export(shell, ["export", "FOO"])
    assert shell.environ["FOO"] == ""
    assert shell.custom_env == ["FOO"]


def test_export_replaces_existing_entry():
    shell = Shell.from_environ({"FOO": "old"})
    builtin_export(shell, ["export", "FOO=new"])
    assert shell.environ["FOO"] == "new"
    assert shell.custom_env == ["FOO=new"]


def test_export_keeps_only_first_value_part():
    shell = Shell.from_environ({})
    builtin_export(shell, ["export", "A=b=c"])
    assert shell.environ["A"] == "b"


def test_export_invalid_identifier_raises_after_applying_valid():
    shell = Shell.from_environ({})
    with pytest.raises(ShellError) as info:
        builtin_export(shell, ["export", "1abc=2", "GOOD=yes"])
    assert info.value.message == "export: not a valid identifier: 1abc=2"
    assert shell.environ["GOOD"] == "yes"
    assert "1abc" not in shell.environ


def test_env_prints_entries():
    shell = Shell.from_environ({"A": "1", "B": "2"})
    out = io.StringIO()
    builtin_env(shell, out)
    assert out.getvalue().splitlines() == shell.custom_env