from __future__ import annotations

import builtins
import logging
import runpy
import sys

import pytest

from codekata.cli import build_parser, main, run_factorial, run_namebook


@pytest.fixture(autouse=True)
def _quiet_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_parse_factorial_defaults() -> None:
    args = build_parser().parse_args(["factorial", "10"])
    assert args.command == "factorial"
    assert args.number == "10"
    assert args.backend == "bignum"
    assert args.upper_bound == 2000
    assert args.verbose is False


def test_parse_namebook_flags() -> None:
    args = build_parser().parse_args(["-v", "namebook", "names.txt", "--method", "both"])
    assert args.command == "namebook"
    assert args.file == "names.txt"
    assert args.method == "both"
    assert args.verbose is True


def test_parse_rejects_unknown_backend() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["factorial", "3", "--backend", "float"])


@pytest.mark.parametrize("backend", ["native", "mpz", "bignum"])
def test_factorial_prints_digit_sum(backend: str, capsys) -> None:
    assert main(["factorial", "10", "--backend", backend]) == 0
    assert capsys.readouterr().out == "Sum of digits of factorial of 10 = 27\n"


def test_factorial_out_of_range(capsys) -> None:
    assert main(["factorial", "2001"]) == -1
    assert capsys.readouterr().out == "Given number (2001) is out of range [0,2000]!\n"


def test_factorial_prompts_when_number_missing(monkeypatch, capsys) -> None:
    prompts: list[str] = []

    def fake_input(message: str) -> str:
        prompts.append(message)
        return " 100 \n"

    monkeypatch.setattr(builtins, "input", fake_input)
    assert run_factorial(None) == 0
    assert prompts == ["Enter a number within range [0,2000]: "]
    assert capsys.readouterr().out == "Sum of digits of factorial of 100 = 648\n"


def test_factorial_prompt_eof(monkeypatch) -> None:
    def fake_input(message: str) -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert run_factorial(None) == 1


def test_factorial_not_an_integer(caplog) -> None:
    assert run_factorial("ten") == 1
    assert "Not an integer" in caplog.text


def test_namebook_trie_consistent(write_names, capsys) -> None:
    path = write_names(["alice", "bob", "carol"])
    assert main(["namebook", str(path)]) == 0
    assert capsys.readouterr().out == "Name book is consistent? true\n"


def test_namebook_pairwise_inconsistent(write_names, capsys) -> None:
    path = write_names(["bob", "alice", "bobby"])
    assert run_namebook(str(path), method="pairwise") == 0
    assert capsys.readouterr().out == (
        "Name book is consistent after loop? false\n"
        "Name book is consistent? false\n"
    )


def test_namebook_both_methods(write_names, capsys) -> None:
    path = write_names(["anna", "anna"])
    assert run_namebook(str(path), method="both") == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Name book is consistent after loop? false",
        "Name book is consistent? false",
        "Name book (trie) is consistent? false",
    ]


def test_namebook_prompts_for_file(write_names, monkeypatch, capsys) -> None:
    path = write_names(["x", "y"])
    monkeypatch.setattr(builtins, "input", lambda message: str(path))
    assert run_namebook(None) == 0
    assert capsys.readouterr().out == "Name book is consistent? true\n"


def test_namebook_missing_file(tmp_path, caplog) -> None:
    assert run_namebook(str(tmp_path / "nope.txt")) == 1
    assert "Cannot read name file" in caplog.text


def test_namebook_invalid_name(write_names, caplog) -> None:
    path = write_names(["alice", "b0b"])
    assert run_namebook(str(path)) == 1
    assert "Invalid name" in caplog.text


def test_verbose_enables_debug(write_names) -> None:
    path = write_names(["bob"])
    assert main(["-v", "namebook", str(path)]) == 0
    assert logging.getLogger().level == logging.DEBUG


def test_module_entry_point(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["codekata", "factorial", "10"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("codekata", run_name="__main__")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "Sum of digits of factorial of 10 = 27\n"
