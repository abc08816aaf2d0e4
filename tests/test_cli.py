"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from abigen.cli import _build_parser, main


ABI = [
    {"name": "getOwner", "type": "function", "stateMutability": "view",
     "outputs": [{"name": "", "type": "address"}]},
]
EXPECTED = "interface SolidityContract {\n  getOwner(): Promise<string>\n}\n"


def _write_json(path: Path, document) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_cli_accepts_abi_option_and_output() -> None:
    args = _build_parser().parse_args(["-f", "Token.json", "-o", "Token.d.ts", "--verbose"])

    assert args.abi == "Token.json"
    assert args.output == "Token.d.ts"
    assert args.verbose is True
    assert args.interface_name == "SolidityContract"


def test_main_writes_definitions_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    abi_path = _write_json(tmp_path / "abi.json", ABI)

    assert main([str(abi_path)]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_unwraps_compilation_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    artifact = {"_format": "hh-sol-artifact-1", "contractName": "Ownable", "sourceName": "Ownable.sol",
                "abi": ABI, "bytecode": "0x", "deployedBytecode": "0x"}
    abi_path = _write_json(tmp_path / "Ownable.json", artifact)

    assert main(["--abi", str(abi_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED
    assert "compilation output" in captured.err


def test_main_overwrites_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    abi_path = _write_json(tmp_path / "abi.json", ABI)
    output = tmp_path / "out.d.ts"
    output.write_text("stale content that is longer than the new definitions" * 10, encoding="utf-8")

    assert main([str(abi_path), "-o", str(output), "--interface-name", "Ownable"]) == 0
    assert output.read_text(encoding="utf-8") == EXPECTED.replace("SolidityContract", "Ownable")
    assert capsys.readouterr().out == ""


def test_main_writes_log_file(tmp_path: Path) -> None:
    abi_path = _write_json(tmp_path / "abi.json", ABI)
    log_file = tmp_path / "abigen.log"

    assert main([str(abi_path), "-o", str(tmp_path / "out.d.ts"), "--log-file", str(log_file), "-v"]) == 0
    assert "Definitions generated successfully" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("document", [{"contractName": "Empty"}, [], "text"])
def test_main_rejects_non_abi_documents(tmp_path: Path, capsys: pytest.CaptureFixture[str], document) -> None:
    abi_path = _write_json(tmp_path / "bad.json", document)

    assert main([str(abi_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not a valid ABI" in captured.err


def test_main_reports_unreadable_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    assert main([str(broken)]) == 1
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "parse the ABI file" in capsys.readouterr().err


def test_main_reports_malformed_tuples(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    abi = [{"name": "f", "type": "function",
            "inputs": [{"name": "p", "type": "tuple", "internalType": "struct P", "components": []}]}]
    abi_path = _write_json(tmp_path / "abi.json", abi)

    assert main([str(abi_path)]) == 1
    assert "unsupported" in capsys.readouterr().err


def test_main_requires_an_abi_file() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_main_reports_files_that_are_not_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    binary = tmp_path / "abi.json"
    binary.write_bytes(b"\xff\xfe[1")

    assert main([str(binary)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "parse the ABI file" in captured.err


def test_main_reports_wrongly_typed_fields(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    abi_path = _write_json(tmp_path / "abi.json", [{"name": "f", "type": "function",
                                                    "inputs": [{"name": "p", "type": None, "internalType": 5}]}])

    assert main([str(abi_path)]) == 1
    assert "must be a string" in capsys.readouterr().err


def test_quiet_hides_progress_messages(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    abi_path = _write_json(tmp_path / "abi.json", {"contractName": "Ownable", "abi": ABI})

    assert main([str(abi_path), "--quiet"]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED
    assert captured.err == ""


def test_log_file_records_debug_output_without_verbose(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    abi = [{"name": "f", "type": "function", "inputs": [
        {"name": "p", "type": "tuple", "internalType": "struct C.P", "components": [{"name": "x", "type": "bool"}]},
    ]}]
    abi_path = _write_json(tmp_path / "abi.json", abi)
    log_file = tmp_path / "abigen.log"

    assert main([str(abi_path), "--quiet", "--log-file", str(log_file)]) == 0
    assert "Registered struct P" in log_file.read_text(encoding="utf-8")
    assert capsys.readouterr().err == ""
