from __future__ import annotations

import json

import pytest
from thrift_tostring_parser.cli import build_arg_parser, default_output_path, main


@pytest.fixture
def dump(tmp_path):
    path = tmp_path / "user.log"
    path.write_text('User(id=1, name="Alice")', encoding="utf-8")
    return path


def test_default_output_in_working_dir(dump, tmp_path, monkeypatch):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(dump)]) == 0

    data = json.loads((workdir / "user.json").read_text(encoding="utf-8"))
    assert data == {"_type": "User", "id": 1, "name": "Alice"}


def test_explicit_output_and_no_type(dump, tmp_path):
    out = tmp_path / "x.json"
    assert main([str(dump), "-o", str(out), "-n"]) == 0
    assert json.loads(out.read_text(encoding="utf-8")) == {"id": 1, "name": "Alice"}


@pytest.mark.parametrize(
    "flags, expected",
    [
        ([], True),
        (["-n"], False),
        (["-t"], True),
        (["-n", "-t"], True),
        (["--include-type", "--no-type"], False),
    ],
)
def test_type_flags_last_one_wins(flags, expected):
    args = build_arg_parser().parse_args(["in.txt", *flags])
    assert args.include_type is expected


def test_missing_input_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code != 0
    assert "usage" in capsys.readouterr().err.lower()


def test_unreadable_input(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), "-o", str(tmp_path / "o.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_extract_from_noisy_file(tmp_path):
    src = tmp_path / "app.log"
    src.write_text("12:00:01 DEBUG got Resp(code=200, body=[1, 2]) from upstream\n", encoding="utf-8")
    out = tmp_path / "resp.json"
    assert main([str(src), "-x", "-o", str(out)]) == 0
    assert json.loads(out.read_text(encoding="utf-8")) == {"_type": "Resp", "code": 200, "body": [1, 2]}


def test_extract_without_record(tmp_path, capsys):
    src = tmp_path / "app.log"
    src.write_text("nothing to see", encoding="utf-8")
    assert main([str(src), "--extract", "-o", str(tmp_path / "o.json")]) == 1
    assert "expected record format" in capsys.readouterr().err


def test_default_output_path():
    assert default_output_path("/var/log/dump.txt") == "dump.json"
    assert default_output_path("dump") == "dump.json"


def test_non_utf8_input(tmp_path, capsys):
    src = tmp_path / "latin.txt"
    src.write_bytes(b'User(name="\xff\xfe")')
    assert main([str(src), "-o", str(tmp_path / "o.json")]) == 1
    assert "Error: Cannot read" in capsys.readouterr().err
