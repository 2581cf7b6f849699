import argparse
import csv
import io

import pytest
from rich.console import Console

from korean_keyfreq.cli import COMMANDS, format_time, main
from korean_keyfreq.commands import TraceCommand
from korean_keyfreq.parser import non_negative_int, positive_int, setup_parser
from korean_keyfreq.rules import default_rules, load_rules


@pytest.fixture
def corpus(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "news.txt"
    path.write_text("정책 정책 사회 문제 그리고\n교육정책은 사회 문제를 다룬다\n", encoding="utf-8")
    return path


def read_csv(path):
    with path.open(encoding="utf-8", newline="") as handle:
        return [(row["word"], int(row["count"])) for row in csv.DictReader(handle)]


def test_analyze_writes_report(corpus, tmp_path):
    output = tmp_path / "reports" / "keywords.csv"
    code = main(
        ["--no-log-file", "analyze", str(corpus), "--input-dir", str(tmp_path / "none"), "--output", str(output)]
    )
    assert code == 0
    assert read_csv(output) == [("정책", 2), ("사회", 2), ("문제", 1), ("교육정책", 1), ("문제를", 1)]


def test_analyze_with_workers_and_rules(corpus, tmp_path):
    rules_path = tmp_path / "rules.yaml"
    rules_path.write_text("stopwords: [정책]\n", encoding="utf-8")
    output = tmp_path / "keywords.json"
    code = main(
        [
            "--no-log-file",
            "analyze",
            str(corpus),
            "--input-dir",
            str(tmp_path / "none"),
            "--rules",
            str(rules_path),
            "--workers",
            "2",
            "--chunk-size",
            "1",
            "--output",
            str(output),
        ]
    )
    assert code == 0
    assert '"정책"' not in output.read_text(encoding="utf-8")
    assert '"그리고"' in output.read_text(encoding="utf-8")


def test_analyze_without_inputs_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = main(["--no-log-file", "analyze", "--input-dir", str(tmp_path / "none")])
    assert code == 1


def test_analyze_with_invalid_rules_fails(corpus, tmp_path):
    rules_path = tmp_path / "rules.yaml"
    rules_path.write_text("particles: [는, 에게서는]\n", encoding="utf-8")
    code = main(["--no-log-file", "analyze", str(corpus), "--rules", str(rules_path)])
    assert code == 1


def test_trace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--no-log-file", "trace", "사람에게서는", "--text", "필요한 hello"]) == 0


def test_trace_without_words_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--no-log-file", "trace"]) == 1


def test_rules_export(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "rules" / "korean_rules.yaml"
    assert main(["--no-log-file", "rules", "--output", str(output)]) == 0
    assert load_rules(output) == default_rules()
    assert main(["--no-log-file", "rules", "--output", str(output)]) == 1
    assert main(["--no-log-file", "rules", "--output", str(output), "--force"]) == 0


def test_invalid_argument_exits_with_2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", "--top", "0"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [(0.5, "500ms"), (3.14159, "3.14초"), (150.5, "2분 30.5초")],
)
def test_format_time(elapsed, expected):
    assert format_time(elapsed) == expected


def test_trace_command_table():
    console = Console(file=io.StringIO(), width=200)
    result = TraceCommand(console, ["사람에게서는", "필요한", "hello"], None).execute()
    assert result == {"tokens": 3, "keywords": 1}
    output = console.file.getvalue()
    assert "사람에게서는" in output
    assert "용언 어미" in output
    assert "한글 아님" in output


def test_bounded_int_validators():
    assert positive_int("3") == 3
    assert non_negative_int("0") == 0
    with pytest.raises(argparse.ArgumentTypeError, match="1 이상"):
        positive_int("0")
    with pytest.raises(argparse.ArgumentTypeError, match="정수가 아닙니다"):
        non_negative_int("세")


def test_subcommand_error_points_to_subcommand_help():
    console = Console(file=io.StringIO(), width=200)
    parser = setup_parser(console, COMMANDS)
    with pytest.raises(SystemExit):
        parser.parse_args(["--no-log-file", "analyze", "--top", "0"])
    with pytest.raises(SystemExit):
        parser.parse_args(["--log-level", "TRACE", "rules"])
    output = console.file.getvalue()
    assert "keyfreq analyze --help" in output
    assert "keyfreq --help" in output
