"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import RuleWriter
from skillbuild.cli import skill_scripts
from skillbuild.cli.main import build_parser, main, resolve_skill_config


def test_build_parser_accepts_validate_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "validate",
            "--skill",
            "terraform-best-practices",
            "--root",
            str(tmp_path),
            "--report",
            str(tmp_path / "report.json"),
        ]
    )

    assert args.command == "validate"
    assert args.skill == "terraform-best-practices"
    assert args.root == tmp_path
    assert args.report == tmp_path / "report.json"
    assert args.skill_dir is None


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(
            ["build", "-s", "x", "-r", "repo"],
            ["build", "--skill", "x", "--root", "repo"],
            id="skill-and-root",
        ),
        pytest.param(
            ["build", "-s", "x", "-d", "dir", "-c", "cfg.yaml"],
            ["build", "--skill", "x", "--skill-dir", "dir", "--config", "cfg.yaml"],
            id="skill-dir-and-config",
        ),
        pytest.param(
            ["validate", "-s", "x", "-o", "out.json", "-v"],
            ["validate", "--skill", "x", "--report", "out.json", "--verbose"],
            id="report-and-verbose",
        ),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()
    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_skill_is_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["build"])


def test_resolve_skill_config_defaults_to_skills_dir(repo_root: Path) -> None:
    config = resolve_skill_config("terraform-best-practices", root=repo_root)

    assert config.skill_dir == (repo_root / "skills" / "terraform-best-practices").resolve()


def test_list_skills(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list-skills"]) == 0
    assert capsys.readouterr().out.split() == ["terraform-best-practices", "terramate-best-practices"]


def test_validate_success(repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate", "--skill", "terraform-best-practices", "--root", str(repo_root)])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.startswith("Terraform Best Practices Skill Validator\n")
    assert "All validations passed!" in captured.out


def test_validate_failure_exits_one(
    repo_root: Path,
    write_rule: RuleWriter,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_rule("unknown-thing.md")

    code = main(["validate", "-s", "terraform-best-practices", "-r", str(repo_root)])

    assert code == 1
    assert "Validation failed!" in capsys.readouterr().err
    assert "Invalid prefix" in caplog.text


def test_validate_missing_skill_file_fails(repo_root: Path) -> None:
    (repo_root / "skills" / "terramate-best-practices" / "SKILL.md").unlink()

    assert main(["validate", "-s", "terramate-best-practices", "-r", str(repo_root)]) == 1


def test_validate_writes_report(repo_root: Path, tmp_path: Path, write_rule: RuleWriter) -> None:
    write_rule("state-bad.md", priority="URGENT")
    report_path = tmp_path / "reports" / "validation.json"

    code = main(["validate", "-s", "terraform-best-practices", "-r", str(repo_root), "-o", str(report_path)])

    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert code == 1
    assert payload["passed"] is False
    assert payload["skill_file"]["valid"] is True
    failed = [item for item in payload["rules"]["files"] if not item["passed"]]
    assert [item["filename"] for item in failed] == ["state-bad.md"]


def test_build_writes_agents_md(repo_root: Path) -> None:
    code = main(["build", "-s", "terramate-best-practices", "-r", str(repo_root)])

    output = (repo_root / "skills" / "terramate-best-practices" / "AGENTS.md").read_text(encoding="utf-8")
    assert code == 0
    assert output.startswith("# Terramate Best Practices - Full Reference\n\n")
    assert output.index("# cicd-preview") < output.index("# cli-orchestration-change-detection")


def test_build_missing_rules_dir_exits_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    skill_dir = tmp_path / "skills" / "terraform-best-practices"
    skill_dir.mkdir(parents=True)

    code = main(["build", "-s", "terraform-best-practices", "-r", str(tmp_path)])

    assert code == 1
    assert "Build error: Rules directory not found" in capsys.readouterr().err


def test_unknown_skill_without_config_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["build", "-s", "mystery", "-r", str(tmp_path)])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_custom_skill_from_config_file(tmp_path: Path) -> None:
    skill_dir = tmp_path / "k8s"
    (skill_dir / "rules").mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("---\nname: k8s\n---\n", encoding="utf-8")
    (skill_dir / "rules" / "pod-limits.md").write_text(
        "# pod-limits\n**Priority:** HIGH\n**Category:** Pods\n## Why\n```yaml\nkind: Pod\n```\n",
        encoding="utf-8",
    )
    config_file = tmp_path / "k8s.yaml"
    config_file.write_text(
        "title: K8s\n"
        "valid_prefixes: [pod-]\n"
        "valid_priorities: [HIGH]\n"
        "required_sections: ['## Why']\n"
        "code_example_languages: [yaml]\n",
        encoding="utf-8",
    )

    args = ["-s", "k8s", "-d", str(skill_dir), "-c", str(config_file)]
    assert main(["validate", *args]) == 0
    assert main(["build", *args]) == 0
    assert (skill_dir / "AGENTS.md").read_text(encoding="utf-8").startswith("# K8s\n\n\n\n---\n\n# pod-limits")


def test_skill_script_forwards_arguments(monkeypatch: pytest.MonkeyPatch, repo_root: Path) -> None:
    monkeypatch.setattr("sys.argv", ["terraform-best-practices-build", "--root", str(repo_root)])

    assert skill_scripts.terraform_build() == 0
    assert (repo_root / "skills" / "terraform-best-practices" / "AGENTS.md").exists()


def test_skill_script_validate(monkeypatch: pytest.MonkeyPatch, repo_root: Path) -> None:
    monkeypatch.setattr("sys.argv", ["terramate-best-practices-validate", "-r", str(repo_root)])

    assert skill_scripts.terramate_validate() == 0
