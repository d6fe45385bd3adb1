"""End-to-end tests for the pre-commit pipeline."""

from __future__ import annotations

import json

import pytest

from svcguard.git.staged import GitCommandError, StagedFileLister
from svcguard.guard import Guard
from svcguard.models import PackageRef
from svcguard.report import Reporter
from tests._fixtures.repo_builder import RepoBuilder, fake_git


def _guard(staged: str) -> Guard:
    return Guard(lister=StagedFileLister(runner=fake_git(staged)))


def test_no_matching_files_passes_without_reading_config(repo_builder: RepoBuilder, capsys) -> None:
    # No package.json or workflow on disk: neither check may run.
    result = _guard("README.md\nservices/foo/src/index.js\n").run(repo_builder.path())

    assert result.packages == []
    assert result.warnings == []
    assert Reporter().report(result) == 0
    assert capsys.readouterr().out == ""


def test_compliant_and_broken_packages(repo_builder: RepoBuilder, capsys) -> None:
    repo_builder.write_workflow(["services/good/**"])
    repo_builder.write_root_manifest(
        {"build:good": "tsc -b", "test:good": "jest", "lint:good": "eslint ."}
    )

    result = _guard("services/good/package.json\nlibs/bad/package.json\n").run(repo_builder.path())

    assert result.packages == [
        PackageRef(name="good", path="services/good"),
        PackageRef(name="bad", path="libs/bad"),
    ]
    assert [check.name for check in result.checks] == ["workflow", "scripts"]
    assert len(result.warnings) == 4
    assert all("bad" in warning for warning in result.warnings)
    assert "'libs/bad/**'" in result.warnings[0]
    assert Reporter().report(result) == 1
    assert "Commit ABORTED." in capsys.readouterr().out


def test_missing_workflow_blocks_commit(repo_builder: RepoBuilder) -> None:
    repo_builder.write_root_manifest(
        {"build:foo": "tsc -b", "test:foo": "jest", "lint:foo": "eslint ."}
    )

    result = _guard("services/foo/package.json\n").run(repo_builder.path())

    assert result.warnings == [
        "Workflow file not found at .github/workflows/ci.yml. Skipping check."
    ]
    assert result.exit_code == 1


def test_git_failure_is_treated_as_no_changes(repo_builder: RepoBuilder) -> None:
    def runner(args, cwd, capture_output=False):  # type: ignore[no-untyped-def]
        raise GitCommandError("fatal: not a git repository")

    result = Guard(lister=StagedFileLister(runner=runner)).run(repo_builder.path())

    assert result.packages == []
    assert result.exit_code == 0


def test_custom_config_is_honoured(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            ".svcguard.yml": """
            workflow_file: .github/workflows/apps.yml
            required_script_prefixes: ["build:"]
            package_pattern: '^apps/[^/]+/package\\.json$'
            """
        }
    )
    repo_builder.write_workflow(["apps/web/**"], relative=".github/workflows/apps.yml")
    repo_builder.write({"package.json": json.dumps({"scripts": {"build:web": "vite build"}})})

    result = _guard("apps/web/package.json\nservices/ignored/package.json\n").run(
        repo_builder.path()
    )

    assert result.packages == [PackageRef(name="web", path="apps/web")]
    assert result.passed


def test_malformed_manifest_is_fatal(repo_builder: RepoBuilder) -> None:
    repo_builder.write_workflow(["services/foo/**"])
    repo_builder.write({"package.json": "{"})

    with pytest.raises(json.JSONDecodeError):
        _guard("services/foo/package.json\n").run(repo_builder.path())
