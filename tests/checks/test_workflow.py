"""Tests for the CI workflow trigger path check."""

from __future__ import annotations

import pytest
import yaml

from svcguard.checks.workflow import WorkflowPathCheck, trigger_paths
from svcguard.config import load_config
from svcguard.models import PackageRef
from tests._fixtures.repo_builder import RepoBuilder

FOO = PackageRef(name="foo", path="services/foo")


def _check(repo_builder: RepoBuilder) -> WorkflowPathCheck:
    return WorkflowPathCheck(load_config(repo_builder.path()))


def test_listed_package_passes(repo_builder: RepoBuilder) -> None:
    repo_builder.write_workflow(["libs/shared/**", "services/foo/**"])

    assert _check(repo_builder).run([FOO]) == []


def test_missing_glob_is_reported(repo_builder: RepoBuilder) -> None:
    repo_builder.write_workflow(["libs/shared/**"])

    warnings = _check(repo_builder).run([FOO])

    assert len(warnings) == 1
    assert "foo" in warnings[0]
    assert "'services/foo/**'" in warnings[0]
    assert ".github/workflows/ci.yml" in warnings[0]


def test_missing_workflow_file_yields_single_notice(repo_builder: RepoBuilder) -> None:
    warnings = _check(repo_builder).run([FOO, PackageRef(name="bar", path="libs/bar")])

    assert warnings == ["Workflow file not found at .github/workflows/ci.yml. Skipping check."]


def test_push_paths_are_used_without_pull_request(repo_builder: RepoBuilder) -> None:
    repo_builder.write_workflow(["services/foo/**"], event="push")

    assert _check(repo_builder).run([FOO]) == []


def test_malformed_workflow_propagates(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".github/workflows/ci.yml": "on: [unclosed\n"})

    with pytest.raises(yaml.YAMLError):
        _check(repo_builder).run([FOO])


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ({True: {"pull_request": {"paths": ["a/**"]}, "push": {"paths": ["b/**"]}}}, ["a/**"]),
        ({"on": {"push": {"paths": ["b/**"]}}}, ["b/**"]),
        ({"on": {"pull_request": {"paths": []}, "push": {"paths": ["b/**"]}}}, []),
        ({"on": ["push", "pull_request"]}, []),
        ({"on": {"pull_request": None}}, []),
        (None, []),
    ],
    ids=["yaml11-on", "push-fallback", "empty-pr-wins", "event-list", "null-event", "empty-doc"],
)
def test_trigger_paths_fallbacks(document, expected) -> None:
    assert trigger_paths(document) == expected
