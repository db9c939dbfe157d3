"""Tests for project root detection and type classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from projutil.classifier import classify, is_project_root, layout_prefix_to_type
from projutil.errors import ConfigError, NotProjectRootError, ProjectError
from projutil.models import LegacyHeuristic, ProjectType, StructuredConfig
from tests._fixtures.project_builder import ProjectBuilder


def test_empty_directory_is_not_project_root(project_builder: ProjectBuilder) -> None:
    classifier = project_builder.classifier()

    assert classifier.is_project_root() is False
    with pytest.raises(NotProjectRootError, match="build/Dockerfile"):
        classifier.check_project_root()


def test_project_file_marks_project_root(project_builder: ProjectBuilder) -> None:
    project_builder.write_project_file(layout="go.kubebuilder.io/v2")

    assert project_builder.classifier().is_project_root() is True
    project_builder.classifier().check_project_root()


def test_legacy_dockerfile_marks_project_root(project_builder: ProjectBuilder) -> None:
    project_builder.write({"build/Dockerfile": "FROM scratch\n"})

    assert is_project_root(project_builder.path()) is True


def test_layout_source_prefers_project_file(project_builder: ProjectBuilder) -> None:
    classifier = project_builder.classifier()
    assert isinstance(classifier.layout_source(), LegacyHeuristic)

    project_builder.write_project_file(layout="helm.sdk.operatorframework.io/v1")
    source = classifier.layout_source()

    assert isinstance(source, StructuredConfig)
    assert source.config.layout == "helm.sdk.operatorframework.io/v1"


def test_roles_directory_only_is_ansible(project_builder: ProjectBuilder) -> None:
    project_builder.mkdirs(["roles/memcached"])

    assert classify(project_builder.path()) is ProjectType.ANSIBLE


@pytest.mark.parametrize(
    "setup",
    [
        {"dirs": ["molecule/default"]},
        {"files": {"requirements.yml": "collections: []\n"}},
    ],
)
def test_legacy_ansible_markers(project_builder: ProjectBuilder, setup: dict) -> None:
    project_builder.mkdirs(setup.get("dirs", []))
    project_builder.write(setup.get("files", {}))

    assert project_builder.classifier().classify() is ProjectType.ANSIBLE


def test_roles_file_is_not_an_ansible_marker(project_builder: ProjectBuilder) -> None:
    project_builder.write({"roles": "not a directory\n"})

    assert project_builder.classifier().classify() is ProjectType.UNKNOWN


@pytest.mark.parametrize("main_file", ["cmd/manager/main.go", "main.go"])
def test_legacy_go_main_file(project_builder: ProjectBuilder, main_file: str) -> None:
    project_builder.write({main_file: "package main\n"})

    assert project_builder.classifier().classify() is ProjectType.GO


def test_legacy_go_checked_before_ansible(project_builder: ProjectBuilder) -> None:
    project_builder.write({"main.go": "package main\n"})
    project_builder.mkdirs(["roles"])

    assert project_builder.classifier().classify() is ProjectType.GO


def test_legacy_layout_is_never_helm(project_builder: ProjectBuilder) -> None:
    project_builder.mkdirs(["helm-charts/memcached"])

    classifier = project_builder.classifier()
    assert classifier.is_helm() is False
    assert classifier.classify() is ProjectType.UNKNOWN


def test_helm_layout_wins_over_other_directory_contents(
    project_builder: ProjectBuilder,
) -> None:
    project_builder.write_project_file(layout="helm.sdk.operatorframework.io/v1")
    project_builder.write({"main.go": "package main\n", "requirements.yml": "---\n"})
    project_builder.mkdirs(["roles", "molecule"])

    assert project_builder.classifier().classify() is ProjectType.HELM


def test_ansible_layout_from_project_file(project_builder: ProjectBuilder) -> None:
    project_builder.write_project_file(layout="ansible.sdk.operatorframework.io/v1")

    classifier = project_builder.classifier()
    assert classifier.is_ansible() is True
    assert classifier.classify() is ProjectType.ANSIBLE


def test_project_file_version_two_is_go(project_builder: ProjectBuilder) -> None:
    project_builder.write_project_file(version="2")

    assert project_builder.classifier().is_go() is True
    assert project_builder.classifier().classify() is ProjectType.GO


def test_project_file_without_layout_ignores_legacy_markers(
    project_builder: ProjectBuilder,
) -> None:
    project_builder.write_project_file(layout="")
    project_builder.mkdirs(["roles"])

    assert project_builder.classifier().classify() is ProjectType.UNKNOWN


def test_unreadable_project_file_raises(project_builder: ProjectBuilder) -> None:
    project_builder.write({"PROJECT": "layout: [broken\n"})

    with pytest.raises(ConfigError):
        project_builder.classifier().classify()


def test_classification_reflects_filesystem_changes(project_builder: ProjectBuilder) -> None:
    classifier = project_builder.classifier()
    assert classifier.classify() is ProjectType.UNKNOWN

    project_builder.write_project_file(layout="go.kubebuilder.io/v2")

    assert classifier.classify() is ProjectType.GO


@pytest.mark.parametrize(
    ("layout", "expected"),
    [
        ("go.kubebuilder.io/v2", ProjectType.GO),
        ("go", ProjectType.GO),
        ("helm.sdk.operatorframework.io/v1", ProjectType.HELM),
        ("ansible.sdk.operatorframework.io/v1", ProjectType.ANSIBLE),
        ("gohelm", ProjectType.GO),
        ("helmansible", ProjectType.HELM),
        ("", ProjectType.UNKNOWN),
        ("java.example.io/v1", ProjectType.UNKNOWN),
        ("Go.kubebuilder.io/v2", ProjectType.UNKNOWN),
    ],
)
def test_layout_prefix_to_type(layout: str, expected: ProjectType) -> None:
    assert layout_prefix_to_type(layout) is expected


def _deny_stat_for(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    original_stat = Path.stat

    def fake_stat(self: Path, *args, **kwargs):
        if self.name == name:
            raise PermissionError(13, "Permission denied", str(self))
        return original_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", fake_stat)


def test_permission_error_on_project_file_is_not_a_negative_answer(
    project_builder: ProjectBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    classifier = project_builder.classifier()
    _deny_stat_for(monkeypatch, "PROJECT")

    with pytest.raises(ProjectError, match="Permission denied"):
        classifier.is_project_root()
    with pytest.raises(ProjectError, match="Permission denied"):
        classifier.classify()


def test_permission_error_on_legacy_marker_raises(
    project_builder: ProjectBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    project_builder.mkdirs(["roles"])
    classifier = project_builder.classifier()
    _deny_stat_for(monkeypatch, "main.go")

    with pytest.raises(ProjectError):
        classifier.classify()
