"""Shared fixtures for scaffold tests."""

import os
import sys

import pytest
from git import Repo

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_repository import FakeGitRepository  # noqa: E402
from fake_hugo_site import FakeHugoSite  # noqa: E402


def _configure_user(repo):
    with repo.config_writer() as config:
        config.set_value("user", "email", "test@test.com")
        config.set_value("user", "name", "Test")


def commit_file(repo, name, content, message):
    """Write *name* in the repo's working tree and commit it."""
    path = os.path.join(repo.working_tree_dir, name)
    with open(path, "w") as f:
        f.write(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def fake_git_repo(calls):
    return FakeGitRepository(calls=calls)


@pytest.fixture
def fake_site(calls):
    return FakeHugoSite(calls=calls)


@pytest.fixture
def upstream_repo(tmp_path):
    """A repository with one commit on master, playing the role of origin."""
    repo = Repo.init(tmp_path / "upstream")
    _configure_user(repo)
    commit_file(repo, "README.md", "# Blog", "Initial commit")
    repo.git.branch("-M", "master")
    return repo


@pytest.fixture
def site_repo(tmp_path, upstream_repo):
    """A clone of upstream_repo, the working tree the scaffolder acts on."""
    repo = Repo.clone_from(upstream_repo.working_tree_dir, tmp_path / "site")
    _configure_user(repo)
    return repo
