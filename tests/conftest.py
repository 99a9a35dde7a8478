"""Shared fixtures for reposync tests."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pytest

from reposync.utils.git import has_git_metadata

HEAD_SHA = "a" * 40
UPSTREAM_SHA = "b" * 40


@dataclass
class FakeRepo:
    """Scripted answers for one repository."""

    head: Optional[str] = HEAD_SHA
    upstream: Optional[str] = HEAD_SHA
    behind: Optional[int] = 0
    fetch_ok: bool = True
    pull_ok: bool = True


@dataclass
class FakeGit:
    """In-memory stand-in for GitClient that records every call."""

    base_dir: str
    repos: Dict[str, FakeRepo] = field(default_factory=dict)
    clone_results: Dict[str, bool] = field(default_factory=dict)
    calls: List[Tuple[str, ...]] = field(default_factory=list)

    def add_repo(self, name: str, git_dir: bool = True, **kwargs) -> FakeRepo:
        path = os.path.join(self.base_dir, name)
        os.makedirs(path, exist_ok=True)
        if git_dir:
            os.makedirs(os.path.join(path, ".git"), exist_ok=True)
        repo = FakeRepo(**kwargs)
        self.repos[name] = repo
        return repo

    def add_behind(self, name: str, count: Optional[int], **kwargs) -> FakeRepo:
        return self.add_repo(name, upstream=UPSTREAM_SHA, behind=count, **kwargs)

    def _repo(self, repo_path: str) -> FakeRepo:
        return self.repos[os.path.relpath(repo_path, self.base_dir)]

    def has_git_metadata(self, repo_path: str) -> bool:
        return has_git_metadata(repo_path)

    def clone(self, clone_url: str, repo_path: str) -> bool:
        self.calls.append(("clone", clone_url, repo_path))
        ok = self.clone_results.get(clone_url, True)
        if ok:
            os.makedirs(os.path.join(repo_path, ".git"))
            self.repos[os.path.relpath(repo_path, self.base_dir)] = FakeRepo()
        return ok

    def fetch_remote(self, repo_path: str) -> bool:
        self.calls.append(("fetch", repo_path))
        return self._repo(repo_path).fetch_ok

    def resolve_revision(self, repo_path: str, ref: str) -> Optional[str]:
        self.calls.append(("rev-parse", repo_path, ref))
        repo = self._repo(repo_path)
        return repo.head if ref == "HEAD" else repo.upstream

    def count_ahead_commits(self, repo_path: str, from_ref: str, to_ref: str) -> Optional[int]:
        self.calls.append(("rev-list", repo_path, from_ref, to_ref))
        return self._repo(repo_path).behind

    def pull_fast_forward_only(self, repo_path: str) -> bool:
        self.calls.append(("pull", repo_path))
        return self._repo(repo_path).pull_ok

    def called(self, name: str) -> List[Tuple[str, ...]]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def base_dir(tmp_path) -> str:
    path = tmp_path / "workspace"
    path.mkdir()
    return str(path)


@pytest.fixture
def fake_git(base_dir) -> FakeGit:
    return FakeGit(base_dir=base_dir)
