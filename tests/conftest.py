"""Shared pytest fixtures for gitresource tests."""

import base64
import json
from typing import Optional, Union

import pytest

from gitresource.config.schema import GitResourceSettings
from gitresource.fetch.models import DirectoryListing, EntryRef, FetchResult, FileContent, GetOptions


def make_file(path: str, text: str, type: str = "file") -> FileContent:
    """Build a base64-encoded FileContent like the contents API returns."""
    return FileContent(
        path=path,
        type=type,
        encoding="base64",
        content=base64.b64encode(text.encode()).decode(),
    )


def make_listing(*paths: str) -> DirectoryListing:
    """Build a DirectoryListing with one entry per path."""
    return DirectoryListing(entries=[EntryRef(path=p) for p in paths])


class FakeFetcher:
    """In-memory content fetcher keyed by repository path.

    Values may be a FetchResult or an exception to raise for that path.
    Every call is recorded as (owner, repo, path, options).
    """

    def __init__(self, contents: dict[str, Union[FetchResult, Exception]]):
        self.contents = contents
        self.calls: list[tuple[str, str, str, Optional[GetOptions]]] = []

    def parse_get_options(self, options: str) -> Optional[GetOptions]:
        if not options:
            return None
        return GetOptions(ref=options.split(":", 1)[1])

    def get_repository_contents(self, owner, repo, path, options):
        self.calls.append((owner, repo, path, options))
        result = self.contents[path]
        if isinstance(result, Exception):
            raise result
        return result

    def is_file_content_type(self, result) -> bool:
        return isinstance(result, FileContent) and result.type == "file"

    @property
    def fetched_paths(self) -> list[str]:
        return [call[2] for call in self.calls]


@pytest.fixture
def location_info():
    """Build a locationInfo JSON payload, overriding any field."""

    def _build(**overrides) -> str:
        data = {
            "owner": "o",
            "repository": "r",
            "path": "scripts/run.sh",
            "getOptions": "",
            "tokenInfo": "",
        }
        data.update(overrides)
        return json.dumps(data)

    return _build


@pytest.fixture
def settings(tmp_path):
    """Settings whose download root lives inside tmp_path."""
    return GitResourceSettings(download_root=str(tmp_path / "downloads"))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep config discovery away from the real home and working directory."""
    home_dir = tmp_path_factory.mktemp("home")
    work_dir = tmp_path_factory.mktemp("work")
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.chdir(work_dir)
    for var in (
        "GITRESOURCE_DOWNLOAD_ROOT",
        "GITRESOURCE_API_URL",
        "GITRESOURCE_TIMEOUT",
        "GITRESOURCE_LOG_LEVEL",
        "GITRESOURCE_TEST_TOKEN",
    ):
        monkeypatch.delenv(var, raising=False)
    return {"home_dir": home_dir, "work_dir": work_dir}
