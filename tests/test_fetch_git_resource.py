"""End-to-end tests for fetch_git_resource with mocked GitHub responses."""

import base64

import httpx
import pytest
import respx

from gitresource import (
    FetchError,
    MalformedInputError,
    MissingFieldError,
    ResourceKind,
    TokenResolutionError,
    UnexpectedContentShapeError,
    fetch_git_resource,
)

CONTENTS_URL = "https://api.github.com/repos/o/r/contents"


def file_json(path: str, text: str) -> dict:
    return {
        "type": "file",
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "encoding": "base64",
        "content": base64.b64encode(text.encode()).decode(),
    }


class TestFetchGitResource:
    """Test the parse, validate, download and classify pipeline."""

    @respx.mock
    def test_single_script(self, location_info, settings, tmp_path):
        """Test downloading scripts/run.sh into a destination directory."""
        respx.get(f"{CONTENTS_URL}/scripts/run.sh").mock(
            return_value=httpx.Response(200, json=file_json("scripts/run.sh", "echo hi"))
        )

        info = fetch_git_resource(location_info(), False, tmp_path / "root", settings=settings)

        assert (tmp_path / "root" / "scripts" / "run.sh").read_text() == "echo hi"
        assert info.starter_file == "run.sh"
        assert info.resource_extension == ".sh"
        assert info.resource_kind == ResourceKind.SCRIPT
        assert info.is_entire_directory is False

    @respx.mock
    def test_document_into_download_root(self, location_info, settings, tmp_path):
        """Test an empty destination uses the download root and JSON is a document."""
        respx.get(f"{CONTENTS_URL}/docs/doc.json").mock(
            return_value=httpx.Response(200, json=file_json("docs/doc.json", "{}"))
        )

        info = fetch_git_resource(location_info(path="docs/doc.json"), settings=settings)

        assert info.resource_kind == ResourceKind.DOCUMENT
        assert info.local_destination_path.read_text() == "{}"
        assert str(info.local_destination_path).startswith(settings.download_root)

    @respx.mock
    def test_entire_directory(self, location_info, settings, tmp_path):
        """Test the containing directory is downloaded recursively."""
        respx.get(f"{CONTENTS_URL}/scripts").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"type": "file", "name": "run.sh", "path": "scripts/run.sh"},
                    {"type": "dir", "name": "lib", "path": "scripts/lib"},
                ],
            )
        )
        respx.get(f"{CONTENTS_URL}/scripts/run.sh").mock(
            return_value=httpx.Response(200, json=file_json("scripts/run.sh", "echo hi"))
        )
        respx.get(f"{CONTENTS_URL}/scripts/lib").mock(
            return_value=httpx.Response(
                200, json=[{"type": "file", "name": "util.sh", "path": "scripts/lib/util.sh"}]
            )
        )
        respx.get(f"{CONTENTS_URL}/scripts/lib/util.sh").mock(
            return_value=httpx.Response(200, json=file_json("scripts/lib/util.sh", "util"))
        )

        info = fetch_git_resource(location_info(), True, tmp_path, settings=settings)

        assert (tmp_path / "scripts" / "run.sh").read_text() == "echo hi"
        assert (tmp_path / "scripts" / "lib" / "util.sh").read_text() == "util"
        assert info.is_entire_directory is True
        assert info.resource_kind == ResourceKind.SCRIPT

    @respx.mock
    def test_directory_without_entire_dir(self, location_info, settings, tmp_path):
        """Test a directory path without entire-directory mode fails."""
        respx.get(f"{CONTENTS_URL}/scripts").mock(
            return_value=httpx.Response(200, json=[{"type": "file", "path": "scripts/run.sh"}])
        )

        with pytest.raises(UnexpectedContentShapeError, match="entireDir"):
            fetch_git_resource(location_info(path="scripts"), False, tmp_path, settings=settings)

    @respx.mock
    def test_branch_option(self, location_info, settings, tmp_path):
        """Test getOptions selects the ref."""
        route = respx.get(f"{CONTENTS_URL}/scripts/run.sh").mock(
            return_value=httpx.Response(200, json=file_json("scripts/run.sh", "echo dev"))
        )

        fetch_git_resource(
            location_info(getOptions="branch:dev"), False, tmp_path, settings=settings
        )

        assert route.calls.last.request.url.params["ref"] == "dev"

    @respx.mock
    def test_token_info(self, location_info, settings, tmp_path, monkeypatch):
        """Test tokenInfo authenticates every request."""
        monkeypatch.setenv("GITRESOURCE_TEST_TOKEN", "test-token-123")
        route = respx.get(f"{CONTENTS_URL}/scripts/run.sh").mock(
            return_value=httpx.Response(200, json=file_json("scripts/run.sh", "echo hi"))
        )

        fetch_git_resource(
            location_info(tokenInfo="env:GITRESOURCE_TEST_TOKEN"),
            False,
            tmp_path,
            settings=settings,
        )

        assert route.calls.last.request.headers["Authorization"] == "Bearer test-token-123"

    @respx.mock
    def test_not_found(self, location_info, settings, tmp_path):
        """Test API errors propagate as FetchError."""
        respx.get(f"{CONTENTS_URL}/scripts/run.sh").mock(return_value=httpx.Response(404))

        with pytest.raises(FetchError, match="Path not found"):
            fetch_git_resource(location_info(), False, tmp_path, settings=settings)


class TestFetchGitResourceValidation:
    """Test failures that happen before any request is made."""

    @respx.mock
    def test_missing_path(self, location_info, settings, tmp_path):
        """Test a missing path is reported without network access."""
        with pytest.raises(MissingFieldError) as exc_info:
            fetch_git_resource(location_info(path=""), False, tmp_path, settings=settings)

        assert exc_info.value.field == "path"

    @respx.mock
    def test_missing_owner_reported_first(self, location_info, settings, tmp_path):
        """Test owner is reported before repository and path."""
        with pytest.raises(MissingFieldError, match="Owner"):
            fetch_git_resource(
                location_info(owner="", repository="", path=""),
                False,
                tmp_path,
                settings=settings,
            )

    def test_malformed_location_info(self, settings, tmp_path):
        """Test invalid JSON is rejected."""
        with pytest.raises(MalformedInputError):
            fetch_git_resource("not json", False, tmp_path, settings=settings)

    def test_unresolvable_token(self, location_info, settings, tmp_path):
        """Test an unset token variable fails before downloading."""
        with pytest.raises(TokenResolutionError):
            fetch_git_resource(
                location_info(tokenInfo="env:GITRESOURCE_TEST_TOKEN"),
                False,
                tmp_path,
                settings=settings,
            )

    def test_token_client_closed_when_validation_fails(self, location_info, settings, tmp_path):
        """Test the authenticated client is closed when a required field is missing."""
        clients = []

        class RecordingTokenProvider:
            def get_oauth_client(self, token_info):
                client = httpx.Client(headers={"Authorization": "Bearer t"})
                clients.append(client)
                return client

        with pytest.raises(MissingFieldError):
            fetch_git_resource(
                location_info(path="", tokenInfo="env:ANY"),
                False,
                tmp_path,
                token_provider=RecordingTokenProvider(),
                settings=settings,
            )

        assert len(clients) == 1
        assert clients[0].is_closed
