"""
Integration tests for the pexelkit CLI.
"""

import json
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from pexelkit.cli import cli
from pexelkit.cli.helpers import set_client_factory
from pexelkit.core.exceptions import ConfigurationError, EmptyResultError, NotFoundError
from pexelkit.models import Photo, PhotoSearchResult, Video, VideoSearchResult


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_client(photo_page_data, video_page_data):
    """A MagicMock APIClient injected into the CLI."""
    client = MagicMock()
    client.__enter__.return_value = client
    client.get_remaining_quota.return_value = 4999
    client.search_photos.return_value = PhotoSearchResult.from_api_response(photo_page_data)
    client.curated_photos.return_value = PhotoSearchResult.from_api_response(photo_page_data)
    client.get_photo.return_value = Photo.from_api_response(photo_page_data["photos"][0])
    client.get_random_photo.return_value = Photo.from_api_response(photo_page_data["photos"][0])
    client.search_videos.return_value = VideoSearchResult.from_api_response(video_page_data)
    client.popular_videos.return_value = VideoSearchResult.from_api_response(video_page_data)
    client.get_video.return_value = Video.from_api_response(video_page_data["videos"][0])
    client.get_random_video.return_value = Video.from_api_response(video_page_data["videos"][0])

    captured = {}

    def factory(options):
        captured.update(options)
        return client

    set_client_factory(factory)
    client.captured_options = captured
    yield client
    set_client_factory(None)


class TestCLIBasic:
    """Basic CLI tests."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "photos" in result.output
        assert "videos" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "pexelkit" in result.output


class TestPhotoCommands:
    """Tests for the photos group."""

    def test_search(self, runner, fake_client):
        result = runner.invoke(cli, ["photos", "search", "nature", "--per-page", "15"])

        assert result.exit_code == 0, result.output
        fake_client.search_photos.assert_called_once_with("nature", 15, 1)
        assert "Requests remaining: 4999" in result.output

    def test_search_json(self, runner, fake_client):
        result = runner.invoke(cli, ["--json", "photos", "search", "nature"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["items"][0]["id"] == 1
        assert data["items"][0]["sources"]["original"] == "o"

    def test_token_option_forwarded(self, runner, fake_client):
        result = runner.invoke(cli, ["--token", "abc", "photos", "curated"])

        assert result.exit_code == 0, result.output
        assert fake_client.captured_options["token"] == "abc"
        fake_client.curated_photos.assert_called_once_with(15, 1)

    def test_get(self, runner, fake_client):
        result = runner.invoke(cli, ["photos", "get", "1"])

        assert result.exit_code == 0, result.output
        fake_client.get_photo.assert_called_once_with(1)
        assert "Photo 1" in result.output
        assert "original" in result.output
        fake_client.__exit__.assert_called_once()

    def test_api_text_is_not_markup(self, runner, fake_client):
        fake_client.get_photo.return_value = Photo.from_api_response(
            {"id": 3, "photographer": "[Studio]", "alt": "a [/b] c", "src": {"original": "[o]"}}
        )

        result = runner.invoke(cli, ["photos", "get", "3"])

        assert result.exit_code == 0, result.output
        assert "[Studio]" in result.output
        assert "a [/b] c" in result.output
        assert "[o]" in result.output

    def test_table_cells_are_not_markup(self, runner, fake_client, photo_page_data):
        photo_page_data["photos"][0]["photographer"] = "[/bold]"
        fake_client.search_photos.return_value = PhotoSearchResult.from_api_response(photo_page_data)

        result = runner.invoke(cli, ["photos", "search", "[red]"])

        assert result.exit_code == 0, result.output
        assert "[/bold]" in result.output

    def test_get_not_found(self, runner, fake_client):
        fake_client.get_photo.side_effect = NotFoundError("Resource not found: photos/2")

        result = runner.invoke(cli, ["photos", "get", "2"])

        assert result.exit_code == 1
        assert "Resource not found" in result.output
        fake_client.__exit__.assert_called_once()

    def test_random(self, runner, fake_client):
        result = runner.invoke(cli, ["photos", "random"])

        assert result.exit_code == 0, result.output
        fake_client.get_random_photo.assert_called_once_with()

    def test_random_empty(self, runner, fake_client):
        fake_client.get_random_photo.side_effect = EmptyResultError("Curated page 999 contains no photos.")

        result = runner.invoke(cli, ["photos", "random"])

        assert result.exit_code == 1
        assert "no photos" in result.output

    def test_invalid_page(self, runner, fake_client):
        result = runner.invoke(cli, ["photos", "curated", "--page", "0"])

        assert result.exit_code == 2
        fake_client.curated_photos.assert_not_called()


class TestVideoCommands:
    """Tests for the videos group."""

    def test_popular(self, runner, fake_client):
        result = runner.invoke(cli, ["videos", "popular", "--per-page", "1"])

        assert result.exit_code == 0, result.output
        fake_client.popular_videos.assert_called_once_with(1, 1)
        assert "2499611" in result.output

    def test_search(self, runner, fake_client):
        result = runner.invoke(cli, ["videos", "search", "ocean", "--page", "3"])

        assert result.exit_code == 0, result.output
        fake_client.search_videos.assert_called_once_with("ocean", 15, 3)

    def test_get_json(self, runner, fake_client):
        result = runner.invoke(cli, ["--json", "videos", "get", "2499611"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["files"][0]["quality"] == "hd"
        assert data["duration_seconds"] == 22.0

    def test_random(self, runner, fake_client):
        result = runner.invoke(cli, ["videos", "random"])

        assert result.exit_code == 0, result.output
        assert "Video 2499611" in result.output
        fake_client.__exit__.assert_called_once()


class TestMissingToken:
    """Tests for the default client factory."""

    def test_missing_token_reported(self, runner, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PEXELS_API_KEY", raising=False)
        monkeypatch.setattr("pexelkit.core.config.CONFIG_LOCATIONS", [])

        result = runner.invoke(cli, ["photos", "curated"])

        assert result.exit_code == 1
        assert "PEXELS_API_KEY" in result.output

    def test_factory_errors_reported(self, runner):
        def failing_factory(options):
            raise ConfigurationError("broken config")

        set_client_factory(failing_factory)
        try:
            result = runner.invoke(cli, ["videos", "popular"])
        finally:
            set_client_factory(None)

        assert result.exit_code == 1
        assert "broken config" in result.output


class TestConfigCommands:
    """Tests for the config group."""

    def test_init_and_show(self, runner, tmp_path):
        path = tmp_path / "pexelkit.toml"

        result = runner.invoke(cli, ["config", "init", str(path)])
        assert result.exit_code == 0, result.output
        assert path.exists()

        path.write_text('[api]\ntoken = "abcdefghijklmnop"\n')
        result = runner.invoke(cli, ["--config", str(path), "config", "show"])

        assert result.exit_code == 0, result.output
        assert "Source:" in result.output
        assert "abcdefghijklmnop" not in result.output
        assert "timeout" in result.output

    def test_init_refuses_overwrite(self, runner, tmp_path):
        path = tmp_path / "pexelkit.toml"
        path.write_text("")

        result = runner.invoke(cli, ["config", "init", str(path)])

        assert result.exit_code == 1
        assert "already exists" in result.output
