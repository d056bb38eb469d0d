"""
Unit tests for the CLI module.

Tests command-line argument parsing and storage invocation.
"""

from unittest.mock import Mock

import pytest

from adapters.uploaded_file import UploadedFile
from adapters.youtube_storage import YouTubeStorage
from app import main as cli
from domain.models import UploadResult
from ports.adapter_error import ConfigurationError


@pytest.fixture
def mock_storage():
    storage = Mock(spec=YouTubeStorage)
    storage.url.side_effect = lambda key, type=None: f"https://youtube.com/watch?v={key}"
    return storage


def run(storage, argv):
    return cli.run_command(storage, cli.parse_args(argv))


@pytest.mark.unit
class TestParseArgs:

    def test_upload_minimal(self):
        args = cli.parse_args(["upload", "video.mp4"])

        assert args.command == "upload"
        assert args.file == "video.mp4"
        assert args.title is None
        assert args.verbose is False

    def test_url_type_choices(self):
        for url_type in ["original", "embed", "short", "watch"]:
            assert cli.parse_args(["url", "vid1", "--type", url_type]).type == url_type

        with pytest.raises(SystemExit):
            cli.parse_args(["url", "vid1", "--type", "invalid"])

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            cli.parse_args([])


@pytest.mark.unit
class TestRunCommand:

    def test_upload(self, mock_storage, tmp_path, capsys):
        video = tmp_path / "clip.mp4"
        video.write_bytes(b"video")
        mock_storage.upload.return_value = UploadResult(id="vid1", video={"id": "vid1"})

        exit_code = run(mock_storage, ["upload", str(video), "--description", "Howdy"])

        assert exit_code == 0
        args = mock_storage.upload.call_args.args
        assert args[1] == "clip.mp4"
        assert args[2] == {"filename": "clip.mp4", "youtube": {"title": "clip.mp4", "description": "Howdy"}}
        out = capsys.readouterr().out
        assert "id=vid1" in out
        assert "https://youtube.com/watch?v=vid1" in out

    def test_upload_missing_file(self, mock_storage, tmp_path, capsys):
        exit_code = run(mock_storage, ["upload", str(tmp_path / "missing.mp4")])

        assert exit_code == 1
        assert "not found" in capsys.readouterr().err
        mock_storage.upload.assert_not_called()

    def test_republish_uploads_stored_content(self, mock_storage, capsys):
        mock_storage.original_storage.exists.return_value = True
        mock_storage.upload.return_value = UploadResult(id="vid2", video={"id": "vid2"})

        exit_code = run(mock_storage, ["republish", "vid1", "--title", "Again"])

        assert exit_code == 0
        source, key, metadata = mock_storage.upload.call_args.args
        assert isinstance(source, UploadedFile)
        assert source.storage is mock_storage.original_storage
        assert source.key == "vid1"
        assert source.closed
        assert key == "vid1"
        assert metadata == {"filename": "vid1", "youtube": {"title": "Again"}}
        assert "id=vid2" in capsys.readouterr().out

    def test_republish_missing_key(self, mock_storage, capsys):
        mock_storage.original_storage.exists.return_value = False

        assert run(mock_storage, ["republish", "vid1"]) == 1
        assert "Nothing stored" in capsys.readouterr().err
        mock_storage.upload.assert_not_called()

    @pytest.mark.parametrize("found, code, output", [(True, 0, "yes"), (False, 1, "no")])
    def test_exists(self, mock_storage, capsys, found, code, output):
        mock_storage.exists.return_value = found

        assert run(mock_storage, ["exists", "vid1"]) == code
        assert capsys.readouterr().out.strip() == output

    def test_delete(self, mock_storage):
        assert run(mock_storage, ["delete", "vid1"]) == 0
        mock_storage.delete.assert_called_once_with("vid1")

    def test_url(self, mock_storage, capsys):
        mock_storage.url.side_effect = None
        mock_storage.url.return_value = "https://youtu.be/vid1"

        assert run(mock_storage, ["url", "vid1", "--type", "short"]) == 0
        mock_storage.url.assert_called_once_with("vid1", type="short")
        assert capsys.readouterr().out.strip() == "https://youtu.be/vid1"

    def test_update(self, mock_storage, capsys):
        mock_storage.update.return_value = {"id": "vid1", "snippet": {"title": "New"}}

        assert run(mock_storage, ["update", "vid1", "--title", "New"]) == 0
        mock_storage.update.assert_called_once_with("vid1", {"youtube": {"title": "New"}})
        assert '"title": "New"' in capsys.readouterr().out

    def test_update_without_fields(self, mock_storage):
        assert run(mock_storage, ["update", "vid1"]) == 2
        mock_storage.update.assert_not_called()

    def test_clear_requires_confirmation(self, mock_storage):
        assert run(mock_storage, ["clear"]) == 2
        mock_storage.clear.assert_not_called()

    def test_clear_confirmed(self, mock_storage):
        assert run(mock_storage, ["clear", "--yes"]) == 0
        mock_storage.clear.assert_called_once_with()


@pytest.mark.unit
class TestMain:

    def test_configuration_error_exits_with_1(self, monkeypatch):
        def failing_storage():
            raise ConfigurationError(code="MISSING_OPTION", message="Required option is missing: client_id")

        monkeypatch.setattr(cli, "create_storage", failing_storage)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["exists", "vid1"])

        assert exc_info.value.code == 1

    def test_exit_code_from_command(self, monkeypatch, mock_storage):
        mock_storage.exists.return_value = True
        monkeypatch.setattr(cli, "create_storage", lambda: mock_storage)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["exists", "vid1"])

        assert exc_info.value.code == 0
