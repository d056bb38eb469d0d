"""Unit tests for PlaylistPaginator."""
from unittest.mock import Mock, call

import pytest

from domain.channel_resolver import ChannelResolver
from domain.playlist_paginator import PlaylistPaginator
from ports.video_service import VideoService


def page(total, *video_ids):
    return {
        "items": [{"snippet": {"resourceId": {"videoId": v}}} for v in video_ids],
        "pageInfo": {"totalResults": total},
    }


@pytest.fixture
def mock_service():
    service = Mock(spec=VideoService)
    service.list_channels.return_value = {
        "items": [{"id": "UC_test", "contentDetails": {"relatedPlaylists": {"uploads": "UU_test"}}}]
    }
    return service


@pytest.fixture
def paginator(mock_service):
    return PlaylistPaginator(mock_service, ChannelResolver(mock_service, channel_id="UC_test"))


@pytest.mark.unit
class TestDeleteAll:

    def test_empty_playlist_makes_no_deletions(self, paginator, mock_service):
        mock_service.list_playlist_items.return_value = page(0)

        assert paginator.delete_all() == 0

        mock_service.list_playlist_items.assert_called_once_with("snippet", playlist_id="UU_test")
        mock_service.delete_video.assert_not_called()

    def test_refetches_first_page_until_empty(self, paginator, mock_service):
        mock_service.list_playlist_items.side_effect = [
            page(3, "v3", "v2"),
            page(1, "v1"),
            page(0),
        ]

        assert paginator.delete_all() == 3

        assert mock_service.delete_video.call_args_list == [call("v3"), call("v2"), call("v1")]
        assert mock_service.list_playlist_items.call_count == 3
        for c in mock_service.list_playlist_items.call_args_list:
            assert c == call("snippet", playlist_id="UU_test")

    def test_delete_error_aborts(self, paginator, mock_service):
        mock_service.list_playlist_items.return_value = page(2, "v2", "v1")
        mock_service.delete_video.side_effect = RuntimeError("quotaExceeded")

        with pytest.raises(RuntimeError):
            paginator.delete_all()

        mock_service.delete_video.assert_called_once_with("v2")
