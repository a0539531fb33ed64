import pytest

from core.errors import ResourceUnavailableError
from core.resource import MediaResource
from core.utils.media import resolve_content_type


@pytest.mark.parametrize(
    "name, expected",
    [
        ("video.mp4", "video/mp4"),
        ("song.mp3", "audio/mpeg"),
        ("CLIP.MP4", "video/mp4"),
        ("movie.webm", "video/webm"),
        ("/srv/media/track.flac", "audio/flac"),
        ("file.unknown", "application/octet-stream"),
        ("README", "application/octet-stream"),
        ("archive.tar.gz", "application/octet-stream"),
        ("", "application/octet-stream"),
    ],
)
def test_resolve_content_type(name, expected):
    assert resolve_content_type(name) == expected


def test_open_reads_size_and_type(media_file):
    with MediaResource.open(media_file) as resource:
        assert resource.size == 10_000
        assert resource.content_type == "video/mp4"
        assert resource.read(4) == media_file.read_bytes()[:4]
    assert resource.closed


def test_close_is_idempotent(media_file):
    resource = MediaResource.open(media_file)
    resource.close()
    resource.close()
    assert resource.closed


def test_each_open_has_independent_cursor(media_file):
    data = media_file.read_bytes()
    with MediaResource.open(media_file) as a, MediaResource.open(media_file) as b:
        a.seek(100)
        assert b.read(10) == data[:10]
        assert a.read(10) == data[100:110]


def test_open_missing_file(tmp_path):
    with pytest.raises(ResourceUnavailableError) as exc_info:
        MediaResource.open(tmp_path / "missing.mp4")
    assert exc_info.value.is_missing
    assert exc_info.value.context["path"].endswith("missing.mp4")


def test_open_directory_is_unavailable(tmp_path):
    with pytest.raises(ResourceUnavailableError) as exc_info:
        MediaResource.open(tmp_path)
    assert not exc_info.value.is_missing
