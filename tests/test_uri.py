"""
Tests for folder URI normalization.
"""
import pytest

from cursor_recent.core.config import TargetOS
from cursor_recent.core.uri import folder_uri_to_path, path_title


def test_posix_triple_slash_uri():
    path = folder_uri_to_path("file:///Users/a/proj", TargetOS.MACOS)
    assert path == "/Users/a/proj"
    assert path_title(path) == "proj"


def test_percent_encoded_segment_is_decoded():
    path = folder_uri_to_path("file:///home/a/my%20proj", TargetOS.LINUX)
    assert path == "/home/a/my proj"
    assert path_title(path) == "my proj"


def test_non_ascii_is_decoded():
    path = folder_uri_to_path("file:///home/a/%E9%A1%B9%E7%9B%AE", TargetOS.LINUX)
    assert path == "/home/a/项目"


def test_windows_double_slash_drive():
    assert folder_uri_to_path("file://C:/Users/a/proj", TargetOS.WINDOWS) == "C:/Users/a/proj"


def test_windows_encoded_drive_colon():
    assert folder_uri_to_path("file:///c%3A/Users/a/proj", TargetOS.WINDOWS) == "c:/Users/a/proj"


def test_windows_leading_slash_before_drive_is_stripped():
    assert folder_uri_to_path("/C:/Users/a/proj", TargetOS.WINDOWS) == "C:/Users/a/proj"


def test_windows_unc_style_path_is_left_alone():
    assert folder_uri_to_path("file://server/share/proj", TargetOS.WINDOWS) == "server/share/proj"


def test_uri_without_scheme_is_only_decoded():
    assert folder_uri_to_path("/srv/a%20b", TargetOS.LINUX) == "/srv/a b"


@pytest.mark.parametrize(
    "path,title",
    [
        ("/Users/a/proj", "proj"),
        ("/Users/a/proj/", "proj"),
        ("C:/Users/a/proj", "proj"),
        ("C:\\Users\\a\\proj", "proj"),
        ("/", ""),
        ("C:/", "C:"),
    ],
)
def test_path_title(path, title):
    assert path_title(path) == title
