import pytest

from church_attendance.photos.service import PhotoService, extract_file_id, photo_src


@pytest.mark.parametrize(
    "url, file_id",
    [
        ("https://drive.google.com/file/d/1AbC_x-9/view?usp=sharing", "1AbC_x-9"),
        ("https://drive.google.com/open?id=XYZ&authuser=0", "XYZ"),
        ("https://docs.google.com/uc?export=view&id=Q1", "Q1"),
        ("https://drive.google.com/d/ZZ/preview", "ZZ"),
    ],
)
def test_extract_file_id(url, file_id):
    assert extract_file_id(url) == file_id


def test_extract_file_id_none_for_other_urls():
    assert extract_file_id("https://example.com/photo.jpg") is None
    assert extract_file_id("") is None


def test_photo_src_routes_drive_urls_through_proxy():
    url = "https://drive.google.com/file/d/abc/view"
    assert photo_src(url) == "/api/image?url=https%3A%2F%2Fdrive.google.com%2Ffile%2Fd%2Fabc%2Fview"
    assert photo_src("https://example.com/a.jpg") == "https://example.com/a.jpg"
    assert photo_src("") == ""


def test_fetch_loads_drive_file(photo_storage):
    photo = PhotoService(photo_storage).fetch("https://drive.google.com/file/d/abc123/view")
    assert photo.content == b"\x89PNG"
    assert photo.mimetype == "image/png"


def test_fetch_returns_none_for_non_drive_url(photo_storage):
    assert PhotoService(photo_storage).fetch("https://example.com/a.jpg") is None


def test_fetch_propagates_storage_failure(photo_storage):
    with pytest.raises(RuntimeError):
        PhotoService(photo_storage).fetch("https://drive.google.com/file/d/forbidden/view")
