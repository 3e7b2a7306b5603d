# tests/test_about.py

from hex_text_converter.__about__ import APP_TITLE, COPYRIGHT, __version__, about_text


def test_about_text_lists_title_version_and_copyright():
    lines = about_text().splitlines()
    assert lines == [APP_TITLE, f"Version {__version__}", COPYRIGHT]


def test_about_text_has_no_links():
    assert "http" not in about_text()
