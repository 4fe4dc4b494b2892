import pytest

from RenderMark.slug import slugify


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Title", "title"),
        ("Hello, World!", "hello-world"),
        ("  Spaced   out  ", "spaced-out"),
        ("Already-hyphenated name", "already-hyphenated-name"),
        ("-edge-", "edge"),
        ("Version 2.0 notes", "version-20-notes"),
        ("**Bold** heading", "bold-heading"),
        ("Привет", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_identical_text_gives_identical_slug():
    assert slugify("Setup") == slugify("Setup")
