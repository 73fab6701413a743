import pytest

from classification import GITHUB, MEDIUM, OTHER, classify_project


@pytest.mark.parametrize("url,expected", [
    ("https://github.com/acme/widgets", GITHUB),
    ("https://github.com/acme/widgets?ref=medium.com", GITHUB),
    ("https://medium.com/jdoe/my-post-12345abcde", MEDIUM),
    ("https://jdoe.medium.com/my-post-12345abcde", MEDIUM),
    ("https://example.com/2021/my-post.html", OTHER),
    ("not a url at all", OTHER),
    ("", OTHER),
])
def test_classify_project(url, expected):
    assert classify_project(url) == expected

