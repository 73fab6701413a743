from unittest.mock import patch

import requests

import config
from conftest import FakeResponse
from fetch import get_repo_readme, github_headers, parse_open_graph, scrape_open_graph

OG_PAGE = """
<html><head>
<title>Fallback</title>
<meta property="og:title" content="My Post">
<meta property="og:description" content="About things">
<meta property="og:image" content="https://example.com/img.png">
</head><body></body></html>
"""


def test_parse_open_graph():
    og = parse_open_graph(OG_PAGE)
    assert og["ogTitle"] == "My Post"
    assert og["ogDescription"] == "About things"
    assert og["ogImage"] == "https://example.com/img.png"


def test_parse_open_graph_twitter_title():
    og = parse_open_graph('<meta name="twitter:title" content="Tweeted">')
    assert og["ogTitle"] == "Tweeted"


def test_scrape_success():
    with patch("requests.get", return_value=FakeResponse(text=OG_PAGE)):
        og = scrape_open_graph("https://example.com/post")
    assert og["success"] is True
    assert og["ogTitle"] == "My Post"


def test_scrape_offline():
    og = scrape_open_graph("https://example.com/post")
    assert og["success"] is False
    assert "offline" in og["error"]


def test_scrape_http_error():
    with patch("requests.get", return_value=FakeResponse(status_code=404)):
        assert scrape_open_graph("https://example.com/missing")["success"] is False


def test_github_headers_without_token():
    assert "Authorization" not in github_headers()


def test_github_headers_with_token(monkeypatch):
    monkeypatch.setenv(config.GITHUB_TOKEN_ENV, "abc123")
    assert github_headers()["Authorization"] == "token abc123"


def test_get_repo_readme():
    with patch("requests.get", return_value=FakeResponse(json_data={"path": "docs/README.md"})) as mock:
        assert get_repo_readme("acme", "widgets") == "docs/README.md"
    assert mock.call_args[0][0] == "https://api.github.com/repos/acme/widgets/readme"


def test_get_repo_readme_sends_token(monkeypatch):
    monkeypatch.setenv(config.GITHUB_TOKEN_ENV, "abc123")
    with patch("requests.get", return_value=FakeResponse(json_data={"path": "README.md"})) as mock:
        get_repo_readme("acme", "widgets")
    assert mock.call_args.kwargs["headers"]["Authorization"] == "token abc123"


def test_get_repo_readme_failures():
    assert get_repo_readme("acme", "widgets") is None
    with patch("requests.get", return_value=FakeResponse(text="oops")):
        assert get_repo_readme("acme", "widgets") is None
    with patch("requests.get", side_effect=requests.Timeout("slow")):
        assert get_repo_readme("acme", "widgets") is None
