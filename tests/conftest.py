# tests/conftest.py

import json
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
import requests

import config

TEMPLATES = Path(__file__).resolve().parent.parent / "config"


class FakeResponse:
    def __init__(self, text="", json_data=None, status_code=200):
        self.text = text
        self._json = json_data
        self.status_code = status_code

    def json(self):
        if self._json is None:
            raise ValueError("no json")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


# ----------------------------------------------------------
# Fresh config root with the shipped templates
# ----------------------------------------------------------
@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    root = tmp_path / "config"
    root.mkdir()
    for name in (config.TEMPLATE_BLOG, config.TEMPLATE_REPO):
        shutil.copy(TEMPLATES / name, root / name)
    monkeypatch.setattr(config, "CONFIG_DIR", str(root))
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv(config.GITHUB_TOKEN_ENV, raising=False)
    return root


# ----------------------------------------------------------
# No real network: every request fails unless a test says otherwise
# ----------------------------------------------------------
@pytest.fixture(autouse=True)
def offline():
    with patch("requests.get", side_effect=requests.ConnectionError("offline")) as mock:
        yield mock


def read_json(path):
    return json.loads(Path(path).read_text(encoding="utf-8"))
