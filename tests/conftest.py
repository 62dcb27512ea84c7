import json

import pytest

from localekeys.config.settings import Config
from localekeys.core.constants import EnvVars
from localekeys.parsers.document_parser import parse_document_text
from localekeys.utils.logger import StructuredLogger

LOGIN = {"login": {"title": "Sign in", "button": {"ok": "OK"}}}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in vars(EnvVars).values():
        if isinstance(name, str) and name.isupper():
            monkeypatch.delenv(name, raising=False)
    yield
    StructuredLogger.reset()


@pytest.fixture
def langs_dir(tmp_path):
    path = tmp_path / "langs"
    path.mkdir()
    return path


@pytest.fixture
def write_json(langs_dir):
    def _write(name, data, directory=None):
        directory = directory or langs_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_config(tmp_path, langs_dir):
    def _make(**overrides):
        return Config(source_dir=langs_dir, output_dir=tmp_path / "out").merged(**overrides)
    return _make


def document(data, name="en"):
    return parse_document_text(json.dumps(data, ensure_ascii=False), name)
