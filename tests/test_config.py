import os
import sys
from importlib import reload
from unittest import mock

import pytest


@pytest.fixture
def mock_env_vars():
    with mock.patch.dict(os.environ, {
        "MONGODB_URI": "mongodb://mockuri:27017",
        "MONGO_DB": "testdb",
        "CONTACTS_COLLECTION": "people",
        "API_BASE_URL": "http://api.local",
        "ALLOWED_HOSTS": "http://a.local, http://b.local",
        "LOG_LEVEL": "DEBUG",
        "TIMEZONE": "Europe/Berlin",
        "ENV": "dev",
    }, clear=True):
        yield


@pytest.fixture(autouse=True)
def _restore_config_module():
    original = sys.modules.get("config")
    yield
    if original is not None:
        sys.modules["config"] = original


def _reload_config():
    if "config" in sys.modules:
        del sys.modules["config"]
    import config as config_module
    with mock.patch("config.load_dotenv"):
        reload(config_module)
    return config_module


def test_config_loads_env_vars(mock_env_vars):
    config_module = _reload_config()
    config = config_module.Config()

    assert config.MONGODB_URI == "mongodb://mockuri:27017"
    assert config.MONGO_DB == "testdb"
    assert config.CONTACTS_COLLECTION == "people"
    assert config.API_BASE_URL == "http://api.local"
    assert config.ALLOWED_HOSTS == ["http://a.local", "http://b.local"]
    assert config.LOG_LEVEL == "DEBUG"
    assert config.TIMEZONE == "Europe/Berlin"
    assert config.ENV == "dev"


def test_config_defaults():
    with mock.patch.dict(os.environ, {}, clear=True):
        config_module = _reload_config()
        config = config_module.Config()

    assert config.MONGODB_URI is None
    assert config.MONGO_DB == "contact-log-db"
    assert config.CONTACTS_COLLECTION == "contacts"
    assert config.ALLOWED_HOSTS == ["*"]
    assert config.TIMEZONE == "UTC"


def test_config_reads_connection_string_from_file(tmp_path):
    secret = tmp_path / "mongodb_uri"
    secret.write_text("mongodb://from-file:27017\n")
    with mock.patch.dict(os.environ, {"MONGODB_URI": str(secret)}, clear=True):
        config_module = _reload_config()
        config = config_module.Config()

    assert config.MONGODB_URI == "mongodb://from-file:27017"


def test_split_hosts_ignores_blanks():
    import config as config_module
    assert config_module.split_hosts(" , ") == ["*"]
    assert config_module.split_hosts(None) == ["*"]
    assert config_module.split_hosts("http://x") == ["http://x"]
