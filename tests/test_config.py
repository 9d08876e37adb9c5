"""
Tests for config loading.
"""
import json
from pathlib import Path

import pytest

from timesheet_api.config import DEF_DBFILE, Config


def test_defaults():
    config = Config()
    assert config.db_file == DEF_DBFILE
    assert config.port == 8080
    assert config.api_prefix == "/api/timesheets"
    assert config.cors_origins == []
    assert config.database_url == f"sqlite:///{DEF_DBFILE}"


def test_db_url_overrides_db_file(tmp_path):
    config = Config(db_file=tmp_path / "x.db", db_url="postgresql://db/timesheets")
    assert config.database_url == "postgresql://db/timesheets"
    config.update(db_url=None)
    assert config.database_url == f"sqlite:///{tmp_path / 'x.db'}"


def test_cors_origins_not_shared():
    first = Config()
    first.cors_origins.append("http://a")
    assert Config().cors_origins == []


def test_from_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"port": 9000, "db_file": str(tmp_path / "t.db")}))
    config = Config(config_file)
    assert config.port == 9000
    assert config.db_file == tmp_path / "t.db"
    assert isinstance(config.db_file, Path)


def test_from_yaml(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("host: 0.0.0.0\ncors_origins:\n  - http://localhost:5173\n")
    config = Config(config_file)
    assert config.host == "0.0.0.0"
    assert config.cors_origins == ["http://localhost:5173"]


def test_from_toml(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text('api_prefix = "/v2/entries"\necho_sql = true\n')
    config = Config(config_file)
    assert config.api_prefix == "/v2/entries"
    assert config.echo_sql is True


def test_unknown_format(tmp_path):
    config_file = tmp_path / "config.ini"
    config_file.write_text("[timesheet]\n")
    with pytest.raises(ValueError):
        Config(config_file)


def test_missing_file(tmp_path):
    config = Config(tmp_path / "nope.json")
    assert config.port == 8080
    with pytest.raises(OSError):
        config.from_file(tmp_path / "nope.json", strict=True)


def test_unknown_option():
    config = Config(bogus=1)
    assert not hasattr(config, "bogus")
    with pytest.raises(KeyError):
        config.update(strict=True, bogus=1)


def test_iter():
    assert dict(Config(port=1234))["port"] == 1234
