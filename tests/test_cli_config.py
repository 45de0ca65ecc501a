"""Tests for CLI configuration module."""

import json

from cli.config import Config


def test_config_creates_default_file(tmp_path, monkeypatch):
    config_path = tmp_path / '.dirlist' / 'config.json'
    monkeypatch.setitem(Config.DEFAULT_CONFIG, 'server_host', 'localhost')
    config = Config(config_path)

    assert config_path.exists()
    assert config.data['server_host'] == 'localhost'
    assert config.data['timeout'] == 30
    assert config.data['max_retries'] == 3
    assert config.data['retry_backoff_multiplier'] == 2


def test_config_loads_existing_file(tmp_path):
    config_path = tmp_path / '.dirlist' / 'config.json'
    config_path.parent.mkdir(parents=True)
    with open(config_path, 'w') as f:
        json.dump({'server_host': 'example.com', 'server_port': 9000}, f)

    config = Config(config_path)

    assert config.get_base_url() == 'http://example.com:9000'
    assert config.get_timeout() == 30


def test_config_corrupt_file_uses_defaults_and_backs_up(tmp_path):
    config_path = tmp_path / '.dirlist' / 'config.json'
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{not json')

    config = Config(config_path)

    assert config.data == Config.DEFAULT_CONFIG
    assert config_path.with_suffix('.json.bak').read_text() == '{not json'


def test_config_save(temp_config):
    temp_config.data['timeout'] = 5
    temp_config.save()

    with open(temp_config.config_path, 'r') as f:
        assert json.load(f)['timeout'] == 5


def test_retry_config(temp_config):
    assert temp_config.get_retry_config() == {
        'max_retries': 3,
        'retry_backoff_multiplier': 2,
    }
