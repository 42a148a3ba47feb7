import pytest
from pydantic import ValidationError

from compls import CompactLineString, CorruptData, LineString
from compls.conf import CodecSettings, get_global_settings
from compls.conf.get_settings import CONFIG_YAML_ENV_VAR, get_settings_source


def test_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    settings = get_global_settings()
    assert settings.DEFAULT_PRECISION == 7
    assert settings.MAX_POINTS is None
    assert get_settings_source() is None
    assert get_global_settings() is settings


def test_from_yaml(tmp_path, monkeypatch):
    config = tmp_path / 'codec.yml'
    config.write_text('DEFAULT_PRECISION: 2\nMAX_POINTS: 3\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(config))

    settings = get_global_settings()
    assert settings.DEFAULT_PRECISION == 2
    assert settings.MAX_POINTS == 3
    assert get_settings_source() == str(config)

    ls = LineString([(1.234, 5.678)])
    assert ls.try_compact() == CompactLineString.try_compact2(ls)

    too_long = LineString([(0.0, 0.0)] * 4).try_compact7()
    with pytest.raises(CorruptData):
        too_long.linestring()
    LineString([(0.0, 0.0)] * 3).try_compact7().linestring()


def test_empty_yaml_uses_defaults(tmp_path, monkeypatch):
    config = tmp_path / 'empty.yml'
    config.write_text('')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(config))
    assert get_global_settings() == CodecSettings()


def test_loading_a_different_file_fails(tmp_path, monkeypatch):
    first = tmp_path / 'first.yml'
    first.write_text('DEFAULT_PRECISION: 2\n')
    second = tmp_path / 'second.yml'
    second.write_text('DEFAULT_PRECISION: 3\n')

    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(first))
    get_global_settings()
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(second))
    with pytest.raises(Exception, match='different file'):
        get_global_settings()


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(tmp_path / 'nope.yml'))
    with pytest.raises(ValueError, match='is not a file'):
        get_global_settings()


def test_non_dict_yaml(tmp_path, monkeypatch):
    config = tmp_path / 'list.yml'
    config.write_text('- 1\n- 2\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(config))
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        get_global_settings()


@pytest.mark.parametrize('values', [
    {'DEFAULT_PRECISION': 10},
    {'DEFAULT_PRECISION': -1},
    {'MAX_POINTS': -5},
    {'UNKNOWN_SETTING': 1},
])
def test_invalid_settings(values):
    with pytest.raises(ValidationError):
        CodecSettings(**values)


def test_settings_are_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.DEFAULT_PRECISION = 2
