"""Config tests."""

import pytest
from sha1py.core.config import Config, get_config, PROJECT_CONFIG_NAME


def test_defaults(isolated_config):
    """Test built-in defaults when nothing is configured."""
    config = get_config()
    assert config.get('core', 'chunksize') == '65536'
    assert config.get_int('bench', 'iterations') == 1000
    assert config.get('core', 'unknown') is None


def test_fallback_beats_default(isolated_config):
    """Test an explicit fallback is preferred to the built-in default."""
    assert get_config().get('core', 'chunksize', '10') == '10'


def test_set_project(isolated_config):
    """Test project values are written to ./.sha1pyconfig."""
    get_config().set('core', 'chunksize', '4096')

    assert (isolated_config / PROJECT_CONFIG_NAME).exists()
    assert get_config().get_int('core', 'chunksize') == 4096


def test_set_global(isolated_config):
    """Test global values are written to the global path."""
    get_config().set('bench', 'iterations', '5', global_config=True)

    assert Config.GLOBAL_CONFIG_PATH.exists()
    assert get_config().get_int('bench', 'iterations') == 5


def test_project_overrides_global(isolated_config):
    """Test project config takes precedence over global config."""
    config = get_config()
    config.set('core', 'chunksize', '100', global_config=True)
    config.set('core', 'chunksize', '200')

    assert get_config().get('core', 'chunksize') == '200'


def test_environment_overrides_files(isolated_config, monkeypatch):
    """Test SHA1PY_<SECTION>_<KEY> beats every file."""
    get_config().set('core', 'chunksize', '200')
    monkeypatch.setenv('SHA1PY_CORE_CHUNKSIZE', '300')

    assert get_config().get_int('core', 'chunksize') == 300


@pytest.mark.parametrize('raw', ['abc', '0', '-5'])
def test_get_int_rejects_bad_values(isolated_config, monkeypatch, raw):
    """Test non-integer and non-positive values raise ValueError."""
    monkeypatch.setenv('SHA1PY_CORE_CHUNKSIZE', raw)
    with pytest.raises(ValueError):
        get_config().get_int('core', 'chunksize')


def test_unset(isolated_config):
    """Test removing a value and its now-empty section."""
    config = get_config()
    config.set('custom', 'key', 'value')

    assert get_config().unset('custom', 'key') is True
    assert get_config().get('custom', 'key') is None
    assert get_config().unset('custom', 'key') is False


def test_list_all(isolated_config):
    """Test listing marks global values."""
    config = get_config()
    config.set('core', 'chunksize', '1024', global_config=True)
    config.set('bench', 'size', '2048')

    values = get_config().list_all()
    assert values['core']['chunksize (global)'] == '1024'
    assert values['bench']['size'] == '2048'

    global_only = get_config().list_all(global_only=True)
    assert 'bench' not in global_only


def test_set_project_without_path():
    """Test project writes need a project config path."""
    with pytest.raises(ValueError):
        Config().set('core', 'chunksize', '1')


def test_get_int_hides_parse_error_context(isolated_config, monkeypatch):
    """Test the int() failure is not chained onto the config error."""
    monkeypatch.setenv('SHA1PY_CORE_CHUNKSIZE', 'lots')
    with pytest.raises(ValueError) as excinfo:
        get_config().get_int('core', 'chunksize')

    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__ is True
