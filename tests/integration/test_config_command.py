"""Integration tests for config command."""

import hashlib
import pytest
from click.testing import CliRunner
from sha1py.cli.main import cli
from sha1py.core.config import Config, PROJECT_CONFIG_NAME


class TestConfigCommand:
    """Tests for sha1py config command."""

    def test_config_set_project(self, isolated_config):
        """Test setting a project config value."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'set', 'core.chunksize', '4096'])
        assert result.exit_code == 0
        assert 'project' in result.output
        assert (isolated_config / PROJECT_CONFIG_NAME).exists()

        result = runner.invoke(cli, ['config', 'get', 'core.chunksize'])
        assert '4096' in result.output

    def test_config_set_global(self, isolated_config):
        """Test setting a global config value."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'set', '--global', 'bench.size', '10'])
        assert result.exit_code == 0
        assert Config.GLOBAL_CONFIG_PATH.exists()

        result = runner.invoke(cli, ['config', 'get', 'bench.size'])
        assert '10' in result.output

    def test_config_get_default(self, isolated_config):
        """Test unset known keys report their default."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'get', 'core.chunksize'])
        assert result.exit_code == 0
        assert '65536' in result.output

    def test_config_get_bare_key_uses_core(self, isolated_config):
        """Test keys without a section live in [core]."""
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', 'chunksize', '512'])

        result = runner.invoke(cli, ['config', 'get', 'core.chunksize'])
        assert '512' in result.output

    def test_config_get_nonexistent(self, isolated_config):
        """Test getting a nonexistent config value."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'get', 'nonexistent.key'])
        assert result.exit_code == 1
        assert 'not found' in result.output

    def test_config_unset(self, isolated_config):
        """Test removing a value."""
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', 'custom.key', 'value'])

        result = runner.invoke(cli, ['config', 'unset', 'custom.key'])
        assert result.exit_code == 0

        result = runner.invoke(cli, ['config', 'unset', 'custom.key'])
        assert result.exit_code == 1

    def test_config_list(self, isolated_config):
        """Test listing all config values."""
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', '--global', 'core.chunksize', '1024'])
        runner.invoke(cli, ['config', 'set', 'bench.iterations', '7'])

        result = runner.invoke(cli, ['config', 'list'])
        assert result.exit_code == 0
        assert 'core.chunksize (global)=1024' in result.output
        assert 'bench.iterations=7' in result.output

    def test_config_list_empty(self, isolated_config):
        """Test listing with nothing configured."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'list'])
        assert result.exit_code == 0
        assert 'No configuration set' in result.output

    def test_chunk_size_config_used_by_sum(self, working_files):
        """Test sum still hashes correctly with a configured chunk size."""
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', 'core.chunksize', '5'])

        result = runner.invoke(cli, ['sum', 'test1.txt'])
        assert result.exit_code == 0
        assert hashlib.sha1(b'Content 1').hexdigest() in result.output
