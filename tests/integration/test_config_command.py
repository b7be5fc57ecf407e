"""Integration tests for config command."""

from kit.cli.main import cli


class TestConfigCommand:
    """Tests for kit config command."""

    def test_config_set_and_get(self, runner, cli_dir):
        runner.invoke(cli, ['init'])

        result = runner.invoke(cli, ['config', 'set', 'core.editor', 'vim'])
        assert result.exit_code == 0

        result = runner.invoke(cli, ['config', 'get', 'core.editor'])
        assert result.output.strip() == 'vim'

    def test_config_get_missing(self, runner, cli_dir):
        runner.invoke(cli, ['init'])
        result = runner.invoke(cli, ['config', 'get', 'core.nothing'])
        assert 'Config key not found' in result.output

    def test_config_unset(self, runner, cli_dir):
        runner.invoke(cli, ['init'])
        runner.invoke(cli, ['config', 'set', 'core.editor', 'vim'])

        result = runner.invoke(cli, ['config', 'unset', 'core.editor'])
        assert result.exit_code == 0

        result = runner.invoke(cli, ['config', 'get', 'core.editor'])
        assert 'Config key not found' in result.output

    def test_config_list_shows_remotes(self, runner, cli_dir):
        runner.invoke(cli, ['init'])
        runner.invoke(cli, ['add-remote', 'origin', '../shared'])

        result = runner.invoke(cli, ['config', 'list'])

        assert 'core.repositoryformatversion=0' in result.output
        assert 'remote "origin".path=../shared' in result.output

    def test_config_global_outside_repository(self, runner, cli_dir):
        result = runner.invoke(cli, ['config', 'set', '--global', 'core.pager', 'less'])
        assert result.exit_code == 0

        result = runner.invoke(cli, ['config', 'get', '--global', 'core.pager'])
        assert result.output.strip() == 'less'

    def test_config_outside_repository(self, runner, cli_dir):
        result = runner.invoke(cli, ['config', 'set', 'core.editor', 'vim'])
        assert 'Not in an initialized Kit directory.' in result.output
