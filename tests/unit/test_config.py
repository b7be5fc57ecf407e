"""Unit tests for configuration management."""

from kit.core.config import Config, get_config


def test_repository_config_has_format_version(repo):
    assert repo.config.get('core', 'repositoryformatversion') == '0'


def test_set_and_get(repo):
    repo.config.set('core', 'editor', 'vim')
    assert get_config(repo).get('core', 'editor') == 'vim'


def test_env_overrides_file(repo, monkeypatch):
    repo.config.set('core', 'editor', 'vim')
    monkeypatch.setenv('KIT_CORE_EDITOR', 'nano')
    assert repo.config.get('core', 'editor') == 'nano'


def test_repository_overrides_global(repo):
    Config().set('core', 'editor', 'emacs', global_config=True)
    assert repo.config.get('core', 'editor') == 'emacs'

    repo.config.set('core', 'editor', 'vim')
    assert get_config(repo).get('core', 'editor') == 'vim'


def test_fallback(repo):
    assert repo.config.get('core', 'missing', fallback='x') == 'x'


def test_unset_removes_empty_section(repo):
    repo.config.set('extra', 'key', 'value')
    assert repo.config.unset('extra', 'key') is True
    assert repo.config.unset('extra', 'key') is False
    assert '[extra]' not in repo.config_file.read_text()


def test_list_all_marks_global_values(repo):
    Config().set('core', 'pager', 'less', global_config=True)
    values = get_config(repo).list_all()
    assert values['core']['pager (global)'] == 'less'
    assert values['core']['repositoryformatversion'] == '0'


def test_values_are_stored_verbatim(repo):
    repo.config.set('remote "origin"', 'path', '../a%b')
    assert get_config(repo).get('remote "origin"', 'path') == '../a%b'
    assert get_config(repo).list_all()['remote "origin"']['path'] == '../a%b'


def test_global_only_listing(repo):
    Config().set('core', 'pager', 'less', global_config=True)
    assert get_config(repo).list_all(global_only=True) == {'core': {'pager (global)': 'less'}}
