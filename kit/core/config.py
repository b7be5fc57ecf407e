"""Configuration management for Kit VCS.

Two INI files are consulted: the repository's .kit/config, which also
holds the remote registry as `[remote "<name>"]` sections, and the
user's ~/.kitconfig.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict, List


class ConfigFile:
    """One INI file, loaded on first access and rewritten on every change."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._parser = None

    @property
    def parser(self) -> configparser.ConfigParser:
        if self._parser is None:
            # Values are stored verbatim; '%' in a remote path is not a placeholder
            self._parser = configparser.ConfigParser(interpolation=None)
            if self.path.exists():
                self._parser.read(self.path)
        return self._parser

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        return self.parser.get(section, key, fallback=fallback)

    def has(self, section: str, key: str) -> bool:
        return self.parser.has_option(section, key)

    def set(self, section: str, key: str, value: str) -> None:
        if not self.parser.has_section(section):
            self.parser.add_section(section)
        self.parser.set(section, key, value)
        self.save()

    def unset(self, section: str, key: str) -> bool:
        """Drop one value, and its section once empty. False if absent."""
        if not self.parser.has_option(section, key):
            return False
        self.parser.remove_option(section, key)
        if not self.parser.options(section):
            self.parser.remove_section(section)
        self.save()
        return True

    def remove_section(self, section: str) -> bool:
        if not self.parser.remove_section(section):
            return False
        self.save()
        return True

    def sections(self) -> List[str]:
        return self.parser.sections()

    def items(self, section: str) -> Dict[str, str]:
        return dict(self.parser.items(section))

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            self.parser.write(f)


class Config:
    """
    Layered Kit configuration.

    Lookups check, in order:
    1. Environment variables (KIT_<SECTION>_<KEY>)
    2. Repository config (.kit/config)
    3. Global config (~/.kitconfig)
    4. The caller's fallback
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.kitconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
        """
        self.repo_file = ConfigFile(repo_config_path) if repo_config_path else None
        self.global_file = ConfigFile(self.GLOBAL_CONFIG_PATH)

    def _layers(self) -> List[ConfigFile]:
        return [f for f in (self.repo_file, self.global_file) if f is not None]

    def _target(self, global_config: bool) -> ConfigFile:
        if global_config:
            return self.global_file
        if self.repo_file is None:
            raise ValueError("No repository config path available")
        return self.repo_file

    @staticmethod
    def env_key(section: str, key: str) -> str:
        """Environment variable that overrides section.key."""
        return f"KIT_{section.upper()}_{key.upper()}"

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'repositoryformatversion')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_value = os.environ.get(self.env_key(section, key))
        if env_value is not None:
            return env_value

        for layer in self._layers():
            if layer.has(section, key):
                return layer.get(section, key)
        return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """Write a value to the repository file, or the global one."""
        self._target(global_config).set(section, key, value)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        return self._target(global_config).unset(section, key)

    def remove_section(self, section: str) -> bool:
        """Remove a whole section from the repository config."""
        return self._target(False).remove_section(section)

    def sections(self, prefix: str = '') -> List[str]:
        """Repository config sections starting with prefix."""
        if self.repo_file is None:
            return []
        return [s for s in self.repo_file.sections() if s.startswith(prefix)]

    def list_all(self, global_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        Every configured value, grouped by section.

        Global values are keyed as '<key> (global)' so both layers can
        be shown side by side.
        """
        result: Dict[str, Dict[str, str]] = {}

        for section in self.global_file.sections():
            for key, value in self.global_file.items(section).items():
                result.setdefault(section, {})[f"{key} (global)"] = value

        if not global_only and self.repo_file is not None:
            for section in self.repo_file.sections():
                result.setdefault(section, {}).update(self.repo_file.items(section))

        return result


def get_config(repo=None) -> Config:
    """Config for repo, or global-only config when repo is None."""
    if repo:
        return Config(repo.config_file)
    return Config()
