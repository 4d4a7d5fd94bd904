"""Configuration management for gcpctl"""

import os
from pathlib import Path
from typing import Dict, Any, Optional
import yaml
from appdirs import user_config_dir
from dotenv import load_dotenv


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries.

    For nested dicts, recursively merge instead of overwriting, so a file
    that only sets gcloud.timeout_seconds keeps gcloud.binary.

    Args:
        base: Base configuration dict
        override: Override values to merge in

    Returns:
        Merged dictionary (base is modified in place and returned)
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Manage gcpctl configuration"""

    def __init__(self, config_path: Optional[Path] = None, config_dir: Optional[Path] = None):
        # Load environment variables
        load_dotenv()

        self.app_name = "gcpctl"
        self.config_dir = Path(config_dir) if config_dir else Path(user_config_dir(self.app_name))

        self.config_path = Path(config_path) if config_path else self.config_dir / "config.yaml"

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file and environment"""
        config = self._get_defaults()

        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}
                _deep_merge(config, file_config)

        # A section set to a scalar or null in the file falls back to its defaults
        for section, defaults in self._get_defaults().items():
            if not isinstance(config.get(section), dict):
                config[section] = defaults

        gcloud_binary = os.getenv('GCPCTL_GCLOUD')
        if gcloud_binary:
            config['gcloud']['binary'] = gcloud_binary

        project_limit = os.getenv('GCPCTL_PROJECT_LIMIT')
        if project_limit:
            config['projects']['limit'] = project_limit

        keybinding = os.getenv('GCPCTL_KEYBINDING')
        if keybinding:
            config['mode']['keybinding'] = keybinding

        return config

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration"""
        return {
            'gcloud': {
                'binary': 'gcloud',
                'timeout_seconds': None,  # gcloud calls block until exit
            },
            'projects': {
                'limit': None,  # passed through as --limit
            },
            'mode': {
                'keybinding': 'C-c g',
                'enable_on_start': True,
            },
        }

    def save(self):
        """Save configuration to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.dump(self._config, f, default_flow_style=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with dot notation support"""
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set configuration value with dot notation support"""
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self.save()

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._config)

    @property
    def gcloud_binary(self) -> str:
        """Get the gcloud executable name or path"""
        return self.get('gcloud.binary') or 'gcloud'

    @property
    def gcloud_timeout_seconds(self) -> Optional[float]:
        """Get the per-call timeout, or None for no timeout"""
        value = self.get('gcloud.timeout_seconds')
        return float(value) if value is not None else None

    @property
    def project_limit(self) -> Optional[int]:
        """Get the default project list limit.

        Raises:
            ValueError: If the stored value is not a positive integer
        """
        value = self.get('projects.limit')
        if value is None or value == '':
            return None
        try:
            limit = int(value)
        except (TypeError, ValueError):
            limit = 0
        if isinstance(value, bool) or limit < 1:
            raise ValueError(f"projects.limit must be a positive integer, got {value!r}")
        return limit

    @property
    def keybinding(self) -> str:
        """Get the key bound to the switch command"""
        return self.get('mode.keybinding', 'C-c g')

    @property
    def enable_on_start(self) -> bool:
        """Whether sessions start with the mode enabled"""
        return bool(self.get('mode.enable_on_start', True))
