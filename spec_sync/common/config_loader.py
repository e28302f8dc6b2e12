"""
Config Loader Module - Handles configuration loading and validation
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from spec_sync import config as config_module
from spec_sync.exceptions import ConfigError

logger = logging.getLogger(__name__)

YAML_KEYS = {
    'hub', 'topurl', 'tags', 'output_dir', 'exclude', 'packages', 'commit',
    'debug', 'log_file', 'fetch_retries', 'max_file_size',
}

BOOL_KEYS = {'commit', 'debug', 'dry_run'}
TRUE_WORDS = {'true', 'yes', 'on', '1'}
FALSE_WORDS = {'false', 'no', 'off', '0'}


def to_bool(key: str, value) -> bool:
    """Accept YAML booleans and their quoted spellings, reject anything else"""
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ConfigError(f"{key} must be true or false, got {value!r}")


@dataclass
class RunConfig:
    """Resolved settings for one mirror run"""
    hub: Optional[str] = None
    topurl: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    output_dir: Path = Path(config_module.DEFAULT_OUTPUT_DIR)
    packages: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    commit: bool = True
    dry_run: bool = False
    debug: bool = False
    log_file: Optional[str] = None
    http_timeout: int = config_module.HTTP_TIMEOUT
    fetch_retries: int = config_module.FETCH_RETRIES
    retry_delay: float = config_module.RETRY_DELAY
    max_file_size: int = config_module.MAX_FILE_SIZE

    @property
    def download_base(self) -> Optional[str]:
        """topurl if configured, else derived from the hub URL"""
        if self.topurl:
            return self.topurl.rstrip('/')
        if not self.hub:
            return None
        hub = self.hub.rstrip('/')
        if hub.endswith(config_module.HUB_SUFFIX):
            return hub[:-len(config_module.HUB_SUFFIX)] + config_module.TOPURL_SUFFIX
        return hub


class ConfigLoader:
    """Handles configuration loading: defaults, YAML file, environment, CLI"""

    @staticmethod
    def load_yaml_config(path) -> Dict:
        """
        Load a YAML config file.

        Args:
            path: Path to the YAML file

        Returns:
            Mapping of recognised keys

        Raises:
            ConfigError: if the file is unreadable, malformed, or has unknown keys
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        unknown = sorted(set(data) - YAML_KEYS)
        if unknown:
            raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

        for key in ('tags', 'exclude', 'packages'):
            if key in data and isinstance(data[key], str):
                data[key] = [data[key]]

        logger.info(f"CONFIG_FILE_LOADED path={path} keys={len(data)}")
        return data

    @staticmethod
    def load_environment_config() -> Dict:
        """Load configuration from environment variables"""
        env_config = {}
        if os.getenv('KOJI_HUB'):
            env_config['hub'] = os.getenv('KOJI_HUB')
        if os.getenv('KOJI_TOPURL'):
            env_config['topurl'] = os.getenv('KOJI_TOPURL')
        if os.getenv('SPEC_SYNC_TAGS'):
            env_config['tags'] = [t.strip() for t in os.getenv('SPEC_SYNC_TAGS').split(',') if t.strip()]
        if os.getenv('SPEC_SYNC_OUTPUT_DIR'):
            env_config['output_dir'] = os.getenv('SPEC_SYNC_OUTPUT_DIR')
        if os.getenv('SPEC_SYNC_DEBUG', '').lower() in ('1', 'true', 'yes'):
            env_config['debug'] = True
        return env_config

    @classmethod
    def load(cls, cli_overrides: Optional[Dict] = None, config_file=None) -> RunConfig:
        """
        Resolve the run configuration.

        Precedence (lowest to highest): config.py defaults, YAML file,
        environment variables, command line overrides. CLI values that are
        None or empty lists are treated as "not given".

        Args:
            cli_overrides: Values parsed from the command line
            config_file: Optional YAML file (falls back to SPEC_SYNC_CONFIG)

        Returns:
            RunConfig
        """
        merged: Dict = {}

        config_file = config_file or os.getenv('SPEC_SYNC_CONFIG')
        if config_file:
            merged.update(cls.load_yaml_config(config_file))

        merged.update(cls.load_environment_config())

        for key, value in (cli_overrides or {}).items():
            if value is None or value == []:
                continue
            merged[key] = value

        run_config = RunConfig()
        for key, value in merged.items():
            if key == 'output_dir':
                value = Path(value)
            elif key in BOOL_KEYS:
                value = to_bool(key, value)
            elif key in ('fetch_retries', 'max_file_size', 'http_timeout'):
                try:
                    value = int(value)
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"{key} must be an integer, got {value!r}") from e
            setattr(run_config, key, value)

        logger.debug(f"CONFIG_RESOLVED tags={run_config.tags} output_dir={run_config.output_dir}")
        return run_config
