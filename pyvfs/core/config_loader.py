"""
PyVFS Configuration Loader

Configuration management for the namespace library:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

from pyvfs.exceptions import ConfigLoadError, ConfigValidationError
from pyvfs.logger import get_logger


@dataclass
class NamespaceConfig:
    """Namespace defaults applied to newly created entries."""
    dir_mode: int = 0o755
    file_mode: int = 0o644
    default_uid: int = 0
    default_gid: int = 0
    # Return to the caller's working directory after a successful mkdir
    restore_cwd_after_mkdir: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the library.
    """
    namespace: NamespaceConfig = field(default_factory=NamespaceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('pyvfs.json')
        >>> oct(config.namespace.dir_mode)
        '0o755'
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                config_path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                config_path=config_path
            ) from e
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                config_path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Configuration root must be a JSON object",
                config_path=config_path
            )

        self._config = self._parse_config(data, config_path)
        self._loaded = True
        get_logger('config').info(
            "Configuration loaded", context={'path': config_path}
        )
        return self._config

    def _parse_config(self, data: dict[str, Any], config_path: str) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        for section in ('namespace', 'logging'):
            if section in data and not isinstance(data[section], dict):
                raise ConfigLoadError(
                    f"Configuration section '{section}' must be a JSON object",
                    config_path=config_path
                )

        if 'namespace' in data:
            ns_data = data['namespace']
            config.namespace = NamespaceConfig(
                dir_mode=self._parse_mode(ns_data.get('dir_mode', config.namespace.dir_mode)),
                file_mode=self._parse_mode(ns_data.get('file_mode', config.namespace.file_mode)),
                default_uid=ns_data.get('default_uid', config.namespace.default_uid),
                default_gid=ns_data.get('default_gid', config.namespace.default_gid),
                restore_cwd_after_mkdir=ns_data.get(
                    'restore_cwd_after_mkdir', config.namespace.restore_cwd_after_mkdir
                ),
            )

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )

        return config

    @staticmethod
    def _parse_mode(value: Any) -> int:
        """Accept modes as integers or octal strings such as "0o755" or "755"."""
        if isinstance(value, int):
            return value
        try:
            return int(str(value), 8)
        except ValueError:
            raise ConfigValidationError(f"Invalid permission mode: {value!r}") from None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'namespace.dir_mode')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'namespace.restore_cwd_after_mkdir')
            value: Value to set

        Raises:
            ConfigValidationError: If the key does not name a setting
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, '__dataclass_fields__') or final_key not in obj.__dataclass_fields__:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)
        setattr(obj, final_key, value)

    def reset(self) -> None:
        """Drop any loaded or modified settings and return to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
