import os
import yaml
from typing import Dict, Any, List, Optional

from src.interface_client.exceptions import ConfigurationError
from src.utils.validators import ConfigValidator

class Settings:
    """Configuration management for the netstats monitor."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or os.getenv('NETSTATS_CONFIG_FILE', 'config/config.yaml')
        self.load_errors: List[str] = []
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and environment variables."""
        config = {}

        # Load from YAML file if exists
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                self.load_errors.append(f"Cannot read {self.config_file}: {e}")
                config = {}

        if not isinstance(config, dict):
            self.load_errors.append(f"{self.config_file}: top level must be a mapping")
            config = {}

        monitor_config = self._section(config, 'monitor')
        logging_config = self._section(config, 'logging')

        # Override with environment variables
        config.update({
            'monitor': {
                'refresh_interval': self._parse_int(os.getenv('NETSTATS_REFRESH_INTERVAL', monitor_config.get('refresh_interval', 1))),
                'precision': self._parse_int(os.getenv('NETSTATS_PRECISION', monitor_config.get('precision', 2))),
                'output_format': str(os.getenv('NETSTATS_FORMAT', monitor_config.get('output_format', 'table'))).lower(),
            },
            'logging': {
                'level': os.getenv('LOG_LEVEL', logging_config.get('level', 'INFO')),
                'file': os.getenv('LOG_FILE', logging_config.get('file', '')) or '',
                'max_bytes': self._parse_int(os.getenv('LOG_MAX_BYTES', logging_config.get('max_bytes', 10485760))),
                'backup_count': self._parse_int(os.getenv('LOG_BACKUP_COUNT', logging_config.get('backup_count', 5))),
            }
        })

        return config

    def _section(self, config: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = config.get(name) or {}
        if not isinstance(section, dict):
            self.load_errors.append(f"{self.config_file}: '{name}' section must be a mapping")
            return {}
        return section

    def get_monitor_defaults(self) -> Dict[str, Any]:
        """Get the configured monitor defaults (interval, precision, format)."""
        return dict(self.config.get('monitor', {}))

    def _parse_int(self, value: Any) -> Any:
        """Parse integer values, leaving anything unparsable for the validators to reject."""
        if isinstance(value, bool):
            return value
        try:
            return int(value)
        except (ValueError, TypeError):
            return value

    def errors(self) -> List[str]:
        """Problems found while loading, plus invalid logging values."""
        _, logging_errors = ConfigValidator.validate_logging_config(self.config.get('logging', {}))
        return self.load_errors + logging_errors

    def validate(self) -> None:
        """
        Raise if the configuration cannot be used.

        Monitor values are checked separately when the MonitorConfig is built.

        Raises:
            ConfigurationError: the file is malformed or a logging value is invalid
        """
        errors = self.errors()
        if errors:
            raise ConfigurationError('; '.join(errors), errors)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

# Global settings instance
settings = Settings()
