"""
Configuration handling for the Password Security Toolkit.
"""

import os
import json
from typing import Dict, Any, Optional, Union
from password_toolkit.utils.exceptions import ConfigError

DEMO_TARGET_HASH = "a97755204f392b4d8787b38d898671839b4a770a864e52862055cdbdf5bc5bee"
DEMO_PASSWORDS = ["Abc5", "abcdef123456", "AbCdEf123456", "AbCdEf 123456"]


class Config:
    """Configuration manager for the password toolkit"""

    DEFAULT_CONFIG = {
        "processes": 1,  # 1 = sequential reference search
        "check_interval": 10000,  # candidates between cancellation/progress checks
        "show_progress": False,
        "verbosity": "info",
        "log_file": None,
        "password_length": 12,
        "target_hash": DEMO_TARGET_HASH,
        "sample_passwords": DEMO_PASSWORDS,
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = json.loads(json.dumps(self.DEFAULT_CONFIG))
        self.config_path = config_path or os.path.expanduser("~/.password_toolkit_config.json")

        if os.path.exists(self.config_path):
            self.load()

    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file: {e}")

        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file must contain a JSON object: {self.config_path}")
        self.config.update(user_config)

    def save(self) -> None:
        """Save current configuration to file"""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2)
        except (OSError, TypeError) as e:
            raise ConfigError(f"Error saving config file: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value"""
        self.config[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update multiple configuration values"""
        self.config.update(config_dict)

    def as_dict(self) -> Dict[str, Any]:
        """Return the configuration as a dictionary"""
        return self.config.copy()

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.config


def verbosity_to_level(verbosity: Union[str, int]) -> int:
    """Convert verbosity string to logging level

    Args:
        verbosity: Verbosity string or logging level integer

    Returns:
        Logging level as integer
    """
    if isinstance(verbosity, int):
        return verbosity

    levels = {
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50
    }

    return levels.get(verbosity.lower(), 20)  # Default to INFO
