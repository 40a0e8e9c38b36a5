"""
Configuration loader utility

Loads DispatchConfig from YAML files.
"""

import yaml
from pathlib import Path
from typing import Union

from .lift_bank import DispatchConfig


class ConfigLoader:
    """Utility class for loading configuration files"""

    @staticmethod
    def load_dispatch(file_path: Union[str, Path]) -> DispatchConfig:
        """
        Load DispatchConfig from YAML file

        Args:
            file_path: Path to YAML file

        Returns:
            DispatchConfig instance

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If validation fails
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        config = DispatchConfig.from_dict(data)
        config.validate()

        return config

    @staticmethod
    def save_dispatch(config: DispatchConfig, file_path: Union[str, Path]):
        """
        Save DispatchConfig to YAML file

        Args:
            config: DispatchConfig instance
            file_path: Path to save YAML file
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        data = config.to_dict()

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


# Convenience functions
def load_dispatch_config(file_path: Union[str, Path]) -> DispatchConfig:
    """Load DispatchConfig from YAML file"""
    return ConfigLoader.load_dispatch(file_path)


def save_dispatch_config(config: DispatchConfig, file_path: Union[str, Path]):
    """Save DispatchConfig to YAML file"""
    ConfigLoader.save_dispatch(config, file_path)
