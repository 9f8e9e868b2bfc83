"""
Validation rules loader.

Loads declared validation rules from YAML configuration files:

    models:
      event:
        validations:
          - attribute: starts_on
            validator: inequality
            options:
              less_than: {attribute: ends_on}
"""

import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path

from missing_validators.utils.config import settings
from missing_validators.utils.logger import setup_logger, log_error

logger = setup_logger(__name__)


class ValidationConfigLoader:
    """
    Loads validation rules from YAML files.

    Supports:
    - Per-model rule lists
    - Global settings
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to validation rules YAML file
                        If None, uses settings.RULES_PATH (may be unset)
        """
        if config_path is None:
            config_path = settings.RULES_PATH

        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
        """
        if self.config_path is None or not self.config_path.exists():
            if self.config_path is not None:
                logger.warning(
                    f"Validation rules file not found: {self.config_path}. "
                    "Using empty configuration."
                )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

            logger.info(f"Loaded validation rules from: {self.config_path}")
            return self._config

        except yaml.YAMLError as e:
            log_error(logger, e, f"Failed to parse validation rules {self.config_path}")
            raise

    @property
    def config(self) -> Dict[str, Any]:
        if self._config is None:
            self.load()
        return self._config

    def get_model_rules(self, model_name: str) -> List[Dict[str, Any]]:
        """
        Get validation rules for a model.

        Args:
            model_name: Model identifier

        Returns:
            List of rule configurations (empty if the model is unknown)
        """
        models = self.config.get('models') or {}
        model_config = models.get(model_name) or {}
        return model_config.get('validations') or []

    def get_model_names(self) -> List[str]:
        """
        Get all models with declared rules.

        Returns:
            List of model names
        """
        return list((self.config.get('models') or {}).keys())

    def get_global_settings(self) -> Dict[str, Any]:
        """
        Get global validation settings.

        Returns:
            Global settings dictionary
        """
        return self.config.get('global') or {}

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration when no file is available.

        Returns:
            Default configuration dictionary
        """
        return {
            'global': {},
            'models': {}
        }

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()


def load_validation_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Convenience function to load validation rules.

    Args:
        config_path: Optional path to rules file

    Returns:
        Configuration dictionary
    """
    loader = ValidationConfigLoader(config_path)
    return loader.load()
