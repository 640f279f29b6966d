"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Any, Union

import yaml

from ..api.exceptions import ConfigError, UnknownFormatError
from ..constants import (
    ENV_CONFIG_PATH,
    ENV_AUTOMATION_DIR,
    ENV_AUTOMATION_DATA_DIR,
    ENV_IMAGE_FORMAT_SEPARATORS,
    ENV_IMAGE_PROVIDER_PATTERN,
    ENV_FROM_IMAGE_PROVIDER_PATTERN,
    ENV_GIT_PROVIDER_PATTERN,
    ImageFormat,
)
from ..models.config import GitProviderAttributes, ImageProviderConfig, ToolConfig

# Environment attribute suffixes of a git provider
GIT_ATTRIBUTE_FIELDS = {
    "DNS": "dns",
    "API_DNS": "api_dns",
    "ORG": "org",
    "CREDENTIALS_VAR": "credentials_var",
}


class ConfigService:
    """Service for building the tool configuration

    Settings come from an optional YAML file, overlaid by the
    environment. The result is built once and passed to components.
    """

    def __init__(self,
                 config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            config_path: YAML configuration file (defaults to $BUILD_REF_TOOL_CONFIG)
            environ: Environment to read (defaults to os.environ)
        """
        self.environ = dict(os.environ if environ is None else environ)
        if config_path is None:
            config_path = self.environ.get(ENV_CONFIG_PATH)
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[ToolConfig] = None
        self.logger = logging.getLogger("ConfigService")

    @property
    def config(self) -> ToolConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def _read_file(self) -> Dict[str, Any]:
        """Read the YAML configuration file, expanding ${VAR} references"""
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        for name, value in self.environ.items():
            content = content.replace(f"${{{name}}}", value)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self.config_path} must contain a mapping")

        self.logger.debug(f"Loaded configuration from {self.config_path}")
        return data

    def _image_providers(self, data: Dict[str, Any]) -> Dict[ImageFormat, ImageProviderConfig]:
        providers = {}
        for name, settings in (data.get("image_providers") or {}).items():
            try:
                image_format = ImageFormat.from_string(name)
            except UnknownFormatError as e:
                raise ConfigError(f"Invalid image_providers entry: {e}") from e
            providers[image_format] = ImageProviderConfig.from_dict(image_format, settings or {})

        for image_format in ImageFormat:
            provider = self.environ.get(ENV_IMAGE_PROVIDER_PATTERN.format(format=image_format.env_name))
            from_provider = self.environ.get(
                ENV_FROM_IMAGE_PROVIDER_PATTERN.format(format=image_format.env_name)
            )
            if not (provider or from_provider):
                continue
            settings = providers.setdefault(image_format, ImageProviderConfig(image_format))
            if provider:
                settings.provider = provider
            if from_provider:
                settings.from_provider = from_provider

        return providers

    def _git_providers(self, data: Dict[str, Any]) -> Dict[str, GitProviderAttributes]:
        providers = {}
        for name, settings in (data.get("git_providers") or {}).items():
            attributes = GitProviderAttributes.from_dict(str(name), settings or {})
            providers[attributes.name] = attributes

        for variable, value in self.environ.items():
            match = ENV_GIT_PROVIDER_PATTERN.match(variable)
            if not match or not value:
                continue
            name = match.group("provider")
            attributes = providers.setdefault(name, GitProviderAttributes(name=name))
            setattr(attributes, GIT_ATTRIBUTE_FIELDS[match.group("attribute")], value)

        return providers

    def load_config(self) -> ToolConfig:
        """Build configuration from the file and the environment

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the configuration file is missing or invalid
        """
        data = self._read_file()

        git_providers = self._git_providers(data)
        credentials = {
            provider.credentials_var: self.environ[provider.credentials_var]
            for provider in git_providers.values()
            if provider.credentials_var and provider.credentials_var in self.environ
        }

        self._config = ToolConfig(
            automation_dir=self.environ.get(ENV_AUTOMATION_DIR) or data.get("automation_dir"),
            automation_data_dir=self.environ.get(ENV_AUTOMATION_DATA_DIR) or data.get("automation_data_dir"),
            image_format_separators=(
                self.environ.get(ENV_IMAGE_FORMAT_SEPARATORS) or data.get("image_format_separators")
            ),
            image_providers=self._image_providers(data),
            git_providers=git_providers,
            credentials=credentials,
        )

        return self._config
