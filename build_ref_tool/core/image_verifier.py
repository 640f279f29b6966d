"""Image acceptance, verification and fallback pulls"""

import logging
from typing import List, Optional

from ..api.exceptions import (
    AcceptFailedError,
    ImageUnavailableError,
    PullFailedError,
)
from ..constants import ImageFormat
from ..images import ImageManagerFactory
from ..models.config import ToolConfig


class ImageVerifier:
    """Drive the per-format image managers for one deployment unit"""

    def __init__(self,
                 config: Optional[ToolConfig] = None,
                 factory: Optional[ImageManagerFactory] = None):
        self.config = config or ToolConfig()
        self.factory = factory or ImageManagerFactory(self.config)
        self.logger = logging.getLogger("ImageVerifier")

    def parse_formats(self, formats: Optional[str]) -> List[ImageFormat]:
        """Split a formats entry into image formats

        Raises:
            UnknownFormatError: If an entry names no supported format
        """
        return [ImageFormat.from_string(value) for value in self.config.split_formats(formats)]

    def accept(self, unit: str, commit: Optional[str], image_format: ImageFormat, acceptance_tag: str) -> None:
        """Tag a unit's image as accepted

        Raises:
            AcceptFailedError: If the manager reports failure
        """
        provider = self.config.get_image_provider(image_format).provider
        manager = self.factory.get_manager(image_format)

        self.logger.info(f"Accepting {image_format.value} image of {unit} as {acceptance_tag}")
        if not manager.accept(unit, commit, acceptance_tag, provider):
            raise AcceptFailedError(image_format.value, unit, acceptance_tag)

    def verify(self, unit: str, commit: str, image_format: ImageFormat) -> bool:
        """Check that an image exists for a commit at the format's provider"""
        provider = self.config.get_image_provider(image_format).provider
        manager = self.factory.get_manager(image_format)
        return manager.verify(unit, commit, provider)

    def pull(self, unit: str, commit: str, image_format: ImageFormat, result_tag: str) -> bool:
        """Copy an image from the format's fallback provider"""
        providers = self.config.get_image_provider(image_format)
        manager = self.factory.get_manager(image_format)

        self.logger.info(
            f"Pulling {image_format.value} image of {unit} ({commit}) from {providers.from_provider}"
        )
        return manager.pull(unit, commit, providers.provider, result_tag, providers.from_provider)

    def ensure_available(self, unit: str, commit: str, image_format: ImageFormat, result_tag: str) -> None:
        """Verify an image, pulling it from the fallback provider if missing

        Raises:
            ImageUnavailableError: If missing and no fallback provider is configured
            PullFailedError: If the fallback pull fails
        """
        if self.verify(unit, commit, image_format):
            self.logger.debug(f"{image_format.value} image of {unit} ({commit}) verified")
            return

        providers = self.config.get_image_provider(image_format)
        if not providers.can_pull:
            raise ImageUnavailableError(image_format.value, unit, commit)

        if not self.pull(unit, commit, image_format, result_tag):
            raise PullFailedError(image_format.value, unit, commit, providers.from_provider)
