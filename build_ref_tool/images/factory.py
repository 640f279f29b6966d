"""Image manager factory"""

from typing import Dict, List, Optional

from .base import ImageManager
from .script import ScriptImageManager
from ..constants import ImageFormat
from ..models.config import ToolConfig


class ImageManagerFactory:
    """Factory for the image manager of each packaging format"""

    def __init__(self, config: Optional[ToolConfig] = None):
        """Initialize factory

        Args:
            config: Tool configuration (for the automation directory)
        """
        self.config = config or ToolConfig()
        self._managers: Dict[ImageFormat, ImageManager] = {}

    def register(self, image_format: ImageFormat, manager: ImageManager) -> None:
        """Use a specific manager for a format

        Args:
            image_format: Packaging format
            manager: Manager instance
        """
        self._managers[image_format] = manager

    def get_manager(self, image_format: ImageFormat) -> ImageManager:
        """Get (creating on first use) the manager of a format

        Args:
            image_format: Packaging format

        Returns:
            Image manager instance
        """
        if image_format not in self._managers:
            self._managers[image_format] = ScriptImageManager(
                image_format, self.config.automation_dir
            )
        return self._managers[image_format]

    @staticmethod
    def get_supported_formats() -> List[str]:
        """Get list of supported format names"""
        return [image_format.value for image_format in ImageFormat]
