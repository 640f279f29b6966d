# build_ref_tool/images/base.py
"""Image manager abstract base class"""

from abc import ABC, abstractmethod
from typing import Optional

from ..constants import ImageFormat


class ImageManager(ABC):
    """Abstract base class for the per-format image collaborators

    Each operation reports success or failure only.
    """

    def __init__(self, image_format: ImageFormat):
        """
        Initialize image manager

        Args:
            image_format: Packaging format handled by this manager
        """
        self.image_format = image_format

    @abstractmethod
    def accept(self, unit: str, commit: Optional[str], acceptance_tag: str, provider: Optional[str]) -> bool:
        """
        Tag the image of a commit as accepted

        Args:
            unit: Deployment unit
            commit: Build commit
            acceptance_tag: Tag marking the image as accepted
            provider: Provider holding the image

        Returns:
            True if successful
        """
        pass

    @abstractmethod
    def verify(self, unit: str, commit: str, provider: Optional[str]) -> bool:
        """
        Check that an image exists for a commit

        Args:
            unit: Deployment unit
            commit: Build commit
            provider: Provider expected to hold the image

        Returns:
            True if the image exists
        """
        pass

    @abstractmethod
    def pull(self, unit: str, commit: str, provider: Optional[str], result_tag: str, from_provider: str) -> bool:
        """
        Copy the image of a commit from another provider

        Args:
            unit: Deployment unit
            commit: Build commit
            provider: Provider to make the image available at
            result_tag: Tag applied to the pulled image
            from_provider: Provider to copy the image from

        Returns:
            True if successful
        """
        pass
