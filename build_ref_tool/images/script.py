# build_ref_tool/images/script.py
"""Image manager backed by the per-format automation scripts"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from .base import ImageManager
from ..constants import UNSET, ImageFormat, IMAGE_MANAGER_SCRIPTS


class ScriptImageManager(ImageManager):
    """Runs ``manage<Format>.sh`` from the automation directory"""

    def __init__(self, image_format: ImageFormat, automation_dir: Optional[Path] = None):
        """
        Initialize script image manager

        Args:
            image_format: Packaging format handled by this manager
            automation_dir: Directory holding the management scripts
        """
        super().__init__(image_format)
        self.automation_dir = Path(automation_dir) if automation_dir else None
        self.logger = logging.getLogger("ScriptImageManager")

    @property
    def script_path(self) -> Optional[Path]:
        """Get the management script of this format"""
        if self.automation_dir is None:
            return None
        return self.automation_dir / IMAGE_MANAGER_SCRIPTS[self.image_format]

    @property
    def unit_flag(self) -> str:
        """Option naming the deployment unit"""
        if self.image_format == ImageFormat.DOCKER:
            return "-s"
        return "-u"

    def _run(self, args: List[str]) -> bool:
        """Run the management script with the given arguments"""
        script = self.script_path
        if script is None:
            self.logger.error(f"No automation directory configured for {self.image_format.value} images")
            return False
        if not script.is_file():
            self.logger.error(f"Image management script not found: {script}")
            return False

        command = [str(script)] + args
        self.logger.debug(f"Running {' '.join(command)}")
        try:
            result = subprocess.run(command)
        except OSError as e:
            self.logger.error(f"Failed to run {script}: {e}")
            return False

        return result.returncode == 0

    def _unit_args(self, unit: str, commit: Optional[str], provider: Optional[str]) -> List[str]:
        return [
            "-a", provider or "",
            self.unit_flag, unit,
            "-g", commit or UNSET,
        ]

    def accept(self, unit: str, commit: Optional[str], acceptance_tag: str, provider: Optional[str]) -> bool:
        return self._run(["-k"] + self._unit_args(unit, commit, provider) + ["-r", acceptance_tag])

    def verify(self, unit: str, commit: str, provider: Optional[str]) -> bool:
        return self._run(["-v"] + self._unit_args(unit, commit, provider))

    def pull(self, unit: str, commit: str, provider: Optional[str], result_tag: str, from_provider: str) -> bool:
        args = ["-p"] + self._unit_args(unit, commit, provider) + ["-r", result_tag, "-z", from_provider]
        if self.image_format == ImageFormat.SWAGGER:
            args = ["-x"] + args
        return self._run(args)
