"""Exception definitions for build-ref-tool API"""

from ..constants import ErrorCode


class BuildRefError(Exception):
    """Base exception for build-ref-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ArgumentError(BuildRefError):
    """Missing or contradictory operation arguments"""

    def __init__(self, message: str = "Insufficient arguments"):
        super().__init__(message, ErrorCode.ARGUMENT_ERROR)


class ConfigError(BuildRefError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class UnknownFormatError(BuildRefError):
    """Image format outside the supported set"""

    def __init__(self, image_format: str):
        message = f'Unknown image format "{image_format}"'
        super().__init__(message, ErrorCode.UNKNOWN_FORMAT)
        self.image_format = image_format


class TagNotFoundError(BuildRefError):
    """Tag could not be resolved to a commit"""

    def __init__(self, tag: str, repo: str):
        message = f"Tag {tag} not found in the {repo} repo. Was an annotated tag used?"
        super().__init__(message, ErrorCode.TAG_NOT_FOUND)
        self.tag = tag
        self.repo = repo


class TagMessageUnavailableError(BuildRefError):
    """Tag message could not be fetched through the provider API"""

    def __init__(self, tag: str, repo: str):
        message = f"Message for tag {tag} not found in the {repo} repo"
        super().__init__(message, ErrorCode.TAG_MESSAGE_UNAVAILABLE)
        self.tag = tag
        self.repo = repo


class ImageError(BuildRefError):
    """Image operation error"""
    pass


class ImageUnavailableError(ImageError):
    """No image exists for the commit and no fallback provider is configured"""

    def __init__(self, image_format: str, unit: str, commit: str):
        message = (
            f"{image_format.capitalize()} image for deployment unit {unit} "
            f"and commit {commit} not found. Was the build successful?"
        )
        super().__init__(message, ErrorCode.IMAGE_UNAVAILABLE)
        self.image_format = image_format
        self.unit = unit
        self.commit = commit


class PullFailedError(ImageError):
    """Image could not be pulled from the fallback provider"""

    def __init__(self, image_format: str, unit: str, commit: str, from_provider: str):
        message = (
            f"Unable to pull {image_format} image for deployment unit {unit} "
            f"and commit {commit} from provider {from_provider}. Was the build successful?"
        )
        super().__init__(message, ErrorCode.PULL_FAILED)
        self.image_format = image_format
        self.unit = unit
        self.commit = commit
        self.from_provider = from_provider


class AcceptFailedError(ImageError):
    """Image could not be tagged as accepted"""

    def __init__(self, image_format: str, unit: str, acceptance_tag: str):
        message = (
            f"Unable to tag {image_format} image for deployment unit {unit} "
            f"with acceptance tag {acceptance_tag}"
        )
        super().__init__(message, ErrorCode.ACCEPT_FAILED)
        self.image_format = image_format
        self.unit = unit
        self.acceptance_tag = acceptance_tag
