"""Global constants for build-ref-tool"""

from enum import Enum
import re

APP_NAME = "build-ref-tool"
LOG_FORMAT = "%(message)s"

# Marker for a missing entry in any of the per-unit lists
UNSET = "?"

# Registry layout
BUILD_REFERENCE_FILE = "build.json"
LEGACY_BUILD_REFERENCE_FILE = "build.ref"
BUILD_REFERENCE_GLOB = "build.*"

# Indirection files, checked in this order
INDIRECTION_FILES = [
    "deployment_unit.ref",
    "slice.ref",
]

# Published context
CONTEXT_PROPERTIES_FILE = "context.properties"
CONTEXT_DETAIL_MESSAGE = "DETAIL_MESSAGE"
CONTEXT_DEPLOYMENT_UNIT_LIST = "DEPLOYMENT_UNIT_LIST"
CONTEXT_CODE_COMMIT_LIST = "CODE_COMMIT_LIST"
CONTEXT_CODE_TAG_LIST = "CODE_TAG_LIST"
CONTEXT_IMAGE_FORMATS_LIST = "IMAGE_FORMATS_LIST"

# Defaults
DEFAULT_IMAGE_FORMAT_SEPARATORS = ";"
SHORT_COMMIT_LENGTH = 7


class ImageFormat(Enum):
    """Packaging formats a deployment unit can be built into"""
    DOCKER = "docker"
    LAMBDA = "lambda"
    SWAGGER = "swagger"
    CLOUDFRONT = "cloudfront"

    @classmethod
    def from_string(cls, value: str) -> 'ImageFormat':
        """Create ImageFormat from string (case-insensitive)

        Raises:
            UnknownFormatError: If the value names no supported format
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            from .api.exceptions import UnknownFormatError
            raise UnknownFormatError(value)

    @property
    def env_name(self) -> str:
        """Name used in environment variable names"""
        return self.value.upper()


DEFAULT_IMAGE_FORMAT = ImageFormat.DOCKER


class ReferenceOperation(Enum):
    """Operations on the build reference registry"""
    ACCEPT = "accept"
    LIST = "list"
    LISTFULL = "listfull"
    UPDATE = "update"
    VERIFY = "verify"


DEFAULT_REFERENCE_OPERATION = ReferenceOperation.LIST

# Collaborator scripts, one per packaging format
IMAGE_MANAGER_SCRIPTS = {
    ImageFormat.DOCKER: "manageDocker.sh",
    ImageFormat.LAMBDA: "manageLambda.sh",
    ImageFormat.SWAGGER: "manageSwagger.sh",
    ImageFormat.CLOUDFRONT: "manageCloudFront.sh",
}


# Error codes
class ErrorCode:
    ARGUMENT_ERROR = "BR001"
    CONFIG_ERROR = "BR002"
    UNKNOWN_FORMAT = "BR003"
    TAG_NOT_FOUND = "BR004"
    TAG_MESSAGE_UNAVAILABLE = "BR005"
    IMAGE_UNAVAILABLE = "BR006"
    PULL_FAILED = "BR007"
    ACCEPT_FAILED = "BR008"


# Environment variables
ENV_CONFIG_PATH = "BUILD_REF_TOOL_CONFIG"
ENV_AUTOMATION_DIR = "AUTOMATION_DIR"
ENV_AUTOMATION_DATA_DIR = "AUTOMATION_DATA_DIR"
ENV_IMAGE_FORMAT_SEPARATORS = "IMAGE_FORMAT_SEPARATORS"
ENV_IMAGE_PROVIDER_PATTERN = "PRODUCT_{format}_PROVIDER"
ENV_FROM_IMAGE_PROVIDER_PATTERN = "FROM_PRODUCT_{format}_PROVIDER"
ENV_GIT_PROVIDER_PATTERN = re.compile(
    r"^(?P<provider>[A-Z0-9_]+?)_GIT_(?P<attribute>API_DNS|DNS|ORG|CREDENTIALS_VAR)$"
)

# Display
EMOJI_ARROW = "→"
