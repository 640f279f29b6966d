"""Core functionality for build-ref-tool"""

from .reference_codec import decode_reference, encode_reference
from .unit_resolver import DeploymentUnitResolver
from .registry import BuildReferenceRegistry
from .git_tag_resolver import GitTagResolver, TagResolution
from .image_verifier import ImageVerifier
from .publisher import ResultPublisher

__all__ = [
    "decode_reference",
    "encode_reference",
    "DeploymentUnitResolver",
    "BuildReferenceRegistry",
    "GitTagResolver",
    "TagResolution",
    "ImageVerifier",
    "ResultPublisher",
]
