import pytest

from build_ref_tool.constants import ImageFormat
from build_ref_tool.core.git_tag_resolver import GitTagResolver, TagResolution
from build_ref_tool.images import ImageManager, ImageManagerFactory
from build_ref_tool.models.config import ImageProviderConfig, ToolConfig


class FakeImageManager(ImageManager):
    """Records calls; outcomes are set per test"""

    def __init__(self, image_format, verify_ok=True, pull_ok=True, accept_ok=True):
        super().__init__(image_format)
        self.verify_ok = verify_ok
        self.pull_ok = pull_ok
        self.accept_ok = accept_ok
        self.calls = []

    def accept(self, unit, commit, acceptance_tag, provider):
        self.calls.append(("accept", unit, commit, acceptance_tag, provider))
        return self.accept_ok

    def verify(self, unit, commit, provider):
        self.calls.append(("verify", unit, commit, provider))
        return self.verify_ok

    def pull(self, unit, commit, provider, result_tag, from_provider):
        self.calls.append(("pull", unit, commit, provider, result_tag, from_provider))
        return self.pull_ok


class FakeTagResolver(GitTagResolver):
    """Resolves tags from a dict instead of a remote"""

    def __init__(self, tags=None):
        super().__init__(ToolConfig())
        self.tags = tags or {}
        self.calls = []

    def resolve(self, provider_name, repo, tag):
        self.calls.append((provider_name, repo, tag))
        return TagResolution(tag=tag, commit=self.tags[tag], tag_object="obj" + tag, message="msg")


@pytest.fixture
def config():
    return ToolConfig(
        image_providers={
            ImageFormat.DOCKER: ImageProviderConfig(ImageFormat.DOCKER, provider="ecr-dev"),
            ImageFormat.LAMBDA: ImageProviderConfig(ImageFormat.LAMBDA, provider="s3-dev"),
        }
    )


@pytest.fixture
def managers():
    return {image_format: FakeImageManager(image_format) for image_format in ImageFormat}


@pytest.fixture
def image_factory(config, managers):
    factory = ImageManagerFactory(config)
    for image_format, manager in managers.items():
        factory.register(image_format, manager)
    return factory


@pytest.fixture
def tag_resolver():
    return FakeTagResolver({"v2": "abcdef1234567890"})


@pytest.fixture
def registry_root(tmp_path):
    return tmp_path / "appsettings" / "segment"
