from pathlib import Path

import pytest

from build_ref_tool.api.exceptions import ConfigError
from build_ref_tool.constants import ImageFormat
from build_ref_tool.services import ConfigService


def test_empty_environment_gives_defaults():
    config = ConfigService(environ={}).load_config()

    assert config.automation_dir is None
    assert config.automation_data_dir is None
    assert config.image_format_separators == ";"
    assert config.image_providers == {}
    assert config.git_providers == {}


def test_environment_settings():
    config = ConfigService(environ={
        "AUTOMATION_DIR": "/opt/automation",
        "AUTOMATION_DATA_DIR": "/tmp/data",
        "IMAGE_FORMAT_SEPARATORS": ",;",
        "PRODUCT_DOCKER_PROVIDER": "ecr-dev",
        "FROM_PRODUCT_DOCKER_PROVIDER": "ecr-build",
        "PRODUCT_CLOUDFRONT_PROVIDER": "s3-dev",
    }).load_config()

    assert config.automation_dir == Path("/opt/automation")
    assert config.automation_data_dir == Path("/tmp/data")
    assert config.split_formats("docker,lambda;swagger") == ["docker", "lambda", "swagger"]
    assert config.join_formats(["docker", "lambda"]) == "docker,lambda"
    assert config.get_image_provider(ImageFormat.DOCKER).provider == "ecr-dev"
    assert config.get_image_provider(ImageFormat.DOCKER).can_pull
    assert config.get_image_provider(ImageFormat.CLOUDFRONT).provider == "s3-dev"
    assert not config.get_image_provider(ImageFormat.LAMBDA).can_pull


def test_git_providers_from_environment():
    config = ConfigService(environ={
        "GITHUB_GIT_DNS": "github.com",
        "GITHUB_GIT_API_DNS": "api.github.com",
        "GITHUB_GIT_ORG": "acme",
        "GITHUB_GIT_CREDENTIALS_VAR": "GITHUB_CREDENTIALS",
        "GITHUB_CREDENTIALS": "user:token",
    }).load_config()

    provider = config.get_git_provider("github")
    assert (provider.dns, provider.api_dns, provider.org) == ("github.com", "api.github.com", "acme")
    assert config.get_credentials(provider) == "user:token"


def test_yaml_file_with_environment_override(tmp_path):
    config_file = tmp_path / "build-ref-tool.yaml"
    config_file.write_text(
        "automation_dir: ${TOOLS_HOME}/automation\n"
        "image_providers:\n"
        "  docker:\n"
        "    provider: ecr-file\n"
        "  Lambda:\n"
        "    provider: s3-file\n"
        "git_providers:\n"
        "  github:\n"
        "    dns: github.com\n"
        "    api_dns: api.github.com\n"
        "    org: file-org\n",
        encoding="utf-8",
    )

    config = ConfigService(config_file, environ={
        "TOOLS_HOME": "/opt",
        "PRODUCT_DOCKER_PROVIDER": "ecr-env",
        "GITHUB_GIT_ORG": "env-org",
    }).load_config()

    assert config.automation_dir == Path("/opt/automation")
    assert config.get_image_provider(ImageFormat.DOCKER).provider == "ecr-env"
    assert config.get_image_provider(ImageFormat.LAMBDA).provider == "s3-file"
    assert config.get_git_provider("github").org == "env-org"
    assert config.get_git_provider("github").is_complete()


def test_config_path_from_environment(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("automation_data_dir: /data\n", encoding="utf-8")

    service = ConfigService(environ={"BUILD_REF_TOOL_CONFIG": str(config_file)})

    assert service.config.automation_data_dir == Path("/data")


def test_empty_file(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("", encoding="utf-8")

    assert ConfigService(config_file, environ={}).load_config().image_providers == {}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        ConfigService(tmp_path / "missing.yaml", environ={}).load_config()


@pytest.mark.parametrize("content", [
    "image_providers: [unclosed\n",
    "- just\n- a list\n",
    "image_providers:\n  bogus:\n    provider: x\n",
])
def test_invalid_file(tmp_path, content):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigService(config_file, environ={}).load_config()
