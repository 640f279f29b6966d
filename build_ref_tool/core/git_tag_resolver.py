"""Resolution of release tags against remote git repositories"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

import requests

from ..api.exceptions import ConfigError, TagNotFoundError, TagMessageUnavailableError
from ..models.config import GitProviderAttributes, ToolConfig

NOT_FOUND_MESSAGE = "Not Found"


@dataclass
class TagResolution:
    """Commit and tag object a release tag points at"""

    tag: str
    commit: str
    tag_object: Optional[str] = None
    message: Optional[str] = None


class GitTagResolver:
    """Resolve tags through ``git ls-remote`` and the provider's REST API"""

    def __init__(self, config: Optional[ToolConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ToolConfig()
        self.session = session or requests.Session()
        self.logger = logging.getLogger("GitTagResolver")

    def get_provider(self, name: str) -> GitProviderAttributes:
        """Get the attributes of a configured git provider

        Raises:
            ConfigError: If the provider is not configured
        """
        provider = self.config.get_git_provider(name)
        if provider is None or not provider.is_complete():
            raise ConfigError(f"Git provider {name} is not configured (dns, api_dns and org are required)")
        return provider

    def _ls_remote(self, url: str, pattern: str) -> Optional[str]:
        """Get the first hash ``git ls-remote -t`` reports for a pattern"""
        try:
            result = subprocess.run(
                ['git', 'ls-remote', '-t', url, pattern],
                capture_output=True,
                text=True
            )
        except FileNotFoundError:
            self.logger.error("git executable not found")
            return None

        if result.returncode != 0:
            self.logger.debug(f"git ls-remote failed: {result.stderr.strip()}")
            return None

        for line in result.stdout.splitlines():
            fields = line.split()
            if fields:
                return fields[0]
        return None

    def resolve_tag(self, provider: GitProviderAttributes, repo: str, tag: str) -> TagResolution:
        """Resolve a tag to the commit it points at

        The dereferenced commit of an annotated tag is preferred; a
        lightweight tag resolves to its own hash.

        Args:
            provider: Provider hosting the repo
            repo: Repository name
            tag: Tag name

        Returns:
            Tag resolution (without message)

        Raises:
            TagNotFoundError: If the remote reports no hash for the tag
        """
        url = provider.clone_url(repo, self.config.get_credentials(provider))
        self.logger.debug(f"Resolving tag {tag} in {provider.clone_url(repo)}")

        tag_object = self._ls_remote(url, tag)
        commit = self._ls_remote(url, f"{tag}^{{}}") or tag_object
        if not commit:
            raise TagNotFoundError(tag, repo)

        return TagResolution(tag=tag, commit=commit, tag_object=tag_object or commit)

    def fetch_tag_message(self, provider: GitProviderAttributes, repo: str, tag: str, tag_object: str) -> str:
        """Fetch the message of a tag object through the REST API

        Raises:
            TagMessageUnavailableError: If the API has no message for the tag
        """
        url = f"https://{provider.api_dns}/repos/{provider.org}/{repo}/git/tags/{tag_object}"
        credentials = self.config.get_credentials(provider)
        auth = (credentials, "") if credentials else None

        try:
            response = self.session.get(url, auth=auth)
        except requests.RequestException as e:
            self.logger.error(f"Tag message request failed: {e}")
            raise TagMessageUnavailableError(tag, repo) from e

        if response.status_code == 404:
            raise TagMessageUnavailableError(tag, repo)

        try:
            message = response.json().get("message")
        except (ValueError, AttributeError):
            message = None

        if not message or message == NOT_FOUND_MESSAGE:
            raise TagMessageUnavailableError(tag, repo)

        return message

    def resolve(self, provider_name: str, repo: str, tag: str) -> TagResolution:
        """Resolve a tag and confirm its tag object is reachable

        Args:
            provider_name: Configured git provider id
            repo: Repository name
            tag: Tag name

        Returns:
            Tag resolution including the tag message
        """
        provider = self.get_provider(provider_name)
        resolution = self.resolve_tag(provider, repo, tag)
        resolution.message = self.fetch_tag_message(provider, repo, tag, resolution.tag_object)
        self.logger.info(f"Tag {tag} of {repo} is commit {resolution.commit}")
        return resolution
