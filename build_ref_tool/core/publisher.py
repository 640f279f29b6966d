"""Publication of run results to the caller's context"""

import logging
from pathlib import Path
from typing import Dict, Optional

from ..constants import (
    CONTEXT_PROPERTIES_FILE,
    CONTEXT_DETAIL_MESSAGE,
    CONTEXT_DEPLOYMENT_UNIT_LIST,
    CONTEXT_CODE_COMMIT_LIST,
    CONTEXT_CODE_TAG_LIST,
    CONTEXT_IMAGE_FORMATS_LIST,
    ReferenceOperation,
)
from ..models.config import ToolConfig
from ..models.result import OperationResult


class ResultPublisher:
    """Expose an operation result as key/value context"""

    def __init__(self, config: Optional[ToolConfig] = None):
        self.config = config or ToolConfig()
        self.logger = logging.getLogger("ResultPublisher")

    @property
    def context_path(self) -> Optional[Path]:
        """Get the context properties file, if a data directory is configured"""
        if self.config.automation_data_dir is None:
            return None
        return self.config.automation_data_dir / CONTEXT_PROPERTIES_FILE

    def build_context(self, result: OperationResult) -> Dict[str, str]:
        """Collect the context pairs an operation publishes

        Args:
            result: Completed operation result

        Returns:
            Ordered key/value pairs (empty for accept and update)
        """
        operation = result.operation
        if operation == ReferenceOperation.LIST:
            return {CONTEXT_DETAIL_MESSAGE: result.detail_message}

        if operation == ReferenceOperation.LISTFULL:
            return {
                CONTEXT_DEPLOYMENT_UNIT_LIST: " ".join(result.unit_names),
                CONTEXT_CODE_COMMIT_LIST: " ".join(result.values("commit")),
                CONTEXT_CODE_TAG_LIST: " ".join(result.values("tag")),
                CONTEXT_IMAGE_FORMATS_LIST: " ".join(result.values("formats")),
                CONTEXT_DETAIL_MESSAGE: result.detail_message,
            }

        if operation == ReferenceOperation.VERIFY:
            return {CONTEXT_CODE_COMMIT_LIST: " ".join(result.values("commit"))}

        return {}

    def publish(self, result: OperationResult) -> Dict[str, str]:
        """Attach the context to the result and append it to the properties file

        Args:
            result: Completed operation result

        Returns:
            Published key/value pairs
        """
        context = self.build_context(result)
        result.context = context

        path = self.context_path
        if context and path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'a', encoding='utf-8') as f:
                for key, value in context.items():
                    f.write(f"{key}={value}\n")
            self.logger.info(f"Context written to {path}")

        return context
