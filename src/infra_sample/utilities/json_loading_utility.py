"""
JSON configuration loading with {{PLACEHOLDER}} substitution.
MIT License. See Project Root for the license information.
"""

import json
import os
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger

logger = Logger(__name__)


class JsonLoadingUtility:
    """Loads JSON configuration files and resolves placeholders"""

    @staticmethod
    def load(path: str, replacements: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        Load a JSON file and apply the placeholder replacements.

        Args:
            path: Path to the JSON file
            replacements: Mapping of placeholder (e.g. "{{VPC_ID}}") to value

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        logger.info(f"Loading configuration from {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if replacements:
            data = JsonLoadingUtility.recursive_replace(data, replacements)
        return data

    @staticmethod
    def recursive_replace(data: Any, replacements: Dict[str, str]) -> Any:
        """
        Replace placeholders in both keys and string values of nested dicts and lists.
        Non-string values are returned unchanged.
        """
        if isinstance(data, dict):
            return {
                JsonLoadingUtility._replace(key, replacements): JsonLoadingUtility.recursive_replace(value, replacements)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [JsonLoadingUtility.recursive_replace(item, replacements) for item in data]
        if isinstance(data, str):
            return JsonLoadingUtility._replace(data, replacements)
        return data

    @staticmethod
    def _replace(value: str, replacements: Dict[str, str]) -> str:
        if not isinstance(value, str):
            return value
        for placeholder, replacement in replacements.items():
            value = value.replace(placeholder, "" if replacement is None else str(replacement))
        return value
