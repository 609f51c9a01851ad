"""Utility functions for loading blueprint and token documents.

This module provides functions for loading JSON from files, URLs and
standard input with proper error handling.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class BlueprintLoaderError(Exception):
    """Exception raised when an input document cannot be loaded."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        BlueprintLoaderError: If the file is missing, unreadable or not JSON.
    """
    file_path = Path(file_path)
    logger.debug("Loading JSON from file: %s", file_path)

    if not file_path.exists():
        raise BlueprintLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded JSON from %s", file_path)
        return str(file_path), data
    except json.JSONDecodeError as e:
        raise BlueprintLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise BlueprintLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        BlueprintLoaderError: If the URL is invalid, the request fails, or
            the response isn't valid JSON.
    """
    logger.debug("Loading JSON from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        raise BlueprintLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()
        logger.info("Loaded JSON from %s", url)
        return url, data

    except requests.exceptions.Timeout:
        raise BlueprintLoaderError(f"Request timeout for URL: {url}")
    except requests.exceptions.ConnectionError as e:
        raise BlueprintLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise BlueprintLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise BlueprintLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        raise BlueprintLoaderError(f"Invalid JSON response from URL {url}: {e}") from e


def load_json_from_stream(stream: TextIO | None = None) -> tuple[str, Any]:
    """Load JSON data from a text stream (standard input by default).

    Raises:
        BlueprintLoaderError: If the stream does not contain valid JSON.
    """
    stream = stream or sys.stdin
    try:
        return "<stdin>", json.load(stream)
    except json.JSONDecodeError as e:
        raise BlueprintLoaderError(f"Invalid JSON input: {e}") from e


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load JSON data from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        BlueprintLoaderError: If neither or both parameters are provided,
            or loading fails.
    """
    if not file_path and not url:
        raise BlueprintLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise BlueprintLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)
