"""
Collector definitions file.

A definitions file is a JSON rendition of the collector property bags:

    {"collectors": [
        {"collector.metric_name": "response_time",
         "collector.help": "Sampler response time",
         "collector.type": "HISTOGRAM",
         "collector.labels": ["label", "code"],
         "collector.quantiles_or_buckets": "100,500,1000,3000"}
    ]}

A bare top-level list of property objects is accepted as well.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

from .config import CollectorConfig

logger = logging.getLogger("loadtest.definitions")

PathLike = Union[str, Path]


class DefinitionsError(ValueError):
    """Raised when a definitions file cannot be interpreted."""


def _entries_from_document(document: Any, path: PathLike) -> List[dict]:
    """Extract the list of property objects from a decoded document."""
    if isinstance(document, dict):
        if "collectors" not in document:
            raise DefinitionsError(f"{path}: missing 'collectors' list")
        document = document["collectors"]

    if not isinstance(document, list):
        raise DefinitionsError(f"{path}: expected a list of collector definitions")

    for index, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise DefinitionsError(
                f"{path}: collector definition #{index} is not an object"
            )

    return document


def load_definitions(path: PathLike) -> List[CollectorConfig]:
    """
    Load collector configs from a JSON definitions file.

    Args:
        path: File to read

    Returns:
        Configs in file order

    Raises:
        FileNotFoundError: If the file does not exist
        DefinitionsError: If the file is not valid UTF-8 JSON or has the wrong shape
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DefinitionsError(f"{path}: invalid JSON: {e}") from e

    configs = [CollectorConfig.from_dict(entry) for entry in _entries_from_document(document, path)]
    logger.info(f"Loaded {len(configs)} collector definitions from {path}")
    return configs


def save_definitions(path: PathLike, configs: Iterable[CollectorConfig]) -> None:
    """Write collector configs to a JSON definitions file."""
    document = {"collectors": [cfg.to_dict() for cfg in configs]}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
        f.write("\n")
    logger.debug(f"Saved {len(document['collectors'])} collector definitions to {path}")
