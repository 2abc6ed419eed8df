"""Localized UI labels.

A catalog maps message keys to display text. Keys without a translation fall
back to the built-in English text, and unknown keys yield an empty label.

Contract:
- Inputs: Optional YAML mapping of key -> label
- Outputs: Display strings
- Side Effects: None
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LABELS: dict[str, str] = {
    "release_type.snapshot": "Snapshot",
    "release_type.release": "Regular release",
    "release_type.old_alpha": "Alpha",
    "release_type.old_beta": "Beta",
    "problem.patch_missing": (
        "The patch file doesn't exist locally. It's possible it just needs to be downloaded."
    ),
    "problem.patch_unreadable": "The patch file couldn't be read:\n{cause}",
    "error.version_missing_files": "Minecraft version {descriptor} could not be applied: version files are missing.",
    "error.version_incomplete": "Can't apply incomplete/builtin Minecraft version {descriptor}",
}


class Catalog:
    """Key -> label lookup with English defaults.

    Example:
        >>> Catalog({"release_type.release": "Version"}).tr("release_type.release")
        'Version'
    """

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels = dict(DEFAULT_LABELS)
        if labels:
            self._labels.update({str(k): str(v) for k, v in labels.items()})

    def tr(self, key: str, **kwargs: object) -> str:
        """Translate a key, formatting ``{placeholders}`` with kwargs.

        Unknown keys return an empty string. A translation whose placeholders
        don't match falls back to the default English text.
        """
        label = self._labels.get(key, "")
        if not (kwargs and label):
            return label
        try:
            return label.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Catalog label {key!r} has invalid placeholders: {e}")
        return DEFAULT_LABELS.get(key, "").format(**kwargs)

    def release_type_label(self, release_type: str) -> str:
        return self.tr(f"release_type.{release_type}")

    def __contains__(self, key: str) -> bool:
        return key in self._labels


def load_catalog(path: Path) -> Catalog:
    """Load a YAML catalog on top of the default labels.

    Args:
        path: YAML file containing a flat mapping

    Returns:
        Catalog with overrides applied; defaults only if the file is unusable
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load catalog from {path}: {e}")
        return Catalog()

    if not isinstance(data, dict):
        logger.warning(f"Catalog {path} is not a mapping, using defaults")
        return Catalog()

    logger.debug(f"Loaded {len(data)} catalog entries from {path}")
    return Catalog(data)


default_catalog = Catalog()
