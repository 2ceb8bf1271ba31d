"""Packing and unpacking of custom chef recipes."""

import io
import tarfile
from pathlib import Path

from engineyard.constants import RECIPES_DIR
from engineyard.exceptions import EngineYardError


def archive_recipes(root: Path) -> bytes:
    """
    Pack ``<root>/cookbooks`` into a gzipped tarball.

    Raises:
        EngineYardError: If there is no cookbooks directory
    """
    cookbooks = root / RECIPES_DIR
    if not cookbooks.is_dir():
        raise EngineYardError(
            "Could not find chef recipes.",
            context="Please run from the root of your recipes repo.",
        )

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        tar.add(str(cookbooks), arcname=RECIPES_DIR)
    return buffer.getvalue()


def ensure_no_recipes(root: Path) -> None:
    if (root / RECIPES_DIR).exists():
        raise EngineYardError(f"Could not download, {RECIPES_DIR} already exists")


def extract_recipes(data: bytes, root: Path) -> None:
    """Unpack a recipes tarball into root."""
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:*") as tar:
        if hasattr(tarfile, "data_filter"):
            tar.extractall(str(root), filter="data")
        else:
            tar.extractall(str(root))
