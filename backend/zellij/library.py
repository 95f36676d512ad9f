"""Filler library loading: JSON file or mapping → FillerLibrary."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import ValidationError

from zellij.engine.filler import Cluster, FillerLibrary, FillerShape, parse_signature
from zellij.errors import DataIntegrityError
from zellij.models.fillers import ClusterModel, FillerLibraryModel
from zellij.utils.geometry import Point

logger = logging.getLogger(__name__)

BUNDLED_LIBRARY = Path(__file__).parent / "data" / "fillers.json"


def _to_cluster(key: str, model: ClusterModel) -> Cluster:
    x1, y1, x2, y2 = model.bounds
    if x1 == x2 and y1 == y2:
        raise DataIntegrityError(f"Signature {key}: reference edge has zero length")
    shapes = tuple(
        FillerShape(path=np.asarray(s.path, dtype=np.float64).reshape(-1, 2), colour=s.colour)
        for s in model.shapes
    )
    return Cluster(fv=Point(x1, y1), fw=Point(x2, y2), shapes=shapes)


def parse_filler_library(data: Mapping[str, Any]) -> FillerLibrary:
    """Validate decoded library JSON and build the engine's library."""
    try:
        model = FillerLibraryModel.model_validate(data)
    except ValidationError as e:
        raise DataIntegrityError(f"Malformed filler library: {e}") from e

    library = FillerLibrary()
    for key, clusters in model.root.items():
        sig = parse_signature(key)
        library.add(sig, [_to_cluster(key, c) for c in clusters])
    return library


def load_filler_library(path: str | Path) -> FillerLibrary:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataIntegrityError(f"{path} is not valid JSON: {e}") from e

    library = parse_filler_library(data)
    logger.info("Loaded %d filler signatures from %s", len(library), path)
    return library


@lru_cache(maxsize=1)
def default_filler_library() -> FillerLibrary:
    """The bundled sample library (basic local tile shapes only)."""
    return load_filler_library(BUNDLED_LIBRARY)
