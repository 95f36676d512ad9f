"""Filler-motif library, corner signatures and signature matching.

A tile's signature lists one corner type per vertex. The library is keyed by
the string form of a signature; a tile matches when any cyclic rotation of its
vertex list produces a key present in the library.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from zellij.errors import DataIntegrityError
from zellij.utils.color import RandomSource
from zellij.utils.geometry import Point, dot, sub


class Corner(str, enum.Enum):
    SQUARE = "L"
    STRAIGHT = "I"
    ACUTE = "V"
    OBTUSE = "C"


Signature = tuple[Corner, ...]


def corner_at(a: Point, b: Point, c: Point, tolerance: float = 1e-4) -> Corner:
    """Classify the corner at b between edges b→a and b→c (unit length)."""
    s = dot(sub(a, b), sub(c, b))
    if abs(s) < tolerance:
        return Corner.SQUARE
    if abs(1 + s) < tolerance:
        return Corner.STRAIGHT
    if s > 0:
        return Corner.ACUTE
    return Corner.OBTUSE


def signature_of(path: Sequence[Point], tolerance: float = 1e-4) -> Signature:
    n = len(path)
    return tuple(
        corner_at(path[(i + n - 1) % n], path[i], path[(i + 1) % n], tolerance)
        for i in range(n)
    )


def signature_key(sig: Signature) -> str:
    return "".join(c.value for c in sig)


def parse_signature(key: str) -> Signature:
    try:
        return tuple(Corner(ch) for ch in key)
    except ValueError as e:
        raise DataIntegrityError(f"Invalid signature {key!r}: letters must be L, I, V or C") from e


def rotate_left(seq: Sequence, k: int) -> list:
    return list(seq[k:]) + list(seq[:k])


@dataclass(frozen=True, eq=False)
class FillerShape:
    # Nx2 coordinates in the cluster's authoring frame
    path: NDArray[np.float64]
    colour: int


@dataclass(frozen=True, eq=False)
class Cluster:
    """One decoration for a signature, authored against the edge fv→fw."""

    fv: Point
    fw: Point
    shapes: tuple[FillerShape, ...]


class FillerLibrary:
    """Signature → ordered clusters. Keys are stored in string form."""

    def __init__(self, entries: Mapping[Signature, Iterable[Cluster]] | None = None) -> None:
        self._entries: dict[str, tuple[Cluster, ...]] = {}
        for sig, clusters in (entries or {}).items():
            self.add(sig, clusters)

    def add(self, sig: Signature, clusters: Iterable[Cluster]) -> None:
        clusters = tuple(clusters)
        if not sig:
            raise DataIntegrityError("Empty signature in filler library")
        if not clusters:
            raise DataIntegrityError(f"Signature {signature_key(sig)} has no clusters")
        self._entries[signature_key(sig)] = clusters

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, sig: object) -> bool:
        if isinstance(sig, str):
            return sig in self._entries
        return signature_key(sig) in self._entries  # type: ignore[arg-type]

    def clusters(self, sig: Signature) -> tuple[Cluster, ...]:
        return self._entries[signature_key(sig)]

    def signatures(self) -> list[Signature]:
        return [parse_signature(key) for key in self._entries]


@dataclass
class FillerMatch:
    # Tile vertices rotated so that path[0]→path[1] is the edge matching fv→fw
    path: list[Point]
    signature: Signature
    cluster: Cluster


def match_filler(
    path: Sequence[Point],
    library: FillerLibrary,
    rng: RandomSource,
    tolerance: float = 1e-4,
) -> FillerMatch | None:
    """Find a decoration for a tile polygon.

    Draws once to pick a random starting vertex, then tries every cyclic
    rotation. On a match a second draw chooses one of the signature's clusters.
    Returns None when no rotation is in the library.
    """
    n = len(path)
    start = int(rng.random() * n)
    rotated = rotate_left(path, start)
    sig = signature_of(rotated, tolerance)

    for _ in range(n):
        if sig in library:
            clusters = library.clusters(sig)
            cluster = clusters[int(rng.random() * len(clusters))]
            return FillerMatch(path=rotated, signature=sig, cluster=cluster)
        rotated = rotate_left(rotated, 1)
        sig = sig[1:] + sig[:1]

    return None
