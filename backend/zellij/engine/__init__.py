"""Zellij pattern generation engine."""

from zellij.engine.config import EngineConfig
from zellij.engine.context import Features, Focus, RenderedShape, RenderOptions, Tile, ZellijContext
from zellij.engine.filler import Cluster, Corner, FillerLibrary, FillerShape
from zellij.engine.pipeline import Pipeline, build_design, generate_zellij
from zellij.engine.registry import Layer, get_registry, stage

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "EngineConfig",
    "Features",
    "Focus",
    "RenderOptions",
    "RenderedShape",
    "Tile",
    "ZellijContext",
    "Cluster",
    "Corner",
    "FillerLibrary",
    "FillerShape",
    "Pipeline",
    "build_design",
    "generate_zellij",
]
