"""GET /api/palettes — the named colour palettes."""

from __future__ import annotations

from fastapi import APIRouter

from zellij.models.responses import PaletteModel
from zellij.palettes import PALETTES

router = APIRouter()


@router.get("/palettes", response_model=list[PaletteModel])
async def palettes() -> list[PaletteModel]:
    return [PaletteModel(name=name, colors=list(colors)) for name, colors in PALETTES.items()]
