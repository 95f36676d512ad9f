"""Named five-colour palettes: [background, accent, fill1, fill2, fill3]."""

from __future__ import annotations

from zellij.errors import ConfigurationError

PALETTES: dict[str, tuple[str, ...]] = {
    "Fes Blue": ("#1a1a2e", "#f0f0f0", "#0047AB", "#1e90ff", "#87ceeb"),
    "Marrakech": ("#2d1f0f", "#f5f0e1", "#c84c09", "#e67e22", "#f4a460"),
    "Chefchaouen": ("#1a3a4a", "#e8f4f8", "#4169e1", "#5dade2", "#aed6f1"),
    "Sahara": ("#3d2914", "#faf0e6", "#d2691e", "#daa520", "#f0e68c"),
    "Emerald": ("#0d2818", "#e8f5e9", "#006400", "#228b22", "#32cd32"),
    "Royal": ("#1a0a2e", "#f5f0ff", "#4b0082", "#8b008b", "#da70d6"),
    "Terracotta": ("#2b1810", "#faf5f0", "#8b4513", "#cd853f", "#deb887"),
    "Ocean": ("#0a1628", "#e6f3f5", "#006994", "#20b2aa", "#48d1cc"),
}

DEFAULT_PALETTE = "Fes Blue"


def get_palette(name: str) -> tuple[str, ...]:
    try:
        return PALETTES[name]
    except KeyError:
        raise ConfigurationError(f"Unknown palette {name!r}") from None
