"""Decoration stages: canvas fit, filler placement and colouring."""
