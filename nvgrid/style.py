"""Colours and highlight styles used by grid cells."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass
class Colors:
    """A foreground, background and special colour, each of which may be unset."""

    foreground: Color | None = None
    background: Color | None = None
    special: Color | None = None


def _fallback(color: Color | None, name: str) -> Color:
    if color is None:
        raise ValueError(f"default {name} color is not set")
    return color


@dataclass
class Style:
    """A highlight definition: colours plus text attributes."""

    colors: Colors = field(default_factory=Colors)
    reverse: bool = False
    italic: bool = False
    bold: bool = False
    strikethrough: bool = False
    underline: bool = False
    undercurl: bool = False
    blend: int = 0

    def foreground(self, default_colors: Colors) -> Color:
        """Colour used to draw text, honouring reverse video."""
        if self.reverse:
            if self.colors.background is not None:
                return self.colors.background
            return _fallback(default_colors.background, "background")
        if self.colors.foreground is not None:
            return self.colors.foreground
        return _fallback(default_colors.foreground, "foreground")

    def background(self, default_colors: Colors) -> Color:
        """Colour used to fill the cell, honouring reverse video."""
        if self.reverse:
            if self.colors.foreground is not None:
                return self.colors.foreground
            return _fallback(default_colors.foreground, "foreground")
        if self.colors.background is not None:
            return self.colors.background
        return _fallback(default_colors.background, "background")

    def special(self, default_colors: Colors) -> Color:
        """Colour used for underlines and undercurls."""
        if self.colors.special is not None:
            return self.colors.special
        return _fallback(default_colors.special, "special")