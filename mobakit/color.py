"""RGBA colours as bytes (``Color32``) and as floats (``Colorf``), plus named colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mobakit.mathlib import random_range

_BYTE_MAX = 255


def _to_byte(value: float) -> int:
    """Truncate toward zero and keep the result inside the byte range."""
    return max(0, min(_BYTE_MAX, int(value)))


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class Color32:
    """An RGBA colour whose components are bytes from 0 to 255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = _BYTE_MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= _BYTE_MAX:
                raise ValueError(f"colour component {name}={value} is outside 0..255")

    @classmethod
    def from_packed(cls, packed: int) -> "Color32":
        """Unpack a 32-bit ``0xAABBGGRR`` value."""
        packed &= 0xFFFFFFFF
        return cls(
            r=packed & 0xFF,
            g=(packed >> 8) & 0xFF,
            b=(packed >> 16) & 0xFF,
            a=(packed >> 24) & 0xFF,
        )

    @classmethod
    def from_colorf(cls, color: "Colorf") -> "Color32":
        """Scale float components to bytes, truncating each one."""
        return cls(
            r=_to_byte(color.r * _BYTE_MAX),
            g=_to_byte(color.g * _BYTE_MAX),
            b=_to_byte(color.b * _BYTE_MAX),
            a=_to_byte(color.a * _BYTE_MAX),
        )

    def packed(self) -> int:
        """Pack into a 32-bit ``0xAABBGGRR`` value."""
        return self.a << 24 | self.b << 16 | self.g << 8 | self.r

    def __getitem__(self, index: int) -> int:
        """Components in the order alpha, red, green, blue."""
        components = (self.a, self.r, self.g, self.b)
        if not 0 <= index < len(components):
            raise IndexError("Out of color range")
        return components[index]

    @classmethod
    def random_color(cls, low: int = 0, high: int = _BYTE_MAX) -> "Color32":
        """An opaque colour with each of r, g, b drawn from ``[low, high]``."""
        return cls(
            random_range(int(low), int(high)),
            random_range(int(low), int(high)),
            random_range(int(low), int(high)),
            _BYTE_MAX,
        )

    @staticmethod
    def lerp(c1: "Color32", c2: "Color32", t: float) -> "Color32":
        """Interpolate the RGB components linearly; the result is opaque."""

        def mix(start: int, end: int) -> int:
            if t == 1:
                return _to_byte(end)
            return _to_byte(start + t * (end - start))

        return Color32(mix(c1.r, c2.r), mix(c1.g, c2.g), mix(c1.b, c2.b))

    def light(self) -> "Color32":
        """Halfway towards white; the result is opaque."""
        return Color32(
            (self.r + _BYTE_MAX) // 2,
            (self.g + _BYTE_MAX) // 2,
            (self.b + _BYTE_MAX) // 2,
        )

    def dark(self) -> "Color32":
        """Halfway towards black; the result is opaque."""
        return Color32(self.r // 2, self.g // 2, self.b // 2)


@dataclass
class Colorf:
    """An RGBA colour with float components, nominally from 0 to 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> "Colorf":
        """Unpack a 32-bit value laid out as in :meth:`Color32.packed`."""
        return cls.from_color32(Color32.from_packed(packed))

    @classmethod
    def from_color32(cls, color: Color32) -> "Colorf":
        return cls(
            color.r / _BYTE_MAX,
            color.g / _BYTE_MAX,
            color.b / _BYTE_MAX,
            color.a / _BYTE_MAX,
        )

    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float, hdr: bool = True) -> "Colorf":
        """Build an opaque colour from hue, saturation and value.

        Without ``hdr`` the components are clamped to ``[0, 1]``. A hue whose
        sector falls outside ``-1..6`` raises ``ValueError``.
        """
        if s == 0.0:
            return cls(v, v, v)
        if v == 0.0:
            return cls(0.0, 0.0, 0.0)

        scaled = h * 6.0
        sector = math.floor(scaled)
        fraction = scaled - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * fraction)
        t = v * (1.0 - s * (1.0 - fraction))

        sectors = {
            -1: (v, p, q),
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
            6: (v, t, p),
        }
        try:
            r, g, b = sectors[sector]
        except KeyError:
            raise ValueError(f"hue {h} is out of range") from None

        if not hdr:
            r, g, b = _clamp01(r), _clamp01(g), _clamp01(b)
        return cls(r, g, b)

    def rgb_to_hsv(self) -> tuple[float, float, float]:
        """Return ``(hue, saturation, value)`` with hue in ``[0, 1)``."""
        if self.b > self.g and self.b > self.r:
            return self._hsv_from_dominant(4.0, self.b, self.r, self.g)
        if self.g > self.r:
            return self._hsv_from_dominant(2.0, self.g, self.b, self.r)
        return self._hsv_from_dominant(0.0, self.r, self.g, self.b)

    @staticmethod
    def _hsv_from_dominant(
        offset: float, dominant: float, first: float, second: float
    ) -> tuple[float, float, float]:
        value = dominant
        if value == 0.0:
            return 0.0, 0.0, value
        spread = value - min(first, second)
        if spread != 0.0:
            saturation = spread / value
            hue = offset + (first - second) / spread
        else:
            saturation = 0.0
            hue = offset + (first - second)
        hue /= 6.0
        if hue < 0.0:
            hue += 1.0
        return hue, saturation, value


_PACKED_NAMES = {
    "TransparentBlack": 0x00000000,
    "Transparent": 0x00000000,
    "AliceBlue": 0xFFFFF8F0,
    "AntiqueWhite": 0xFFD7EBFA,
    "Aqua": 0xFFFFFF00,
    "Aquamarine": 0xFFD4FF7F,
    "Azure": 0xFFFFFFF0,
    "Beige": 0xFFDCF5F5,
    "Bisque": 0xFFC4E4FF,
    "Black": 0xFF000000,
    "BlanchedAlmond": 0xFFCDEBFF,
    "Blue": 0xFFFF0000,
    "BlueViolet": 0xFFE22B8A,
    "Brown": 0xFF2A2AA5,
    "BurlyWood": 0xFF87B8DE,
    "CadetBlue": 0xFFA09E5F,
    "Chartreuse": 0xFF00FF7F,
    "Chocolate": 0xFF1E69D2,
    "Coral": 0xFF507FFF,
    "CornflowerBlue": 0xFFED9564,
    "Cornsilk": 0xFFDCF8FF,
    "Crimson": 0xFF3C14DC,
    "Cyan": 0xFFFFFF00,
    "DarkBlue": 0xFF8B0000,
    "DarkCyan": 0xFF8B8B00,
    "DarkGoldenrod": 0xFF0B86B8,
    "DarkGray": 0xFFA9A9A9,
    "DarkGreen": 0xFF006400,
    "DarkKhaki": 0xFF6BB7BD,
    "DarkMagenta": 0xFF8B008B,
    "DarkOliveGreen": 0xFF2F6B55,
    "DarkOrange": 0xFF008CFF,
    "DarkOrchid": 0xFFCC3299,
    "DarkRed": 0xFF00008B,
    "DarkSalmon": 0xFF7A96E9,
    "DarkSeaGreen": 0xFF8BBC8F,
    "DarkSlateBlue": 0xFF8B3D48,
    "DarkSlateGray": 0xFF4F4F2F,
    "DarkTurquoise": 0xFFD1CE00,
    "DarkViolet": 0xFFD30094,
    "DeepPink": 0xFF9314FF,
    "DeepSkyBlue": 0xFFFFBF00,
    "DimGray": 0xFF696969,
    "DodgerBlue": 0xFFFF901E,
    "Firebrick": 0xFF2222B2,
    "FloralWhite": 0xFFF0FAFF,
    "ForestGreen": 0xFF228B22,
    "Fuchsia": 0xFFFF00FF,
    "Gainsboro": 0xFFDCDCDC,
    "GhostWhite": 0xFFFFF8F8,
    "Gold": 0xFF00D7FF,
    "Goldenrod": 0xFF20A5DA,
    "Gray": 0xFF808080,
    "Green": 0xFF008000,
    "GreenYellow": 0xFF2FFFAD,
    "Honeydew": 0xFFF0FFF0,
    "HotPink": 0xFFB469FF,
    "IndianRed": 0xFF5C5CCD,
    "Indigo": 0xFF82004B,
    "Ivory": 0xFFF0FFFF,
    "Khaki": 0xFF8CE6F0,
    "Lavender": 0xFFFAE6E6,
    "LavenderBlush": 0xFFF5F0FF,
    "LawnGreen": 0xFF00FC7C,
    "LemonChiffon": 0xFFCDFAFF,
    "LightBlue": 0xFFE6D8AD,
    "LightCoral": 0xFF8080F0,
    "LightCyan": 0xFFFFFFE0,
    "LightGoldenrodYellow": 0xFFD2FAFA,
    "LightGray": 0xFFD3D3D3,
    "LightGreen": 0xFF90EE90,
    "LightPink": 0xFFC1B6FF,
    "LightSalmon": 0xFF7AA0FF,
    "LightSeaGreen": 0xFFAAB220,
    "LightSkyBlue": 0xFFFACE87,
    "LightSlateGray": 0xFF998877,
    "LightSteelBlue": 0xFFDEC4B0,
    "LightYellow": 0xFFE0FFFF,
    "Lime": 0xFF00FF00,
    "LimeGreen": 0xFF32CD32,
    "Linen": 0xFFE6F0FA,
    "Magenta": 0xFFFF00FF,
    "Maroon": 0xFF000080,
    "MediumAquamarine": 0xFFAACD66,
    "MediumBlue": 0xFFCD0000,
    "MediumOrchid": 0xFFD355BA,
    "MediumPurple": 0xFFDB7093,
    "MediumSeaGreen": 0xFF71B33C,
    "MediumSlateBlue": 0xFFEE687B,
    "MediumSpringGreen": 0xFF9AFA00,
    "MediumTurquoise": 0xFFCCD148,
    "MediumVioletRed": 0xFF8515C7,
    "MidnightBlue": 0xFF701919,
    "MintCream": 0xFFFAFFF5,
    "MistyRose": 0xFFE1E4FF,
    "Moccasin": 0xFFB5E4FF,
    "NavajoWhite": 0xFFADDEFF,
    "Navy": 0xFF800000,
    "OldLace": 0xFFE6F5FD,
    "Olive": 0xFF008080,
    "OliveDrab": 0xFF238E6B,
    "Orange": 0xFF00A5FF,
    "OrangeRed": 0xFF0045FF,
    "Orchid": 0xFFD670DA,
    "PaleGoldenrod": 0xFFAAE8EE,
    "PaleGreen": 0xFF98FB98,
    "PaleTurquoise": 0xFFEEEEAF,
    "PaleVioletRed": 0xFF9370DB,
    "PapayaWhip": 0xFFD5EFFF,
    "PeachPuff": 0xFFB9DAFF,
    "Peru": 0xFF3F85CD,
    "Pink": 0xFFCBC0FF,
    "Plum": 0xFFDDA0DD,
    "PowderBlue": 0xFFE6E0B0,
    "Purple": 0xFF800080,
    "Red": 0xFF0000FF,
    "RosyBrown": 0xFF8F8FBC,
    "RoyalBlue": 0xFFE16941,
    "SaddleBrown": 0xFF13458B,
    "Salmon": 0xFF7280FA,
    "SandyBrown": 0xFF60A4F4,
    "SeaGreen": 0xFF578B2E,
    "SeaShell": 0xFFEEF5FF,
    "Sienna": 0xFF2D52A0,
    "Silver": 0xFFC0C0C0,
    "SkyBlue": 0xFFEBCE87,
    "SlateBlue": 0xFFCD5A6A,
    "SlateGray": 0xFF908070,
    "Snow": 0xFFFAFAFF,
    "SpringGreen": 0xFF7FFF00,
    "SteelBlue": 0xFFB48246,
    "Tan": 0xFF8CB4D2,
    "Teal": 0xFF808000,
    "Thistle": 0xFFD8BFD8,
    "Tomato": 0xFF4763FF,
    "Turquoise": 0xFFD0E040,
    "Violet": 0xFFEE82EE,
    "Wheat": 0xFFB3DEF5,
    "White": 0xFFFFFFFF,
    "WhiteSmoke": 0xFFF5F5F5,
    "Yellow": 0xFF00FFFF,
    "YellowGreen": 0xFF32CD9A,
}

NAMED_COLORS: dict[str, Color32] = {
    name: Color32.from_packed(value) for name, value in _PACKED_NAMES.items()
}