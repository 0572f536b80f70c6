"""
Color blindness simulator module.

Applies the fixed color matrices used for color vision deficiency
simulation to individual colors, so a color pair can be re-checked for
contrast as it is perceived by each vision type.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from .contrast import (
    evaluate_contrast,
    get_contrast_ratio,
    get_luminance,
    hex_to_rgb,
    rgb_to_hex,
)
from ..utils.log import get_logger


class VisionType(Enum):
    """Simulated color vision types."""
    NORMAL = "normal"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    ACHROMATOPSIA = "achromatopsia"
    ACHROMATOMALY = "achromatomaly"


VISION_TYPES: Dict[VisionType, Dict[str, str]] = {
    VisionType.NORMAL: {
        'label': 'Normal Vision',
        'description': 'No color blindness',
    },
    VisionType.PROTANOPIA: {
        'label': 'Protanopia',
        'description': 'Red-blind (1% of males)',
    },
    VisionType.DEUTERANOPIA: {
        'label': 'Deuteranopia',
        'description': 'Green-blind (1% of males)',
    },
    VisionType.TRITANOPIA: {
        'label': 'Tritanopia',
        'description': 'Blue-blind (rare)',
    },
    VisionType.PROTANOMALY: {
        'label': 'Protanomaly',
        'description': 'Red-weak (1% of males)',
    },
    VisionType.DEUTERANOMALY: {
        'label': 'Deuteranomaly',
        'description': 'Green-weak (most common, 6% of males)',
    },
    VisionType.TRITANOMALY: {
        'label': 'Tritanomaly',
        'description': 'Blue-weak (rare)',
    },
    VisionType.ACHROMATOPSIA: {
        'label': 'Achromatopsia',
        'description': 'Complete color blindness (very rare)',
    },
    VisionType.ACHROMATOMALY: {
        'label': 'Achromatomaly',
        'description': 'Incomplete color blindness (rare)',
    },
}

Matrix = List[List[float]]

# RGB rows of the feColorMatrix filters, alpha is passed through unchanged
COLOR_MATRICES: Dict[VisionType, Matrix] = {
    VisionType.PROTANOPIA: [
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ],
    VisionType.PROTANOMALY: [
        [0.817, 0.183, 0.0],
        [0.333, 0.667, 0.0],
        [0.0, 0.125, 0.875],
    ],
    VisionType.DEUTERANOPIA: [
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ],
    VisionType.DEUTERANOMALY: [
        [0.8, 0.2, 0.0],
        [0.258, 0.742, 0.0],
        [0.0, 0.142, 0.858],
    ],
    VisionType.TRITANOPIA: [
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ],
    VisionType.TRITANOMALY: [
        [0.967, 0.033, 0.0],
        [0.0, 0.733, 0.267],
        [0.0, 0.183, 0.817],
    ],
}

# Amount passed to the CSS grayscale() filter
GRAYSCALE_AMOUNTS: Dict[VisionType, float] = {
    VisionType.ACHROMATOPSIA: 1.0,
    VisionType.ACHROMATOMALY: 0.5,
}

SVG_FILTER_TYPES = {
    VisionType.PROTANOPIA,
    VisionType.DEUTERANOPIA,
    VisionType.TRITANOPIA,
    VisionType.PROTANOMALY,
    VisionType.DEUTERANOMALY,
    VisionType.TRITANOMALY,
}


@dataclass
class VisionContrast:
    """Contrast of a color pair as perceived under one vision type."""
    vision_type: VisionType
    label: str
    text_color: str
    background_color: str
    ratio: float
    pass_aa: bool


def grayscale_matrix(amount: float) -> Matrix:
    """Build the matrix of the CSS grayscale() filter function."""
    k = 1 - amount
    return [
        [0.2126 + 0.7874 * k, 0.7152 - 0.7152 * k, 0.0722 - 0.0722 * k],
        [0.2126 - 0.2126 * k, 0.7152 + 0.2848 * k, 0.0722 - 0.0722 * k],
        [0.2126 - 0.2126 * k, 0.7152 - 0.7152 * k, 0.0722 + 0.9278 * k],
    ]


def css_filter(vision_type: Union[VisionType, str]) -> str:
    """
    Get the CSS filter value that renders a vision type.

    Args:
        vision_type: Vision type or its name

    Returns:
        CSS filter string, "none" for normal vision
    """
    vision_type = VisionType(vision_type)
    if vision_type in SVG_FILTER_TYPES:
        return f"url(#{vision_type.value})"
    if vision_type in GRAYSCALE_AMOUNTS:
        return f"grayscale({int(GRAYSCALE_AMOUNTS[vision_type] * 100)}%)"
    return "none"


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(math.floor(value + 0.5))))


class ColorBlindnessSimulator:
    """
    Simulates how colors appear under color vision deficiencies.

    Matrices are applied directly to sRGB channel values.
    """

    def __init__(self):
        """Initialize the color blindness simulator."""
        self.logger = get_logger("color_blindness")

    def _matrix_for(self, vision_type: VisionType) -> Matrix:
        if vision_type in COLOR_MATRICES:
            return COLOR_MATRICES[vision_type]
        if vision_type in GRAYSCALE_AMOUNTS:
            return grayscale_matrix(GRAYSCALE_AMOUNTS[vision_type])
        return grayscale_matrix(0.0)

    def simulate(
        self,
        hex_color: str,
        vision_type: Union[VisionType, str]
    ) -> str:
        """
        Simulate a color as perceived under a vision type.

        Args:
            hex_color: Color in 6-digit hex
            vision_type: Vision type or its name

        Returns:
            Simulated color in hex. A malformed color is returned unchanged.

        Raises:
            ValueError: If the vision type is unknown
        """
        vision_type = VisionType(vision_type)
        rgb = hex_to_rgb(hex_color)
        channels = [rgb.r, rgb.g, rgb.b]

        if any(math.isnan(c) for c in channels):
            return hex_color

        matrix = self._matrix_for(vision_type)
        simulated = [
            _clamp_channel(sum(row[i] * channels[i] for i in range(3)))
            for row in matrix
        ]
        return rgb_to_hex(*simulated)

    def simulate_all(self, hex_color: str) -> Dict[str, str]:
        """Simulate a color under every vision type."""
        return {
            vision_type.value: self.simulate(hex_color, vision_type)
            for vision_type in VisionType
        }

    def contrast_under_vision(
        self,
        text_color: str,
        bg_color: str
    ) -> List[VisionContrast]:
        """
        Check a color pair's contrast under every vision type.

        Args:
            text_color: Foreground color in hex
            bg_color: Background color in hex

        Returns:
            One VisionContrast per vision type
        """
        results = []
        for vision_type in VisionType:
            text = self.simulate(text_color, vision_type)
            background = self.simulate(bg_color, vision_type)
            ratio = get_contrast_ratio(
                get_luminance(hex_to_rgb(text)),
                get_luminance(hex_to_rgb(background)),
            )
            results.append(VisionContrast(
                vision_type=vision_type,
                label=VISION_TYPES[vision_type]['label'],
                text_color=text,
                background_color=background,
                ratio=ratio,
                pass_aa=evaluate_contrast(ratio).pass_aa,
            ))

        failing = [r.vision_type.value for r in results if not r.pass_aa]
        self.logger.debug(
            f"Vision contrast {text_color} on {bg_color}: "
            f"{len(failing)} vision type(s) below AA"
        )
        return results


def simulate_color_blindness(
    hex_color: str,
    vision_type: Union[VisionType, str]
) -> str:
    """Simulate a color as perceived under a vision type."""
    return ColorBlindnessSimulator().simulate(hex_color, vision_type)
