"""
Width, ratio and quality tables used to generate srcsets.

The default target widths are a geometric progression: each width is at
most SRCSET_WIDTH_TOLERANCE percent away from its neighbours, so an
image is never rendered more than that much larger or smaller than the
closest downloaded width.
"""

from __future__ import annotations

import math

VERSION = "0.1.0"
IMPL_TAG = "python"

# Width of an empty image; requested widths must be greater than this.
IMAGE_ZERO_WIDTH = 0
IMAGE_MIN_WIDTH = 100
IMAGE_MAX_WIDTH = 8192

# Maximum tolerated difference (percent) between downloaded and rendered size.
SRCSET_WIDTH_TOLERANCE = 8.0

SRCSET_TARGET_WIDTHS: tuple[int, ...] = (
    100, 116, 135, 156, 181, 210, 244, 283, 328, 380, 441, 512, 594, 689, 799, 927,
    1075, 1247, 1446, 1678, 1946, 2257, 2619, 3038, 3524, 4087, 4741, 5500, 6380,
    7401, 8192,
)

# Default device pixel ratios (dpr).
SRCSET_TARGET_DPR_RATIOS: tuple[int, ...] = (1, 2, 3, 4, 5)

# Quality paired with each default dpr when variable quality is on.
SRCSET_DPR_QUALITIES: tuple[int, ...] = (75, 50, 35, 23, 20)


def target_widths(
    min_width: int = IMAGE_MIN_WIDTH,
    max_width: int = IMAGE_MAX_WIDTH,
    tolerance: float = SRCSET_WIDTH_TOLERANCE,
) -> list[int]:
    """
    Derive the target widths between min_width and max_width.

    Widths grow by (1 + 2 * tolerance / 100) per step and are rounded to
    the nearest integer. The last width is always max_width. With the
    default arguments the result equals SRCSET_TARGET_WIDTHS.

    Raises ValueError: If the bounds or tolerance are not usable
    """
    if min_width <= IMAGE_ZERO_WIDTH:
        raise ValueError(f"min_width must be greater than {IMAGE_ZERO_WIDTH}, got {min_width}")
    if max_width < min_width:
        raise ValueError(f"max_width ({max_width}) must be >= min_width ({min_width})")
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")

    step = 1.0 + (tolerance / 100.0) * 2.0
    widths: list[int] = []
    prev = float(min_width)
    while prev <= max_width:
        # Halves round away from zero; steps that round onto the previous width are skipped.
        width = int(math.floor(prev + 0.5))
        if not widths or width > widths[-1]:
            widths.append(width)
        prev *= step

    if widths[-1] < max_width:
        widths.append(max_width)
    return widths


def lib_version() -> str:
    """Implementation identity, e.g. "python=0.1.0"."""
    return f"{IMPL_TAG}={VERSION}"


def ixlib() -> str:
    """The raw ixlib tag set by Url.ix(), e.g. "ixlib=python-0.1.0"."""
    return f"ixlib={IMPL_TAG}-{VERSION}"
