"""
Image URL and srcset builder.

This package builds image-delivery URLs and responsive-image srcset
attribute values. It is used by the ixset CLI and the ixset service.

Deployment:
    pip install ixset

This package has no networking dependencies. It only builds strings.

Example:
    from ixset_core import SrcsetConfig

    srcset = (
        SrcsetConfig()
        .domain("test.imgix.net")
        .path("image.png")
        .params([("w", "640")])
        .srcset_attr()
    )
"""

from .constants import (
    IMAGE_MAX_WIDTH,
    IMAGE_MIN_WIDTH,
    IMAGE_ZERO_WIDTH,
    SRCSET_DPR_QUALITIES,
    SRCSET_TARGET_DPR_RATIOS,
    SRCSET_TARGET_WIDTHS,
    SRCSET_WIDTH_TOLERANCE,
    VERSION,
    ixlib,
    lib_version,
    target_widths,
)
from .errors import DomainError, Error, IoError, JoinError, ParamError, PathError
from .source_set import (
    SRCSET_SEPARATOR,
    Action,
    SourceSet,
    SrcsetConfig,
    candidate,
    create_srcset,
    create_variable_quality_set,
    infer_action,
    srcset_attr,
)
from .url import Scheme, Url

__version__ = VERSION

__all__ = [
    # Constants
    "IMAGE_ZERO_WIDTH",
    "IMAGE_MIN_WIDTH",
    "IMAGE_MAX_WIDTH",
    "SRCSET_WIDTH_TOLERANCE",
    "SRCSET_TARGET_WIDTHS",
    "SRCSET_TARGET_DPR_RATIOS",
    "SRCSET_DPR_QUALITIES",
    "VERSION",
    "target_widths",
    "lib_version",
    "ixlib",
    # Errors
    "Error",
    "IoError",
    "DomainError",
    "JoinError",
    "ParamError",
    "PathError",
    # Url
    "Scheme",
    "Url",
    # Srcset
    "SRCSET_SEPARATOR",
    "Action",
    "SrcsetConfig",
    "SourceSet",
    "infer_action",
    "candidate",
    "create_srcset",
    "create_variable_quality_set",
    "srcset_attr",
]
