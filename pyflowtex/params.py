"""
Generation parameters for PyFlowTex.

A single immutable value carries everything the pipeline needs: texture size,
fractal noise settings and directional blur settings. The value is validated
when it is built, so the kernels never see partial or inconsistent state.

Author: B.G.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass, fields, replace as _dc_replace
from typing import Any, Mapping

import numpy as np

from . import constants as cte
from .errors import ParameterValidationError


_INT_FIELDS = ("width", "height", "octaves", "blur_strength", "seed")
_REAL_FIELDS = ("scale_x", "scale_y", "offset_x", "offset_y", "lacunarity", "gain", "blur_angle_degrees")


def _is_int(value) -> bool:
    # bool is an int subclass, but True is not a texture width
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)) and math.isfinite(value)


@dataclass(frozen=True)
class GenerationParameters:
    """
    Complete parameter set for one flow texture generation request.

    Attributes:
        width, height: Texture size in pixels (> 0)
        octaves: Number of noise layers summed (> 0)
        scale_x, scale_y: Spatial frequency multipliers per axis
        offset_x, offset_y: Translation of the noise field
        lacunarity: Frequency multiplier between successive octaves
        gain: Amplitude multiplier between successive octaves (>= 0)
        apply_blur: Whether the directional blur pass runs
        blur_angle_degrees: Blur direction, 0 is horizontal, 90 is vertical
        blur_strength: Blur sample radius in pixels (>= 0, 0 is a no-op)
        seed: Permutation seed of the default Perlin noise primitive
    """

    width: int = cte.WIDTH
    height: int = cte.HEIGHT
    octaves: int = cte.OCTAVES
    scale_x: float = cte.SCALE_X
    scale_y: float = cte.SCALE_Y
    offset_x: float = cte.OFFSET_X
    offset_y: float = cte.OFFSET_Y
    lacunarity: float = cte.LACUNARITY
    gain: float = cte.GAIN
    apply_blur: bool = cte.APPLY_BLUR
    blur_angle_degrees: float = cte.BLUR_ANGLE
    blur_strength: int = cte.BLUR_STRENGTH
    seed: int = cte.SEED

    def __post_init__(self):
        self.validate()
        # NumPy scalars are accepted, stored values are plain Python numbers
        for name in _INT_FIELDS:
            object.__setattr__(self, name, int(getattr(self, name)))
        for name in _REAL_FIELDS:
            object.__setattr__(self, name, float(getattr(self, name)))
        object.__setattr__(self, "apply_blur", bool(self.apply_blur))

    def validate(self) -> None:
        """
        Check every field, raising ParameterValidationError on the first problem.

        Values are never clamped: an out-of-range value is a caller mistake.
        """
        for name in ("width", "height", "octaves"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ParameterValidationError(f"{name} must be a positive integer, got {value!r}")

        for name in _REAL_FIELDS:
            value = getattr(self, name)
            if not _is_real(value):
                raise ParameterValidationError(f"{name} must be a finite number, got {value!r}")

        if self.gain < 0:
            raise ParameterValidationError(f"gain must be >= 0, got {self.gain!r}")

        if not isinstance(self.apply_blur, (bool, np.bool_)):
            raise ParameterValidationError(f"apply_blur must be a boolean, got {self.apply_blur!r}")

        if not _is_int(self.blur_strength) or not 0 <= self.blur_strength <= cte.MAX_BLUR_STRENGTH:
            raise ParameterValidationError(
                f"blur_strength must be an integer in [0, {cte.MAX_BLUR_STRENGTH}], got {self.blur_strength!r}"
            )

        if not _is_int(self.seed) or self.seed < 0:
            raise ParameterValidationError(f"seed must be a non-negative integer, got {self.seed!r}")

    @property
    def shape(self) -> tuple:
        """Buffer shape (height, width) of the produced field."""
        return (self.height, self.width)

    def replace(self, **changes) -> "GenerationParameters":
        """Return a new validated parameter set with some fields changed."""
        return _dc_replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "GenerationParameters":
        """
        Build parameters from a plain mapping, e.g. a decoded JSON config file.

        Missing keys take their default value. Unknown keys are rejected so that
        a typo in a config file does not silently fall back to a default.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ParameterValidationError(f"Unknown parameter(s): {', '.join(unknown)}")
        return cls(**dict(values))


__all__ = ["GenerationParameters"]
