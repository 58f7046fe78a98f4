"""Search for an encoding that fits a byte budget.

Lossy formats get one baseline encode, then a bisection over quality with a
fixed number of steps, then at most one geometric rescale. Lossless formats
get one encode and at most one rescale. The search only talks to a
BaseImageCodec, so it runs unchanged against a fake codec.
"""

import math
from dataclasses import dataclass

from filekit.image.base import BaseImageCodec
from filekit.logging.logger import Log

LOSSLESS_QUALITY = 1.0


@dataclass(frozen=True)
class SearchParams:
    """Tuning knobs of the size search."""

    safety_margin: float = 0.95
    min_quality: float = 0.10
    max_quality: float = 0.95
    iterations: int = 10
    acceptance_ratio: float = 0.8


@dataclass(frozen=True)
class SearchOutcome:
    """Encoding chosen by the search and how it got there."""

    data: bytes
    quality: float
    scale: float = 1.0
    encode_calls: int = 1

    @property
    def size(self) -> int:
        return len(self.data)


def rescale_factor(encoded_size: int, budget: int, safety_margin: float) -> float:
    """Dimension scale expected to bring ``encoded_size`` under the margin-adjusted budget."""
    return math.sqrt(budget * safety_margin / encoded_size)


def fit_to_budget(
    codec: BaseImageCodec,
    budget: int,
    *,
    lossless: bool,
    params: SearchParams = SearchParams(),
) -> SearchOutcome:
    """Encode through ``codec`` aiming at ``budget`` bytes.

    The budget is a target: an input whose smallest reachable encoding is
    still too large comes back over budget, though smaller than the first
    encode.

    Raises:
        ValueError: if ``budget`` is not positive.
        EncodeError: propagated from the codec.
    """
    if budget <= 0:
        raise ValueError(f"Byte budget must be positive, got {budget}")
    if lossless:
        return _fit_lossless(codec, budget, params)
    return _fit_lossy(codec, budget, params)


def _fit_lossless(codec: BaseImageCodec, budget: int, params: SearchParams) -> SearchOutcome:
    data = codec.encode(LOSSLESS_QUALITY)
    if len(data) <= budget:
        return SearchOutcome(data=data, quality=LOSSLESS_QUALITY)

    scale = rescale_factor(len(data), budget, params.safety_margin)
    Log.debug(f"Lossless encode is {len(data)} bytes, rescaling by {scale:.3f}")
    return SearchOutcome(
        data=codec.encode(LOSSLESS_QUALITY, scale),
        quality=LOSSLESS_QUALITY,
        scale=scale,
        encode_calls=2,
    )


def _fit_lossy(codec: BaseImageCodec, budget: int, params: SearchParams) -> SearchOutcome:
    quality = params.max_quality
    data = codec.encode(quality)
    calls = 1
    if len(data) <= budget:
        return SearchOutcome(data=data, quality=quality, encode_calls=calls)

    # Sizes in [acceptance_ratio * budget, budget] end the search early.
    floor = budget * params.acceptance_ratio
    lo, hi = params.min_quality, params.max_quality
    for step in range(params.iterations):
        quality = (lo + hi) / 2
        data = codec.encode(quality)
        calls += 1
        Log.debug(f"Search step {step + 1}: quality={quality:.4f} size={len(data)}")
        if len(data) > budget:
            hi = quality
        elif len(data) < floor:
            lo = quality
        else:
            break

    if len(data) <= budget:
        return SearchOutcome(data=data, quality=quality, encode_calls=calls)

    scale = rescale_factor(len(data), budget, params.safety_margin)
    Log.debug(f"Quality search missed budget at {len(data)} bytes, rescaling by {scale:.3f}")
    return SearchOutcome(
        data=codec.encode(quality, scale),
        quality=quality,
        scale=scale,
        encode_calls=calls + 1,
    )
