"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/sampler.py

Uniform row-index sampling without replacement.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import FrozenSet, Optional

import numpy as np


def sample_indexes(
    k: int, n: int, rng: Optional[np.random.Generator] = None
) -> FrozenSet[int]:
    """
    Pick min(k, n) distinct ordinals from [0, n); every subset of that size is
    equally likely. The default generator is seeded from OS entropy per call.
    """
    if k < 0 or n < 0:
        raise ValueError(f"sample size and population must be >= 0 (got k={k}, n={n})")
    if k == 0 or n == 0:
        return frozenset()
    if k >= n:
        return frozenset(range(n))
    rng = rng if rng is not None else np.random.default_rng()
    picks = rng.choice(n, size=k, replace=False)
    return frozenset(int(i) for i in picks)
