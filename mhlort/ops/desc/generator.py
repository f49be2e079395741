#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Random sampling ops.

Without an explicit `rng` each call builds its generator via
mhlort.config.make_rng, i.e. from fresh OS entropy unless a seed is
configured, so results are not reproducible across calls. Tests and any
caller that needs determinism pass a seeded numpy.random.Generator.
"""
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np
from loguru import logger

from mhlort.config import get_runtime_config, make_rng
from mhlort.errors import UnsupportedOperationError
from mhlort.ops.desc.helpers import as_sequence
from mhlort.ops.desc.registry import STATUS_IMPLEMENTED, STATUS_PLACEHOLDER, register_ops
from mhlort.utils.common import prod_ints
from mhlort.utils.types import ElementType, get_element_type, type_max, type_min

LOG     = logger
DEBUG   = LOG.debug
WARNING = LOG.warning


class RngAlgorithm(Enum):
    DEFAULT   = 0
    THREE_FRY = 1
    PHILOX    = 2


def get_rng_algorithm(algorithm: Union[RngAlgorithm, str, int]) -> RngAlgorithm:
    if isinstance(algorithm, RngAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return RngAlgorithm[algorithm.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid rng algorithm '{algorithm}', expected one of {[a.name for a in RngAlgorithm]}")
    try:
        return RngAlgorithm(algorithm)
    except ValueError:
        raise ValueError(f"Invalid rng algorithm {algorithm!r}")


def _num_samples(shape: Sequence[int]) -> int:
    dims = [int(d) for d in shape]
    if any(d < 0 for d in dims):
        raise ValueError(f"RngUniform: negative dimension in shape {list(shape)}")
    return prod_ints(dims)

def _uniform_int(low, high, n: int, et: ElementType, rng: np.random.Generator) -> np.ndarray:
    lo, hi = int(low), int(high)
    if lo >= hi:
        raise ValueError(f"RngUniform: empty interval [{lo}, {hi})")
    # closed-interval draw on [lo, hi - 1] realizes the half-open [lo, hi)
    return rng.integers(lo, hi - 1, size=n, dtype=et.np_dtype, endpoint=True)

def _uniform_float(low, high, n: int, et: ElementType, rng: np.random.Generator) -> np.ndarray:
    lo, hi = float(low), float(high)
    if not lo < hi:
        raise ValueError(f"RngUniform: empty interval [{lo}, {hi})")
    dt = et.np_dtype
    if not dt.type(lo) < dt.type(hi):
        raise ValueError(f"RngUniform: interval [{lo}, {hi}) is empty in {et}")
    u = rng.random(n)
    # interpolation form stays finite even when hi - lo overflows
    samples = (lo * (1.0 - u) + hi * u).astype(dt)
    below   = np.nextafter(dt.type(hi), dt.type(-np.inf))
    return np.clip(samples, dt.type(lo), below).astype(dt)

def rng_uniform(low, high, shape: Sequence[int], etype=None,
                rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    prod(shape) independent samples uniform over the half-open [low, high).

    Integral types draw on the closed [low, high - 1]. Floating types sample
    in float64 and round to `etype`; a sample that rounds up to `high` is
    clamped to the next representable value below it, so `high` is excluded
    for every floating type. The element type defaults to the numpy result
    type of (low, high).
    """
    et = get_element_type(etype) if etype is not None else \
            get_element_type(np.result_type(np.asarray(low), np.asarray(high)))
    n  = _num_samples(shape)
    if rng is None:
        rng = make_rng()
    DEBUG('RngUniform: [{}, {}) x {} as {}', low, high, n, et)
    if et.is_integral:
        return _uniform_int(low, high, n, et, rng)
    if et.is_floating:
        return _uniform_float(low, high, n, et, rng)
    raise ValueError(f"RngUniform: unsupported element type {et}")

def rng_bit_generator(state, etype, algorithm: Union[RngAlgorithm, str, int], n: int,
                      rng: Optional[np.random.Generator] = None) -> tuple[np.ndarray, np.ndarray]:
    """
    PLACEHOLDER - not a counter-based generator.

    The algorithm is validated but ignored; the state is returned unchanged
    and the n outputs come from rng_uniform over [type_min, type_max) of
    `etype` (type_min is the smallest positive normal for floats). Output is
    neither deterministic in `state` nor seekable. Disallowed (raises
    UnsupportedOperationError) when the runtime config sets
    allow_placeholder_ops to false.
    """
    algo = get_rng_algorithm(algorithm)
    if not get_runtime_config().allow_placeholder_ops:
        raise UnsupportedOperationError('RngBitGenerator', 'placeholder implementation disabled by runtime config')
    WARNING('RngBitGenerator is a placeholder: algorithm {} ignored, state not advanced, output not reproducible', algo.name)
    et = get_element_type(etype)
    new_state = as_sequence(state, ElementType.UI64)
    values    = rng_uniform(type_min(et), type_max(et), [n], etype=et, rng=rng)
    return new_state, values


def register_generator_ops():
    _optbl = [
            ['RngUniform',      'ARITY_3->1', 3, 3, 1, rng_uniform,       STATUS_IMPLEMENTED, ['etype', 'rng']],
            ['RngBitGenerator', 'ARITY_1->2', 1, 1, 2, rng_bit_generator, STATUS_PLACEHOLDER, ['etype', 'algorithm', 'n', 'rng']],
            ]

    register_ops('generator', _optbl)
    return
