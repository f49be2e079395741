#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Scalar/sequence convention shared by every op.

A value is either a single element (numpy scalar or python number) or a
flattened tensor (list, tuple or numpy array, raveled in row-major order).
Sequence ops always work on fresh copies, so inputs are never mutated and
results never alias an input buffer.

The scalar form of an op runs the sequence form on a length-1 sequence and
unwraps the single result, so both forms apply the same per-element rule.
"""
from typing import Callable, Optional

import numpy as np
from loguru import logger

from mhlort.errors import LengthMismatchError
from mhlort.utils.types import ElementTypeLike, get_element_type

LOG   = logger
DEBUG = LOG.debug


def is_sequence(x) -> bool:
    return isinstance(x, (list, tuple, np.ndarray)) and np.ndim(x) > 0


def np_dtype_or_none(etype: Optional[ElementTypeLike]):
    return None if etype is None else get_element_type(etype).np_dtype


def as_sequence(x, etype: Optional[ElementTypeLike] = None) -> np.ndarray:
    """fresh 1-D copy of x (a scalar becomes a length-1 sequence)"""
    dt  = np_dtype_or_none(etype)
    arr = np.array(x, dtype=dt, copy=True)
    return arr.reshape(-1)


def as_scalar(x, etype: Optional[ElementTypeLike] = None):
    return np.asarray(x, dtype=np_dtype_or_none(etype))[()]


def seqlen(x):
    """element count of a sequence (all dimensions), or 'scalar'"""
    return int(np.size(x)) if is_sequence(x) else 'scalar'


def check_same_length(opname: str, *operands) -> None:
    lengths = [seqlen(x) for x in operands]
    if len(set(lengths)) > 1:
        raise LengthMismatchError(opname, lengths)


def elementwise(opname: str, fn: Callable, *operands, etype: Optional[ElementTypeLike] = None,
                promote: bool = True):
    """
    Apply fn to operands that are either all scalars or all equal-length sequences.

    fn receives 1-D arrays and returns a 1-D array of the same length. With
    promote=True (and no etype) the operands are first cast to their common
    numpy result type, so binary ops see a single element type.
    """
    check_same_length(opname, *operands)
    scalar_form = not is_sequence(operands[0])
    arrs = [as_sequence(x, etype) for x in operands]
    if promote and etype is None and len(arrs) > 1:
        common = np.result_type(*arrs)
        arrs   = [a.astype(common, copy=False) for a in arrs]
    DEBUG('{}: {} form, n={}, dtype={}', opname, 'scalar' if scalar_form else 'sequence',
          len(arrs[0]), arrs[0].dtype)
    result = np.asarray(fn(*arrs))
    assert result.shape == arrs[0].shape, f"{opname}: result shape {result.shape} != operand shape {arrs[0].shape}"
    return result[0] if scalar_form else result
