#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Structural ops on flattened tensors.

Shape is not modelled: broadcast_in_dim repeats the whole operand, reshape is
an identity copy and concatenate joins along the single implicit axis. The
caller owns the shape bookkeeping that makes these correct for rank > 1.
"""
import numpy as np
from loguru import logger

from mhlort.errors import LengthMismatchError
from mhlort.ops.desc.helpers import as_scalar, as_sequence, check_same_length, is_sequence, seqlen
from mhlort.ops.desc.registry import STATUS_IMPLEMENTED, VARIADIC_MAX, register_ops

LOG   = logger
DEBUG = LOG.debug


def broadcast_in_dim(x, n: int, etype=None) -> np.ndarray:
    """n copies of x back to back; a scalar x counts as a length-1 sequence"""
    if int(n) != n or n < 0:
        raise ValueError(f"BroadcastInDim: repeat count must be a non-negative integer, got {n}")
    arr = as_sequence(x, etype)
    DEBUG('BroadcastInDim: n={} x {}', len(arr), n)
    return np.tile(arr, int(n))

def concatenate(x, y, *more, etype=None) -> np.ndarray:
    """x followed by y (and any further operands, in order)"""
    arrs = [as_sequence(t, etype) for t in (x, y) + more]
    if etype is None:
        # an empty list carries no element type; take it from the data
        nonempty = [a for a in arrs if a.size > 0]
        if nonempty:
            arrs = [a if a.size > 0 else a.astype(nonempty[0].dtype) for a in arrs]
    DEBUG('Concatenate: lengths={}', [len(a) for a in arrs])
    return np.concatenate(arrs)

def reshape(x, etype=None):
    """identity copy of x"""
    if is_sequence(x):
        return as_sequence(x, etype)
    return as_scalar(x, etype)

def select(mask, x, y, etype=None):
    """
    result[i] = x[i] if mask[i] else y[i]. A scalar mask picks one whole
    operand.
    """
    if not is_sequence(mask):
        check_same_length('Select', x, y)
        pick = x if bool(mask) else y
        return reshape(pick, etype)
    if not (is_sequence(x) and is_sequence(y)):
        raise LengthMismatchError('Select', [seqlen(mask), seqlen(x), seqlen(y)])
    check_same_length('Select', mask, x, y)
    m  = as_sequence(mask).astype(np.bool_)
    xs = as_sequence(x, etype)
    ys = as_sequence(y, etype)
    DEBUG('Select: n={}', len(m))
    return np.where(m, xs, ys)


def register_tensor_ops():
    _optbl = [
            ['BroadcastInDim', 'ARITY_1->1',             1, 1,            1, broadcast_in_dim, STATUS_IMPLEMENTED, ['n', 'etype']],
            ['Concatenate',    'ARITY_VARIADIC[2-*]->1', 2, VARIADIC_MAX, 1, concatenate,      STATUS_IMPLEMENTED, ['etype']],
            ['Reshape',        'ARITY_1->1',             1, 1,            1, reshape,          STATUS_IMPLEMENTED, ['etype']],
            ['Select',         'ARITY_3->1',             3, 3,            1, select,           STATUS_IMPLEMENTED, ['etype']],
            ]

    register_ops('tensor', _optbl)
    return
