#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from typing import Union

import numpy as np

from mhlort.errors import UnsupportedOperationError
from mhlort.ops.desc.helpers import elementwise
from mhlort.ops.desc.registry import STATUS_IMPLEMENTED, register_ops


class ComparisonDirection(Enum):
    """comparison kinds, valued as in the IR attribute"""
    EQ = 0
    NE = 1
    GE = 2
    GT = 3
    LE = 4
    LT = 5


_ORDERED_PREDICATES = {
        ComparisonDirection.EQ: np.equal,
        ComparisonDirection.NE: np.not_equal,
        ComparisonDirection.GE: np.greater_equal,
        ComparisonDirection.GT: np.greater,
        ComparisonDirection.LE: np.less_equal,
        ComparisonDirection.LT: np.less,
        }

# numpy dtype kind -> {direction: predicate}; complex numbers have no order
PREDICATE_TABLE = {
        'b': _ORDERED_PREDICATES,
        'i': _ORDERED_PREDICATES,
        'u': _ORDERED_PREDICATES,
        'f': _ORDERED_PREDICATES,
        'c': {
            ComparisonDirection.EQ: np.equal,
            ComparisonDirection.NE: np.not_equal,
            },
        }


def get_comparison_direction(kind: Union[ComparisonDirection, str, int]) -> ComparisonDirection:
    if isinstance(kind, ComparisonDirection):
        return kind
    if isinstance(kind, str):
        try:
            return ComparisonDirection[kind.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid comparison direction '{kind}', expected one of {[d.name for d in ComparisonDirection]}")
    try:
        return ComparisonDirection(kind)
    except ValueError:
        raise ValueError(f"Invalid comparison direction {kind!r}")


def compare(x, y, direction, etype=None):
    """
    Evaluate the predicate selected by `direction` at each index; returns a
    boolean mask (or a single np.bool_ for scalar operands).
    """
    cmpdir = get_comparison_direction(direction)

    def apply(a, b):
        table = PREDICATE_TABLE[a.dtype.kind]
        if cmpdir not in table:
            raise UnsupportedOperationError('Compare', f"{cmpdir.name} is not defined for dtype {a.dtype}")
        return table[cmpdir](a, b)
    return elementwise('Compare', apply, x, y, etype=etype)


def _bitwise(opname, ufunc):
    def apply(a, b):
        if a.dtype.kind not in 'biu':
            raise UnsupportedOperationError(opname, f"not defined for dtype {a.dtype}")
        return ufunc(a, b.astype(a.dtype, copy=False))
    return apply

def or_(x, y, etype=None):
    """logical or for pred, bitwise or for integers; the result keeps the element type of x"""
    return elementwise('Or', _bitwise('Or', np.bitwise_or), x, y, etype=etype, promote=False)

def xor(x, y, etype=None):
    """logical xor for pred, bitwise xor for integers; the result keeps the element type of x"""
    return elementwise('Xor', _bitwise('Xor', np.bitwise_xor), x, y, etype=etype, promote=False)


def _shift(opname, left):
    def apply(a, s):
        if a.dtype.kind not in 'iu':
            raise UnsupportedOperationError(opname, f"not defined for dtype {a.dtype}")
        nbits  = a.dtype.itemsize * 8
        udtype = np.dtype(f'u{a.dtype.itemsize}')
        ua     = a.view(udtype)
        # shift amounts outside [0, nbits) produce 0
        amount = s.astype(np.int64)
        oob    = (amount < 0) | (amount >= nbits)
        amount = np.where(oob, 0, amount).astype(udtype)
        r = np.left_shift(ua, amount) if left else np.right_shift(ua, amount)
        r = np.where(oob, 0, r).astype(udtype)
        return r.view(a.dtype)
    return apply

def shift_left(x, y, etype=None):
    """the result keeps the element type of x; y only supplies shift amounts"""
    return elementwise('ShiftLeft', _shift('ShiftLeft', True), x, y, etype=etype, promote=False)

def shift_right_logical(x, y, etype=None):
    """right shift filling with zeros regardless of the sign of x"""
    return elementwise('ShiftRightLogical', _shift('ShiftRightLogical', False), x, y, etype=etype, promote=False)


def register_logical_ops():
    _optbl = [
            ['Compare',           'ARITY_2->1', 2, 2, 1, compare,             STATUS_IMPLEMENTED, ['direction', 'etype']],
            ['Or',                'ARITY_2->1', 2, 2, 1, or_,                 STATUS_IMPLEMENTED, ['etype']],
            ['Xor',               'ARITY_2->1', 2, 2, 1, xor,                 STATUS_IMPLEMENTED, ['etype']],
            ['ShiftLeft',         'ARITY_2->1', 2, 2, 1, shift_left,          STATUS_IMPLEMENTED, ['etype']],
            ['ShiftRightLogical', 'ARITY_2->1', 2, 2, 1, shift_right_logical, STATUS_IMPLEMENTED, ['etype']],
            ]

    register_ops('logical', _optbl)
    return
