#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Unary and binary arithmetic elementwise ops.

Functions here intentionally carry the IR op names (abs, min, max, pow), so
the numpy equivalents are always used inside this module.
"""
import numpy as np

from mhlort.errors import DivisionByZeroError, UnsupportedConversionError, UnsupportedOperationError
from mhlort.ops.desc.helpers import elementwise
from mhlort.ops.desc.registry import STATUS_IMPLEMENTED, register_ops
from mhlort.utils.types import etype_of, get_element_type


def _float_domain(fn):
    """integer operands are evaluated in float64; IEEE754 specials never raise"""
    def apply(a):
        if a.dtype.kind not in 'fc':
            a = a.astype(np.float64)
        with np.errstate(all='ignore'):
            return fn(a)
    return apply

def _ignore_fp_errors(fn):
    def apply(*arrs):
        with np.errstate(all='ignore'):
            return fn(*arrs)
    return apply

#############################################################################
# unary
#############################################################################

def abs(x, etype=None):
    """magnitude; complex operands yield their real-valued modulus"""
    return elementwise('Abs', _ignore_fp_errors(np.abs), x, etype=etype)

def bitcast_convert(x, etype, src_etype=None):
    """
    Reinterpret the bits of x as `etype`. The source type is x's numpy dtype
    (or `src_etype`); python ints default to i64, python floats to f64.
    """
    dst = get_element_type(etype)

    def apply(a):
        src = etype_of(a)
        if src.bitwidth != dst.bitwidth:
            raise UnsupportedConversionError('BitcastConvert', src, dst)
        return a.view(dst.np_dtype)
    return elementwise('BitcastConvert', apply, x, etype=src_etype)

def convert(x, etype, src_etype=None):
    """
    Numeric cast with the target type's native rules: float->int truncates
    toward zero, integer narrowing wraps, complex->real drops the imaginary
    part, anything->pred is `x != 0`.
    """
    dst = get_element_type(etype)

    def apply(a):
        if dst.is_pred:
            return a != 0
        if a.dtype.kind == 'c' and not dst.is_complex:
            a = a.real
        with np.errstate(all='ignore'):
            return a.astype(dst.np_dtype)
    return elementwise('Convert', apply, x, etype=src_etype)

def cos(x, etype=None):
    return elementwise('Cos', _float_domain(np.cos), x, etype=etype)

def sin(x, etype=None):
    return elementwise('Sin', _float_domain(np.sin), x, etype=etype)

def sqrt(x, etype=None):
    """sqrt of a negative real is NaN"""
    return elementwise('Sqrt', _float_domain(np.sqrt), x, etype=etype)

def exp(x, etype=None):
    return elementwise('Exp', _float_domain(np.exp), x, etype=etype)

def log(x, etype=None):
    """natural log; log(0) = -inf, log(<0) = NaN"""
    return elementwise('Log', _float_domain(np.log), x, etype=etype)

def is_finite(x, etype=None):
    return elementwise('IsFinite', np.isfinite, x, etype=etype)

def neg(x, etype=None):
    """negation; integer negation wraps, so neg(INT_MIN) == INT_MIN"""
    def apply(a):
        if a.dtype.kind == 'b':
            raise UnsupportedOperationError('Neg', f"not defined for element type {etype_of(a)}")
        with np.errstate(all='ignore'):
            return np.negative(a)
    return elementwise('Neg', apply, x, etype=etype)

#############################################################################
# binary
#############################################################################

def add(x, y, etype=None):
    return elementwise('Add', _ignore_fp_errors(np.add), x, y, etype=etype)

def sub(x, y, etype=None):
    return elementwise('Sub', _ignore_fp_errors(np.subtract), x, y, etype=etype)

def mul(x, y, etype=None):
    return elementwise('Mul', _ignore_fp_errors(np.multiply), x, y, etype=etype)

def _div(a, b):
    if a.dtype.kind in 'iu':
        zeros = np.flatnonzero(b == 0)
        if zeros.size > 0:
            raise DivisionByZeroError('Div', int(zeros[0]))
        with np.errstate(all='ignore'):
            q = np.floor_divide(a, b)
            # floor -> truncation toward zero for inexact quotients of mixed sign
            fix = (np.remainder(a, b) != 0) & ((a < 0) != (b < 0))
            return (q + fix).astype(a.dtype)
    with np.errstate(all='ignore'):
        return np.true_divide(a, b).astype(a.dtype, copy=False)

def div(x, y, etype=None):
    """
    Integer division truncates toward zero and raises DivisionByZeroError on a
    zero divisor; floating division follows IEEE754 (+-inf, NaN).
    """
    return elementwise('Div', _div, x, y, etype=etype)

def max(x, y, etype=None):
    """
    `y if x < y else x`. With a NaN operand the result depends on operand
    order (max(nan, 1) is nan, max(1, nan) is 1).
    """
    return elementwise('Max', lambda a, b: np.where(a < b, b, a), x, y, etype=etype)

def min(x, y, etype=None):
    """`y if y < x else x`; NaN handling is order dependent as for max."""
    return elementwise('Min', lambda a, b: np.where(b < a, b, a), x, y, etype=etype)

def _pow(a, b):
    if a.dtype.kind in 'iu':
        neg_exp = b < 0
        with np.errstate(all='ignore'):
            r = np.power(a, np.where(neg_exp, 0, b).astype(b.dtype))
        if a.dtype.kind == 'i' and neg_exp.any():
            # 1 for base 1, +-1 for base -1 by parity, 0 otherwise
            m1 = np.where(np.remainder(b, 2) == 0, 1, -1)
            r  = np.where(neg_exp, np.where(a == 1, 1, np.where(a == -1, m1, 0)), r)
        return r.astype(a.dtype)
    with np.errstate(all='ignore'):
        return np.power(a, b)

def pow(x, y, etype=None):
    return elementwise('Pow', _pow, x, y, etype=etype)


def register_math_ops():
    _unary_optbl = [
            ['Abs',            'ARITY_1->1', 1, 1, 1, abs,             STATUS_IMPLEMENTED, ['etype']],
            ['BitcastConvert', 'ARITY_1->1', 1, 1, 1, bitcast_convert, STATUS_IMPLEMENTED, ['etype', 'src_etype']],
            ['Convert',        'ARITY_1->1', 1, 1, 1, convert,         STATUS_IMPLEMENTED, ['etype', 'src_etype']],
            ['Cos',            'ARITY_1->1', 1, 1, 1, cos,             STATUS_IMPLEMENTED, ['etype']],
            ['Sin',            'ARITY_1->1', 1, 1, 1, sin,             STATUS_IMPLEMENTED, ['etype']],
            ['Sqrt',           'ARITY_1->1', 1, 1, 1, sqrt,            STATUS_IMPLEMENTED, ['etype']],
            ['Exp',            'ARITY_1->1', 1, 1, 1, exp,             STATUS_IMPLEMENTED, ['etype']],
            ['Log',            'ARITY_1->1', 1, 1, 1, log,             STATUS_IMPLEMENTED, ['etype']],
            ['IsFinite',       'ARITY_1->1', 1, 1, 1, is_finite,       STATUS_IMPLEMENTED, ['etype']],
            ['Neg',            'ARITY_1->1', 1, 1, 1, neg,             STATUS_IMPLEMENTED, ['etype']],
            ]

    _binary_optbl = [
            ['Add', 'ARITY_2->1', 2, 2, 1, add, STATUS_IMPLEMENTED, ['etype']],
            ['Sub', 'ARITY_2->1', 2, 2, 1, sub, STATUS_IMPLEMENTED, ['etype']],
            ['Mul', 'ARITY_2->1', 2, 2, 1, mul, STATUS_IMPLEMENTED, ['etype']],
            ['Div', 'ARITY_2->1', 2, 2, 1, div, STATUS_IMPLEMENTED, ['etype']],
            ['Max', 'ARITY_2->1', 2, 2, 1, max, STATUS_IMPLEMENTED, ['etype']],
            ['Min', 'ARITY_2->1', 2, 2, 1, min, STATUS_IMPLEMENTED, ['etype']],
            ['Pow', 'ARITY_2->1', 2, 2, 1, pow, STATUS_IMPLEMENTED, ['etype']],
            ]

    register_ops('math', _unary_optbl + _binary_optbl)
    return
