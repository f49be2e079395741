#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
import pytest

import numpy as np
import mhlort.ops as ops
from mhlort.errors import UnsupportedConversionError, UnsupportedOperationError
from mhlort.utils.types import ElementType

def get_max_test_msg_len(TL): return max([len(x[0]) for x in TL])

test_name  = 'test_eltwiseunary'
test_cases = [
        ("abs int32",    ops.abs,  np.abs,  np.array([-3, 0, 4], dtype=np.int32)),
        ("abs float32",  ops.abs,  np.abs,  np.array([-1.5, 0.0, 2.25], dtype=np.float32)),
        ("cos float64",  ops.cos,  np.cos,  np.linspace(-np.pi, np.pi, 9)),
        ("sin float32",  ops.sin,  np.sin,  np.linspace(-3, 3, 7, dtype=np.float32)),
        ("sqrt float64", ops.sqrt, np.sqrt, np.array([0.0, 1.0, 2.0, 144.0])),
        ("exp float64",  ops.exp,  np.exp,  np.array([-1.0, 0.0, 1.0, 10.0])),
        ("log float64",  ops.log,  np.log,  np.array([0.5, 1.0, np.e, 100.0])),
        ("neg int64",    ops.neg,  np.negative, np.array([-3, 0, 4], dtype=np.int64)),
        ]

@pytest.mark.unit
@pytest.mark.opunit
def test_eltwiseunary():
    msgw = get_max_test_msg_len(test_cases)
    for tno, (tmsg, op, ref_op, X) in enumerate(test_cases):
        Y   = op(X)
        ref = ref_op(X)
        if Y.shape == X.shape and Y.dtype == ref.dtype and np.allclose(Y, ref):
            print(f"TEST[{tno:3d}] {tmsg:{msgw}s} PASS")
        else:
            assert False, f"TEST[{tno:3d}] {tmsg:{msgw}s} FAIL {Y} != {ref}"

@pytest.mark.unit
@pytest.mark.opunit
def test_abs_complex_to_real():
    X = np.array([3+4j, -1j, 1-1j, 0], dtype=np.complex64)
    Y = ops.abs(X)
    assert Y.dtype == np.float32
    expected = np.sqrt(X.real.astype(np.float64)**2 + X.imag.astype(np.float64)**2)
    np.testing.assert_allclose(Y, expected, rtol=1e-6)
    assert ops.abs(np.complex128(-5j)) == 5.0

@pytest.mark.unit
@pytest.mark.opunit
def test_transcendental_domain_errors_do_not_raise():
    assert np.isnan(ops.sqrt(-1.0))
    Y = ops.log(np.array([0.0, -1.0]))
    assert Y[0] == -np.inf and np.isnan(Y[1])
    assert ops.exp(np.float32(1000)) == np.inf
    assert np.isnan(ops.cos(np.inf))

@pytest.mark.unit
@pytest.mark.opunit
def test_transcendental_integer_operands():
    Y = ops.sqrt([4, 9])
    assert Y.dtype == np.float64
    assert Y.tolist() == [2.0, 3.0]

@pytest.mark.unit
@pytest.mark.opunit
def test_neg():
    assert ops.neg(np.array([-128, 5], dtype=np.int8)).tolist() == [-128, -5]
    assert ops.neg(2.5) == -2.5
    with pytest.raises(UnsupportedOperationError):
        ops.neg([True, False])

@pytest.mark.unit
@pytest.mark.opunit
def test_is_finite():
    Y = ops.is_finite(np.array([1.0, np.inf, -np.inf, np.nan, 0.0], dtype=np.float32))
    assert Y.dtype == np.bool_
    assert Y.tolist() == [True, False, False, False, True]
    assert ops.is_finite(np.array([1, 2], dtype=np.int32)).tolist() == [True, True]

@pytest.mark.unit
@pytest.mark.opunit
def test_convert():
    assert ops.convert([1.9, -1.9, 2.5], 'i32').tolist() == [1, -1, 2]
    assert ops.convert([1.9, -1.9], 'i32').dtype == np.int32
    assert ops.convert(np.array([300, -1], dtype=np.int32), 'ui8').tolist() == [44, 255]
    assert ops.convert([0, 3, -1], ElementType.PRED).tolist() == [False, True, True]
    assert ops.convert(np.array([1.5+2j]), 'f32').tolist() == [1.5]
    assert ops.convert(7, 'f64') == 7.0
    assert ops.convert(7, 'f64').dtype == np.float64

@pytest.mark.unit
@pytest.mark.opunit
def test_bitcast_convert():
    Y = ops.bitcast_convert(np.array([1.0, -2.0], dtype=np.float32), 'i32')
    assert Y.dtype == np.int32
    assert Y.tolist() == [0x3F800000, -0x40000000]
    assert ops.bitcast_convert(np.int8(-1), 'ui8') == 255
    assert ops.bitcast_convert(1.0, 'i64') == 0x3FF0000000000000
    assert ops.bitcast_convert([0x3F800000], 'f32', src_etype='ui32').tolist() == [1.0]

@pytest.mark.unit
@pytest.mark.opunit
def test_bitcast_convert_width_mismatch():
    with pytest.raises(UnsupportedConversionError):
        ops.bitcast_convert(np.array([1.0], dtype=np.float32), 'f64')
    with pytest.raises(UnsupportedConversionError):
        ops.bitcast_convert(np.int8(1), ElementType.PRED)
    with pytest.raises(TypeError):
        ops.bitcast_convert(np.int16(1), 'i32')
