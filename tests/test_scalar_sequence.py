#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Scalar and sequence forms of every elementwise op apply the same rule, and
sequence forms never mutate or alias their operands.
"""
import pytest

import numpy as np
import mhlort.ops as ops
from mhlort.ops.desc.helpers import as_sequence, is_sequence

UNARY = [ops.abs, ops.cos, ops.sin, ops.sqrt, ops.exp, ops.log, ops.neg, ops.is_finite]
BINARY = [ops.add, ops.sub, ops.mul, ops.div, ops.min, ops.max, ops.pow]

X = np.array([0.5, 2.0, 3.5, 9.0], dtype=np.float32)
Y = np.array([1.5, 0.25, 3.5, -2.0], dtype=np.float32)

@pytest.mark.unit
def test_is_sequence():
    assert is_sequence([1, 2])
    assert is_sequence((1,))
    assert is_sequence(np.zeros(3))
    assert is_sequence([])
    assert not is_sequence(1.0)
    assert not is_sequence(np.float32(1))
    assert not is_sequence(np.array(3))

@pytest.mark.unit
def test_as_sequence_copies():
    x = np.arange(4)
    y = as_sequence(x)
    y[0] = 10
    assert x[0] == 0
    assert as_sequence(5, 'i16').dtype == np.int16

@pytest.mark.unit
def test_unary_scalar_matches_sequence():
    for op in UNARY:
        seq = op(X)
        for i, x in enumerate(X):
            s = op(x)
            assert not is_sequence(s), f"{op.__name__} scalar form returned a sequence"
            assert s.dtype == seq.dtype
            np.testing.assert_array_equal(s, seq[i])

@pytest.mark.unit
def test_binary_scalar_matches_sequence():
    for op in BINARY:
        seq = op(X, Y)
        assert len(seq) == len(X)
        for i in range(len(X)):
            np.testing.assert_array_equal(op(X[i], Y[i]), seq[i])

@pytest.mark.unit
def test_operands_not_mutated():
    x0, y0 = X.copy(), Y.copy()
    for op in BINARY:
        op(X, Y)
    for op in UNARY:
        op(X)
    ops.select([True, False, True, False], X, Y)
    ops.compare(X, Y, 'LT')
    assert np.array_equal(X, x0) and np.array_equal(Y, y0)
