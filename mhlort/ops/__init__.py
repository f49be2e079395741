#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
from .op import RtOp
from .desc import initialize_op_desc
from .desc.registry import get_opdesc_registry
from .desc.math import (abs, bitcast_convert, convert, cos, sin, sqrt, exp, log, is_finite, neg,
                        add, sub, mul, div, max, min, pow)
from .desc.logical import ComparisonDirection, compare, or_, xor, shift_left, shift_right_logical
from .desc.tensor import broadcast_in_dim, concatenate, reshape, select
from .desc.generator import RngAlgorithm, rng_uniform, rng_bit_generator

initialize_op_desc()


def get_opdesc(opname):
    return get_opdesc_registry().get_opdesc(opname)

def get_op_func(opname):
    return get_opdesc_registry().get_op_func(opname)

def is_placeholder(opname) -> bool:
    return get_opdesc_registry().is_placeholder(opname)

def list_ops(group=None) -> list[str]:
    return get_opdesc_registry().list_ops(group)
