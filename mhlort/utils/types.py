#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from functools import lru_cache
from typing import Union

import numpy as np


class ElementType(Enum):
    """
    Element types understood by the runtime; value is the IR spelling.
    """
    PRED = 'i1'
    I8   = 'i8'
    I16  = 'i16'
    I32  = 'i32'
    I64  = 'i64'
    UI8  = 'ui8'
    UI16 = 'ui16'
    UI32 = 'ui32'
    UI64 = 'ui64'
    F16  = 'f16'
    F32  = 'f32'
    F64  = 'f64'
    C64  = 'complex<f32>'
    C128 = 'complex<f64>'

    @property
    def np_dtype(self) -> np.dtype:
        return np.dtype(ETYPE2NP[self])

    @property
    def bitwidth(self) -> int:
        return 1 if self == ElementType.PRED else self.np_dtype.itemsize * 8

    @property
    def is_pred(self) -> bool:
        return self == ElementType.PRED

    @property
    def is_integral(self) -> bool:
        return self.np_dtype.kind in 'iu'

    @property
    def is_unsigned(self) -> bool:
        return self.np_dtype.kind == 'u'

    @property
    def is_floating(self) -> bool:
        return self.np_dtype.kind == 'f'

    @property
    def is_complex(self) -> bool:
        return self.np_dtype.kind == 'c'

    def __str__(self):
        return self.value


ETYPE2NP = {
    ElementType.PRED: np.bool_,
    ElementType.I8  : np.int8,
    ElementType.I16 : np.int16,
    ElementType.I32 : np.int32,
    ElementType.I64 : np.int64,
    ElementType.UI8 : np.uint8,
    ElementType.UI16: np.uint16,
    ElementType.UI32: np.uint32,
    ElementType.UI64: np.uint64,
    ElementType.F16 : np.float16,
    ElementType.F32 : np.float32,
    ElementType.F64 : np.float64,
    ElementType.C64 : np.complex64,
    ElementType.C128: np.complex128,
}

# alternate spellings accepted by get_element_type, all lower-case
ETYPE_ALIASES = {
    'pred'      : ElementType.PRED,
    'bool'      : ElementType.PRED,
    'si8'       : ElementType.I8,
    'si16'      : ElementType.I16,
    'si32'      : ElementType.I32,
    'si64'      : ElementType.I64,
    'fp16'      : ElementType.F16,
    'fp32'      : ElementType.F32,
    'fp64'      : ElementType.F64,
    'c64'       : ElementType.C64,
    'c128'      : ElementType.C128,
}

ElementTypeLike = Union[ElementType, str, np.dtype, type]


@lru_cache(maxsize=None)
def _etype_from_np(dt: np.dtype) -> ElementType:
    for etype, np_type in ETYPE2NP.items():
        if np.dtype(np_type) == dt:
            return etype
    raise ValueError(f"Invalid element type: numpy dtype {dt} has no runtime equivalent")


def get_element_type(x: ElementTypeLike) -> ElementType:
    """
    Resolve an IR spelling ('f32', 'ui8', 'complex<f64>'), an alias ('fp32',
    'bool'), a numpy name ('float32') or a numpy dtype to an ElementType.
    """
    if isinstance(x, ElementType):
        return x
    if isinstance(x, str):
        key = x.strip().lower()
        if not key:
            raise ValueError("Invalid element type: ''")
        for etype in ElementType:
            if etype.value == key:
                return etype
        if key in ETYPE_ALIASES:
            return ETYPE_ALIASES[key]
        try:
            dt = np.dtype(key)
        except TypeError:
            raise ValueError(f"Invalid element type: '{x}'")
        return _etype_from_np(dt)
    try:
        dt = np.dtype(x)
    except TypeError:
        raise ValueError(f"Invalid element type: {x!r}")
    return _etype_from_np(dt)


def etype_of(value) -> ElementType:
    """Element type of a numpy scalar/array (python numbers go through numpy's default promotion)."""
    return _etype_from_np(np.asarray(value).dtype)


def get_bpe(etype: ElementTypeLike) -> int:
    """bytes per element"""
    return get_element_type(etype).np_dtype.itemsize


def type_min(etype: ElementTypeLike):
    """
    Lowest value of an integral type; for floating types the smallest positive
    normal number (numeric_limits<T>::min semantics).
    """
    et = get_element_type(etype)
    if et.is_pred:
        return np.bool_(False)
    if et.is_integral:
        return np.iinfo(et.np_dtype).min
    if et.is_floating:
        return np.finfo(et.np_dtype).tiny
    raise ValueError(f"type_min undefined for element type {et}")


def type_max(etype: ElementTypeLike):
    et = get_element_type(etype)
    if et.is_pred:
        return np.bool_(True)
    if et.is_integral:
        return np.iinfo(et.np_dtype).max
    if et.is_floating:
        return np.finfo(et.np_dtype).max
    raise ValueError(f"type_max undefined for element type {et}")
