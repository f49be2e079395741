#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Failure kinds raised by the runtime op catalog.

Each class also derives from the closest builtin exception so that callers
catching ValueError / ZeroDivisionError / TypeError keep working.
"""


class RuntimeOpError(Exception):
    """Base class for every failure raised by an mhlort operation."""

    def __init__(self, opname: str, msg: str):
        self.opname = opname
        super().__init__(f"{opname}: {msg}")


class LengthMismatchError(RuntimeOpError, ValueError):
    """Sequence operands of an op do not have the required (equal) length."""

    def __init__(self, opname: str, lengths):
        self.lengths = list(lengths)
        super().__init__(opname, f"operand length mismatch {self.lengths}")


class DivisionByZeroError(RuntimeOpError, ZeroDivisionError):
    """Integer division with a zero divisor element."""

    def __init__(self, opname: str, index=None):
        self.index = index
        where = '' if index is None else f" at index {index}"
        super().__init__(opname, f"integer division by zero{where}")


class UnsupportedConversionError(RuntimeOpError, TypeError):
    """Bit reinterpretation between element types of different bit width."""

    def __init__(self, opname: str, src, dst):
        self.src = src
        self.dst = dst
        super().__init__(opname, f"cannot reinterpret {src} as {dst}")


class UnsupportedOperationError(RuntimeOpError, NotImplementedError):
    """Op (or predicate) not available for the requested element type or mode."""
