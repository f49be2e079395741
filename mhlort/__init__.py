#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
mhlort: runtime op catalog backing code translated from MHLO.

Every IR op maps onto one function that accepts either a single element or a
flattened tensor (1-D sequence) and applies the same per-element rule to both.
"""
from mhlort.errors import (RuntimeOpError, LengthMismatchError, DivisionByZeroError,
                           UnsupportedConversionError, UnsupportedOperationError)
from mhlort.utils.types import ElementType, get_element_type
from mhlort.config import RuntimeConfig, load_config, apply_config, get_runtime_config, set_runtime_config, make_rng
from mhlort import ops

__version__ = '0.1.0'
