#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Union

import numpy as np

from .desc.registry import get_opdesc_registry
import mhlort.utils.common as common


class RtOp:
    """
    An IR op bound to its attributes, e.g.

        RtOp({'name': 'cmp0', 'optype': 'Compare', 'attrs': {'direction': 'LT'}})(x, y)

    Operands are passed positionally when the op is called, attributes are
    forwarded to the implementation as keyword arguments.
    """
    def __init__(self, cfg):
        self.name    = cfg['name']
        self.optype  = cfg['optype']
        self.attrs   = cfg.get('attrs', {})
        self.inList  = cfg.get('inList', [])
        self.outList = cfg.get('outList', [])
        self.docstr  = cfg.get('docstr', "")

        self.opdesc = get_opdesc_registry().get_opdesc(self.optype)
        self.check_known_args(self.attrs)

        #set on every call
        self.exec_stats: Union[dict, None] = None

    def __str__(self):
        s  = f"RtOp({self.name}) optype={self.optype}, group={self.opdesc['group']}, "
        s += f"status={self.opdesc['status']}, attrs={self.attrs}, "
        s += f"inList={self.inList}, "
        s += f"outList={self.outList}"
        return s

    def check_known_args(self, args: dict[str, Any]) -> None:
        common.check_known_args(str(self), args=args,
                                default_args=dict.fromkeys(self.opdesc['attrs']))

    @property
    def is_placeholder(self) -> bool:
        return get_opdesc_registry().is_placeholder(self.optype)

    def __call__(self, *inputs):
        in_range = range(self.opdesc['min_input'], self.opdesc['max_input']+1)
        assert len(inputs) in in_range, f"#inputs for {self} operator should be in {in_range}, is {len(inputs)}"

        result  = self.opdesc['impl_func'](*inputs, **self.attrs)
        outputs = result if self.opdesc['num_output'] > 1 else (result,)
        assert len(outputs) == self.opdesc['num_output'], \
                f"#outputs for {self} operator should be {self.opdesc['num_output']}, is {len(outputs)}"

        self.exec_stats = {
                'inElems' : int(sum(np.size(x) for x in inputs)),
                'outElems': int(sum(np.size(x) for x in outputs)),
                }
        return result
