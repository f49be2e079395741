#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from typing import Optional

STATUS_IMPLEMENTED = 'IMPLEMENTED'
STATUS_PLACEHOLDER = 'PLACEHOLDER'
VARIADIC_MAX       = 2147483647


class RtOpDescRegistry:
    def __init__(self):
        self._registry = {}
        return

    def register(self, **kwargs):
        opname = kwargs['opname']
        assert kwargs['status'] in (STATUS_IMPLEMENTED, STATUS_PLACEHOLDER), \
                f"illegal status {kwargs['status']} for {opname}"
        self._registry[opname] = kwargs
        return

    def get_opdesc(self, opname):
        try:
            return self._registry[opname]
        except KeyError:
            raise KeyError(f"{opname} not supported in RtOpDescRegistry!!")

    def get_op_func(self, opname):
        return self.get_opdesc(opname)['impl_func']

    def is_placeholder(self, opname) -> bool:
        return self.get_opdesc(opname)['status'] == STATUS_PLACEHOLDER

    def list_ops(self, group: Optional[str] = None) -> list[str]:
        return sorted(k for k, v in self._registry.items() if group is None or v['group'] == group)

    def __contains__(self, opname):
        return opname in self._registry

    def __len__(self):
        return len(self._registry)

# Global registry instance
_global_registry: Optional[RtOpDescRegistry] = None

def get_opdesc_registry() -> RtOpDescRegistry:
    global _global_registry
    if _global_registry is None:
        _global_registry = RtOpDescRegistry()
    return _global_registry

def register_ops(group, optbl):
    op_fields = [
            'opname', 'arity_class', 'min_input', 'max_input', 'num_output',
            'impl_func', 'status', 'attrs',
            ]
    for rec in optbl:
        assert len(rec) == len(op_fields), f"malformed op table row {rec}"
        cfg = {f: v for f,v in zip(op_fields, rec)}
        cfg['group'] = group
        get_opdesc_registry().register(**cfg)
