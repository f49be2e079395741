#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
"""
Process-wide runtime configuration.

The config is a small pydantic model, loadable from YAML:

    loglevel: INFO
    allow_placeholder_ops: false
    rng:
      bitgen: Philox
      seed: 1234

With `rng.seed` unset (the default) every sampling call draws fresh OS
entropy and results are not reproducible.
"""
from typing import Optional

import numpy as np
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from mhlort.utils.common import parse_yaml, setup_logging

SUPPORTED_BITGENS = ['PCG64', 'PCG64DXSM', 'MT19937', 'Philox', 'SFC64']
LOGLEVELS         = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']


class RngConfig(BaseModel):
    bitgen: str           = Field('PCG64', description='numpy bit generator class')
    seed  : Optional[int] = Field(None, description='fixed seed; None draws fresh entropy per call')

    model_config = {'extra': 'forbid'}

    @field_validator('bitgen')
    @classmethod
    def validate_bitgen(cls, v: str) -> str:
        if v not in SUPPORTED_BITGENS:
            raise ValueError(f"Invalid bit generator '{v}', expected one of {SUPPORTED_BITGENS}")
        return v

    @field_validator('seed')
    @classmethod
    def validate_seed(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError(f"rng seed must be non-negative, got {v}")
        return v


class RuntimeConfig(BaseModel):
    loglevel             : str       = 'WARNING'
    allow_placeholder_ops: bool      = True
    rng                  : RngConfig = Field(default_factory=RngConfig)

    model_config = {'extra': 'forbid'}

    @field_validator('loglevel')
    @classmethod
    def validate_loglevel(cls, v: str) -> str:
        v = v.upper()
        if v not in LOGLEVELS:
            raise ValueError(f"Invalid loglevel '{v}', expected one of {LOGLEVELS}")
        return v


_runtime_config: Optional[RuntimeConfig] = None


def get_runtime_config() -> RuntimeConfig:
    global _runtime_config
    if _runtime_config is None:
        _runtime_config = RuntimeConfig()
    return _runtime_config


def set_runtime_config(cfg: Optional[RuntimeConfig]) -> None:
    """install cfg as the process-wide config; None restores the defaults"""
    global _runtime_config
    _runtime_config = cfg


def load_config(cfgfile) -> RuntimeConfig:
    cfg = RuntimeConfig(**parse_yaml(cfgfile))
    logger.debug('loaded runtime config from {}: {}', cfgfile, cfg)
    return cfg


def apply_config(cfg: RuntimeConfig) -> None:
    set_runtime_config(cfg)
    setup_logging(cfg.loglevel)


def make_rng(cfg: Optional[RuntimeConfig] = None) -> np.random.Generator:
    if cfg is None:
        cfg = get_runtime_config()
    bitgen_cls = getattr(np.random, cfg.rng.bitgen)
    return np.random.Generator(bitgen_cls(cfg.rng.seed))
