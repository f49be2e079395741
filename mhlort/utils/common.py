#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import sys
from functools import reduce
from typing import Any, Iterable

import yaml
from loguru import logger

LOG_FORMAT = '<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>'


def setup_logging(level: str = 'WARNING', sink=sys.stderr) -> None:
    logger.remove()
    logger.add(sink, format=LOG_FORMAT, level=level.upper())


def parse_yaml(cfgfile):
    with open(cfgfile) as f:
        cfg = yaml.safe_load(f)
    return {} if cfg is None else cfg


def prod_ints(dims: Iterable[int]) -> int:
    """product of a list of ints, 1 for an empty list"""
    return reduce(lambda a, b: a * b, [int(d) for d in dims], 1)


def check_known_args(ctx: str, args: dict[str, Any], default_args: dict[str, Any]) -> None:
    unknown = [k for k in args if k not in default_args]
    if unknown:
        raise ValueError(f"{ctx}: unknown argument(s) {unknown}, expected one of {list(default_args)}")
