# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scoped overrides for process environment variables.

The helpers mutate process-wide state. Overlapping use from several threads is
unsafe; callers must serialise access themselves.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from typing import ParamSpec, TypeVar

LOGGER = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

EnvOverrides = Mapping[str, str | None]


@contextmanager
def with_environment(
    overrides: EnvOverrides,
    *,
    environ: MutableMapping[str, str] | None = None,
) -> Iterator[MutableMapping[str, str]]:
    """Apply ``overrides`` for the duration of the ``with`` block.

    A ``None`` value removes the variable. On exit, including exits caused by
    an exception, every touched variable regains its previous value and
    variables that were previously unset are removed again.

    Args:
        overrides: Variable names mapped to their temporary values.
        environ: Mapping to mutate; defaults to :data:`os.environ`.

    Yields:
        MutableMapping[str, str]: The mapping carrying the overrides.
    """

    env = environ if environ is not None else os.environ
    previous: dict[str, str | None] = {}
    try:
        for key, value in overrides.items():
            name = str(key)
            previous.setdefault(name, env.get(name))
            _assign(env, name, value)
        LOGGER.debug("applied environment overrides: %s", sorted(previous))
        yield env
    finally:
        for name, value in previous.items():
            _assign(env, name, value)
        LOGGER.debug("restored environment variables: %s", sorted(previous))


def call_with_environment(
    overrides: EnvOverrides,
    func: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> R:
    """Run ``func`` with ``overrides`` applied to :data:`os.environ`.

    Args:
        overrides: Variable names mapped to their temporary values.
        func: Unit of work to execute.
        *args: Positional arguments forwarded to ``func``.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        R: Whatever ``func`` returns.
    """

    with with_environment(overrides):
        return func(*args, **kwargs)


def _assign(env: MutableMapping[str, str], name: str, value: str | None) -> None:
    if value is None:
        env.pop(name, None)
    else:
        env[name] = value


__all__ = ["EnvOverrides", "call_with_environment", "with_environment"]
