"""Logging utilities for earclip.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All earclip code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'earclip'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_earclip_root() -> logging.Logger:
    """Ensure the 'earclip' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'earclip' logger.
    """
    root = logging.getLogger(_ROOT_NAME)
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_non_null:
        # Drop the package NullHandler so records are not swallowed
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    if isinstance(resolved, int):
        return resolved
    return default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'earclip' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_earclip_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font cache scans)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'earclip' namespace.

    Without an explicit level the logger is left at NOTSET so it inherits
    whatever configure_logging() set on the 'earclip' parent. Handlers are
    only installed by configure_logging(); a library import stays silent.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
