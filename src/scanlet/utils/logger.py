"""Logger lookup for Scanlet modules.

Every Scanlet logger lives under the ``scanlet`` namespace, so an
application can tune the whole library with one call:

    >>> import logging
    >>> logging.getLogger("scanlet").setLevel(logging.DEBUG)

What gets logged:
- ``scanlet.lexer.core``: DEBUG per ILLEGAL character and a per-scan summary
- ``scanlet.diagnostics``: WARNING per ILLEGAL token dropped by the SKIP policy

No handlers are installed here.
"""

from __future__ import annotations

import logging

_ROOT = "scanlet"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, placed under ``scanlet.``.

    Module names from inside the package (``scanlet.lexer.core``) are used
    as-is; any other name is nested below the package logger.

    Example:
        >>> get_logger("scanlet.diagnostics").name
        'scanlet.diagnostics'
        >>> get_logger("driver").name
        'scanlet.driver'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
