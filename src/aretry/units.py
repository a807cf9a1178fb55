r"""Time unit constants used to scale the retry delay.

Each unit is its length in seconds. The delay between two attempts is
``delay * unit`` seconds, so any positive float works as a custom unit.

Example:
    ```pycon
    >>> from aretry.units import MILLISECOND, SECOND
    >>> 100 * MILLISECOND
    0.1
    >>> 2 * SECOND
    2.0

    ```
"""

from __future__ import annotations

__all__ = ["HOUR", "MICROSECOND", "MILLISECOND", "MINUTE", "NANOSECOND", "SECOND"]

NANOSECOND = 1e-9
MICROSECOND = 1e-6
MILLISECOND = 1e-3
SECOND = 1.0
MINUTE = 60.0
HOUR = 3600.0
