"""
Small shared helpers for gplaces.
"""

import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)


def formatInvariantNumber(value: Union[int, float]) -> str:
    """Format number the way the Places API expects it, dood!

    Dot as decimal separator, no grouping, no exponent and no trailing ``.0``
    for integral values, so ``100.0`` becomes ``"100"`` and ``12.5`` stays
    ``"12.5"``. Python float formatting does not depend on the host locale.

    Args:
        value: Number to format

    Returns:
        Formatted number string
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")

    if isinstance(value, int):
        return str(value)

    if value.is_integer():
        return str(int(value))

    ret = repr(float(value))
    if "e" in ret or "E" in ret:
        # Shortest round-trip digits, but positional
        ret = format(Decimal(ret), "f")
    return ret


def load_dotenv(path: str = ".env", populateEnv: bool = True) -> Dict[str, str]:
    """
    Simple dotenv file loader.
    Just read file line by line and put key-value pairs into dictionary.
    Missing file is not an error: empty dict is returned.

    Args:
        path: Path to .env file (default ".env")
        populateEnv: Whether to populate environment variables (default True)

    Returns:
        Dictionary of key-value pairs from .env file
    """
    ret: Dict[str, str] = {}
    envPath = Path(path)
    if not envPath.is_file():
        logger.debug(f"No dotenv file at {path}, skipping")
        return ret

    with open(envPath, "rt") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if sep:
                ret[key.strip()] = value.strip().strip('"')

    if populateEnv:
        for k, v in ret.items():
            os.environ[k] = v
    return ret
