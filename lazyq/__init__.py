r"""
'   __                      ___
'  / /  __ _ _____   _ __ _/ _ \
' / /  / _` |_  / | | |/ _` | | |
'/ /__| (_| |/ /| |_| | (_| | |_|
'\____/\__,_/___|\__, |\__, |\__\
'                |___/    |_|
"""

import logging

# expose the main classes
from .enumerable import Enumerable, IEnumerable

# expose the adaptors
from .extensions.cycle import LazyCycle
from .extensions.extract import Extract
from .extensions.tee import Tee
from .extensions.grouping import GroupBy

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    lazyq,
    Q,
    q,
    # adaptor entry points
    lazy_cycle,
    extract,
    tee,
    group_by
)

# expose the pull contract
from .types import Producer, as_producer

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "IEnumerable",
    "LazyCycle",
    "Extract",
    "Tee",
    "GroupBy",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazyq",
    "Q",
    "q",
    "lazy_cycle",
    "extract",
    "tee",
    "group_by",
    "Producer",
    "as_producer"
]
