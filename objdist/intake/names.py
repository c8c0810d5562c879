"""
OBJDIST Filename Identifier Parser

Object files carry their identifiers in the filename:

    label_1_object_2.txt -> tokens ['label', '1', 'object', '2', 'txt']
                         -> label=1, object_id=2

Unparseable identifiers default to 0 without a diagnostic. The *_ok flags
let callers tell a real 0 from a default.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from objdist.config.defaults import LABEL_TOKEN, NAME_DELIMITERS, OBJECT_TOKEN

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")


@dataclass(frozen=True)
class ObjectName:
    """Identifiers parsed from one filename."""
    label: int
    object_id: int
    label_ok: bool = True
    object_ok: bool = True

    @property
    def ok(self) -> bool:
        return self.label_ok and self.object_ok


def tokenize_name(name: str, delimiters: str = NAME_DELIMITERS) -> List[str]:
    """Split a filename on any delimiter character, dropping empty tokens."""
    return [t for t in re.split(f"[{re.escape(delimiters)}]", name) if t]


def parse_int_token(tokens: List[str], index: int) -> Tuple[int, bool]:
    """
    Parse tokens[index] as a base-10 integer.

    Returns:
        (value, ok) where value is 0 and ok is False on any failure
    """
    if index >= len(tokens):
        return 0, False
    token = tokens[index]
    if not _INT_RE.match(token):
        return 0, False
    return int(token), True


def parse_object_name(name: str) -> ObjectName:
    """
    Derive label and object id from a filename.

    Args:
        name: Bare filename (no directory part)

    Returns:
        ObjectName; failed fields are 0 with their *_ok flag cleared
    """
    tokens = tokenize_name(name)
    logger.debug(f"{name}: tokens {tokens}")

    label, label_ok = parse_int_token(tokens, LABEL_TOKEN)
    object_id, object_ok = parse_int_token(tokens, OBJECT_TOKEN)

    return ObjectName(
        label=label,
        object_id=object_id,
        label_ok=label_ok,
        object_ok=object_ok,
    )
