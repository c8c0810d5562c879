"""
OBJDIST Intake Reader - Object Directory Ingestion

Lists an object directory, derives identifiers from each filename, reads
each point file and reduces it to a centroid.

Failures to list the directory or open a file are fatal (InputError).
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from objdist.config.loader import RunConfig
from objdist.core.types import ObjectRecord
from objdist.engines.centroid import compute_centroid
from objdist.errors import InputError
from objdist.intake.names import ObjectName, parse_object_name

logger = logging.getLogger(__name__)


def list_object_files(input_dir: Union[str, Path]) -> List[Path]:
    """
    List every entry of input_dir, non-recursively, sorted by name.

    Raises:
        InputError: if the directory cannot be read
    """
    input_dir = Path(input_dir)
    try:
        entries = list(input_dir.iterdir())
    except OSError as e:
        raise InputError(f"Unable to read input directory {input_dir}: {e}", internal_error=e) from e

    return sorted(entries, key=lambda p: p.name)


def read_object_file(path: Union[str, Path]) -> str:
    """
    Read one point file as text, byte for byte.

    Line endings are left untouched and undecodable bytes are carried as
    surrogate escapes, so they only fail the field they sit in.

    Raises:
        InputError: if the file cannot be opened or read
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise InputError(f"Input file does not exist : {e}", internal_error=e) from e
    return data.decode("utf-8", errors="surrogateescape")


def load_object(path: Path, *, offset: int, name: Optional[ObjectName] = None) -> ObjectRecord:
    """Build the ObjectRecord for one point file."""
    if name is None:
        name = parse_object_name(path.name)
    centroid = compute_centroid(read_object_file(path), offset=offset)
    return ObjectRecord(
        label=name.label,
        object_id=name.object_id,
        centroid=centroid,
        source=path.name,
    )


def load_objects(config: Optional[RunConfig] = None) -> List[ObjectRecord]:
    """
    Load the object collection for a run.

    Args:
        config: Run configuration (defaults when omitted)

    Returns:
        ObjectRecords in directory enumeration order. Duplicate
        identifiers are kept as separate entries.
    """
    config = config or RunConfig()
    objects = []

    for path in list_object_files(config.input_dir):
        name = parse_object_name(path.name)
        if config.strict_names and not name.ok:
            logger.warning(f"Skipping {path.name}: label/object id not found in filename")
            continue

        obj = load_object(path, offset=config.point_offset, name=name)
        logger.debug(f"{path.name}: label={obj.label} object={obj.object_id}")
        objects.append(obj)

    logger.info(f"Loaded {len(objects)} objects from {config.input_dir}")
    return objects
