"""
OBJDIST Intake

    names.py  - label / object id from filenames
    reader.py - directory listing, point file reading, object collection
"""

from objdist.intake.names import ObjectName, parse_object_name, tokenize_name
from objdist.intake.reader import list_object_files, load_objects, read_object_file

__all__ = [
    'ObjectName',
    'parse_object_name',
    'tokenize_name',
    'list_object_files',
    'load_objects',
    'read_object_file',
]
