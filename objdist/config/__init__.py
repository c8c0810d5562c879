"""
OBJDIST Configuration

    defaults.py - fixed default constants (paths, point layout, filename layout)
    loader.py   - RunConfig dataclass and YAML manifest loading
"""

from objdist.config.loader import RunConfig

__all__ = [
    'RunConfig',
]
