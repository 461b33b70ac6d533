"""
defkit - defensive programming helpers

Argument validation, quiet resource closing, properties loading and
separator-aware string assembly shared across projects.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
