"""Static agronomic reference tables.

Importing this package builds every table once; nothing here is mutated at
runtime. Most callers want the indexed view::

    from ag360.reference import get_catalog
"""

from ag360.reference.catalog import ReferenceCatalog, get_catalog
from ag360.reference.costs import DEFAULT_INPUT_COSTS

__all__ = [
    "DEFAULT_INPUT_COSTS",
    "ReferenceCatalog",
    "get_catalog",
]
