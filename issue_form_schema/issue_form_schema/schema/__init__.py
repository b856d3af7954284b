"""Packaged JSON Schemas for issue form documents.

Kept free of model imports so structural checks stay independent of the
SchemaModel implementation.
"""

from .json_schema_loader import clear_cache, get_schema_path, load_schema
