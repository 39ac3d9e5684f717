"""Schema contracts for configuration and scan output."""
from .validate import load_catalog, schema_path, validate

__all__ = ["load_catalog", "schema_path", "validate"]
