"""Schema store exports."""

from .schema_repository import SchemaStore

__all__ = ["SchemaStore"]
