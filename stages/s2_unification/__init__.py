"""Stage 2: Schema Unification"""

from .unifier import SchemaUnifier

__all__ = ["SchemaUnifier"]
