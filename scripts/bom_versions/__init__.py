"""Rewrite a BOM's dependency management into shared version properties."""

from .coalescer import transform_dependency_management, transform_pom
from .name_mapper import NameMapper
from .pom_models import Dependency, ManagedPom

__all__ = ["transform_dependency_management", "transform_pom", "NameMapper", "Dependency", "ManagedPom"]
