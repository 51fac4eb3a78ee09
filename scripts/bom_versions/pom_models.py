"""Maven data model classes.

Pure data structures for the parts of a POM the version coalescer reads
and writes. No behavior or imports from other bom_versions modules.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Dependency:
    """A ``<dependency>`` entry from ``<dependencyManagement>``.

    Only ``version`` is ever rewritten; the remaining fields are carried
    through to the generated BOM unchanged.

    Attributes:
        group_id: Maven groupId (e.g. ``org.jboss.logging``).
        artifact_id: Maven artifactId (e.g. ``jboss-logging``).
        version: Pinned version string, or a ``${...}`` property reference.
        scope: Maven scope; ``None`` when the POM does not declare one.
        classifier: Optional classifier (e.g. ``tests``).
        dep_type: Optional packaging type (e.g. ``pom`` for BOM imports).
        optional: Whether the entry is marked ``<optional>true</optional>``.
        exclusions: List of ``(groupId, artifactId)`` tuples to exclude.
    """
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    scope: Optional[str] = None
    classifier: Optional[str] = None
    dep_type: Optional[str] = None
    optional: bool = False
    exclusions: list = field(default_factory=list)

    @property
    def key(self) -> str:
        """The ``groupId:artifactId`` grouping key."""
        return f"{self.group_id}:{self.artifact_id}"


@dataclass
class ManagedPom:
    """Parse result for a BOM-style ``pom.xml``.

    Attributes:
        group_id: Project groupId (inherited from parent if not declared).
        artifact_id: Project artifactId.
        version: Project version (inherited from parent if not declared).
        name: Human-readable ``<name>`` element.
        parent_group_id: Parent POM groupId, if any.
        parent_artifact_id: Parent POM artifactId, if any.
        parent_version: Parent POM version, if any.
        properties: ``<properties>`` as an ordered dict.
        dep_management: ``<dependencyManagement>`` dependencies in document order.
    """
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    name: Optional[str] = None
    parent_group_id: Optional[str] = None
    parent_artifact_id: Optional[str] = None
    parent_version: Optional[str] = None
    properties: dict = field(default_factory=dict)
    dep_management: list = field(default_factory=list)
