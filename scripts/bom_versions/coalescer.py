"""Coalesce managed dependency versions into shared properties.

Groups ``<dependencyManagement>`` entries by groupId. A group whose
artifacts all agree on one version shares a single ``version.<groupId>``
property; a group that disagrees gets one ``version.<groupId>.<artifactId>``
property per artifact. Every candidate name goes through a ``NameMapper``
first, so several groups can be merged into one property on purpose, and
merging two different versions into one name is rejected.

Pure in-memory transformation: no file I/O, no printing, and the caller's
dependencies and properties are never mutated.
"""

from dataclasses import replace
from typing import Mapping, Optional, Union

from .errors import (
    DuplicateCoordinateError,
    MissingVersionError,
    UnresolvedCoordinateError,
    VersionConflictError,
)
from .name_mapper import NameMapper
from .pom_models import ManagedPom


def property_reference(name: str) -> str:
    """Return the Maven interpolation token for a property name."""
    return "${" + name + "}"


def set_version(
    properties: dict,
    origins: dict,
    candidate: str,
    mapped_name: str,
    version: str,
) -> None:
    """Assign ``version`` to ``mapped_name``, refusing to overwrite a different value.

    Re-assigning the same value is allowed, which is what lets several
    groups with equal versions share one configured name. A version that
    is already a reference to ``mapped_name`` itself keeps the existing value.

    Args:
        properties: The property table being built (mutated).
        origins: Mapped name → candidate name that first assigned it (mutated).
        candidate: The generated name before mapping, for error reporting.
        mapped_name: The name the version is stored under.
        version: The version value.

    Raises:
        VersionConflictError: ``mapped_name`` already holds a different value.
    """
    known = properties.get(mapped_name)
    if known is not None and version == property_reference(mapped_name):
        # already parameterized by this very property
        origins.setdefault(mapped_name, candidate)
        return
    if known is not None and known != version:
        raise VersionConflictError(
            candidate=candidate,
            mapped_name=mapped_name,
            value=version,
            existing_candidate=origins.get(mapped_name, mapped_name),
            existing_value=known,
        )
    properties[mapped_name] = version
    origins.setdefault(mapped_name, candidate)


def all_same_version(group_id: str, artifact_ids, versions: Mapping[str, str]) -> bool:
    """Check whether every artifact of a group pins the same version."""
    return len({versions[f"{group_id}:{a}"] for a in artifact_ids}) <= 1


def _index(dependencies) -> tuple:
    """Build the groupId → artifactIds and groupId:artifactId → version maps."""
    versions = {}
    artifacts_by_group = {}
    for dep in dependencies:
        if dep.version is None:
            raise MissingVersionError(dep.key)
        known = versions.get(dep.key)
        if known is not None and known != dep.version:
            raise DuplicateCoordinateError(dep.key, known, dep.version)
        versions[dep.key] = dep.version
        artifacts_by_group.setdefault(dep.group_id, set()).add(dep.artifact_id)
    return artifacts_by_group, versions


def transform_dependency_management(
    dependencies: list,
    merged_properties: Union[Mapping[str, str], NameMapper],
    properties: Optional[Mapping[str, str]] = None,
) -> tuple:
    """Rewrite managed dependency versions into property references.

    Args:
        dependencies: Managed dependencies in document order.
        merged_properties: Canonical property name → comma-separated
            regular expressions, or an already built ``NameMapper``.
        properties: Existing properties to augment. Entries already present
            count as prior assignments for conflict detection.

    Returns:
        ``(rewritten, table)`` where ``rewritten`` is a new list of
        dependencies whose versions read ``${<property>}`` and ``table`` is
        a new dict of all properties sorted by name.

    Raises:
        NamePatternError: A configured pattern does not compile.
        VersionConflictError: Two different versions map to one name.
        DuplicateCoordinateError: A coordinate is listed with two versions.
        MissingVersionError: A managed dependency has no version.
        UnresolvedCoordinateError: Internal error; a dependency was left
            without a property name.
    """
    if isinstance(merged_properties, NameMapper):
        name_mapper = merged_properties
    else:
        name_mapper = NameMapper(merged_properties)

    artifacts_by_group, versions = _index(dependencies)
    table = dict(properties or {})
    origins = {}
    property_names = {}  # groupId:artifactId → mapped property name

    for group_id in sorted(artifacts_by_group):
        artifact_ids = sorted(artifacts_by_group[group_id])
        if len(artifact_ids) == 1 or all_same_version(group_id, artifact_ids, versions):
            candidate = f"version.{group_id}"
            mapped_name = name_mapper.map_name(candidate)
            set_version(table, origins, candidate, mapped_name,
                        versions[f"{group_id}:{artifact_ids[0]}"])
            for artifact_id in artifact_ids:
                property_names[f"{group_id}:{artifact_id}"] = mapped_name
        else:
            for artifact_id in artifact_ids:
                key = f"{group_id}:{artifact_id}"
                candidate = f"version.{group_id}.{artifact_id}"
                mapped_name = name_mapper.map_name(candidate)
                set_version(table, origins, candidate, mapped_name, versions[key])
                property_names[key] = mapped_name

    rewritten = []
    for dep in dependencies:
        name = property_names.get(dep.key)
        if name is None:
            raise UnresolvedCoordinateError(f"No version property was assigned to [{dep.key}]")
        rewritten.append(replace(dep, version=property_reference(name)))

    return rewritten, dict(sorted(table.items()))


def transform_pom(pom: ManagedPom, merged_properties) -> ManagedPom:
    """Return a copy of ``pom`` with its dependency management parameterized.

    Args:
        pom: The parsed BOM. Left untouched.
        merged_properties: Name-pattern configuration, as for
            ``transform_dependency_management``.

    Returns:
        A new ManagedPom whose ``dep_management`` versions are property
        references and whose ``properties`` include the assigned versions.
    """
    rewritten, table = transform_dependency_management(
        pom.dep_management, merged_properties, pom.properties
    )
    return replace(pom, properties=table, dep_management=rewritten)
