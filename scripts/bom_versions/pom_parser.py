"""Maven POM parsing, XML helpers, and property resolution.

Reads the parts of a BOM the coalescer needs: project coordinates,
``<properties>`` and ``<dependencyManagement>``. Works on XML text; the
caller is responsible for reading the file.
"""

import re
import sys
import xml.etree.ElementTree as ET
from dataclasses import replace
from typing import Optional

from .errors import PomParseError
from .pom_models import Dependency, ManagedPom

# XML namespace used by Maven POM files (POM model version 4.0.0).
NS = {"m": "http://maven.apache.org/POM/4.0.0"}

_REFERENCE = re.compile(r"^\$\{(.+?)\}$")


def _find(el, tag, ns=NS):
    """Find a direct child XML element, trying with and without the Maven namespace.

    Args:
        el: Parent XML element to search within.
        tag: Tag name to look for (without namespace prefix).
        ns: Namespace mapping (defaults to Maven POM 4.0.0).

    Returns:
        The first matching child element, or ``None`` if not found.
    """
    result = el.find(f"m:{tag}", ns)
    if result is not None:
        return result
    return el.find(tag)


def _findall(el, tag, ns=NS):
    return list(el.findall(f"m:{tag}", ns)) + list(el.findall(tag))


def _text(el, tag, ns=NS):
    """Extract the stripped text of a child element, or ``None`` if absent or empty."""
    child = _find(el, tag, ns)
    if child is not None and child.text:
        return child.text.strip()
    return None


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _parse_dependency(dep_el) -> Dependency:
    """Parse a ``<dependency>`` XML element into a Dependency dataclass.

    Extracts scope, type, classifier, the optional flag, and any
    ``<exclusions>`` children.
    """
    optional_text = _text(dep_el, "optional")
    exclusions = []
    excl_el = _find(dep_el, "exclusions")
    if excl_el is not None:
        for ex in _findall(excl_el, "exclusion"):
            eg = _text(ex, "groupId")
            ea = _text(ex, "artifactId")
            if eg and ea:
                exclusions.append((eg, ea))
    return Dependency(
        group_id=_text(dep_el, "groupId") or "",
        artifact_id=_text(dep_el, "artifactId") or "",
        version=_text(dep_el, "version"),
        scope=_text(dep_el, "scope"),
        classifier=_text(dep_el, "classifier"),
        dep_type=_text(dep_el, "type"),
        optional=bool(optional_text) and optional_text.lower() == "true",
        exclusions=exclusions,
    )


def parse_pom_string(content: str) -> ManagedPom:
    """Parse ``pom.xml`` content into a ManagedPom.

    Handles both namespaced and non-namespaced POMs. groupId and version
    fall back to the ``<parent>`` values when the project omits them.

    Args:
        content: The POM XML text.

    Returns:
        A ManagedPom with properties and dependency management in
        document order.

    Raises:
        PomParseError: The content is not well-formed XML.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise PomParseError(f"Could not parse POM: {e}") from e

    parent_el = _find(root, "parent")
    parent_gid = parent_aid = parent_ver = None
    if parent_el is not None:
        parent_gid = _text(parent_el, "groupId")
        parent_aid = _text(parent_el, "artifactId")
        parent_ver = _text(parent_el, "version")

    properties = {}
    props_el = _find(root, "properties")
    if props_el is not None:
        for child in props_el:
            if not isinstance(child.tag, str):
                # comments and processing instructions
                continue
            properties[_local_name(child.tag)] = (child.text or "").strip()

    dep_mgmt = []
    dm_el = _find(root, "dependencyManagement")
    if dm_el is not None:
        dm_deps = _find(dm_el, "dependencies")
        if dm_deps is not None:
            for dep_el in _findall(dm_deps, "dependency"):
                dep_mgmt.append(_parse_dependency(dep_el))

    return ManagedPom(
        group_id=_text(root, "groupId") or parent_gid or "",
        artifact_id=_text(root, "artifactId") or "",
        version=_text(root, "version") or parent_ver,
        name=_text(root, "name"),
        parent_group_id=parent_gid,
        parent_artifact_id=parent_aid,
        parent_version=parent_ver,
        properties=properties,
        dep_management=dep_mgmt,
    )


def resolve_property(value: str, properties: dict, _depth: int = 0) -> Optional[str]:
    """Resolve a ``${property}`` reference against a properties dict.

    Only values that are entirely a single ``${...}`` reference are
    resolved; ``${major}.${minor}`` is returned unchanged. Chains such as
    ``${foo}`` → ``${bar}`` → ``1.0`` are followed up to a depth of 10.
    The ``project.`` prefix is also tried, so ``${project.version}``
    resolves against a ``version`` entry.

    Args:
        value: The string potentially containing a ``${property}`` reference.
        properties: Properties to resolve against.
        _depth: Internal recursion counter (callers should not set this).

    Returns:
        The resolved value, or the original value if unresolvable.
        Returns ``None`` if value is ``None``.
    """
    if not value or _depth > 10:
        return value
    match = _REFERENCE.match(value)
    if match:
        prop_name = match.group(1)
        for key in [prop_name, prop_name.replace("project.", "", 1)]:
            if key in properties:
                resolved = properties[key]
                if resolved and "${" in resolved:
                    return resolve_property(resolved, properties, _depth + 1)
                return resolved
    return value


def resolve_versions(pom: ManagedPom) -> ManagedPom:
    """Return a copy of ``pom`` with ``${...}`` dependency versions interpolated.

    ``project.version``, ``project.groupId`` and ``project.artifactId`` are
    available alongside the POM's own properties. References that cannot
    be resolved are kept verbatim and reported on stderr.

    Args:
        pom: The parsed BOM. Left untouched.

    Returns:
        A new ManagedPom with resolved dependency versions.
    """
    lookup = dict(pom.properties)
    for key, value in (("groupId", pom.group_id), ("artifactId", pom.artifact_id), ("version", pom.version)):
        if value:
            lookup.setdefault(f"project.{key}", value)

    resolved = []
    for dep in pom.dep_management:
        ver = resolve_property(dep.version, lookup)
        if ver and "${" in ver:
            print(f"WARNING: Could not resolve version '{dep.version}' for "
                  f"{dep.key}, keeping it as-is",
                  file=sys.stderr)
        resolved.append(replace(dep, version=ver))
    return replace(pom, dep_management=resolved)
