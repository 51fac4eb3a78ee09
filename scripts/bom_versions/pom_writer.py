"""BOM ``pom.xml`` generator.

Turns a transformed ManagedPom back into POM text: a ``pom``-packaged
project whose ``<properties>`` hold the coalesced versions and whose
``<dependencyManagement>`` refers to them.
"""

from xml.sax.saxutils import escape

from .pom_models import Dependency, ManagedPom

INDENT = "    "


def _element(tag: str, value: str, depth: int) -> str:
    return f"{INDENT * depth}<{tag}>{escape(value)}</{tag}>"


def _dependency_lines(dep: Dependency, depth: int) -> list:
    """Render one ``<dependency>`` block, omitting fields that hold Maven defaults."""
    lines = [f"{INDENT * depth}<dependency>"]
    lines.append(_element("groupId", dep.group_id, depth + 1))
    lines.append(_element("artifactId", dep.artifact_id, depth + 1))
    if dep.version:
        lines.append(_element("version", dep.version, depth + 1))
    if dep.dep_type:
        lines.append(_element("type", dep.dep_type, depth + 1))
    if dep.classifier:
        lines.append(_element("classifier", dep.classifier, depth + 1))
    if dep.scope:
        lines.append(_element("scope", dep.scope, depth + 1))
    if dep.optional:
        lines.append(_element("optional", "true", depth + 1))
    if dep.exclusions:
        lines.append(f"{INDENT * (depth + 1)}<exclusions>")
        for group_id, artifact_id in dep.exclusions:
            lines.append(f"{INDENT * (depth + 2)}<exclusion>")
            lines.append(_element("groupId", group_id, depth + 3))
            lines.append(_element("artifactId", artifact_id, depth + 3))
            lines.append(f"{INDENT * (depth + 2)}</exclusion>")
        lines.append(f"{INDENT * (depth + 1)}</exclusions>")
    lines.append(f"{INDENT * depth}</dependency>")
    return lines


def render_bom(pom: ManagedPom) -> str:
    """Generate ``pom.xml`` content for a bill-of-materials project.

    Properties are written in sorted order so that two runs over the same
    input produce identical files. The parent section is emitted only when
    the source POM had one.

    Args:
        pom: A ManagedPom, normally the output of ``transform_pom``.

    Returns:
        Complete ``pom.xml`` file content as a string.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<project xmlns="http://maven.apache.org/POM/4.0.0"'
        ' xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
        ' xsi:schemaLocation="http://maven.apache.org/POM/4.0.0'
        ' http://maven.apache.org/xsd/maven-4.0.0.xsd">',
        _element("modelVersion", "4.0.0", 1),
        "",
    ]

    if pom.parent_artifact_id:
        lines.append(f"{INDENT}<parent>")
        lines.append(_element("groupId", pom.parent_group_id or "", 2))
        lines.append(_element("artifactId", pom.parent_artifact_id, 2))
        if pom.parent_version:
            lines.append(_element("version", pom.parent_version, 2))
        lines.append(f"{INDENT}</parent>")
        lines.append("")

    lines.append(_element("groupId", pom.group_id, 1))
    lines.append(_element("artifactId", pom.artifact_id, 1))
    if pom.version:
        lines.append(_element("version", pom.version, 1))
    lines.append(_element("packaging", "pom", 1))
    if pom.name:
        lines.append(_element("name", pom.name, 1))
    lines.append("")

    if pom.properties:
        lines.append(f"{INDENT}<properties>")
        for key, value in sorted(pom.properties.items()):
            lines.append(_element(key, value, 2))
        lines.append(f"{INDENT}</properties>")
        lines.append("")

    if pom.dep_management:
        lines.append(f"{INDENT}<dependencyManagement>")
        lines.append(f"{INDENT * 2}<dependencies>")
        for dep in pom.dep_management:
            lines.extend(_dependency_lines(dep, 3))
        lines.append(f"{INDENT * 2}</dependencies>")
        lines.append(f"{INDENT}</dependencyManagement>")
        lines.append("")

    lines.append("</project>")
    lines.append("")
    return "\n".join(lines)
