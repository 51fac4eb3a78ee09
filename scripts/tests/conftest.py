"""Shared test fixtures for the BOM version coalescing test suite."""

import textwrap
from pathlib import Path

import pytest

from bom_versions.pom_models import Dependency, ManagedPom


@pytest.fixture
def tmp_pom(tmp_path):
    """Factory fixture that writes a pom.xml to a temp directory and returns the path."""
    def _write(content: str) -> Path:
        pom = tmp_path / "pom.xml"
        pom.write_text(textwrap.dedent(content), encoding="utf-8")
        return pom
    return _write


@pytest.fixture
def acme_deps():
    """Two agreeing com.acme artifacts and a lone com.other artifact."""
    return [
        Dependency(group_id="com.acme", artifact_id="core", version="1.2"),
        Dependency(group_id="com.acme", artifact_id="util", version="1.2"),
        Dependency(group_id="com.other", artifact_id="widget", version="3.0"),
    ]


@pytest.fixture
def split_deps():
    """A com.acme group whose artifacts disagree on version."""
    return [
        Dependency(group_id="com.acme", artifact_id="core", version="1.2"),
        Dependency(group_id="com.acme", artifact_id="util", version="1.3"),
    ]


@pytest.fixture
def wildfly_bom():
    """A BOM-style ManagedPom with a parent and one pre-existing property."""
    return ManagedPom(
        group_id="org.wildfly",
        artifact_id="wildfly-component-matrix",
        version="27.0.0.Final",
        parent_group_id="org.jboss",
        parent_artifact_id="jboss-parent",
        parent_version="39",
        properties={"project.build.sourceEncoding": "UTF-8"},
        dep_management=[
            Dependency(group_id="org.jboss.logging", artifact_id="jboss-logging", version="3.5.0.Final"),
            Dependency(group_id="io.undertow", artifact_id="undertow-core", version="2.3.0.Final"),
            Dependency(group_id="io.undertow", artifact_id="undertow-servlet", version="2.3.0.Final"),
            Dependency(group_id="org.jboss.logging", artifact_id="jboss-logging-annotations", version="2.2.1.Final"),
        ],
    )


BOM_XML = """\
    <?xml version="1.0" encoding="UTF-8"?>
    <project xmlns="http://maven.apache.org/POM/4.0.0">
        <modelVersion>4.0.0</modelVersion>
        <groupId>org.example</groupId>
        <artifactId>example-bom</artifactId>
        <version>1.0.0</version>
        <packaging>pom</packaging>
        <properties>
            <netty.version>4.1.100.Final</netty.version>
        </properties>
        <dependencyManagement>
            <dependencies>
                <dependency>
                    <groupId>io.netty</groupId>
                    <artifactId>netty-buffer</artifactId>
                    <version>${netty.version}</version>
                </dependency>
                <dependency>
                    <groupId>io.netty</groupId>
                    <artifactId>netty-codec</artifactId>
                    <version>${netty.version}</version>
                </dependency>
                <dependency>
                    <groupId>org.slf4j</groupId>
                    <artifactId>slf4j-api</artifactId>
                    <version>2.0.9</version>
                </dependency>
            </dependencies>
        </dependencyManagement>
    </project>
"""


@pytest.fixture
def bom_xml():
    """POM text for a small namespaced BOM with one interpolated group."""
    return textwrap.dedent(BOM_XML)
