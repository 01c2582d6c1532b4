"""Shared pytest configuration, marker assignment and snapshot fixtures."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from bloop_gradle.application.options import ConverterParameters
from bloop_gradle.schemas import BuildSnapshot

SCALA_LIBRARY = {
    "group": "org.scala-lang",
    "name": "scala-library",
    "version": "2.13.8",
    "file": "/cache/org.scala-lang/scala-library-2.13.8.jar",
}
GUAVA = {
    "group": "com.google.guava",
    "name": "guava",
    "version": "31.1",
    "file": "/cache/com.google.guava/guava-31.1.jar",
}
LIB_JAR = {
    "group": "com.example",
    "name": "lib",
    "version": "1.0",
    "file": "/workspace/lib/build/libs/lib-1.0.jar",
}

BUILD_PAYLOAD: dict[str, Any] = {
    "root_dir": "/workspace",
    "projects": [
        {
            "path": ":lib",
            "name": "lib",
            "project_dir": "/workspace/lib",
            "build_dir": "/workspace/lib/build",
            "source_sets": [
                {
                    "name": "main",
                    "sources": ["/workspace/lib/src/main/scala/Lib.scala"],
                    "compile_configuration": "compileClasspath",
                },
                {
                    "name": "test",
                    "sources": ["/workspace/lib/src/test/scala/LibSpec.scala"],
                    "compile_configuration": "testCompileClasspath",
                },
            ],
            "configurations": {
                "compileClasspath": {
                    "name": "compileClasspath",
                    "artifacts": [SCALA_LIBRARY],
                },
                "testCompileClasspath": {
                    "name": "testCompileClasspath",
                    "artifacts": [
                        SCALA_LIBRARY,
                        {
                            "group": "org.scalatest",
                            "name": "scalatest_2.13",
                            "version": "3.2.15",
                            "file": "/cache/org.scalatest/scalatest_2.13-3.2.15.jar",
                        },
                    ],
                },
            },
            "scala_compile_tasks": {
                "compileScala": {
                    "options": {
                        "encoding": "UTF-8",
                        "additional_parameters": ["-Xfatal-warnings"],
                    },
                    "scala_classpath": [
                        "/cache/org.scala-lang/scala-compiler-2.13.8.jar",
                        "/cache/org.scala-lang/scala-library-2.13.8.jar",
                    ],
                },
                "compileTestScala": {
                    "scala_classpath": [
                        "/cache/org.scala-lang/scala-compiler-2.13.8.jar",
                    ],
                },
            },
            "java_compile_tasks": {
                "compileJava": {
                    "options": {"source_compatibility": "11", "target_compatibility": "11"}
                },
            },
        },
        {
            "path": ":util",
            "name": "util",
            "project_dir": "/workspace/util",
            "build_dir": "/workspace/util/build",
            "source_sets": [
                {
                    "name": "main",
                    "sources": ["/workspace/util/src/main/java/Util.java"],
                    "compile_configuration": "compileClasspath",
                },
            ],
            "configurations": {
                "compileClasspath": {
                    "name": "compileClasspath",
                    "artifacts": [
                        {
                            "group": "org.apache.commons",
                            "name": "commons-lang3",
                            "version": "3.12.0",
                            "file": "/cache/org.apache.commons/commons-lang3-3.12.0.jar",
                        }
                    ],
                },
            },
            "java_compile_tasks": {"compileJava": {}},
        },
        {
            "path": ":app",
            "name": "app",
            "project_dir": "/workspace/app",
            "build_dir": "/workspace/app/build",
            "source_sets": [
                {
                    "name": "main",
                    "sources": ["/workspace/app/src/main/scala/App.scala"],
                    "compile_configuration": "compileClasspath",
                },
            ],
            "configurations": {
                "compileClasspath": {
                    "name": "compileClasspath",
                    "artifacts": [SCALA_LIBRARY, GUAVA, LIB_JAR],
                    "project_dependencies": [
                        {
                            "group": "com.example",
                            "name": "lib",
                            "version": "1.0",
                            "project": ":lib",
                        }
                    ],
                },
            },
            "scala_compile_tasks": {"compileScala": {}},
        },
    ],
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def build_payload() -> dict[str, Any]:
    """Return a mutable copy of the three-project build snapshot payload."""
    return copy.deepcopy(BUILD_PAYLOAD)


@pytest.fixture
def snapshot(build_payload: dict[str, Any]) -> BuildSnapshot:
    """Return the validated three-project build snapshot."""
    return BuildSnapshot.model_validate(build_payload)


@pytest.fixture
def params(tmp_path: Path) -> ConverterParameters:
    """Return converter parameters targeting a temporary directory."""
    return ConverterParameters(target_dir=tmp_path / ".bloop")
