"""Java compiler configuration of a source set."""

from __future__ import annotations

from bloop_gradle.application.ports import JavaArgumentsBuilder
from bloop_gradle.project_config import JavaConfig
from bloop_gradle.schemas import JavaCompileTask


def resolve_java_config(
    task: JavaCompileTask | None, builder: JavaArgumentsBuilder
) -> JavaConfig:
    """Forward the builder's main-option arguments for the java compile task.

    A source set without a java compile task yields an empty configuration.
    """
    if task is None:
        return JavaConfig()
    return JavaConfig(options=tuple(builder.build(task.options)))
