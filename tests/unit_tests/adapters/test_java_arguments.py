"""Unit tests for the javac argument builder adapter."""

from __future__ import annotations

import os
from pathlib import Path

from bloop_gradle.adapters.java_arguments import GradleJavaArgumentsBuilder
from bloop_gradle.schemas import JavaCompileOptions

builder = GradleJavaArgumentsBuilder()


def test_defaults_only_emit_debug_flag() -> None:
    """Emit ``-g`` for default options."""
    assert builder.build(JavaCompileOptions()) == ["-g"]


def test_main_options_follow_gradle_order() -> None:
    """Order source/target, destination, encoding, warnings and free-form args."""
    options = JavaCompileOptions(
        source_compatibility="11",
        target_compatibility="11",
        destination_dir=Path("/out"),
        encoding="UTF-8",
        warnings=False,
        deprecation=True,
        verbose=True,
        debug_level="source,lines",
        header_output_dir=Path("/headers"),
        compiler_args=("-Xlint:all", "-parameters"),
    )

    assert builder.build(options) == [
        "-source",
        "11",
        "-target",
        "11",
        "-d",
        "/out",
        "-encoding",
        "UTF-8",
        "-nowarn",
        "-deprecation",
        "-verbose",
        "-g:source,lines",
        "-h",
        "/headers",
        "-Xlint:all",
        "-parameters",
    ]


def test_release_replaces_source_and_target() -> None:
    """Drop ``-source``/``-target`` when a release is configured."""
    options = JavaCompileOptions(
        source_compatibility="8", target_compatibility="8", release=17
    )
    assert builder.build(options) == ["--release", "17", "-g"]

    from_args = JavaCompileOptions(source_compatibility="8", compiler_args=("--release", "11"))
    assert builder.build(from_args) == ["-g", "--release", "11"]


def test_debug_disabled() -> None:
    """Emit ``-g:none`` when debug information is disabled."""
    assert builder.build(JavaCompileOptions(debug=False)) == ["-g:none"]


def test_annotation_processing_options() -> None:
    """Emit the processor path or disable processing for an empty path."""
    processors = JavaCompileOptions(
        annotation_processor_path=(Path("/a.jar"), Path("/b.jar")),
        generated_sources_dir=Path("/gen"),
    )
    assert builder.build(processors) == [
        "-g",
        "-processorpath",
        f"/a.jar{os.pathsep}/b.jar",
        "-s",
        "/gen",
    ]
    assert builder.build(JavaCompileOptions(annotation_processor_path=())) == [
        "-g",
        "-proc:none",
    ]


def test_never_emits_classpath_or_launcher_options() -> None:
    """Leave classpath, sources and launcher options out."""
    args = builder.build(
        JavaCompileOptions(boot_classpath=(Path("/rt.jar"),), extension_dirs="/ext")
    )
    assert "-classpath" not in args and "-cp" not in args
    assert not any(arg.startswith("-J") for arg in args)
    assert args[:4] == ["-bootclasspath", "/rt.jar", "-extdirs", "/ext"]
