"""Javac argument builder adapter."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from bloop_gradle.schemas import JavaCompileOptions


def _join_paths(paths: Iterable[Path]) -> str:
    return os.pathsep.join(str(path) for path in paths)


def _release_in_args(compiler_args: Iterable[str]) -> bool:
    return any(arg == "--release" or arg.startswith("--release=") for arg in compiler_args)


class GradleJavaArgumentsBuilder:
    """Build javac "main options" the way Gradle's arguments builder does.

    Classpath, source files and launcher (``-J``) options are never emitted.
    """

    def build(self, options: JavaCompileOptions) -> list[str]:
        """Return ordered javac arguments for ``options``.

        Parameters
        ----------
        options : JavaCompileOptions
            Java compile options exported by the host.

        Returns
        -------
        list[str]
            Arguments in Gradle's order, followed by the free-form compiler
            arguments.
        """
        args: list[str] = []
        uses_release = options.release is not None or _release_in_args(
            options.compiler_args
        )
        if not uses_release:
            if options.source_compatibility:
                args += ["-source", options.source_compatibility]
            if options.target_compatibility:
                args += ["-target", options.target_compatibility]
        if options.destination_dir is not None:
            args += ["-d", str(options.destination_dir)]
        if options.encoding:
            args += ["-encoding", options.encoding]
        if options.boot_classpath is not None:
            args += ["-bootclasspath", _join_paths(options.boot_classpath)]
        if options.extension_dirs:
            args += ["-extdirs", options.extension_dirs]
        if options.release is not None:
            args += ["--release", str(options.release)]
        if not options.warnings:
            args.append("-nowarn")
        if options.deprecation:
            args.append("-deprecation")
        if options.verbose:
            args.append("-verbose")
        args.append(self._debug_flag(options))
        args += self._annotation_processing(options)
        if options.header_output_dir is not None:
            args += ["-h", str(options.header_output_dir)]
        args += options.compiler_args
        return args

    @staticmethod
    def _debug_flag(options: JavaCompileOptions) -> str:
        if not options.debug:
            return "-g:none"
        if options.debug_level:
            return f"-g:{options.debug_level}"
        return "-g"

    @staticmethod
    def _annotation_processing(options: JavaCompileOptions) -> list[str]:
        args: list[str] = []
        processor_path = options.annotation_processor_path
        if processor_path is not None:
            if processor_path:
                args += ["-processorpath", _join_paths(processor_path)]
            elif "-proc:none" not in options.compiler_args:
                args.append("-proc:none")
        if options.generated_sources_dir is not None:
            args += ["-s", str(options.generated_sources_dir)]
        return args
