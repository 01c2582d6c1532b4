"""Shared type aliases for snapshot conversion modules."""

from __future__ import annotations

from typing import Literal

type ProjectPath = str
type SourceSetName = str
type Coordinates = tuple[str, str, str]
type CompilerLanguage = Literal["scala", "java"]
type PairId = tuple[ProjectPath, SourceSetName]
