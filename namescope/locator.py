"""
Declaration locator.

Generators are usually triggered from a marker inside a source file and
need the named type declared next to that marker. This module defines the
interface the rest of a generator relies on and an implementation for
Python sources built on the standard ast module.
"""

from __future__ import annotations

import ast
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence, Tuple, Union

from .utils.constants import ENV_SOURCE_FILE, ENV_SOURCE_LINE, SOURCE_FILE_SUFFIX
from .utils.exceptions import AmbiguousDeclarationError, DeclarationNotFoundError
from .utils.logging import NamescopeLogger, get_logger

logger = get_logger(__name__)
locator_logger = NamescopeLogger(__name__)

PathLike = Union[str, os.PathLike]

DEFINITION_NODES = (
    ast.ClassDef,
    ast.FunctionDef,
    ast.AsyncFunctionDef,
    ast.Assign,
    ast.AnnAssign,
)


@dataclass
class BuildDescription:
    """Source files (or directories of them) making up one program."""

    paths: Sequence[PathLike] = field(default_factory=list)

    def source_files(self) -> List[Path]:
        """Expand directories to the Python files they contain, sorted."""
        files: List[Path] = []
        for entry in self.paths:
            path = Path(entry)
            if path.is_dir():
                files.extend(sorted(path.rglob(f"*{SOURCE_FILE_SUFFIX}")))
            else:
                files.append(path)
        return files


@dataclass
class SourceFile:
    """A parsed source file."""

    path: Path
    tree: ast.Module

    @property
    def module_name(self) -> str:
        return self.path.stem


class DeclarationLocator(Protocol):
    """Resolve a generation trigger position to a named type declaration."""

    def locate(
        self, build: BuildDescription, file_hint: str, line_hint: int = 0
    ) -> Tuple[SourceFile, ast.ClassDef]:
        ...


def _declared_names(node: ast.AST) -> List[str]:
    if isinstance(node, (ast.ClassDef, ast.FunctionDef, ast.AsyncFunctionDef)):
        return [node.name]
    targets = node.targets if isinstance(node, ast.Assign) else [node.target]
    return [t.id for t in targets if isinstance(t, ast.Name)]


def _position(node: ast.AST) -> Tuple[int, bool]:
    return node.lineno, not isinstance(node, ast.ClassDef)


class SourceDeclarationLocator:
    """
    Locate class declarations in Python sources.

    The declaration returned is the definition closest to, and not
    before, the line hint. Only a class counts as a named type: if the
    closest definition is anything else the lookup fails rather than
    skipping ahead.
    """

    def locate(
        self, build: BuildDescription, file_hint: str, line_hint: int = 0
    ) -> Tuple[SourceFile, ast.ClassDef]:
        """
        Find the named type declared at or after line_hint in file_hint.

        Args:
            build: Files making up the program
            file_hint: Path or base name of the file holding the trigger
            line_hint: 1-based line of the trigger; 0 searches the whole file

        Returns:
            Tuple of the parsed file and the class declaration

        Raises:
            DeclarationNotFoundError: If no matching file or class exists
            AmbiguousDeclarationError: If file_hint maps to several files
        """
        path = self._resolve_file(build, file_hint)
        source = self._parse(path, file_hint)

        closest: Optional[ast.AST] = None
        for node in ast.walk(source.tree):
            if not isinstance(node, DEFINITION_NODES) or not _declared_names(node):
                continue
            if node.lineno < line_hint:
                continue
            # classes win ties with other definitions on the same line
            if closest is None or _position(node) < _position(closest):
                closest = node

        if closest is None:
            raise DeclarationNotFoundError("failed to determine type", file_hint, line_hint)

        if not isinstance(closest, ast.ClassDef):
            names = ", ".join(_declared_names(closest))
            raise DeclarationNotFoundError(
                f"failed to determine type: closest declaration is not a named type: {names}",
                file_hint,
                line_hint,
            )

        locator_logger.log_locate(str(path), line_hint, closest.name)
        return source, closest

    def _resolve_file(self, build: BuildDescription, file_hint: str) -> Path:
        hint = Path(file_hint)
        files = build.source_files()

        if hint.exists():
            matches = [f for f in files if f.exists() and os.path.samefile(f, hint)]
        else:
            matches = [f for f in files if f.name == hint.name]

        if not matches:
            raise DeclarationNotFoundError("file is not part of the build", file_hint)
        if len(matches) > 1:
            raise AmbiguousDeclarationError(file_hint, matches)
        return matches[0]

    def _parse(self, path: Path, file_hint: str) -> SourceFile:
        try:
            text = path.read_text(encoding="utf-8")
            tree = ast.parse(text, filename=str(path))
        except SyntaxError as e:
            raise DeclarationNotFoundError(f"failed to parse source: {e.msg}", file_hint, e.lineno) from e
        logger.debug(f"Parsed {path}")
        return SourceFile(path=path, tree=tree)


def locate_from_environment(
    build: BuildDescription,
    environ: Optional[Mapping[str, str]] = None,
    locator: Optional[DeclarationLocator] = None,
) -> Tuple[SourceFile, ast.ClassDef]:
    """
    Locate the declaration named by the generation trigger environment.

    NAMESCOPE_FILE names the trigger file and NAMESCOPE_LINE, when set,
    the trigger line.

    Raises:
        DeclarationNotFoundError: If the environment does not name a file,
            the line is not an integer, or the lookup fails
    """
    env = os.environ if environ is None else environ

    file_hint = env.get(ENV_SOURCE_FILE)
    if not file_hint:
        raise DeclarationNotFoundError(f"failed to determine input file: {ENV_SOURCE_FILE} is not set")

    line = 0
    line_str = env.get(ENV_SOURCE_LINE, "").strip()
    if line_str:
        try:
            line = int(line_str)
        except ValueError as e:
            raise DeclarationNotFoundError(
                f"failed to determine source line: {line_str!r}", file_hint
            ) from e

    locator = locator or SourceDeclarationLocator()
    return locator.locate(build, file_hint, line)
