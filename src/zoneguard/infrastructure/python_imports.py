"""
Import edge extraction for Python sources.

Pure AST-based: the source is parsed, never executed. Python imports are
turned into path specifiers so the engine can resolve them like any other
edge:

    from ..data import db     ->  ../data
    from .models import User  ->  ./models
    from . import views       ->  ./views
    import app.core.db        ->  <package_root>/app/core/db

Absolute imports become edges only when their top-level package exists
under ``package_root`` (a directory or a ``.py`` module there). Standard
library, third-party and ``__future__`` imports produce no edge.

Specifiers name the module path without the ``.py`` suffix.
"""

import ast
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from zoneguard.domain import paths
from zoneguard.domain.exceptions import SourceParseError
from zoneguard.domain.models import ImportEdge, SourceLocation

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRS = (
    ".git",
    ".venv",
    "venv",
    "__pycache__",
    "node_modules",
    "dist",
    "build",
    ".mypy_cache",
    ".pytest_cache",
)


def _relative_prefix(level: int) -> str:
    return "./" if level == 1 else "../" * (level - 1)


def _module_path(module: str) -> str:
    return module.replace(".", "/")


def _is_local(module: str, package_root: str) -> bool:
    """True when the top-level package of ``module`` lives under ``package_root``."""
    top = module.split(".", 1)[0]
    if not top or top == "__future__":
        return False
    candidate = Path(package_root or paths.SEPARATOR) / top
    return candidate.is_dir() or candidate.with_suffix(".py").is_file()


def _specifiers(node: ast.Import | ast.ImportFrom, package_root: str) -> list[str]:
    """Path specifiers for one import statement."""
    if isinstance(node, ast.Import):
        modules = [alias.name for alias in node.names]
    elif node.level == 0:
        modules = [node.module or ""]
    else:
        prefix = _relative_prefix(node.level)
        if node.module:
            return [prefix + _module_path(node.module)]
        # from . import a, b: each name is a sibling module
        return [prefix + alias.name for alias in node.names if alias.name != "*"]

    local = [m for m in modules if _is_local(m, package_root)]
    if len(local) < len(modules):
        logger.debug(
            "Skipping imports outside %s: %s",
            package_root,
            ", ".join(m for m in modules if m not in local),
        )
    return [f"{package_root}/{_module_path(m)}" for m in local]


def extract_import_edges(
    path: Path,
    source: str | None = None,
    package_root: str | None = None,
) -> list[ImportEdge]:
    """
    Extract import edges from one Python file.

    Args:
        path: Absolute path of the file (used as the edge source)
        source: File contents (default: read from ``path``)
        package_root: Directory absolute imports are resolved under;
            imports of packages missing there are skipped
            (default: the file's directory)

    Returns:
        Edges in source order, each with its statement location

    Raises:
        SourceParseError: If the file is not valid Python
    """
    source_file = paths.to_posix(str(path))
    if source is None:
        source = path.read_text(encoding="utf-8", errors="replace")
    root = paths.to_posix(package_root) if package_root else paths.dirname(source_file)
    root = root.rstrip(paths.SEPARATOR)

    try:
        tree = ast.parse(source, filename=source_file)
    except SyntaxError as e:
        raise SourceParseError(source_file, f"line {e.lineno}: {e.msg}") from e

    nodes = [
        node
        for node in ast.walk(tree)
        if isinstance(node, ast.Import | ast.ImportFrom)
    ]
    nodes.sort(key=lambda n: (n.lineno, n.col_offset))

    edges = []
    for node in nodes:
        location = SourceLocation(line=node.lineno, column=node.col_offset)
        for specifier in _specifiers(node, root):
            edges.append(ImportEdge.create(source_file, specifier, location=location))
    return edges


def iter_python_files(
    roots: Iterable[Path],
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS,
) -> Iterator[Path]:
    """Yield ``.py`` files under each root (or the root itself), sorted per root."""
    for root in roots:
        if root.is_file():
            if root.suffix == ".py":
                yield root
            continue
        for candidate in sorted(root.rglob("*.py")):
            if any(part in exclude_dirs for part in candidate.relative_to(root).parts):
                continue
            yield candidate
