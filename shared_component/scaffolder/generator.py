"""Main scaffolding orchestrator.

Takes the requested component names plus one shared ``GenerationOptions``
and writes every component's source and test batches concurrently.  A run
either reports full success or raises one ``ScaffoldError``; files written by
batches that finished before a failure stay on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Iterable

from pydantic import BaseModel, Field

from ..config import GenerationOptions, Language
from ..errors import InvalidArgumentsError
from .materializer import Formatter, ensure_directory, guard_not_exists, write_formatted
from .naming import ComponentRequest, normalize
from .selector import Batch, FileSpec, build_batches, index_file_name
from .templates import TemplateRenderer, to_identifier

MULTI_INDEX_TEMPLATE = "multi_index"


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class ComponentResult(BaseModel):
    """Files written for one component."""

    name: str
    directory: Path
    files: list[Path] = Field(default_factory=list)


class ScaffoldResult(BaseModel):
    """Outcome of a successful run."""

    components: list[ComponentResult] = Field(default_factory=list)
    indexes: list[Path] = Field(default_factory=list, description="Multi-component index files written")
    skipped_indexes: list[Path] = Field(
        default_factory=list, description="Multi-component index files left untouched because they exist"
    )

    @property
    def files(self) -> list[Path]:
        written = [path for component in self.components for path in component.files]
        return written + list(self.indexes)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_arguments(
    names: list[str],
    options: GenerationOptions,
    cwd: Path,
) -> list[ComponentRequest]:
    """Check the names/flags combination and build every request.

    Pure: nothing on disk is read or written.

    Raises:
        InvalidArgumentsError: On an empty name list, a flag conflict or two
            names resolving to the same component directory, ignoring case.
        InvalidNameError: If a name contains anything but letters.
    """
    if not names:
        raise InvalidArgumentsError("No component name given")
    if options.no_style and options.styles:
        sheets = ", ".join(f"--{sheet.value}" for sheet in options.styles)
        raise InvalidArgumentsError(f"--nocss cannot be combined with {sheets}")
    if options.jsx and options.language is Language.TYPED:
        raise InvalidArgumentsError("--jsx cannot be combined with --typescript")

    requests = [normalize(raw, options, cwd) for raw in names]

    # `Foo` and `foo` are one folder on case-insensitive file systems.
    seen: dict[str, str] = {}
    for request in requests:
        key = str(request.directory).casefold()
        if key in seen:
            raise InvalidArgumentsError(f"{request.raw!r} and {seen[key]!r} resolve to the same component")
        seen[key] = request.raw
    return requests


# ---------------------------------------------------------------------------
# Fan-out / fan-in
# ---------------------------------------------------------------------------


async def gather_settled(*aws: Awaitable[Any]) -> list[Any]:
    """Await every awaitable, then raise the first failure in launch order.

    Siblings are never cancelled: a failing task does not stop the others,
    it only decides what gets reported once all have settled.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Scaffolding orchestrator.

    Given ``GenerationOptions``, writes for every requested component:
    - ``index`` re-exporting the component
    - one body file per platform (``Name.web.js``, ``Name.native.js``)
    - optional ``.less``/``.scss`` style sheets
    - one test file per platform under ``__tests__``
    and, when ``emit_index`` is set, one index per parent directory
    exporting all components created there.
    """

    def __init__(
        self,
        options: GenerationOptions,
        cwd: str | Path | None = None,
        *,
        renderer: TemplateRenderer | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self.options = options
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.renderer = renderer or TemplateRenderer()
        self.formatter = formatter

    # -- Public API --------------------------------------------------------

    async def generate(self, names: list[str]) -> ScaffoldResult:
        """Validate, guard and write every requested component."""
        requests = await self.prepare(names)
        return await self.materialize(requests)

    async def prepare(self, names: list[str]) -> list[ComponentRequest]:
        """Validate the request and guard the primary target directory.

        Nothing is written.  Only the first component's directory is
        checked; the others are not re-checked.

        Raises:
            InvalidArgumentsError: See :func:`validate_arguments`.
            DirectoryExistsError: If the primary target already exists.
        """
        requests = validate_arguments(names, self.options, self.cwd)
        await guard_not_exists(requests[0].directory)
        return requests

    async def materialize(self, requests: list[ComponentRequest]) -> ScaffoldResult:
        """Write every batch of every request concurrently.

        All batches are started before any is awaited.  The first error (in
        launch order) is raised once every batch has settled.
        """
        planned: list[tuple[ComponentRequest, tuple[Batch, Batch]]] = [
            (request, build_batches(request, self.options, self.renderer))
            for request in requests
        ]
        tasks = [
            asyncio.create_task(self._write_batch(request, batch))
            for request, batches in planned
            for batch in batches
        ]
        written = await gather_settled(*tasks)

        components: list[ComponentResult] = []
        for position, (request, _) in enumerate(planned):
            source_files, test_files = written[2 * position], written[2 * position + 1]
            components.append(
                ComponentResult(
                    name=request.canonical_name,
                    directory=request.directory,
                    files=source_files + test_files,
                )
            )

        result = ScaffoldResult(components=components)
        if self.options.emit_index:
            await self._write_multi_indexes(requests, result)
        return result

    # -- Batches -----------------------------------------------------------

    async def _write_batch(self, request: ComponentRequest, batch: Batch) -> list[Path]:
        """Create the batch directory, then write its files concurrently."""
        if not batch.specs:
            return []
        await ensure_directory(batch.directory)

        async def _write(spec: FileSpec) -> Path:
            content = spec.render(request.canonical_name, self.options)
            return await write_formatted(batch.directory / spec.relative_path, content, self.formatter)

        return await gather_settled(*[_write(spec) for spec in batch.specs])

    # -- Multi-component index ---------------------------------------------

    async def _write_multi_indexes(
        self, requests: Iterable[ComponentRequest], result: ScaffoldResult
    ) -> None:
        """Write one index per parent directory exporting its components.

        An index that already exists is left untouched and recorded in
        ``result.skipped_indexes``.
        """
        by_parent: dict[Path, list[ComponentRequest]] = {}
        for request in requests:
            by_parent.setdefault(request.parent_directory, []).append(request)

        async def _write(parent: Path, members: list[ComponentRequest]) -> None:
            path = parent / index_file_name(self.options)
            if await asyncio.to_thread(path.exists):
                result.skipped_indexes.append(path)
                return
            content = self.renderer.render(
                MULTI_INDEX_TEMPLATE,
                {
                    "components": [
                        {"name": m.canonical_name, "identifier": to_identifier(m.canonical_name)}
                        for m in members
                    ]
                },
            )
            result.indexes.append(await write_formatted(path, content, self.formatter))

        await gather_settled(*[_write(parent, members) for parent, members in by_parent.items()])
