"""ThumbnailComposer: thumbnail orchestration layer.

This module decides, per event, which thumbnail gets written and where. It
owns the backend chain (remote image service first when configured, local SVG
rendering always last), the pinned-PNG short circuit and the hand-off to the
file-system sink. Networking lives in :mod:`simg_tools.pipeline.image_backend`
and drawing lives in :mod:`.renderer`; nothing here builds markup or requests.

Backends are chosen once, when the composer is built, from the configuration's
capability check. The render path itself never looks at the environment.

Examples
--------
>>> import asyncio
>>> from pathlib import Path
>>> from simg_tools.pipeline.thumbnail_generator.composer import ThumbnailComposer
>>> composer = ThumbnailComposer(Path("public/images/events"))
>>> # stats = asyncio.run(composer.process_all(descriptors))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

import aiohttp
from aiolimiter import AsyncLimiter

from simg_tools.config import (
    DEFAULT_REMOTE_TARGET_RPM,
    LOCAL_IMAGE_EXTENSION,
    REMOTE_IMAGE_EXTENSION,
)
from simg_tools.exceptions import OutputWriteError
from simg_tools.pipeline.image_backend import BananaAPIClient

from .file_sink import pinned_png_path, target_path, write_document
from .models import ComposeResult, EventDescriptor, ThumbnailDocument
from .renderer import render_local_thumbnail

logger = logging.getLogger(__name__)


class ThumbnailBackend(Protocol):
    """A way of producing a thumbnail document for an event."""

    name: str

    async def render(
        self, event: EventDescriptor, session: aiohttp.ClientSession | None
    ) -> ThumbnailDocument | None:
        """Return a document, or None when this backend cannot produce one."""
        ...


class RemoteImageBackend:
    """Generate a PNG through the remote image service.

    Every failure (transport, HTTP status, malformed body, missing image) is
    logged and reported as ``None`` so the next backend can take over.
    """

    name = "remote"

    def __init__(self, config: Any, client: BananaAPIClient | None = None) -> None:
        self.config = config
        self.client = client or BananaAPIClient(config)
        self.rate_limiter = AsyncLimiter(
            getattr(config, "target_rpm", DEFAULT_REMOTE_TARGET_RPM), 60
        )

    async def render(
        self, event: EventDescriptor, session: aiohttp.ClientSession | None
    ) -> ThumbnailDocument | None:
        if session is None:
            logger.warning("No HTTP session available; skipping remote generation.")
            return None
        payload = self.client.build_payload(event.title)
        logger.info(f"Requesting AI thumbnail for: {event.title}")
        async with self.rate_limiter:
            ok, image, raw = await self.client.generate_image(session, payload)
        if not ok or not image:
            logger.warning(
                f"Remote generation failed for {event.title!r}, falling back to "
                f"local rendering: {raw}"
            )
            return None
        return ThumbnailDocument(
            content=image, extension=REMOTE_IMAGE_EXTENSION, source=self.name
        )


class LocalSvgBackend:
    """Render the deterministic SVG event card. Always succeeds."""

    name = "local"

    async def render(
        self, event: EventDescriptor, session: aiohttp.ClientSession | None = None
    ) -> ThumbnailDocument:
        svg, theme = render_local_thumbnail(event)
        logger.debug(f"Rendered local thumbnail for {event.title!r} ({theme.value})")
        return ThumbnailDocument(
            content=svg,
            extension=LOCAL_IMAGE_EXTENSION,
            source=self.name,
            theme=theme,
        )


class ThumbnailComposer:
    """Compose and persist thumbnails for events.

    Parameters
    ----------
    output_dir : Path
        Directory thumbnails are written to.
    config : Any, optional
        Remote backend configuration (normally ``BananaConfig``). When it is
        missing or ``config.is_available`` is False only local rendering is
        used.
    backends : list[ThumbnailBackend] | None, optional
        Explicit backend chain; overrides the chain derived from ``config``.
    """

    def __init__(
        self,
        output_dir: Path,
        config: Any = None,
        backends: list[ThumbnailBackend] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.config = config
        if backends is not None:
            self.backends = list(backends)
        elif config is not None and getattr(config, "is_available", False):
            self.backends = [RemoteImageBackend(config), LocalSvgBackend()]
        else:
            self.backends = [LocalSvgBackend()]
        logger.info(
            f"Initialized ThumbnailComposer with output: {self.output_dir}, "
            f"backends: {[backend.name for backend in self.backends]}"
        )

    @property
    def remote_enabled(self) -> bool:
        """True when any backend in the chain needs an HTTP session."""
        return any(backend.name == "remote" for backend in self.backends)

    async def compose(
        self, event: EventDescriptor, session: aiohttp.ClientSession | None = None
    ) -> ComposeResult:
        """Produce and write the thumbnail for one event.

        Parameters
        ----------
        event : EventDescriptor
            The event to render.
        session : aiohttp.ClientSession | None, optional
            Session for the remote backend; ignored by local rendering.

        Returns
        -------
        ComposeResult
            ``status`` is ``"skipped"`` when a PNG already pins the thumbnail,
            otherwise ``"written"``.

        Raises
        ------
        OutputWriteError
            If the rendered document cannot be written.
        """
        slug = event.slug
        pinned = pinned_png_path(self.output_dir, slug)
        if pinned is not None:
            logger.info(f"Thumbnail already exists: {pinned.name}, skipping.")
            return ComposeResult(
                status="skipped", path=pinned, extension=REMOTE_IMAGE_EXTENSION
            )
        document: ThumbnailDocument | None = None
        for backend in self.backends:
            document = await backend.render(event, session)
            if document is not None:
                break
        if document is None:
            # An explicit chain without the local backend may come up empty.
            document = await LocalSvgBackend().render(event, session)
        path = write_document(
            document, target_path(self.output_dir, slug, document.extension)
        )
        logger.info(f"Thumbnail saved ({document.source}): {path.name}")
        return ComposeResult(
            status="written",
            path=path,
            extension=document.extension,
            theme=document.theme,
        )

    async def process_all(self, events: list[EventDescriptor]) -> dict[str, int]:
        """Compose thumbnails for ``events`` one after another.

        A write failure for one event is logged and counted; the remaining
        events are still processed.

        Parameters
        ----------
        events : list[EventDescriptor]
            Events in processing order.

        Returns
        -------
        dict[str, int]
            Statistics about the run.
        """
        results: list[ComposeResult] = []
        failed = 0
        if self.remote_enabled:
            async with aiohttp.ClientSession() as session:
                for event in events:
                    failed += await self._compose_one(event, session, results)
        else:
            for event in events:
                failed += await self._compose_one(event, None, results)
        return self._build_stats_dict(len(events), results, failed)

    async def _compose_one(
        self,
        event: EventDescriptor,
        session: aiohttp.ClientSession | None,
        results: list[ComposeResult],
    ) -> int:
        """Compose one event, append its result and return 1 on write failure."""
        try:
            results.append(await self.compose(event, session))
        except OutputWriteError as error:
            logger.error(f"Could not write thumbnail for {event.title!r}: {error}")
            return 1
        return 0

    @staticmethod
    def _build_stats_dict(
        total: int, results: list[ComposeResult], failed: int
    ) -> dict[str, int]:
        """Build a statistics dictionary describing a composition run."""
        written = [result for result in results if result.status == "written"]
        return {
            "total_events": total,
            "skipped_existing_png": len(results) - len(written),
            "written_png": sum(
                1 for result in written if result.extension == REMOTE_IMAGE_EXTENSION
            ),
            "written_svg": sum(
                1 for result in written if result.extension == LOCAL_IMAGE_EXTENSION
            ),
            "failed": failed,
        }
