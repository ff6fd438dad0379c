# ABOUTME: Two-stage extraction pipeline: review page, then the linked game page for cover art
# ABOUTME: Owns the observable value and busy flag; only the latest submitted run may commit

import asyncio
from collections.abc import Callable
from enum import Enum

from backloggd_snippet.core.fetch import FetchError, HttpPageFetcher, PageFetcher
from backloggd_snippet.core.models import FetchedPage, ReviewInfo
from backloggd_snippet.core.urls import is_valid_review_url
from backloggd_snippet.extraction import ExtractionError, extract_game_image, extract_review, parse_html
from backloggd_snippet.utils.logging import get_logger

ReviewListener = Callable[[ReviewInfo | None], None]
StateListener = Callable[["PipelineState"], None]


class PipelineState(Enum):
    """States of a single pipeline run."""

    IDLE = "idle"
    FETCHING_REVIEW = "fetching_review"
    EXTRACTING_REVIEW = "extracting_review"
    FETCHING_GAME = "fetching_game"
    EXTRACTING_IMAGE = "extracting_image"
    DONE = "done"
    FAILED = "failed"


class ExtractionPipeline:
    """Turns a review URL into a ReviewInfo, enriched with the game's cover art.

    Every submitted input starts a new run and supersedes any run still in
    flight. A superseded run keeps going until its next suspension point and
    then drops its result, so consumers only ever observe the latest run.
    """

    def __init__(self, fetcher: PageFetcher | None = None):
        self.fetcher = fetcher or HttpPageFetcher()
        self._owns_fetcher = fetcher is None
        self._generation = 0
        self._value: ReviewInfo | None = None
        self._loading = False
        self._state = PipelineState.IDLE
        self._listeners: list[ReviewListener] = []
        self._state_listeners: list[StateListener] = []
        self._task: asyncio.Task | None = None
        self.logger = get_logger(__name__)

    @property
    def value(self) -> ReviewInfo | None:
        return self._value

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: ReviewListener) -> Callable[[], None]:
        """Call listener with every committed value. Returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def watch_state(self, listener: StateListener) -> Callable[[], None]:
        """Call listener on every state change of the latest run. Returns an unsubscribe function."""
        self._state_listeners.append(listener)
        return lambda: self._state_listeners.remove(listener)

    async def submit(self, url: str | None) -> ReviewInfo | None:
        """Run the pipeline for url.

        Returns:
            The committed ReviewInfo, or None for invalid input, a failed review
            fetch, or a run that was superseded by a newer submission

        Raises:
            StructuralFault: If the fetched review page lacks required markup
        """
        return await self._run(url, self._next_generation())

    def trigger(self, url: str | None) -> asyncio.Task:
        """Schedule a run for url, cancelling the previously scheduled one."""
        generation = self._next_generation()
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.create_task(self._run(url, generation))
        return self._task

    async def close(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        if self._owns_fetcher and isinstance(self.fetcher, HttpPageFetcher):
            await self.fetcher.close()

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    async def _run(self, url: str | None, generation: int) -> ReviewInfo | None:
        if not self._is_current(generation):
            return None

        logger = self.logger.bind(review_url=url, generation=generation)

        if not url or not is_valid_review_url(url):
            if url:
                logger.debug("Ignoring unsupported URL")
            self._commit(generation, None, PipelineState.IDLE)
            return None

        try:
            return await self._extract(url, generation, logger)
        except asyncio.CancelledError:
            if self._is_current(generation):
                logger.info("Run cancelled", state=self._state.value)
            self._commit(generation, None, PipelineState.IDLE)
            raise
        except ExtractionError as e:
            logger.error("Review page is missing required markup", error=str(e))
            self._commit(generation, None, PipelineState.FAILED)
            raise
        except Exception as e:
            logger.error("Pipeline run failed", error=str(e), error_type=type(e).__name__, state=self._state.value)
            self._commit(generation, None, PipelineState.FAILED)
            raise

    async def _extract(self, url: str, generation: int, logger) -> ReviewInfo | None:
        self._loading = True
        self._advance(generation, PipelineState.FETCHING_REVIEW)
        logger.info("Fetching review page")

        review_page = await self._fetch(url, "review", logger)
        if not self._is_current(generation):
            logger.debug("Discarding superseded run")
            return None
        if review_page is None:
            self._commit(generation, None, PipelineState.FAILED)
            return None

        self._advance(generation, PipelineState.EXTRACTING_REVIEW)
        review = extract_review(parse_html(review_page.text), review_page.url)

        self._advance(generation, PipelineState.FETCHING_GAME)
        logger.info("Fetching game page", game=review.game, game_url=review.game_url)

        game_page = await self._fetch(review.game_url, "game", logger)
        if not self._is_current(generation):
            logger.debug("Discarding superseded run")
            return None

        if game_page is not None:
            self._advance(generation, PipelineState.EXTRACTING_IMAGE)
            image = extract_game_image(parse_html(game_page.text), game_page.url)
            if image is not None:
                review = review.with_image(image)

        self._commit(generation, review, PipelineState.DONE)
        logger.info("Review extracted", reviewer=review.reviewer, game=review.game, has_image=review.has_image)
        return review

    async def _fetch(self, url: str, page: str, logger) -> FetchedPage | None:
        try:
            return await self.fetcher.fetch(url)
        except FetchError as e:
            logger.error("Page fetch failed", page=page, url=url, error=str(e))
            return None

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _advance(self, generation: int, state: PipelineState) -> None:
        if self._is_current(generation):
            self._set_state(state)

    def _set_state(self, state: PipelineState) -> None:
        self._state = state
        for listener in list(self._state_listeners):
            listener(state)

    def _commit(self, generation: int, value: ReviewInfo | None, state: PipelineState) -> None:
        if not self._is_current(generation):
            return
        self._value = value
        self._loading = False
        self._set_state(state)
        for listener in list(self._listeners):
            listener(value)
