from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from fake_useragent import UserAgent
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .config import ScraperSettings
from .errors import ExtractionError, NavigationError, ScraperError
from .models import TaskState

logger = logging.getLogger(__name__)

T = TypeVar("T")

StateListener = Callable[[TaskState], None]


def random_user_agent() -> str:
    return UserAgent().random


def _ignore_state(state: TaskState) -> None:
    pass


class ScrapeSession:
    """One isolated browser (driver, browser, context, page) owned by a single task."""

    def __init__(self, url: str, driver: Any = None, browser: Any = None, context: Any = None, page: Any = None) -> None:
        self.url = url
        self.driver = driver
        self.browser = browser
        self.context = context
        self.page = page
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        """Release the page, context, browser and driver; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        for name, resource, method in (
            ("page", self.page, "close"),
            ("context", self.context, "close"),
            ("browser", self.browser, "close"),
            ("driver", self.driver, "stop"),
        ):
            if resource is None:
                continue
            try:
                await getattr(resource, method)()
            except Exception as exc:  # noqa: BLE001
                logger.warning("Error closing %s for %s: %s", name, self.url, exc)


class SessionManager:
    """Creates and tears down one browser session per task.

    Each session gets its own Chromium instance with a random user agent,
    CSP bypass and a route handler that aborts image, stylesheet, font and
    media requests. Navigation waits for the network to go idle.
    """

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        playwright_factory: Callable[[], Any] = async_playwright,
        user_agent_factory: Callable[[], str] = random_user_agent,
    ) -> None:
        self._settings = settings or ScraperSettings()
        self._playwright_factory = playwright_factory
        self._user_agent_factory = user_agent_factory

    async def acquire(
        self,
        source_url: str,
        timeout_ms: Optional[int] = None,
        listener: Optional[StateListener] = None,
    ) -> ScrapeSession:
        """Open a session and navigate it to ``source_url``.

        Raises NavigationError if launching or loading the page fails; nothing
        is left open in that case.
        """
        timeout = timeout_ms or self._settings.navigation_timeout_ms
        notify = listener or _ignore_state
        notify(TaskState.ACQUIRING)
        session = ScrapeSession(source_url)
        try:
            session.driver = await self._playwright_factory().start()
            session.browser = await session.driver.chromium.launch(headless=self._settings.headless)
            session.context = await session.browser.new_context(
                user_agent=self._user_agent_factory(),
                bypass_csp=True,
            )
            await session.context.route("**/*", self._route_handler)
            session.page = await session.context.new_page()
            notify(TaskState.NAVIGATING)
            await session.page.goto(source_url, timeout=timeout, wait_until=self._settings.wait_until)
        except PlaywrightError as exc:
            await session.close()
            raise NavigationError(source_url, str(exc)) from exc
        except BaseException:
            await session.close()
            raise
        logger.debug("Session ready for %s", source_url)
        return session

    async def with_session(
        self,
        source_url: str,
        fn: Callable[[Any], Awaitable[T]],
        timeout_ms: Optional[int] = None,
        listener: Optional[StateListener] = None,
    ) -> T:
        """Run ``fn(page)`` inside a fresh session that is always closed afterwards."""
        session = await self.acquire(source_url, timeout_ms, listener)
        try:
            if listener is not None:
                listener(TaskState.EXTRACTING)
            return await fn(session.page)
        except ScraperError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise ExtractionError(f"Extraction from {source_url} failed: {exc}") from exc
        finally:
            await session.close()

    async def _route_handler(self, route: Any) -> None:
        if route.request.resource_type in self._settings.blocked_resources:
            await route.abort()
        else:
            await route.continue_()
