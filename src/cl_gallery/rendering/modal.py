"""Shared lightbox modal for enlarged images.

One modal subtree is reused for every image. Opening it starts an
asynchronous preload of the requested image; the preload result is applied
only if no newer open or close happened in the meantime.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from cl_gallery.logging_config import get_logger
from cl_gallery.models.enums import ModalState
from cl_gallery.page.document import Element, Event, Page
from cl_gallery.rendering.exceptions import ModalSetupError
from cl_gallery.rendering.placeholder import create_placeholder_image
from cl_gallery.rendering.probe import ImageProbe
from cl_gallery.state_machine import StateMachineMixin

__all__ = ["ModalController"]

logger = get_logger(__name__)

OPEN_CLASS = "modal-open"


class ModalController(StateMachineMixin[ModalState]):
    """Controls the single shared image modal.

    The modal starts ``closed``. ``open`` replaces whatever is displayed;
    there is no stack of modals. The close control, a click on the modal
    backdrop and the Escape key all converge on ``close``.

    Every open and close bumps a request sequence number. A preload only
    writes the modal image if its sequence number is still current, so a
    slow preload can never overwrite a newer request.

    Example:
        modal = ModalController(page, FileImageProbe(site_root))
        modal.setup()
        modal.open("data/ewc/class_0.png", "EWC - cat", "Split CIFAR on CIFAR-100")
        await modal.wait_for_preload()

    """

    _VALID_TRANSITIONS: dict[ModalState, set[ModalState]] = {
        ModalState.closed: {ModalState.open},
        ModalState.open: {ModalState.open, ModalState.closed},
    }
    _TERMINAL_STATES: set[ModalState] = set()

    def __init__(
        self,
        page: Page,
        probe: ImageProbe,
        placeholder_factory: Callable[[], str] = create_placeholder_image,
    ) -> None:
        self._page = page
        self._probe = probe
        self._placeholder_factory = placeholder_factory
        self._state = ModalState.closed
        self._request_id = 0
        self._preload_task: asyncio.Task[None] | None = None
        self._root: Element | None = None
        self._image: Element | None = None
        self._title: Element | None = None
        self._description: Element | None = None

    @property
    def state(self) -> ModalState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state == ModalState.open

    @property
    def request_id(self) -> int:
        return self._request_id

    def _get_current_state(self) -> ModalState:
        return self._state

    def _set_current_state(self, state: ModalState) -> None:
        self._state = state

    def setup(self) -> None:
        """Locate the modal subtree and attach the close handlers.

        Raises:
            ModalSetupError: If any part of the modal is missing from the page.

        """
        self._root = self._require("image-modal")
        self._image = self._require("modal-image")
        self._title = self._require("modal-title")
        self._description = self._require("modal-description")

        close_control = self._root.query("close")
        if close_control is None:
            raise ModalSetupError("Modal element not found: .close")

        self._root.set_attribute("data-placeholder", self._placeholder_factory())

        close_control.add_event_listener("click", lambda _event: self.close())
        self._page.add_event_listener("click", self._on_document_click)
        self._page.add_event_listener("keydown", self._on_keydown)

    def _require(self, element_id: str) -> Element:
        element = self._page.get_element_by_id(element_id)
        if element is None:
            raise ModalSetupError(f"Modal element not found: #{element_id}")
        return element

    def _on_document_click(self, event: Event) -> None:
        if event.target is self._root:
            self.close()

    def _on_keydown(self, event: Event) -> None:
        if event.key == "Escape" and self.is_open:
            self.close()

    def open(
        self, src: str, title: str, description: str
    ) -> asyncio.Task[None] | None:
        """Show the modal and start preloading ``src``.

        Title and description are set immediately regardless of the image
        outcome. Inside a running event loop the preload is scheduled as a
        task; without one it runs to completion before ``open`` returns.

        Args:
            src: Image source to display.
            title: Modal title text.
            description: Modal description text.

        Returns:
            The preload task, or None when the preload already settled.

        Raises:
            ModalSetupError: If setup() has not been called.

        """
        if self._root is None or self._image is None:
            raise ModalSetupError("Modal used before setup()")

        self._request_id += 1
        request_id = self._request_id

        self._image.set_attribute("src", "")
        self._title.text_content = title  # type: ignore[union-attr]
        self._description.text_content = description  # type: ignore[union-attr]
        self._root.display = "block"
        self._root.add_class(OPEN_CLASS)
        self.transition_to(ModalState.open)

        logger.debug("modal_opened", src=src, request_id=request_id)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # activated from synchronous code: settle the preload right away
            self._preload_task = None
            asyncio.run(self._preload(request_id, src))
            return None

        self._preload_task = loop.create_task(self._preload(request_id, src))
        return self._preload_task

    async def _preload(self, request_id: int, src: str) -> None:
        try:
            loadable = await self._probe.is_loadable(src)
        except Exception:
            logger.warning("modal_preload_failed", src=src, exc_info=True)
            loadable = False

        if request_id != self._request_id:
            logger.debug("stale_preload_ignored", src=src, request_id=request_id)
            return

        self._image.set_attribute(  # type: ignore[union-attr]
            "src", src if loadable else self._placeholder_factory()
        )

    def close(self) -> None:
        """Hide the modal and drop its open visual state."""
        if self._root is None:
            return
        self._request_id += 1
        self._root.display = "none"
        self._root.remove_class(OPEN_CLASS)
        if self.can_transition_to(ModalState.closed):
            self.transition_to(ModalState.closed)
            logger.debug("modal_closed")

    async def wait_for_preload(self) -> None:
        """Wait until the most recent preload has settled."""
        if self._preload_task is not None:
            await self._preload_task
