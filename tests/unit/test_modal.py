"""Unit tests for ModalController."""

import asyncio

import pytest

from cl_gallery.models.enums import ModalState
from cl_gallery.page.document import Page
from cl_gallery.rendering.exceptions import ModalSetupError
from cl_gallery.rendering.modal import ModalController
from cl_gallery.rendering.placeholder import create_placeholder_image
from tests.fixtures import GatedProbe, StaticProbe


def _modal(page: Page, probe) -> ModalController:
    modal = ModalController(page, probe)
    modal.setup()
    return modal


class RaisingProbe:
    """Probe that always raises."""

    async def is_loadable(self, src: str) -> bool:
        raise RuntimeError(f"cannot probe {src}")


class TestModalSetup:
    """Tests for ModalController.setup()."""

    def test_initial_state_closed(self, page: Page) -> None:
        modal = _modal(page, StaticProbe())

        assert modal.state == ModalState.closed
        assert page.get_element_by_id("image-modal").is_hidden

    def test_placeholder_exposed_for_browser_script(self, page: Page) -> None:
        _modal(page, StaticProbe())

        root = page.get_element_by_id("image-modal")
        assert root.get_attribute("data-placeholder") == create_placeholder_image()

    @pytest.mark.parametrize(
        "element_id",
        ["image-modal", "modal-image", "modal-title", "modal-description"],
    )
    def test_missing_element_raises(self, page: Page, element_id: str) -> None:
        page.get_element_by_id(element_id).id = None

        with pytest.raises(ModalSetupError, match=f"#{element_id}"):
            ModalController(page, StaticProbe()).setup()

    def test_missing_close_control_raises(self, page: Page) -> None:
        root = page.get_element_by_id("image-modal")
        root.query("close").remove_class("close")

        with pytest.raises(ModalSetupError, match=r"\.close"):
            ModalController(page, StaticProbe()).setup()

    @pytest.mark.asyncio
    async def test_open_before_setup_raises(self, page: Page) -> None:
        with pytest.raises(ModalSetupError):
            ModalController(page, StaticProbe()).open("a.png", "t", "d")


class TestModalOpen:
    """Tests for opening the modal and preloading its image."""

    @pytest.mark.asyncio
    async def test_loadable_image_is_shown(self, page: Page) -> None:
        modal = _modal(page, StaticProbe({"data/ewc/class_0.png"}))

        modal.open("data/ewc/class_0.png", "EWC - cat", "Split CIFAR on CIFAR-10")
        await modal.wait_for_preload()

        root = page.get_element_by_id("image-modal")
        assert modal.is_open
        assert root.display == "block"
        assert root.has_class("modal-open")
        assert page.get_element_by_id("modal-image").get_attribute("src") == "data/ewc/class_0.png"
        assert page.get_element_by_id("modal-title").text_content == "EWC - cat"
        assert page.get_element_by_id("modal-description").text_content == (
            "Split CIFAR on CIFAR-10"
        )

    @pytest.mark.asyncio
    async def test_unloadable_image_shows_placeholder(self, page: Page) -> None:
        modal = _modal(page, StaticProbe())

        modal.open("data/missing.png", "LwF - dog", "desc")
        await modal.wait_for_preload()

        src = page.get_element_by_id("modal-image").get_attribute("src")
        assert src.startswith("data:image/png;base64,")
        assert page.get_element_by_id("modal-title").text_content == "LwF - dog"

    @pytest.mark.asyncio
    async def test_probe_exception_shows_placeholder(self, page: Page) -> None:
        modal = _modal(page, RaisingProbe())

        modal.open("data/a.png", "t", "d")
        await modal.wait_for_preload()

        assert page.get_element_by_id("modal-image").get_attribute("src") == (
            create_placeholder_image()
        )

    @pytest.mark.asyncio
    async def test_texts_set_before_preload_settles(self, page: Page) -> None:
        probe = GatedProbe()
        modal = _modal(page, probe)

        modal.open("data/a.png", "Title", "Description")
        await asyncio.sleep(0)

        assert page.get_element_by_id("modal-title").text_content == "Title"
        assert page.get_element_by_id("modal-image").get_attribute("src") == ""

        probe.release("data/a.png", True)
        await modal.wait_for_preload()
        assert page.get_element_by_id("modal-image").get_attribute("src") == "data/a.png"

    @pytest.mark.asyncio
    async def test_stale_preload_does_not_overwrite_newer_request(self, page: Page) -> None:
        """Test that a slow first preload resolving last is ignored."""
        probe = GatedProbe()
        modal = _modal(page, probe)

        first = modal.open("data/a.png", "A", "first")
        second = modal.open("data/b.png", "B", "second")

        probe.release("data/b.png", True)
        await second
        probe.release("data/a.png", True)
        await first

        assert page.get_element_by_id("modal-image").get_attribute("src") == "data/b.png"
        assert page.get_element_by_id("modal-title").text_content == "B"

    @pytest.mark.asyncio
    async def test_preload_after_close_is_ignored(self, page: Page) -> None:
        probe = GatedProbe()
        modal = _modal(page, probe)

        task = modal.open("data/a.png", "A", "first")
        modal.close()
        probe.release("data/a.png", True)
        await task

        assert page.get_element_by_id("modal-image").get_attribute("src") == ""
        assert modal.state == ModalState.closed

    def test_open_without_event_loop(self, page: Page) -> None:
        modal = _modal(page, StaticProbe())

        result = modal.open("data/missing.png", "LwF - dog", "desc")

        assert result is None
        assert modal.is_open
        assert page.get_element_by_id("modal-image").get_attribute("src") == (
            create_placeholder_image()
        )


class TestModalClose:
    """Tests for the three close triggers."""

    async def _open(self, page: Page) -> ModalController:
        modal = _modal(page, StaticProbe())
        modal.open("data/a.png", "t", "d")
        await modal.wait_for_preload()
        return modal

    def _assert_closed(self, page: Page, modal: ModalController) -> None:
        root = page.get_element_by_id("image-modal")
        assert modal.state == ModalState.closed
        assert root.display == "none"
        assert not root.has_class("modal-open")

    @pytest.mark.asyncio
    async def test_close_control(self, page: Page) -> None:
        modal = await self._open(page)

        page.click(page.get_element_by_id("image-modal").query("close"))

        self._assert_closed(page, modal)

    @pytest.mark.asyncio
    async def test_backdrop_click(self, page: Page) -> None:
        modal = await self._open(page)

        page.click(page.get_element_by_id("image-modal"))

        self._assert_closed(page, modal)

    @pytest.mark.asyncio
    async def test_escape_key(self, page: Page) -> None:
        modal = await self._open(page)

        page.press_key("Escape")

        self._assert_closed(page, modal)

    @pytest.mark.asyncio
    async def test_click_inside_content_keeps_modal_open(self, page: Page) -> None:
        modal = await self._open(page)

        page.click(page.get_element_by_id("modal-image"))

        assert modal.is_open

    @pytest.mark.asyncio
    async def test_other_keys_keep_modal_open(self, page: Page) -> None:
        modal = await self._open(page)

        page.press_key("Enter")

        assert modal.is_open

    def test_escape_while_closed_is_a_no_op(self, page: Page) -> None:
        modal = _modal(page, StaticProbe())

        page.press_key("Escape")

        assert modal.state == ModalState.closed
        assert modal.request_id == 0
