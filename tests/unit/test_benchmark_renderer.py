"""Unit tests for BenchmarkRenderer and show_error."""

from typing import Any

import pytest

from cl_gallery.config.loader import ConfigLoader
from cl_gallery.config.settings import GallerySettings
from cl_gallery.models.enums import ModalState
from cl_gallery.page.document import Element, Page
from cl_gallery.rendering.benchmarks import BenchmarkRenderer
from cl_gallery.rendering.errors import show_error
from cl_gallery.rendering.modal import ModalController
from tests.fixtures import StaticProbe


def _render(page: Page, config_value: dict[str, Any], settings: GallerySettings) -> BenchmarkRenderer:
    modal = ModalController(page, StaticProbe())
    modal.setup()
    renderer = BenchmarkRenderer(ConfigLoader(config_value).load(), modal, settings)
    renderer.render(page)
    return renderer


class TestBenchmarkSections:
    """Tests for section and method row structure."""

    def test_one_section_per_benchmark(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        _render(page, sample_config, settings)

        sections = page.get_elements_by_class_name("benchmark-section")
        assert len(sections) == 2
        assert [s.query("benchmark-subtitle").text_content for s in sections] == [
            "Split CIFAR-10",
            "Split Tiny-ImageNet",
        ]
        assert [s.query("benchmark-dataset").text_content for s in sections] == [
            "CIFAR-10",
            "Tiny-ImageNet",
        ]
        assert sections[0].query("benchmark-title").text_content == "Benchmark"

    def test_method_rows_and_stats(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        _render(page, sample_config, settings)

        rows = page.get_elements_by_class_name("method-row")
        assert [r.query("method-name").text_content for r in rows] == ["EWC", "LwF", "iCaRL"]

        ewc_stats = rows[0].get_elements_by_class_name("stat-item")
        assert [
            (s.query("stat-value").text_content, s.query("stat-label").text_content)
            for s in ewc_stats
        ] == [("71.5", "Avg Acc"), ("90", "ASR")]
        assert rows[1].get_elements_by_class_name("stat-item") == []
        assert rows[0].query("method-legend").get_attribute("src") == "data/legend.png"

    def test_rerender_replaces_previous_content(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        renderer = _render(page, sample_config, settings)
        renderer.render(page)

        assert len(page.get_elements_by_class_name("benchmark-section")) == 2
        assert len(renderer.chains) == 9

    def test_missing_container_is_a_no_op(
        self, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        page = Page()
        renderer = BenchmarkRenderer(
            ConfigLoader(sample_config).load(), ModalController(page, StaticProbe()), settings
        )

        renderer.render(page)

        assert renderer.chains == []

    def test_empty_benchmarks_render_nothing(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        sample_config["benchmarks"] = []

        _render(page, sample_config, settings)

        assert page.get_element_by_id("benchmarks-container").children == []


class TestImageCells:
    """Tests for per-class image cells."""

    def test_cell_count_matches_target_classes(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        _render(page, sample_config, settings)

        for grid in page.get_elements_by_class_name("image-grid"):
            assert len(grid.get_elements_by_class_name("image-item")) == 3

    def test_zero_target_classes(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        sample_config["target_classes"] = 0

        _render(page, sample_config, settings)

        assert page.get_elements_by_class_name("image-item") == []
        assert len(page.get_elements_by_class_name("method-row")) == 3

    def test_captions_fall_back_to_class_index(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        _render(page, sample_config, settings)

        grid = page.get_elements_by_class_name("image-grid")[0]
        captions = [c.text_content for c in grid.get_elements_by_class_name("image-caption")]
        assert captions == ["airplane", "automobile", "Class 2"]

    def test_candidates_in_format_order(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        _render(page, sample_config, settings)

        cell = page.get_elements_by_class_name("image-item")[1]
        images = cell.get_elements_by_class_name("result-image")
        assert [i.get_attribute("src") for i in images] == [
            "data/cifar10/ewc/class_1.png",
            "data/cifar10/ewc/class_1.jpg",
            "data/cifar10/ewc/class_1.jpeg",
            "data/cifar10/ewc/class_1.svg",
        ]
        assert all(i.get_attribute("alt") == "automobile" for i in images)
        assert [i.display for i in images] == ["block", "none", "none", "none"]

    def test_placeholder_structure(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        _render(page, sample_config, settings)

        cell = page.get_elements_by_class_name("image-item")[0]
        placeholder = cell.query("image-placeholder")
        assert placeholder.display == "none"
        assert placeholder.children[0].text_content == "No Image"

    def test_data_dir_setting(self, page: Page, sample_config: dict[str, Any]) -> None:
        settings = GallerySettings(data_dir="assets")

        _render(page, sample_config, settings)

        first = page.get_elements_by_class_name("result-image")[0]
        assert first.get_attribute("src") == "assets/cifar10/ewc/class_0.png"
        assert page.get_elements_by_class_name("method-legend")[0].get_attribute("src") == (
            "assets/legend.png"
        )

    @pytest.mark.asyncio
    async def test_click_opens_modal_with_cell_data(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        """Test that a click on an inner element bubbles to the cell listener."""
        probe = StaticProbe()
        modal = ModalController(page, probe)
        modal.setup()
        BenchmarkRenderer(ConfigLoader(sample_config).load(), modal, settings).render(page)

        tiny_cell = page.get_elements_by_class_name("image-grid")[2].children[2]
        page.click(tiny_cell.query("image-caption"))
        await modal.wait_for_preload()

        assert modal.state == ModalState.open
        assert page.get_element_by_id("modal-title").text_content == "iCaRL - Class 2"
        assert page.get_element_by_id("modal-description").text_content == (
            "Split Tiny-ImageNet on Tiny-ImageNet"
        )
        assert probe.calls == ["data/tiny/icarl/class_2.png"]

    def test_click_without_event_loop_opens_modal(
        self, page: Page, sample_config: dict[str, Any], settings: GallerySettings
    ) -> None:
        """Test that a cell activated from synchronous code settles its preload."""
        probe = StaticProbe({"data/cifar10/ewc/class_0.png"})
        modal = ModalController(page, probe)
        modal.setup()
        BenchmarkRenderer(ConfigLoader(sample_config).load(), modal, settings).render(page)

        page.click(page.get_elements_by_class_name("image-item")[0])

        assert modal.state == ModalState.open
        assert page.get_element_by_id("modal-title").text_content == "EWC - airplane"
        assert page.get_element_by_id("modal-image").get_attribute("src") == (
            "data/cifar10/ewc/class_0.png"
        )


class TestShowError:
    """Tests for the error presenter."""

    def test_replaces_container_contents(self, page: Page) -> None:
        container = page.get_element_by_id("benchmarks-container")
        container.append(Element("section", classes=["benchmark-section"]))

        show_error(page, "Failed to load application data")

        assert len(container.children) == 1
        blocks = page.get_elements_by_class_name("error-block")
        assert len(blocks) == 1
        assert [c.text_content for c in blocks[0].children] == [
            "Error",
            "Failed to load application data",
        ]

    def test_missing_container_is_a_no_op(self) -> None:
        page = Page()
        show_error(page, "boom")
        assert page.get_elements_by_class_name("error-block") == []
