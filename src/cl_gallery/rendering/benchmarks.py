"""Renders benchmark sections, method rows and per-class image grids."""

from __future__ import annotations

from cl_gallery.config.defaults import NO_IMAGE_TEXT
from cl_gallery.config.settings import GallerySettings, get_settings
from cl_gallery.logging_config import get_logger
from cl_gallery.models.gallery import Benchmark, GalleryConfig, Method
from cl_gallery.page.document import Element, Event, Page
from cl_gallery.rendering.fallback import FallbackChain
from cl_gallery.rendering.modal import ModalController

__all__ = ["BenchmarkRenderer"]

logger = get_logger(__name__)


class BenchmarkRenderer:
    """Builds one section per benchmark inside ``#benchmarks-container``.

    Each method row gets exactly ``target_classes`` image cells. Every cell
    carries its own FallbackChain and a click listener that opens the shared
    modal with that cell's first-preference image.

    Attributes:
        chains: Fallback chains of every rendered cell, in document order.

    """

    def __init__(
        self,
        config: GalleryConfig,
        modal: ModalController,
        settings: GallerySettings | None = None,
    ) -> None:
        self._config = config
        self._modal = modal
        self._settings = settings or get_settings()
        self.chains: list[FallbackChain] = []

    def render(self, page: Page) -> None:
        container = page.get_element_by_id("benchmarks-container")
        if container is None:
            logger.warning("benchmarks_container_missing")
            return

        container.clear()
        self.chains = []

        for benchmark in self._config.benchmarks:
            container.append(self._create_benchmark_section(benchmark))

        logger.info(
            "benchmarks_rendered",
            benchmarks=len(self._config.benchmarks),
            cells=len(self.chains),
        )

    def _create_benchmark_section(self, benchmark: Benchmark) -> Element:
        section = Element("section", classes=["benchmark-section"])

        header = section.append(Element("div", classes=["benchmark-header"]))
        header.append(Element("h2", classes=["benchmark-title"], text="Benchmark"))
        header.append(Element("h3", classes=["benchmark-subtitle"], text=benchmark.name))
        header.append(
            Element("h4", classes=["benchmark-dataset"], text=benchmark.dataset or "")
        )

        grid = section.append(Element("div", classes=["results-grid"]))
        for method in benchmark.cil_methods:
            grid.append(self._create_method_row(method, benchmark))

        return section

    def _create_method_row(self, method: Method, benchmark: Benchmark) -> Element:
        row = Element("div", classes=["method-row"])

        header = row.append(Element("div", classes=["method-header"]))
        header.append(Element("h4", classes=["method-name"], text=method.name))
        header.append(
            Element(
                "img",
                classes=["method-legend"],
                attrs={"src": self._settings.legend_path, "alt": ""},
            )
        )
        stats = header.append(Element("div", classes=["method-stats"]))
        for stat in method.stat:
            item = stats.append(Element("div", classes=["stat-item"]))
            item.append(Element("span", classes=["stat-value"], text=stat.display_value))
            item.append(Element("span", classes=["stat-label"], text=stat.name))

        grid = row.append(Element("div", classes=["image-grid"]))
        for class_index in range(self._config.target_classes):
            grid.append(self._create_image_cell(method, benchmark, class_index))

        return row

    def _create_image_cell(
        self, method: Method, benchmark: Benchmark, class_index: int
    ) -> Element:
        class_name = self._config.class_label(class_index)
        paths = method.candidate_paths(class_index, self._settings.data_dir)
        title = f"{method.name} - {class_name}"
        description = benchmark.description

        cell = Element(
            "div",
            classes=["image-item"],
            attrs={
                "data-class-index": str(class_index),
                "data-src": paths[0],
                "data-title": title,
                "data-description": description,
            },
        )

        candidates = [
            cell.append(
                Element("img", classes=["result-image"], attrs={"src": path, "alt": class_name})
            )
            for path in paths
        ]
        placeholder = cell.append(Element("div", classes=["image-placeholder"]))
        placeholder.append(Element("span", text=NO_IMAGE_TEXT))
        cell.append(Element("div", classes=["image-caption"], text=class_name))

        chain = FallbackChain(candidates, placeholder)
        chain.attach()
        self.chains.append(chain)

        def open_modal(_event: Event) -> None:
            self._modal.open(paths[0], title, description)

        cell.add_event_listener("click", open_modal)
        return cell
