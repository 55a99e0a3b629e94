"""Configuration models for the benchmark gallery.

This module defines Pydantic models representing the embedded gallery
configuration: project metadata, benchmarks, compared methods and their
summary statistics.
"""

from __future__ import annotations

from pydantic import Field

from cl_gallery.config.defaults import DEFAULT_DATA_DIR, IMAGE_FORMATS
from cl_gallery.models.base import BaseSchema

__all__ = [
    "Benchmark",
    "GalleryConfig",
    "Method",
    "ProjectInfo",
    "Stat",
]


class ProjectInfo(BaseSchema):
    """Project metadata shown in the page header.

    Attributes:
        title: Project or paper title.
        authors: Author names in display order.
        paper_url: Link to the paper.
        code_url: Link to the code repository.

    """

    title: str | None = None
    authors: list[str] | None = None
    paper_url: str | None = None
    code_url: str | None = None


class Stat(BaseSchema):
    """A named summary statistic of a method (e.g. "Avg Acc")."""

    name: str = ""
    value: float | int | str | None = None

    @property
    def display_value(self) -> str:
        """Value as shown on the page; integral floats drop the ``.0``."""
        if self.value is None:
            return ""
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return str(self.value)


class Method(BaseSchema):
    """One compared technique within a benchmark.

    Attributes:
        name: Display name of the method.
        results_path: Directory segment under the data directory holding
            the per-class result images.
        stat: Summary statistics in display order.

    """

    name: str = ""
    results_path: str
    stat: list[Stat] = Field(default_factory=list)

    def candidate_paths(
        self, class_index: int, data_dir: str = DEFAULT_DATA_DIR
    ) -> list[str]:
        """Build the candidate image paths for one class, in preference order.

        Args:
            class_index: Index of the class.
            data_dir: Relative data directory prefix.

        Returns:
            Paths of the form ``<data_dir>/<results_path>/class_<i>.<ext>``.

        """
        base = f"{data_dir}/{self.results_path}/class_{class_index}"
        return [f"{base}.{ext}" for ext in IMAGE_FORMATS]


class Benchmark(BaseSchema):
    """A named evaluation scenario tied to a dataset."""

    name: str = ""
    dataset: str | None = None
    cil_methods: list[Method] = Field(default_factory=list)

    @property
    def description(self) -> str:
        """Caption used for every image of this benchmark."""
        if self.dataset is None:
            return self.name
        return f"{self.name} on {self.dataset}"


class GalleryConfig(BaseSchema):
    """Top-level gallery configuration.

    Attributes:
        project: Header metadata.
        target_classes: Number of image cells rendered per method.
        class_names: Class labels indexed by class id; may be shorter
            than target_classes and may hold None for unnamed classes.
        benchmarks: Benchmarks in display order.

    """

    project: ProjectInfo = Field(default_factory=ProjectInfo)
    target_classes: int = Field(ge=0)
    class_names: list[str | None] = Field(default_factory=list)
    benchmarks: list[Benchmark] = Field(default_factory=list)

    def class_label(self, class_index: int) -> str:
        """Return the label of a class, synthesizing one when missing."""
        if 0 <= class_index < len(self.class_names) and self.class_names[class_index]:
            return self.class_names[class_index]
        return f"Class {class_index}"
