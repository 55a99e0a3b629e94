"""Pytest configuration and shared fixtures for the cl-gallery test suite.

Provides a sample embedded configuration, a rendered default page and a
site directory with real result images written by Pillow.
"""

from pathlib import Path
from typing import Any

import pytest

from cl_gallery.config.settings import GallerySettings, get_settings
from cl_gallery.page.document import Page
from cl_gallery.page.template import build_default_page
from tests.fixtures import write_image


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> GallerySettings:
    return GallerySettings()


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Provide an embedded configuration with two benchmarks.

    Three target classes but only two class names, so the third class
    falls back to a synthesized label.
    """
    return {
        "project": {
            "title": "Forgetting Under Attack",
            "authors": ["A. Rossi", "B. Chen", "C. Okafor"],
            "paper_url": "https://arxiv.org/abs/2401.00001",
            "code_url": "https://github.com/example/cl-attack",
        },
        "target_classes": 3,
        "class_names": ["airplane", "automobile"],
        "benchmarks": [
            {
                "name": "Split CIFAR-10",
                "dataset": "CIFAR-10",
                "cil_methods": [
                    {
                        "name": "EWC",
                        "results_path": "cifar10/ewc",
                        "stat": [
                            {"name": "Avg Acc", "value": 71.5},
                            {"name": "ASR", "value": 90.0},
                        ],
                    },
                    {"name": "LwF", "results_path": "cifar10/lwf", "stat": []},
                ],
            },
            {
                "name": "Split Tiny-ImageNet",
                "dataset": "Tiny-ImageNet",
                "cil_methods": [
                    {
                        "name": "iCaRL",
                        "results_path": "tiny/icarl",
                        "stat": [{"name": "Avg Acc", "value": "n/a"}],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def page(settings: GallerySettings) -> Page:
    return build_default_page(settings)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Provide a site root whose data/ directory matches sample_config.

    - EWC: class 0 as png, class 1 as jpg only, class 2 missing
    - LwF: no images
    - iCaRL: class 0 as svg only, class 1 with a corrupt png and a valid jpeg
    """
    site = tmp_path / "site"
    data = site / "data"
    write_image(data / "legend.png")
    write_image(data / "cifar10" / "ewc" / "class_0.png")
    write_image(data / "cifar10" / "ewc" / "class_1.jpg")
    write_image(data / "tiny" / "icarl" / "class_0.svg")
    (data / "tiny" / "icarl" / "class_1.png").write_bytes(b"definitely not a png")
    write_image(data / "tiny" / "icarl" / "class_1.jpeg")
    return site
