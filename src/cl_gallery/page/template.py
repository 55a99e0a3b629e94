"""Default hosting page for the gallery.

The gallery does not create page chrome itself; it expects a page that
already provides the header regions, the benchmarks container and the
modal subtree. This module builds that shell, with the stylesheet and the
browser script that replays the fallback chain and modal client-side.
"""

from __future__ import annotations

from cl_gallery.config.settings import GallerySettings, get_settings
from cl_gallery.page.document import Element, Page

__all__ = ["build_default_page"]


def build_default_page(settings: GallerySettings | None = None) -> Page:
    """Build the hosting page shell.

    Args:
        settings: Gallery settings (defaults to the cached settings).

    Returns:
        A Page with every element the gallery binds to.

    """
    settings = settings or get_settings()
    page = Page()

    head = page.head
    head.append(Element("meta", attrs={"charset": "UTF-8"}))
    head.append(
        Element(
            "meta",
            attrs={"name": "viewport", "content": "width=device-width, initial-scale=1.0"},
        )
    )
    head.append(Element("title", text=settings.page_title))
    head.append(Element("style", text=_CSS, raw=True))

    header = page.body.append(Element("header", classes=["hero"]))
    hero = header.append(Element("div", classes=["container"]))
    hero.append(Element("h1", classes=["title"], text=settings.page_title))
    hero.append(Element("p", classes=["subtitle"]))
    links = hero.append(Element("div", classes=["links"]))
    links.append(Element("a", id="paper-link", classes=["button"], attrs={"href": "#"}, text="Paper"))
    links.append(Element("a", id="code-link", classes=["button"], attrs={"href": "#"}, text="Code"))

    main = page.body.append(Element("main", classes=["container"]))
    main.append(Element("div", id="benchmarks-container"))

    modal = page.body.append(Element("div", id="image-modal", classes=["modal"], display="none"))
    content = modal.append(Element("div", classes=["modal-content"]))
    content.append(Element("span", classes=["close"], text="×"))
    content.append(Element("img", id="modal-image", attrs={"src": "", "alt": ""}))
    caption = content.append(Element("div", classes=["modal-caption"]))
    caption.append(Element("h3", id="modal-title"))
    caption.append(Element("p", id="modal-description"))

    page.body.append(Element("script", text=_SCRIPT, raw=True))
    return page


_CSS = """
:root { --bg-primary: #ffffff; --bg-page: #f5f6f8; --text-primary: #1f2937;
        --text-secondary: #6b7280; --border-color: #e5e7eb; --accent: #4a90e2;
        --error-color: #dc2626; --border-radius-xl: 12px; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
       margin: 0; background: var(--bg-page); color: var(--text-primary); }
.container { max-width: 1200px; margin: 0 auto; padding: 0 20px; }
.hero { background: var(--bg-primary); border-bottom: 1px solid var(--border-color);
        padding: 40px 0; text-align: center; }
.subtitle { color: var(--text-secondary); }
.links .button { display: inline-block; margin: 0 6px; padding: 8px 18px; border-radius: 20px;
                 background: var(--text-primary); color: #fff; text-decoration: none; }
.benchmark-section { background: var(--bg-primary); border: 1px solid var(--border-color);
                     border-radius: var(--border-radius-xl); margin: 30px 0; padding: 24px; }
.benchmark-header { text-align: center; margin-bottom: 20px; }
.benchmark-header h2, .benchmark-header h3, .benchmark-header h4 { margin: 4px 0; }
.benchmark-dataset { color: var(--text-secondary); font-weight: normal; }
.method-row { border-top: 1px solid var(--border-color); padding: 16px 0; }
.method-header { display: flex; align-items: center; gap: 16px; flex-wrap: wrap; }
.method-name { margin: 0; min-width: 120px; }
.method-legend { max-height: 32px; }
.method-stats { display: flex; gap: 16px; }
.stat-item { display: flex; flex-direction: column; align-items: center; }
.stat-value { font-weight: 600; }
.stat-label { font-size: 0.8em; color: var(--text-secondary); }
.image-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(140px, 1fr));
              gap: 12px; margin-top: 12px; }
.image-item { cursor: pointer; text-align: center; }
.result-image { width: 100%; border-radius: 6px; border: 1px solid var(--border-color); }
.image-placeholder { height: 120px; align-items: center; justify-content: center;
                     background: #f3f4f6; color: var(--text-secondary); border-radius: 6px; }
.image-caption { font-size: 0.85em; margin-top: 4px; }
.error-block { text-align: center; padding: 2rem; }
.error-block h3 { color: var(--error-color); margin-bottom: 1rem; }
.error-block p { color: var(--text-secondary); }
.modal { position: fixed; z-index: 1000; inset: 0; overflow: auto; background: rgba(0,0,0,0.8); }
.modal-content { position: relative; margin: 5% auto; max-width: 900px; background: var(--bg-primary);
                 border-radius: var(--border-radius-xl); padding: 20px; }
.modal-content img { width: 100%; }
.close { position: absolute; top: 8px; right: 16px; font-size: 28px; cursor: pointer; }
.modal-open .modal-content { animation: zoom 0.2s ease-out; }
@keyframes zoom { from { transform: scale(0.95); opacity: 0; } to { transform: scale(1); opacity: 1; } }
"""

_SCRIPT = """
(function () {
  "use strict";
  var modal = document.getElementById("image-modal");
  var modalImage = document.getElementById("modal-image");
  var modalTitle = document.getElementById("modal-title");
  var modalDescription = document.getElementById("modal-description");
  var requestId = 0;

  function closeModal() {
    requestId += 1;
    modal.style.display = "none";
    modal.classList.remove("modal-open");
  }

  function openModal(src, title, description) {
    var current = ++requestId;
    var preload = new Image();
    preload.onload = function () {
      if (current === requestId) { modalImage.src = src; }
    };
    preload.onerror = function () {
      if (current === requestId) { modalImage.src = modal.dataset.placeholder || ""; }
    };
    preload.src = src;
    modalTitle.textContent = title;
    modalDescription.textContent = description;
    modal.style.display = "block";
    modal.classList.add("modal-open");
  }

  function attachFallback(item) {
    var candidates = Array.prototype.slice.call(item.querySelectorAll("img.result-image"));
    var placeholder = item.querySelector(".image-placeholder");
    // errors raised before this script ran are only visible on raster images;
    // a loaded SVG without intrinsic size also reports naturalWidth 0
    var failed = candidates.map(function (img) {
      var isVector = /[.]svg$/i.test(img.getAttribute("src") || "");
      return !isVector && img.complete && img.naturalWidth === 0;
    });

    function show() {
      var cursor = failed.indexOf(false);
      candidates.forEach(function (img, i) {
        img.style.display = i === cursor ? "block" : "none";
      });
      if (placeholder) { placeholder.style.display = cursor === -1 ? "flex" : "none"; }
    }

    candidates.forEach(function (img, i) {
      img.addEventListener("error", function () { failed[i] = true; show(); });
    });
    show();
  }

  Array.prototype.forEach.call(document.querySelectorAll(".image-item"), function (item) {
    attachFallback(item);
    item.addEventListener("click", function () {
      openModal(item.dataset.src, item.dataset.title, item.dataset.description);
    });
  });

  modal.querySelector(".close").addEventListener("click", closeModal);
  window.addEventListener("click", function (event) {
    if (event.target === modal) { closeModal(); }
  });
  document.addEventListener("keydown", function (event) {
    if (event.key === "Escape" && modal.style.display === "block") { closeModal(); }
  });
})();
"""
