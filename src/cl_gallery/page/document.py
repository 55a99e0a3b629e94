"""In-process document model of the hosting page.

This module provides a small element tree with ids, classes, attributes,
inline display style, text and event listeners. The gallery mutates it the
way a browser script mutates the DOM; ``Page.to_html`` serializes the final
state to a self-contained HTML document.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterator

from cl_gallery.page.exceptions import ElementNotFoundError

__all__ = ["Element", "Event", "EventHandler", "Page"]

VOID_TAGS = frozenset({"img", "meta", "link", "br", "hr", "input"})


class Event:
    """An event delivered to element or document listeners.

    Attributes:
        type: Event name ("click", "load", "error", "keydown").
        target: Element the event was dispatched at.
        key: Key name for keyboard events.
        current_target: Element whose listeners are currently running.

    """

    def __init__(
        self,
        type: str,
        target: Element | None = None,
        key: str | None = None,
    ) -> None:
        self.type = type
        self.target = target
        self.key = key
        self.current_target: Element | None = None
        self.propagation_stopped = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


EventHandler = Callable[[Event], object]


class Element:
    """A node of the page tree."""

    def __init__(
        self,
        tag: str,
        *,
        id: str | None = None,
        classes: list[str] | tuple[str, ...] = (),
        attrs: dict[str, str] | None = None,
        text: str = "",
        display: str | None = None,
        raw: bool = False,
    ) -> None:
        self.tag = tag
        self.id = id
        self.class_list: list[str] = list(classes)
        self.attrs: dict[str, str] = dict(attrs or {})
        self.style: dict[str, str] = {}
        self.text_content = text
        self.children: list[Element] = []
        self.parent: Element | None = None
        # raw text is emitted unescaped (inline <style> and <script>)
        self.raw = raw
        self._listeners: dict[str, list[EventHandler]] = {}
        if display is not None:
            self.display = display

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.class_list)
        return f"<Element {self.tag}{ident}{classes}>"

    # --- tree ---

    def append(self, child: Element) -> Element:
        """Append a child element and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def clear(self) -> None:
        """Remove all children and text (``innerHTML = ''``)."""
        for child in self.children:
            child.parent = None
        self.children = []
        self.text_content = ""

    def iter(self) -> Iterator[Element]:
        """Iterate over this element and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def get_element_by_id(self, element_id: str) -> Element | None:
        return next((e for e in self.iter() if e.id == element_id), None)

    def get_elements_by_class_name(self, class_name: str) -> list[Element]:
        return [e for e in self.iter() if class_name in e.class_list]

    def query(self, class_name: str, tag: str | None = None) -> Element | None:
        """Return the first descendant with the class (and tag, if given)."""
        for element in self.get_elements_by_class_name(class_name):
            if tag is None or element.tag == tag:
                return element
        return None

    # --- classes, attributes and style ---

    def has_class(self, class_name: str) -> bool:
        return class_name in self.class_list

    def add_class(self, class_name: str) -> None:
        if class_name not in self.class_list:
            self.class_list.append(class_name)

    def remove_class(self, class_name: str) -> None:
        if class_name in self.class_list:
            self.class_list.remove(class_name)

    def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    @property
    def display(self) -> str | None:
        """Inline ``display`` style, or None when unset."""
        return self.style.get("display")

    @display.setter
    def display(self, value: str | None) -> None:
        if value is None:
            self.style.pop("display", None)
        else:
            self.style["display"] = value

    @property
    def is_hidden(self) -> bool:
        return self.display == "none"

    # --- events ---

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def dispatch_event(self, event: Event) -> Event:
        """Run this element's listeners for the event (no propagation)."""
        if event.target is None:
            event.target = self
        event.current_target = self
        for handler in list(self._listeners.get(event.type, [])):
            handler(event)
        return event

    # --- serialization ---

    def _start_tag(self) -> str:
        parts = [self.tag]
        if self.id:
            parts.append(f'id="{html.escape(self.id)}"')
        if self.class_list:
            parts.append(f'class="{html.escape(" ".join(self.class_list))}"')
        for name, value in self.attrs.items():
            parts.append(f'{name}="{html.escape(str(value))}"')
        if self.style:
            style = " ".join(f"{k}: {v};" for k, v in self.style.items())
            parts.append(f'style="{html.escape(style)}"')
        return f"<{' '.join(parts)}>"

    def to_html(self, indent: int = 0) -> str:
        """Serialize the element subtree as indented HTML."""
        pad = "  " * indent
        start = self._start_tag()
        if self.tag in VOID_TAGS:
            return f"{pad}{start}"

        text = self.text_content if self.raw else html.escape(self.text_content, quote=False)
        if not self.children:
            if self.raw and text:
                return f"{pad}{start}\n{text}\n{pad}</{self.tag}>"
            return f"{pad}{start}{text}</{self.tag}>"

        lines = [f"{pad}{start}"]
        if text:
            lines.append(f"{pad}  {text}")
        lines.extend(child.to_html(indent + 1) for child in self.children)
        lines.append(f"{pad}</{self.tag}>")
        return "\n".join(lines)


class Page:
    """The hosting page: an ``<html>`` tree plus document-level listeners."""

    def __init__(self, lang: str = "en") -> None:
        self.root = Element("html", attrs={"lang": lang})
        self.head = self.root.append(Element("head"))
        self.body = self.root.append(Element("body"))
        self._listeners: dict[str, list[EventHandler]] = {}

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self.root.get_element_by_id(element_id)

    def get_elements_by_class_name(self, class_name: str) -> list[Element]:
        return self.root.get_elements_by_class_name(class_name)

    def require_element_by_id(self, element_id: str) -> Element:
        """Return the element with the id, raising if the page lacks it.

        Raises:
            ElementNotFoundError: If no element has the id.

        """
        element = self.get_element_by_id(element_id)
        if element is None:
            raise ElementNotFoundError(f"#{element_id}")
        return element

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        """Register a document-level listener."""
        self._listeners.setdefault(event_type, []).append(handler)

    def dispatch(self, event: Event) -> Event:
        """Bubble an event from its target up to the document listeners."""
        node = event.target
        while node is not None and not event.propagation_stopped:
            node.dispatch_event(event)
            node = node.parent
        if not event.propagation_stopped:
            event.current_target = None
            for handler in list(self._listeners.get(event.type, [])):
                handler(event)
        return event

    def click(self, element: Element) -> Event:
        """Simulate a user click on an element."""
        return self.dispatch(Event("click", target=element))

    def press_key(self, key: str) -> Event:
        """Simulate a keydown on the document body."""
        return self.dispatch(Event("keydown", target=self.body, key=key))

    def to_html(self) -> str:
        """Serialize the page as a complete HTML document."""
        return "<!DOCTYPE html>\n" + self.root.to_html() + "\n"
