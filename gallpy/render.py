"""
Render gallery, image and movie pages with Jinja2.

Templates see the tree nodes directly plus a set of view helpers that
return safe markup (links, breadcrumbs, titles and the table layout used
by the thumbnail partials).
"""

import re
from pathlib import Path
from typing import Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError
from markupsafe import Markup

from .config import ROWSIZE, STYLESHEET_FILENAME
from .errors import RenderError
from .log import get_logger
from .templates import STYLESHEET, TEMPLATES

DATE_RE = re.compile(r"^(\d{4}-\d{1,2}(-\d{1,2})?)[ -](.+)$")


# ---------------------------------------------------------------------------
# Table layout helpers
# ---------------------------------------------------------------------------

def start_of_row(counter: int, rowsize: int) -> bool:
    return counter % rowsize == 0


def end_of_row(counter: int, rowsize: int, listsize: int) -> bool:
    return counter == listsize - 1 or counter % rowsize == rowsize - 1


def start_of_table(counter: int) -> bool:
    return counter == 0


def end_of_table(counter: int, listsize: int) -> bool:
    return counter == listsize - 1


def maybe_start_row(counter, rowsize):
    return Markup("<tr>") if start_of_row(counter, rowsize) else ""


def maybe_end_row(counter, rowsize, listsize):
    return Markup("</tr>") if end_of_row(counter, rowsize, listsize) else ""


def maybe_start_table(counter):
    return Markup("<table>") if start_of_table(counter) else ""


def maybe_end_table(counter, listsize):
    return Markup("</table>") if end_of_table(counter, listsize) else ""


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class Renderer:
    def __init__(self, root, urls, rowsize: int = ROWSIZE, templates: Optional[dict] = None, logger=None):
        self.root = root
        self.urls = urls
        self.rowsize = rowsize
        self.logger = get_logger(logger)
        self.env = Environment(
            loader=DictLoader(templates or TEMPLATES),
            autoescape=True,
            undefined=StrictUndefined,
        )
        self.env.globals.update(
            url_for=self.url_for,
            link_to=self.link_to,
            image_link_to=self.image_link_to,
            stylesheet=self.stylesheet,
            breadcrumb=self.breadcrumb,
            title=self.title,
            details=self.details,
            link_to_previous=self.link_to_previous,
            link_to_next=self.link_to_next,
            render_collection=self.render_collection,
            maybe_start_row=maybe_start_row,
            maybe_end_row=maybe_end_row,
            maybe_start_table=maybe_start_table,
            maybe_end_table=maybe_end_table,
        )

    def render(self, name: str, **bindings) -> str:
        try:
            return self.env.get_template(f"{name}.html").render(**bindings)
        except TemplateError as exc:
            raise RenderError(name, exc) from exc

    def render_collection(self, partial: str, collection, **bindings) -> Markup:
        """Render _<partial> once per element, with a zero-based <partial>_counter."""
        bindings = dict(bindings, listsize=len(collection), rowsize=self.rowsize)
        parts = []
        for counter, element in enumerate(collection):
            bindings[partial] = element
            bindings[f"{partial}_counter"] = counter
            parts.append(self.render(f"_{partial}", **bindings))
        return Markup("".join(parts))

    # -- helpers exposed to templates --

    def url_for(self, path) -> str:
        return self.urls.url_for(path)

    def link_to(self, name, path) -> Markup:
        return Markup('<a href="{}">{}</a>').format(self.url_for(path), name)

    def image_link_to(self, img, target) -> Markup:
        return Markup('<a href="{}" class="image"><img src="{}" /></a>').format(
            self.url_for(target), self.url_for(img)
        )

    def stylesheet(self, path: str = STYLESHEET_FILENAME) -> Markup:
        return Markup('<link rel="stylesheet" type="text/css" href="{}">').format(
            self.url_for(self.root.path / path)
        )

    def breadcrumb(self, node, include_self: bool = True) -> Markup:
        parts = [self.link_to(a.title, a.index) for a in node.ancestors(self.root.path)]
        if include_self:
            parts.append(node.title)
        return Markup(" : ").join(parts)

    def title(self, gallery) -> Markup:
        match = DATE_RE.match(gallery.title)
        if match:
            return Markup('<div class="title date">{}</div><div class="title">{}</div>').format(
                self.link_to(match.group(1), gallery.index),
                self.link_to(match.group(3), gallery.index),
            )
        return Markup('<div class="title">{}</div>').format(self.link_to(gallery.title, gallery.index))

    def details(self, gallery) -> Markup:
        parts = []
        for count, noun in ((gallery.sub_galleries_count, "albums"),
                            (gallery.sub_images_count, "images"),
                            (gallery.sub_movies_count, "movies")):
            if count:
                parts.append(f"{count} {noun}")
        return Markup('<div class="details">{}</div>').format(", ".join(parts))

    def page_for(self, item) -> Path:
        """Where a link to item should point: its medium page if it has one, else the file."""
        medium = item.medium
        return medium.html if medium.has_html else item.path

    def link_to_previous(self, item):
        if item.previous is None:
            return ""
        return self.link_to(f"(prev) {item.previous.title}", self.page_for(item.previous))

    def link_to_next(self, item):
        if item.next is None:
            return ""
        return self.link_to(f"{item.next.title} (next)", self.page_for(item.next))

    # -- static assets --

    def write_stylesheet(self) -> bool:
        """Install the default stylesheet at the gallery root unless one is there."""
        target = self.root.path / STYLESHEET_FILENAME
        if target.exists():
            return False
        target.write_text(STYLESHEET, encoding="utf-8")
        self.logger.info("Wrote %s", target)
        return True
