import pytest

from gallpy.errors import RenderError
from gallpy.render import (
    Renderer,
    end_of_row,
    end_of_table,
    maybe_end_row,
    maybe_start_row,
    start_of_row,
)
from gallpy.tree import scan_gallery
from gallpy.urls import UrlResolver

from conftest import touch


@pytest.fixture
def renderer(trip_tree):
    root = scan_gallery(trip_tree)
    return Renderer(root, UrlResolver(root.path, "/photos"), rowsize=2)


def test_row_predicates():
    assert start_of_row(0, 5) and start_of_row(5, 5)
    assert not start_of_row(3, 5)
    assert end_of_row(4, 5, 20)
    assert end_of_row(6, 5, 7)
    assert not end_of_row(5, 5, 20)
    assert end_of_table(2, 3) and not end_of_table(1, 3)
    assert maybe_start_row(0, 5) == "<tr>"
    assert maybe_start_row(1, 5) == ""
    assert maybe_end_row(1, 2, 10) == "</tr>"


def test_gallery_page(renderer):
    html = renderer.render("gallery", gallery=renderer.root)
    assert 'href="/photos/med/a_med.html"' in html
    assert 'src="/photos/tn/a_tn.jpg"' in html
    assert 'src="/photos/tn/b_tn.jpg"' in html
    assert 'href="/photos/Trip/"' in html
    assert 'src="/photos/Trip/tn/c_tn.jpg"' in html
    assert "1 albums, 3 images" in html
    assert 'href="/photos/style.css"' in html
    assert html.count("<table>") == 2
    assert html.count("<tr>") == 2


def test_image_page_links_neighbours(renderer):
    a, b = renderer.root.images
    html = renderer.render("image", image=b)
    assert "(prev) a.jpg" in html
    assert 'href="/photos/med/a_med.html"' in html
    assert "(next)" not in html
    assert 'src="/photos/med/b_med.jpg"' in html
    assert 'href="/photos/b.jpg"' in html


def test_breadcrumb(renderer):
    root = renderer.root
    c = root.galleries[0].images[0]
    crumb = renderer.breadcrumb(c)
    assert crumb == (f'<a href="/photos/">{root.title}</a> : '
                     '<a href="/photos/Trip/">Trip</a> : c.jpg')
    assert renderer.breadcrumb(root) == root.title


def test_titles_are_escaped(tmp_path):
    touch(tmp_path / "<b>" / "x.jpg")
    root = scan_gallery(tmp_path)
    renderer = Renderer(root, UrlResolver(root.path, "/photos"))
    assert "&lt;b&gt;" in renderer.title(root.galleries[0])


def test_dated_title(tmp_path):
    touch(tmp_path / "2008-07-04 Fireworks" / "x.jpg")
    root = scan_gallery(tmp_path)
    renderer = Renderer(root, UrlResolver(root.path, "/photos"))
    title = renderer.title(root.galleries[0])
    assert '<div class="title date"><a href="/photos/2008-07-04%20Fireworks/">2008-07-04</a></div>' in title
    assert ">Fireworks</a></div>" in title


def test_details_omits_zero_counts(renderer):
    trip = renderer.root.galleries[0]
    assert renderer.details(trip) == '<div class="details">1 images</div>'


def test_movie_neighbours_link_to_files(tmp_path):
    touch(tmp_path / "a.mov")
    touch(tmp_path / "b.mov")
    root = scan_gallery(tmp_path)
    renderer = Renderer(root, UrlResolver(root.path, "/photos"))
    assert 'href="/photos/b.mov"' in renderer.link_to_next(root.movies[0])


def test_collection_counters(renderer):
    templates = {"_item.html": "{{ item }}:{{ item_counter }}/{{ listsize }}/{{ rowsize }};"}
    custom = Renderer(renderer.root, renderer.urls, rowsize=3, templates=templates)
    assert custom.render_collection("item", ["x", "y"]) == "x:0/2/3;y:1/2/3;"


def test_missing_template_is_fatal(renderer):
    with pytest.raises(RenderError):
        renderer.render("nonexistent", gallery=renderer.root)


def test_missing_binding_is_fatal(renderer):
    with pytest.raises(RenderError):
        renderer.render("gallery")


def test_stylesheet_written_once(renderer):
    target = renderer.root.path / "style.css"
    assert renderer.write_stylesheet() is True
    target.write_text("custom")
    assert renderer.write_stylesheet() is False
    assert target.read_text() == "custom"


def test_empty_album_page(tmp_path):
    (tmp_path / "empty").mkdir()
    root = scan_gallery(tmp_path)
    renderer = Renderer(root, UrlResolver(root.path, "/photos"))
    assert "This album is empty." in renderer.render("gallery", gallery=root.galleries[0])
    assert "This album is empty." not in renderer.render("gallery", gallery=root)
