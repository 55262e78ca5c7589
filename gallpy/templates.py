"""Page templates and the default stylesheet."""

# ---------------------------------------------------------------------------
# Shared CSS (written to style.css at the gallery root)
# ---------------------------------------------------------------------------

STYLESHEET = """\
/* ── base ── */
body {
  margin: 0; padding: 24px;
  font-family: "Inter", "SF Pro Text", system-ui, -apple-system, sans-serif;
  font-size: 15px; line-height: 1.5;
  background: #0e0e0e; color: #c8c8c8;
}
a { color: #7db8e0; text-decoration: none; }
a:hover { color: #aed4f0; }
img { border: 0; }

/* ── breadcrumb & titles ── */
.breadcrumb { font-size: 0.88em; color: #777; margin-bottom: 16px; }
.breadcrumb a { color: #888; }
h1 { font-size: 1.5em; font-weight: 500; margin: 0 0 16px; }
.title { font-size: 0.92em; }
.title.date { color: #777; font-size: 0.82em; }
.details { color: #555; font-size: 0.78em; }
.empty { color: #555; font-style: italic; }

/* ── thumbnail tables ── */
table { border-collapse: separate; border-spacing: 8px; margin-bottom: 24px; }
td { vertical-align: top; text-align: center; width: 150px; }
td a.image img { border-radius: 2px; }
td a.image:hover img { filter: brightness(1.15); }

/* ── item page ── */
.nav {
  margin-bottom: 20px; padding-bottom: 12px;
  border-bottom: 1px solid #1a1a1a;
  font-size: 0.88em; display: flex; gap: 16px;
}
.nav .next { margin-left: auto; }
.media img { max-width: 100%; display: block; border-radius: 3px; }
.original-link { font-size: 0.82em; margin-top: 10px; }
"""

# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

GALLERY_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ gallery.title }}</title>
{{ stylesheet() }}
</head>
<body>
<div class="breadcrumb">{{ breadcrumb(gallery) }}</div>
<h1>{{ gallery.title }}</h1>
{{ details(gallery) }}
{% if not gallery.has_children %}<p class="empty">This album is empty.</p>{% endif %}
{{ render_collection("gallery", gallery.galleries) }}
{{ render_collection("image", gallery.images) }}
{{ render_collection("movie", gallery.movies) }}
</body>
</html>
"""

IMAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ image.title }}</title>
{{ stylesheet() }}
</head>
<body>
<div class="breadcrumb">{{ breadcrumb(image) }}</div>
<div class="nav">
  <span class="previous">{{ link_to_previous(image) }}</span>
  {{ link_to("index", image.parent.index) }}
  <span class="next">{{ link_to_next(image) }}</span>
</div>
<div class="media">{{ image_link_to(image.medium.path, image.path) }}</div>
<div class="original-link">{{ link_to("original", image.path) }}</div>
</body>
</html>
"""

MOVIE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ movie.title }}</title>
{{ stylesheet() }}
</head>
<body>
<div class="breadcrumb">{{ breadcrumb(movie) }}</div>
<div class="nav">
  <span class="previous">{{ link_to_previous(movie) }}</span>
  {{ link_to("index", movie.parent.index) }}
  <span class="next">{{ link_to_next(movie) }}</span>
</div>
<div class="media">{{ link_to(movie.title, movie.path) }}</div>
</body>
</html>
"""

# ---------------------------------------------------------------------------
# Partials, rendered once per collection element
# ---------------------------------------------------------------------------

GALLERY_PARTIAL = """\
{{ maybe_start_table(gallery_counter) }}{{ maybe_start_row(gallery_counter, rowsize) }}
<td>
{% if gallery.thumbnail %}{{ image_link_to(gallery.thumbnail.path, gallery.index) }}{% endif %}
{{ title(gallery) }}
{{ details(gallery) }}
</td>
{{ maybe_end_row(gallery_counter, rowsize, listsize) }}{{ maybe_end_table(gallery_counter, listsize) }}
"""

IMAGE_PARTIAL = """\
{{ maybe_start_table(image_counter) }}{{ maybe_start_row(image_counter, rowsize) }}
<td>{{ image_link_to(image.thumbnail.path, image.medium.html) }}</td>
{{ maybe_end_row(image_counter, rowsize, listsize) }}{{ maybe_end_table(image_counter, listsize) }}
"""

MOVIE_PARTIAL = """\
{{ maybe_start_table(movie_counter) }}{{ maybe_start_row(movie_counter, rowsize) }}
<td>{{ link_to(movie.title, movie.path) }}</td>
{{ maybe_end_row(movie_counter, rowsize, listsize) }}{{ maybe_end_table(movie_counter, listsize) }}
"""

TEMPLATES = {
    "gallery.html": GALLERY_TEMPLATE,
    "image.html": IMAGE_TEMPLATE,
    "movie.html": MOVIE_TEMPLATE,
    "_gallery.html": GALLERY_PARTIAL,
    "_image.html": IMAGE_PARTIAL,
    "_movie.html": MOVIE_PARTIAL,
}
