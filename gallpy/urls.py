"""Map filesystem paths under the gallery root to public URLs."""

import os
import posixpath
from pathlib import Path
from urllib.parse import quote

from .config import INDEX_FILENAME

# Characters left alone when escaping: path separators plus URL punctuation.
_SAFE = "/:@!$&'()*+,;=~"


def cleanpath(path: str) -> str:
    """Resolve "." and ".." segments, keeping any scheme://host prefix intact."""
    path = path.replace("\\", "/")
    prefix = ""
    if "://" in path:
        scheme, _, rest = path.partition("://")
        host, slash, path = rest.partition("/")
        prefix = f"{scheme}://{host}"
        path = slash + path
    if not path:
        return prefix
    cleaned = posixpath.normpath(path)
    if cleaned == ".":
        cleaned = ""
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return prefix + cleaned


class UrlResolver:
    def __init__(self, root, base_url: str):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def url_for(self, path) -> str:
        path = Path(path)
        if path == self.root:
            url = self.base_url + "/"
        else:
            relative = Path(os.path.relpath(path, self.root)).as_posix()
            url = posixpath.join(self.base_url + "/", relative)
            # Let the web server pick up the directory's index document.
            if url.endswith("/" + INDEX_FILENAME):
                url = url[: -len(INDEX_FILENAME)]
        return quote(url, safe=_SAFE)
