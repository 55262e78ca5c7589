"""
gallpy: build a static, browsable HTML gallery from a directory of photos.

Walks a directory tree, writes an index.html per directory, resized
thumbnail/medium copies under tn/ and med/, and a detail page per image.
"""

__version__ = "0.3.0"
