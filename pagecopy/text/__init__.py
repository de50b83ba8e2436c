from pagecopy.text.extractor import TextExtractor
from pagecopy.text.node_index import NodeIndex
from pagecopy.text.visibility import VisibilityFilter

__all__ = ["NodeIndex", "TextExtractor", "VisibilityFilter"]
