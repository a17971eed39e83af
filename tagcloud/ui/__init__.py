"""tagcloud Textual widgets."""

from .modals import AddTagScreen
from .tag_chip import TagChip
from .tag_cloud import TagCloud

__all__ = [
    "AddTagScreen",
    "TagChip",
    "TagCloud",
]
