"""
tagcloud - Unique tag chips for Textual applications
"""

from tagcloud.collection import TagCollection

__version__ = "0.3.0"

__all__ = ["TagCollection", "__version__"]
