# Models package init
"""
Importing this package registers every table on `Base.metadata` and lets
the string-based relationships between them resolve.
"""

from journal.models.category import Category
from journal.models.comment import Comment
from journal.models.entry import Entry
from journal.models.media import MEDIA_TYPES, Media

__all__ = ["Category", "Comment", "Entry", "Media", "MEDIA_TYPES"]
