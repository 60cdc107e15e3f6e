"""Data models shared by the matcher, repositories and API."""

from .comment_added import Approval, CommentAdded
from .server import ANY_SERVER, CategoryOption, GerritServer, VerdictCategory

__all__ = [
    "ANY_SERVER",
    "Approval",
    "CategoryOption",
    "CommentAdded",
    "GerritServer",
    "VerdictCategory",
]
