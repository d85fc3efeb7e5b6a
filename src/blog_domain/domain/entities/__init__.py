"""领域实体"""

from .author import Author
from .comment import Comment
from .commenter import Commenter
from .post import Post

__all__ = [
    "Author",
    "Comment",
    "Commenter",
    "Post",
]
