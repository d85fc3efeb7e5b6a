"""应用用例"""

from .add_comment import AddCommentUseCase
from .add_post import AddPostUseCase
from .increment_view_count import IncrementViewCountUseCase
from .lock_author import LockAuthorUseCase, UnlockAuthorUseCase
from .tag_post import TagPostUseCase
from .update_content import UpdateContentUseCase
from .update_title import UpdateTitleUseCase

__all__ = [
    "AddPostUseCase",
    "UpdateTitleUseCase",
    "UpdateContentUseCase",
    "AddCommentUseCase",
    "TagPostUseCase",
    "LockAuthorUseCase",
    "UnlockAuthorUseCase",
    "IncrementViewCountUseCase",
]
