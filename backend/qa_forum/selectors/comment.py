"""Comment Selector — reusable loader options and projection for a CommentV2.

Invariants:
    - The author is loaded through user_with_cosmetics_select (same shape everywhere)
"""

from sqlalchemy.orm import load_only, selectinload

from qa_forum.models.comment import CommentV2
from qa_forum.selectors.user import (
    project_user_with_cosmetics, user_with_cosmetics_select,
)


def comment_v2_select() -> tuple:
    """Loader options for a CommentV2 row and its author."""
    return (
        load_only(
            CommentV2.id, CommentV2.user_id, CommentV2.content,
            CommentV2.nsfw, CommentV2.tos_violation, CommentV2.created_at,
        ),
        selectinload(CommentV2.user).options(*user_with_cosmetics_select()),
    )


def project_comment_v2(comment: CommentV2) -> dict:
    return {
        "id": comment.id,
        "created_at": comment.created_at,
        "content": comment.content,
        "nsfw": comment.nsfw,
        "tos_violation": comment.tos_violation,
        "user": project_user_with_cosmetics(comment.user),
    }
