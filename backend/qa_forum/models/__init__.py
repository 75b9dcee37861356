"""ORM Models — users, tags, questions and everything hanging off a question.

Invariants:
    - Question is the aggregate root: deleting it deletes its tag links, rank,
      reactions, comment links and answers
    - Join rows (TagsOnQuestions, QuestionComment, UserCosmetic) are mapped entities,
      so responses can unwrap them explicitly

Design Decisions:
    - Everything imported here: string relationship() targets resolve on first use,
      and alembic sees the full metadata by importing this package
"""

from qa_forum.models.user import User, Cosmetic, UserCosmetic  # noqa: F401
from qa_forum.models.tag import Tag  # noqa: F401
from qa_forum.models.question import Question, TagsOnQuestions  # noqa: F401
from qa_forum.models.question_rank import QuestionRank  # noqa: F401
from qa_forum.models.question_reaction import QuestionReaction  # noqa: F401
from qa_forum.models.comment import CommentV2, QuestionComment  # noqa: F401
from qa_forum.models.answer import Answer  # noqa: F401
