"""Question Service — persistence operations for questions.

Invariants:
    - Every read takes its selection (loader options) from the caller; nothing
      is lazy-loaded afterwards
    - Mutations commit before returning
    - Missing question (or foreign/missing answer, or unknown tag id) raises
      ResourceNotFoundError
    - Detail comments: the `comment_limit` most recent, returned oldest-first

Design Decisions:
    - Plain async functions taking an AsyncSession: no repository object to wire
    - Tag links reused when a tag stays attached (no delete+insert of the same key)
    - Reactions not queried at all for anonymous callers
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from qa_forum.core.domain_types import (
    QUESTION_DETAIL_COMMENT_LIMIT, AnswerId, QuestionId, QuestionSort,
    QuestionStatus, UserId, rank_columns_for,
)
from qa_forum.core.errors import ResourceNotFoundError
from qa_forum.core.pagination import get_pagination, get_paging_data
from qa_forum.models.answer import Answer
from qa_forum.models.comment import CommentV2, QuestionComment
from qa_forum.models.question import Question, TagsOnQuestions
from qa_forum.models.question_rank import QuestionRank
from qa_forum.models.question_reaction import QuestionReaction
from qa_forum.models.tag import Tag
from qa_forum.schemas.question import GetQuestionsInput

logger = logging.getLogger(__name__)


@dataclass
class QuestionDetailRecord:
    """Everything the detail view reads, as loaded rows."""
    question: Question
    reactions: list[QuestionReaction]
    comments: list[QuestionComment]
    comment_count: int


def _question_filters(params: GetQuestionsInput) -> list:
    filters = []
    if params.query:
        filters.append(Question.title.icontains(params.query, autoescape=True))
    if params.tagname:
        filters.append(
            Question.tags.any(TagsOnQuestions.tag.has(Tag.name == params.tagname)),
        )
    if params.status == QuestionStatus.ANSWERED:
        filters.append(Question.selected_answer_id.is_not(None))
    elif params.status == QuestionStatus.PENDING:
        filters.append(Question.selected_answer_id.is_(None))
    return filters


async def get_questions(
    db: AsyncSession, params: GetQuestionsInput, options: Sequence[Any] = (),
) -> dict:
    """Page of questions matching `params`, loaded with `options`."""
    filters = _question_filters(params)
    take, skip = get_pagination(params.limit, params.page)

    query = select(Question).where(*filters).options(*options)
    if params.sort == QuestionSort.MOST_LIKED:
        heart_count = getattr(
            QuestionRank, rank_columns_for(params.period).heart_count,
        )
        query = query.outerjoin(
            QuestionRank, QuestionRank.question_id == Question.id,
        ).order_by(
            func.coalesce(heart_count, 0).desc(),
            Question.created_at.desc(),
            Question.id.desc(),
        )
    else:
        query = query.order_by(Question.created_at.desc(), Question.id.desc())
    query = query.limit(take).offset(skip)

    items = list((await db.scalars(query)).all())
    total = await db.scalar(
        select(func.count()).select_from(Question).where(*filters),
    )
    return get_paging_data(items, total or 0, params.limit, params.page)


async def get_question_detail(
    db: AsyncSession,
    question_id: QuestionId,
    options: Sequence[Any] = (),
    reactions_user_id: UserId | None = None,
    comment_options: Sequence[Any] = (),
    comment_limit: int = QUESTION_DETAIL_COMMENT_LIMIT,
) -> QuestionDetailRecord | None:
    """One question with the caller's reactions and its most recent comments."""
    result = await db.execute(
        select(Question).where(Question.id == question_id).options(*options),
    )
    question = result.scalar_one_or_none()
    if question is None:
        return None

    reactions: list[QuestionReaction] = []
    if reactions_user_id is not None:
        reactions = list((await db.scalars(
            select(QuestionReaction)
            .where(QuestionReaction.question_id == question_id)
            .where(QuestionReaction.user_id == reactions_user_id)
            .order_by(QuestionReaction.id)
        )).all())

    recent = list((await db.scalars(
        select(QuestionComment)
        .join(CommentV2, QuestionComment.comment_id == CommentV2.id)
        .where(QuestionComment.question_id == question_id)
        .order_by(CommentV2.created_at.desc(), CommentV2.id.desc())
        .limit(comment_limit)
        .options(selectinload(QuestionComment.comment).options(*comment_options))
    )).all())
    recent.reverse()

    comment_count = await db.scalar(
        select(func.count())
        .select_from(QuestionComment)
        .where(QuestionComment.question_id == question_id),
    )
    return QuestionDetailRecord(
        question=question,
        reactions=reactions,
        comments=recent,
        comment_count=comment_count or 0,
    )


async def _resolve_tags(db: AsyncSession, tags: list[dict]) -> list[Tag]:
    """Tag inputs -> Tag rows; ids must exist, names are connected-or-created."""
    resolved: dict[int, Tag] = {}
    for item in tags:
        if item.get("id") is not None:
            tag = await db.get(Tag, item["id"])
            if tag is None:
                raise ResourceNotFoundError("Tag", item["id"])
        else:
            tag = await db.scalar(select(Tag).where(Tag.name == item["name"]))
            if tag is None:
                tag = Tag(name=item["name"])
                db.add(tag)
                await db.flush()
        resolved.setdefault(tag.id, tag)
    return list(resolved.values())


async def upsert_question(
    db: AsyncSession,
    *,
    user_id: UserId,
    title: str,
    content: str | None = None,
    id: QuestionId | None = None,
    tags: list[dict] | None = None,
) -> Question:
    """Create a question for `user_id`, or update question `id`.

    On update, `content=None` keeps the stored body and `tags=None` keeps the tags.
    """
    if id is None:
        question = Question(
            user_id=user_id, title=title, content=content or "", tags=[],
        )
        db.add(question)
        existing_links: dict[int, TagsOnQuestions] = {}
    else:
        result = await db.execute(
            select(Question)
            .where(Question.id == id)
            .options(selectinload(Question.tags)),
        )
        question = result.scalar_one_or_none()
        if question is None:
            raise ResourceNotFoundError("Question", id)
        question.title = title
        if content is not None:
            question.content = content
        existing_links = {link.tag_id: link for link in question.tags}

    if tags is not None:
        resolved = await _resolve_tags(db, tags)
        question.tags = [
            existing_links.get(tag.id) or TagsOnQuestions(tag=tag)
            for tag in resolved
        ]

    await db.commit()
    await db.refresh(question)
    logger.info(
        f"Question {question.id} {'created' if id is None else 'updated'}",
        extra={"question_id": question.id, "user_id": user_id},
    )
    return question


async def delete_question(db: AsyncSession, question_id: QuestionId) -> None:
    result = await db.execute(
        select(Question)
        .where(Question.id == question_id)
        .options(
            selectinload(Question.tags),
            selectinload(Question.rank),
            selectinload(Question.reactions),
            selectinload(Question.comments),
            selectinload(Question.answers),
        ),
    )
    question = result.scalar_one_or_none()
    if question is None:
        raise ResourceNotFoundError("Question", question_id)
    await db.delete(question)
    await db.commit()
    logger.info(
        f"Question {question_id} deleted", extra={"question_id": question_id},
    )


async def set_question_answer(
    db: AsyncSession, question_id: QuestionId, answer_id: AnswerId | None,
) -> None:
    """Mark `answer_id` as the selected answer; None clears it."""
    question = await db.get(Question, question_id)
    if question is None:
        raise ResourceNotFoundError("Question", question_id)
    if answer_id is not None:
        answer = await db.get(Answer, answer_id)
        if answer is None or answer.question_id != question_id:
            raise ResourceNotFoundError("Answer", answer_id)
    question.selected_answer_id = answer_id
    await db.commit()
    logger.info(
        f"Question {question_id} selected answer set to {answer_id}",
        extra={"question_id": question_id},
    )
