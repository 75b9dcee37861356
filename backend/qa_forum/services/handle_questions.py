"""Question Handlers — list, detail, upsert, delete, set_answer.

Invariants:
    - Each handler composes its selection, calls one service function, reshapes the result
    - Service failures leave as DatabaseError; a missing detail record as ResourceNotFoundError
    - Responses never contain join wrappers; rank keys are heart_count / answer_count
    - Anonymous detail callers get user_reactions == [] (reactions are never queried)
    - Detail returns at most QUESTION_DETAIL_COMMENT_LIMIT comments plus comment_count

Design Decisions:
    - Stateless: one handler object per request, holding only the AsyncSession
    - Service module called through its namespace so the service boundary can be
      replaced in tests
    - upsert takes AuthenticatedContext: the non-null caller is a typed precondition
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, selectinload

from qa_forum.core.caller import AuthenticatedContext, CallerContext
from qa_forum.core.domain_types import (
    QUESTION_DETAIL_COMMENT_LIMIT, MetricTimeframe, rank_columns_for,
)
from qa_forum.core.errors import ErrorContext
from qa_forum.core.question_shape import (
    canonical_rank, flatten_tags, project_reaction, unwrap,
)
from qa_forum.models.question import Question, TagsOnQuestions
from qa_forum.models.question_rank import QuestionRank
from qa_forum.schemas.base import GetByIdInput
from qa_forum.schemas.question import (
    GetQuestionsInput, SetQuestionAnswerInput, UpsertQuestionInput,
)
from qa_forum.selectors.comment import comment_v2_select, project_comment_v2
from qa_forum.selectors.user import (
    project_user_with_cosmetics, user_with_cosmetics_select,
)
from qa_forum.services import question_service
from qa_forum.services.error_handling import (
    db_error_boundary, throw_not_found_error,
)


def _rank_select(period: MetricTimeframe):
    columns = rank_columns_for(period)
    return selectinload(Question.rank).load_only(
        getattr(QuestionRank, columns.heart_count),
        getattr(QuestionRank, columns.answer_count),
    )


def _tags_select():
    return selectinload(Question.tags).selectinload(TagsOnQuestions.tag)


class QuestionHandlers:
    """Request handlers for the question feature."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_questions(self, input: GetQuestionsInput) -> dict:
        """Page of questions with flat tags and the period's rank."""
        options = (
            load_only(Question.id, Question.title, Question.selected_answer_id),
            _tags_select(),
            _rank_select(input.period),
        )
        async with db_error_boundary("get_questions"):
            page = await question_service.get_questions(
                self.db, input, options=options,
            )

        items = page.pop("items")
        return {
            **page,
            "items": [
                {
                    "id": item.id,
                    "title": item.title,
                    "selected_answer_id": item.selected_answer_id,
                    "tags": flatten_tags(item.tags),
                    "rank": canonical_rank(item.rank, input.period),
                }
                for item in items
            ],
        }

    async def get_question_detail(
        self, ctx: CallerContext, input: GetByIdInput,
    ) -> dict:
        """Full question view; ResourceNotFoundError when the id is unknown."""
        user_id = ctx.user_id
        options = (
            selectinload(Question.user).options(*user_with_cosmetics_select()),
            _tags_select(),
            _rank_select(MetricTimeframe.ALL_TIME),
        )
        context = ErrorContext(
            question_id=input.id, user_id=user_id, operation="get_question_detail",
        )
        async with db_error_boundary("get_question_detail", context):
            record = await question_service.get_question_detail(
                self.db,
                input.id,
                options=options,
                reactions_user_id=user_id,
                comment_options=comment_v2_select(),
                comment_limit=QUESTION_DETAIL_COMMENT_LIMIT,
            )
            if record is None:
                raise throw_not_found_error("Question", input.id, context)

        question = record.question
        return {
            "id": question.id,
            "created_at": question.created_at,
            "updated_at": question.updated_at,
            "title": question.title,
            "content": question.content,
            "selected_answer_id": question.selected_answer_id,
            "user": project_user_with_cosmetics(question.user),
            "tags": flatten_tags(question.tags),
            "rank": canonical_rank(question.rank, MetricTimeframe.ALL_TIME),
            "user_reactions": [
                project_reaction(r) for r in record.reactions
            ] if user_id is not None else [],
            "comments": [
                project_comment_v2(c)
                for c in unwrap(record.comments[:QUESTION_DETAIL_COMMENT_LIMIT], "comment")
            ],
            "comment_count": record.comment_count,
        }

    async def upsert_question(
        self, ctx: AuthenticatedContext, input: UpsertQuestionInput,
    ):
        """Create or update; returns the service result as-is."""
        context = ErrorContext(question_id=input.id, user_id=ctx.user_id)
        async with db_error_boundary("upsert_question", context):
            return await question_service.upsert_question(
                self.db, **input.model_dump(), user_id=ctx.user_id,
            )

    async def delete_question(self, input: GetByIdInput) -> None:
        context = ErrorContext(question_id=input.id)
        async with db_error_boundary("delete_question", context):
            await question_service.delete_question(self.db, input.id)

    async def set_question_answer(self, input: SetQuestionAnswerInput) -> None:
        context = ErrorContext(question_id=input.id)
        async with db_error_boundary("set_question_answer", context):
            await question_service.set_question_answer(
                self.db, input.id, input.answer_id,
            )
