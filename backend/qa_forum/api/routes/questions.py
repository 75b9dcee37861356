"""Question Routes — HTTP surface of the question handlers.

Invariants:
    - Routes contain no query or shaping logic; QuestionHandlers owns both
    - Mutations (upsert, delete, set answer) require an identified caller
    - Responses serialize with camelCase keys (schemas.base.CamelModel)

Design Decisions:
    - Query parameters gathered into GetQuestionsInput by a dependency so the
      handler receives the same validated object whatever the transport
"""

from fastapi import APIRouter, Depends, Path, Query, Response, status

from qa_forum.api.dependencies import (
    get_caller_context, get_question_handlers, require_caller,
)
from qa_forum.core.caller import AuthenticatedContext, CallerContext
from qa_forum.core.domain_types import (
    MetricTimeframe, QuestionSort, QuestionStatus,
)
from qa_forum.schemas.base import GetByIdInput
from qa_forum.schemas.question import (
    GetQuestionsInput, QuestionDetailResponse, QuestionListResponse,
    QuestionUpsertResponse, SetQuestionAnswerBody, SetQuestionAnswerInput,
    UpsertQuestionInput,
)
from qa_forum.services.handle_questions import QuestionHandlers

router = APIRouter(prefix="/api/v1/questions", tags=["questions"])


def get_questions_input(
    limit: int = Query(20, ge=1, le=100),
    page: int = Query(1, ge=1),
    query: str | None = Query(None, max_length=255),
    tagname: str | None = Query(None, max_length=100),
    sort: QuestionSort = Query(QuestionSort.MOST_LIKED),
    period: MetricTimeframe = Query(MetricTimeframe.ALL_TIME),
    status_filter: QuestionStatus | None = Query(None, alias="status"),
) -> GetQuestionsInput:
    return GetQuestionsInput(
        limit=limit, page=page, query=query, tagname=tagname,
        sort=sort, period=period, status=status_filter,
    )


@router.get("", response_model=QuestionListResponse)
async def list_questions(
    params: GetQuestionsInput = Depends(get_questions_input),
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """List questions with pagination."""
    return await handlers.get_questions(params)


@router.get("/{question_id}", response_model=QuestionDetailResponse)
async def get_question(
    question_id: int = Path(gt=0),
    ctx: CallerContext = Depends(get_caller_context),
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Get question details."""
    return await handlers.get_question_detail(
        ctx, GetByIdInput(id=question_id),
    )


@router.post("", response_model=QuestionUpsertResponse)
async def upsert_question(
    body: UpsertQuestionInput,
    ctx: AuthenticatedContext = Depends(require_caller),
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Create a question (no id) or update one (id)."""
    return await handlers.upsert_question(ctx, body)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: int = Path(gt=0),
    ctx: AuthenticatedContext = Depends(require_caller),
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    await handlers.delete_question(GetByIdInput(id=question_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{question_id}/answer", status_code=status.HTTP_204_NO_CONTENT)
async def set_question_answer(
    body: SetQuestionAnswerBody,
    question_id: int = Path(gt=0),
    ctx: AuthenticatedContext = Depends(require_caller),
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Mark (or clear, with answerId null) the selected answer."""
    await handlers.set_question_answer(
        SetQuestionAnswerInput(id=question_id, answer_id=body.answer_id),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
