"""Question Schemas — request inputs and response shapes for the question API.

Invariants:
    - GetQuestionsInput.limit: 1-100, page >= 1
    - UpsertQuestionInput.title: 1-255 chars, stripped, non-empty
    - UpsertQuestionInput.content omitted (None) leaves an existing body untouched
    - GetQuestionsInput.tagname normalized like stored tag names
    - Response rank keys are heartCount / answerCount for every period
    - Responses never carry join wrappers: tags and comments are flat lists

Design Decisions:
    - Enum fields reuse core.domain_types: one definition for API and queries
    - SetQuestionAnswerInput.answer_id nullable: None clears the selected answer
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from qa_forum.core.domain_types import (
    MetricTimeframe, QuestionSort, QuestionStatus,
)
from qa_forum.schemas.base import CamelModel, PageMeta


# --- Inputs -------------------------------------------------------------------

class GetQuestionsInput(CamelModel):
    """Listing parameters — filters, sort, period and pagination."""
    limit: int = Field(20, ge=1, le=100)
    page: int = Field(1, ge=1)
    query: str | None = Field(None, max_length=255)
    tagname: str | None = Field(None, max_length=100)
    sort: QuestionSort = QuestionSort.MOST_LIKED
    period: MetricTimeframe = MetricTimeframe.ALL_TIME
    status: QuestionStatus | None = None

    @field_validator("tagname")
    @classmethod
    def normalize_tagname(cls, v: str | None) -> str | None:
        # tag names are stored stripped and lowercased (TagInput)
        if v is None:
            return None
        return v.strip().lower() or None


class TagInput(CamelModel):
    """Existing tag by id, or a tag to connect-or-create by name."""
    id: int | None = None
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("tag name cannot be empty or whitespace")
        return v


class UpsertQuestionInput(CamelModel):
    """Create (no id) or update (id) a question."""
    id: int | None = Field(None, gt=0)
    title: str = Field(min_length=1, max_length=255)
    content: str | None = None
    tags: list[TagInput] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class SetQuestionAnswerInput(CamelModel):
    id: int = Field(gt=0)
    answer_id: int | None = None


class SetQuestionAnswerBody(CamelModel):
    """Request body of PUT /questions/{id}/answer."""
    answer_id: int | None = None


# --- Responses ----------------------------------------------------------------

class TagResponse(CamelModel):
    id: int | None = None
    name: str


class RankResponse(CamelModel):
    heart_count: int | None = None
    answer_count: int | None = None


class CosmeticResponse(CamelModel):
    id: int
    name: str
    type: str
    source: str
    data: dict[str, Any] | None = None


class UserWithCosmeticsResponse(CamelModel):
    id: int
    username: str | None = None
    image: str | None = None
    deleted_at: datetime | None = None
    cosmetics: list[CosmeticResponse] = []


class ReactionResponse(CamelModel):
    id: int
    user_id: int
    reaction: str


class CommentResponse(CamelModel):
    id: int
    created_at: datetime
    content: str
    nsfw: bool
    tos_violation: bool
    user: UserWithCosmeticsResponse


class QuestionListItem(CamelModel):
    id: int
    title: str
    selected_answer_id: int | None = None
    tags: list[TagResponse]
    rank: RankResponse


class QuestionListResponse(PageMeta):
    items: list[QuestionListItem]


class QuestionDetailResponse(CamelModel):
    id: int
    created_at: datetime
    updated_at: datetime
    title: str
    content: str
    selected_answer_id: int | None = None
    user: UserWithCosmeticsResponse
    tags: list[TagResponse]
    rank: RankResponse
    user_reactions: list[ReactionResponse]
    comments: list[CommentResponse]
    comment_count: int


class QuestionUpsertResponse(CamelModel):
    id: int
    user_id: int
    title: str
    content: str
    selected_answer_id: int | None = None
    created_at: datetime
    updated_at: datetime
