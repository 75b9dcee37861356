"""Question Service — mutations against a real (SQLite) database.

Tests cover:
    - upsert creates with owner and connect-or-create tags
    - upsert updates title/content and replaces tags, reusing kept links
    - upsert update without content keeps the stored body
    - upsert of unknown id / unknown tag id raises ResourceNotFoundError
    - delete removes the question and its links; missing id raises
    - set_question_answer validates ownership of the answer and can clear it
"""

import pytest
from sqlalchemy import func, select

from qa_forum.core.errors import ResourceNotFoundError
from qa_forum.models import (
    Question, QuestionComment, QuestionRank, Tag, TagsOnQuestions,
)
from qa_forum.services import question_service


async def _tag_names(db, question_id) -> list[str]:
    rows = await db.scalars(
        select(Tag.name)
        .join(TagsOnQuestions, TagsOnQuestions.tag_id == Tag.id)
        .where(TagsOnQuestions.question_id == question_id)
        .order_by(Tag.name)
    )
    return list(rows.all())


async def test_upsert_creates_question(test_db, forum_data):
    question = await question_service.upsert_question(
        test_db, user_id=forum_data.viewer_id, title="New", content="Body",
        tags=[{"id": None, "name": "python"}, {"id": None, "name": "fastapi"}],
    )
    assert question.id is not None
    assert question.user_id == forum_data.viewer_id
    assert await _tag_names(test_db, question.id) == ["fastapi", "python"]

    python_count = await test_db.scalar(
        select(func.count()).select_from(Tag).where(Tag.name == "python"),
    )
    assert python_count == 1


async def test_upsert_without_tags_creates_none(test_db, forum_data):
    question = await question_service.upsert_question(
        test_db, user_id=forum_data.author_id, title="Plain",
    )
    assert await _tag_names(test_db, question.id) == []


async def test_upsert_updates_and_replaces_tags(test_db, forum_data):
    question = await question_service.upsert_question(
        test_db, user_id=forum_data.author_id, id=forum_data.popular_id,
        title="Renamed", content="New body",
        tags=[{"id": forum_data.python_tag_id, "name": "python"}, {"name": "asyncio"}],
    )
    assert question.title == "Renamed"
    assert question.content == "New body"
    assert await _tag_names(test_db, forum_data.popular_id) == ["asyncio", "python"]


async def test_upsert_update_without_tags_keeps_tags(test_db, forum_data):
    await question_service.upsert_question(
        test_db, user_id=forum_data.author_id, id=forum_data.popular_id, title="Renamed",
    )
    assert await _tag_names(test_db, forum_data.popular_id) == [
        "python", "sqlalchemy",
    ]


async def test_upsert_update_without_content_keeps_body(test_db, forum_data):
    question = await question_service.upsert_question(
        test_db, user_id=forum_data.author_id, id=forum_data.popular_id, title="Renamed",
    )
    assert question.title == "Renamed"
    assert question.content == "Details inside"


async def test_upsert_create_without_content_stores_empty_body(test_db, forum_data):
    question = await question_service.upsert_question(
        test_db, user_id=forum_data.author_id, title="Title only",
    )
    assert question.content == ""


async def test_upsert_unknown_question_raises(test_db, forum_data):
    with pytest.raises(ResourceNotFoundError):
        await question_service.upsert_question(
            test_db, user_id=forum_data.author_id, id=9999, title="x",
        )


async def test_upsert_unknown_tag_id_raises(test_db, forum_data):
    with pytest.raises(ResourceNotFoundError) as info:
        await question_service.upsert_question(
            test_db, user_id=forum_data.author_id, title="x",
            tags=[{"id": 9999, "name": "missing"}],
        )
    assert info.value.resource_type == "Tag"


async def test_delete_removes_question_and_links(test_db, forum_data):
    await question_service.delete_question(test_db, forum_data.popular_id)

    assert await test_db.get(Question, forum_data.popular_id) is None
    assert await test_db.scalar(
        select(func.count()).select_from(TagsOnQuestions)
        .where(TagsOnQuestions.question_id == forum_data.popular_id),
    ) == 0
    assert await test_db.scalar(
        select(func.count()).select_from(QuestionComment)
        .where(QuestionComment.question_id == forum_data.popular_id),
    ) == 0
    assert await test_db.get(QuestionRank, forum_data.popular_id) is None


async def test_delete_missing_question_raises(test_db, forum_data):
    with pytest.raises(ResourceNotFoundError):
        await question_service.delete_question(test_db, 9999)


async def test_set_answer_marks_selected(test_db, forum_data):
    answer_id = forum_data.popular_answer_ids[1]
    await question_service.set_question_answer(
        test_db, forum_data.popular_id, answer_id,
    )
    question = await test_db.get(Question, forum_data.popular_id)
    assert question.selected_answer_id == answer_id


async def test_set_answer_none_clears(test_db, forum_data):
    await question_service.set_question_answer(test_db, forum_data.fresh_id, None)
    question = await test_db.get(Question, forum_data.fresh_id)
    assert question.selected_answer_id is None


async def test_set_answer_from_other_question_raises(test_db, forum_data):
    with pytest.raises(ResourceNotFoundError) as info:
        await question_service.set_question_answer(
            test_db, forum_data.popular_id, forum_data.fresh_answer_id,
        )
    assert info.value.resource_type == "Answer"


async def test_set_answer_missing_question_raises(test_db, forum_data):
    with pytest.raises(ResourceNotFoundError):
        await question_service.set_question_answer(
            test_db, 9999, forum_data.fresh_answer_id,
        )
