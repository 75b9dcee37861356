"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - client routes get_db through a ForumDatabase bound to the test engine
    - forum_data seeds through its own session, so tests read through a clean identity map

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for query tests
      (PostgreSQL-specific features not exercised here)
"""

import os
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from qa_forum.db.base import Base  # noqa: E402
from qa_forum.infrastructure.database import ForumDatabase  # noqa: E402
import qa_forum.infrastructure.database as db_module  # noqa: E402
from qa_forum.models import (  # noqa: E402
    Answer, CommentV2, Cosmetic, Question, QuestionComment, QuestionRank,
    QuestionReaction, Tag, TagsOnQuestions, User, UserCosmetic,
)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

AUTHOR_ID = 1
VIEWER_ID = 2
OTHER_ID = 3


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine):
    """FastAPI test client whose get_db and readiness probe use the test engine."""
    from qa_forum.main import app

    original_manager = db_module.db_manager
    db_module.db_manager = ForumDatabase(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def forum_data(test_session_factory):
    """Seed users, tags, two questions, reactions, comments and answers.

    popular: tags python + sqlalchemy, rank (Month 3/1, AllTime 10/4),
             7 comments, reactions by viewer (Heart, Like) and other (Laugh),
             2 answers, no selected answer
    fresh:   tag python, no rank row, one answer which is selected, newest
    """
    async with test_session_factory() as db:
        author = User(id=AUTHOR_ID, username="author", image="a.png")
        viewer = User(id=VIEWER_ID, username="viewer")
        other = User(id=OTHER_ID, username="other")
        badge = Cosmetic(
            name="Gold Badge", type="Badge", source="Purchase",
            data={"url": "gold.png"},
        )
        frame = Cosmetic(name="Blue Frame", type="ProfileDecoration", source="Event")
        author.cosmetics = [
            UserCosmetic(cosmetic=badge, equipped_at=BASE_TIME),
            UserCosmetic(cosmetic=frame, equipped_at=None),
        ]
        python = Tag(name="python")
        sqlalchemy_tag = Tag(name="sqlalchemy")
        db.add_all([author, viewer, other, python, sqlalchemy_tag])
        await db.flush()

        popular = Question(
            user_id=AUTHOR_ID, title="How do async sessions work?",
            content="Details inside", created_at=BASE_TIME,
            updated_at=BASE_TIME,
            tags=[
                TagsOnQuestions(tag=python), TagsOnQuestions(tag=sqlalchemy_tag),
            ],
            rank=QuestionRank(
                heart_count_month=3, answer_count_month=1,
                heart_count_all_time=10, answer_count_all_time=4,
            ),
        )
        fresh = Question(
            user_id=VIEWER_ID, title="Fresh question about Python",
            content="", created_at=BASE_TIME + timedelta(days=1),
            updated_at=BASE_TIME + timedelta(days=1),
            tags=[TagsOnQuestions(tag=python)],
        )
        db.add_all([popular, fresh])
        await db.flush()

        db.add_all([
            QuestionReaction(question_id=popular.id, user_id=VIEWER_ID, reaction="Heart"),
            QuestionReaction(question_id=popular.id, user_id=VIEWER_ID, reaction="Like"),
            QuestionReaction(question_id=popular.id, user_id=OTHER_ID, reaction="Laugh"),
        ])

        comments = [
            CommentV2(
                user_id=AUTHOR_ID if i % 2 else OTHER_ID,
                content=f"comment {i}",
                created_at=BASE_TIME + timedelta(minutes=i),
            )
            for i in range(7)
        ]
        db.add_all(comments)
        await db.flush()
        db.add_all([
            QuestionComment(question_id=popular.id, comment_id=c.id)
            for c in comments
        ])

        answers = [
            Answer(question_id=popular.id, user_id=VIEWER_ID, content="Use AsyncSession"),
            Answer(question_id=popular.id, user_id=OTHER_ID, content="Read the docs"),
            Answer(question_id=fresh.id, user_id=AUTHOR_ID, content="Yes"),
        ]
        db.add_all(answers)
        await db.flush()
        fresh.selected_answer_id = answers[2].id
        await db.commit()

        return SimpleNamespace(
            author_id=AUTHOR_ID,
            viewer_id=VIEWER_ID,
            other_id=OTHER_ID,
            popular_id=popular.id,
            fresh_id=fresh.id,
            python_tag_id=python.id,
            sqlalchemy_tag_id=sqlalchemy_tag.id,
            comment_ids=[c.id for c in comments],
            popular_answer_ids=[answers[0].id, answers[1].id],
            fresh_answer_id=answers[2].id,
        )
