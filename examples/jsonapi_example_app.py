"""Example FastAPI app serving SQLAlchemy models as JSON:API documents.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload
"""
from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Response
from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, relationship, selectinload, sessionmaker

from modlr_jsonapi import JSONAPISerializer, RestUrlAdapter, SerializerError
from modlr_jsonapi.middleware import ErrorHandlerMiddleware
from modlr_jsonapi.middleware.error_handler import JSONAPI_MEDIA_TYPE
from modlr_jsonapi.sqlalchemy import SQLAlchemyMetadataRegistry, SQLAlchemyModel

DATABASE_URL = "sqlite+aiosqlite:///./jsonapi_example.db"

engine = create_async_engine(DATABASE_URL, echo=True)
async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    bio = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")
    comments = relationship("Comment", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    published_at = Column(DateTime, server_default=func.now())
    extra = Column(JSON, nullable=True)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))
    author_id = Column(Integer, ForeignKey("users.id"))
    article = relationship("Article", back_populates="comments")
    author = relationship("User", back_populates="comments")


registry = SQLAlchemyMetadataRegistry()
serializer = JSONAPISerializer(RestUrlAdapter("http://localhost:8000/api/v1"))


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


async def seed_example_data(session: AsyncSession) -> None:
    """Insert example users, articles and comments if empty."""
    result = await session.execute(select(User.id).limit(1))
    if result.first() is not None:
        return

    jane = User(name="Jane Doe", email="jane.doe@example.com", bio="Tech writer.")
    john = User(name="John Smith", email="john.smith@example.com", bio="Backend developer.")
    session.add_all([jane, john])
    await session.flush()

    article = Article(
        title="JSON:API from SQLAlchemy",
        body="Serializing mapped models into JSON:API documents.",
        extra={"tags": ["jsonapi", "sqlalchemy"]},
        author_id=jane.id,
    )
    session.add(article)
    await session.flush()

    session.add_all(
        [
            Comment(body="Great article!", article_id=article.id, author_id=john.id),
            Comment(body="Helpful examples.", article_id=article.id, author_id=jane.id),
        ]
    )
    await session.commit()


def jsonapi_response(content: str, status_code: int = 200) -> Response:
    return Response(content=content, status_code=status_code, media_type=JSONAPI_MEDIA_TYPE)


app = FastAPI(
    title="JSON:API Serializer Example",
    description="Example API serializing SQLAlchemy models as JSON:API v1.1.",
    version="0.1.0",
)
app.add_middleware(ErrorHandlerMiddleware, serializer=serializer)


@app.on_event("startup")
async def on_startup() -> None:
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_example_data(session)


@app.get("/api/v1/articles")
async def list_articles(session: AsyncSession = Depends(get_session)) -> Response:
    # relationships not eager-loaded here are emitted with null linkage
    result = await session.execute(select(Article).options(selectinload(Article.author)))
    articles = [SQLAlchemyModel(article, registry) for article in result.scalars()]
    return jsonapi_response(serializer.serialize_array(articles))


@app.get("/api/v1/articles/{article_id}")
async def retrieve_article(
    article_id: int, session: AsyncSession = Depends(get_session)
) -> Response:
    statement = (
        select(Article)
        .where(Article.id == article_id)
        .options(selectinload(Article.author), selectinload(Article.comments))
    )
    article = (await session.execute(statement)).scalars().first()
    if article is None:
        raise SerializerError(
            f"No article with id {article_id}.", title="Not Found", status_code=404
        )
    return jsonapi_response(serializer.serialize(SQLAlchemyModel(article, registry)))
