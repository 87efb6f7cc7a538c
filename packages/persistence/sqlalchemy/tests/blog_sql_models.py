"""Mapped models shared by the SQLAlchemy test modules."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from admin_backends_sqlalchemy import ArchivableModelMixin


class Base(DeclarativeBase):
    pass


class TimestampedBase(Base):
    __abstract__ = True

    created_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50))

    posts: Mapped[list[Post]] = relationship(back_populates="author")
    profile: Mapped[Profile | None] = relationship(
        back_populates="author", uselist=False
    )


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"))
    bio: Mapped[str] = mapped_column(Text, default="")

    author: Mapped[Author] = relationship(back_populates="profile")


class Post(TimestampedBase):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(100))
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    views: Mapped[int] = mapped_column(Integer, default=0)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    published: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="draft")
    published_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("authors.id"), nullable=True
    )

    author: Mapped[Author | None] = relationship(back_populates="posts")
    comments: Mapped[list[Comment]] = relationship(
        primaryjoin=(
            "and_(Post.id == foreign(Comment.commentable_id), "
            "Comment.commentable_type == 'blog_sql_models.Post')"
        ),
        viewonly=True,
        info={"as": "commentable"},
    )
    cover: Mapped[Photo | None] = relationship(uselist=False)


class Photo(Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    url: Mapped[str] = mapped_column(String(200))
    post_id: Mapped[int | None] = mapped_column(ForeignKey("posts.id"), nullable=True)

    comments: Mapped[list[Comment]] = relationship(
        primaryjoin=(
            "and_(Photo.id == foreign(Comment.commentable_id), "
            "Comment.commentable_type == 'blog_sql_models.Photo')"
        ),
        viewonly=True,
        info={"as": "commentable"},
    )


class Comment(ArchivableModelMixin, Base):
    __tablename__ = "comments"
    __polymorphic_belongs_to__ = ("commentable",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    body: Mapped[str] = mapped_column(Text)
    commentable_id: Mapped[int] = mapped_column(Integer)
    commentable_type: Mapped[str] = mapped_column(String(100))


class Plain:
    pass
