"""Document classes shared by the Mongo test modules."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from bson import ObjectId

from admin_backends_mongo import BelongsTo, Document, HasMany, HasOne


class ArchivableDocument(Document):
    __abstract__: ClassVar[bool] = True
    __default_scope__: ClassVar[dict[str, object]] = {"archived_at": None}

    archived_at: datetime | None = None


class Author(Document):
    __relations__ = (
        HasMany("articles", target="Article"),
        HasOne("profile", target="blog_documents.Profile"),
    )

    name: str


class Profile(Document):
    __relations__ = (BelongsTo("author", target="Author"),)

    author_id: ObjectId | None = None
    bio: str = ""


class Article(Document):
    __collection__ = "posts"
    __relations__ = (
        BelongsTo("author", target="Author"),
        HasMany("notes", target="Note", as_="notable"),
    )

    title: str
    author_id: ObjectId | None = None
    price: Decimal | None = None


class Gallery(Document):
    __relations__ = (HasMany("notes", target="Note", as_="notable"),)

    name: str = ""


class Note(ArchivableDocument):
    __relations__ = (BelongsTo("notable", polymorphic=True),)

    body: str
    notable_id: ObjectId | None = None
    notable_type: str | None = None


class Plain:
    pass
