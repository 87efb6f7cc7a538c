"""Tests for MongoAdapter against mongomock."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import mongomock
import pytest
from bson import ObjectId

import blog_documents
from admin_backends_core import (
    AdapterKind,
    AdminBackendsConfig,
    AssociationKind,
    ModelRegistry,
)
from admin_backends_mongo import (
    Document,
    MongoAdapter,
    MongoConnectionError,
    MongoDocumentMapper,
)
from blog_documents import Article, Author, Gallery, Note, Profile


def save(db: Any, document: Document) -> None:
    mapper = MongoDocumentMapper(type(document))
    db[type(document).collection_name()].insert_one(mapper.to_doc(document))


@pytest.fixture
def db() -> Any:
    return mongomock.MongoClient().blog


@pytest.fixture
def adapter(db: Any) -> MongoAdapter:
    return MongoAdapter(db)


@pytest.fixture
def blog(db: Any) -> dict[str, Document]:
    author = Author(name="Ada")
    article = Article(title="Engines", author_id=author.id)
    gallery = Gallery(name="Sketches")
    documents: dict[str, Document] = {
        "author": author,
        "profile": Profile(author_id=author.id, bio="Mathematician"),
        "article": article,
        "gallery": gallery,
        "note": Note(
            body="nice",
            notable_id=article.id,
            notable_type="blog_documents.Article",
        ),
        "archived_note": Note(
            body="old",
            notable_id=article.id,
            notable_type="blog_documents.Article",
            archived_at=datetime(2024, 1, 1),
        ),
        "gallery_note": Note(
            body="pretty",
            notable_id=gallery.id,
            notable_type="blog_documents.Gallery",
        ),
    }
    # Same id, other owner type: must not be picked up as the article's note.
    documents["impostor"] = Note(
        body="impostor", notable_id=article.id, notable_type="blog_documents.Gallery"
    )
    for document in documents.values():
        save(db, document)
    return documents


def association(adapter: MongoAdapter, cls: type, name: str) -> Any:
    return next(a for a in adapter.associations(cls) if a.name == name)


class TestSupports:
    @pytest.mark.parametrize("cls", [Author, Article, Note])
    def test_documents(self, adapter: MongoAdapter, cls: type) -> None:
        assert adapter.supports(cls)

    @pytest.mark.parametrize(
        "cls", [Document, blog_documents.ArchivableDocument, blog_documents.Plain]
    )
    def test_non_documents(self, adapter: MongoAdapter, cls: type) -> None:
        assert not adapter.supports(cls)

    def test_kind(self, adapter: MongoAdapter) -> None:
        assert adapter.kind is AdapterKind.DOCUMENT

    def test_collection_names(self) -> None:
        assert Author.collection_name() == "authors"
        assert Article.collection_name() == "posts"


class TestAssociations:
    def test_article(self, adapter: MongoAdapter) -> None:
        author, notes = adapter.associations(Article)

        assert author.kind is AssociationKind.BELONGS_TO
        assert author.target_class_name == "blog_documents.Author"
        assert author.foreign_key == "author_id"
        assert author.owner_name == "blog_documents.Article"

        assert notes.kind is AssociationKind.HAS_MANY
        assert notes.target_class_name == "blog_documents.Note"
        assert notes.as_ == "notable"
        assert notes.foreign_key == "notable_id"

    def test_default_foreign_key_is_owner_name(self, adapter: MongoAdapter) -> None:
        articles, profile = adapter.associations(Author)

        assert articles.foreign_key == "author_id"
        assert profile.kind is AssociationKind.HAS_ONE
        assert profile.target_class_name == "blog_documents.Profile"

    def test_polymorphic_belongs_to(self, adapter: MongoAdapter) -> None:
        (notable,) = adapter.associations(Note)

        assert notable.kind is AssociationKind.POLYMORPHIC_BELONGS_TO
        assert notable.target_class_name is None
        assert notable.foreign_key == "notable_id"


class TestQueries:
    def test_where_applies_default_scope(
        self, adapter: MongoAdapter, blog: dict[str, Document]
    ) -> None:
        cursor = adapter.where(Note, {"notable_id": blog["article"].id})
        assert sorted(doc["body"] for doc in cursor) == ["impostor", "nice"]

    def test_conditions_override_default_scope(
        self, adapter: MongoAdapter, blog: dict[str, Document]
    ) -> None:
        cursor = adapter.where(Note, {"archived_at": {"$ne": None}})
        assert [doc["body"] for doc in cursor] == ["old"]

    def test_where_without_default_scope(
        self, adapter: MongoAdapter, blog: dict[str, Document]
    ) -> None:
        assert [doc["title"] for doc in adapter.where(Article, {})] == ["Engines"]

    def test_fetch_many_is_unscoped_and_type_aware(
        self, adapter: MongoAdapter, blog: dict[str, Document]
    ) -> None:
        notes = adapter.fetch_many_unscoped(blog["article"], association(adapter, Article, "notes"))

        assert all(isinstance(note, Note) for note in notes)
        assert sorted(note.body for note in notes) == ["nice", "old"]

    def test_fetch_many_plain_has_many(
        self, adapter: MongoAdapter, blog: dict[str, Document]
    ) -> None:
        articles = adapter.fetch_many_unscoped(blog["author"], association(adapter, Author, "articles"))
        assert [a.id for a in articles] == [blog["article"].id]

    def test_fetch_one(self, adapter: MongoAdapter, blog: dict[str, Document]) -> None:
        profile = adapter.fetch_one_unscoped(blog["author"], association(adapter, Author, "profile"))
        assert isinstance(profile, Profile)
        assert profile.bio == "Mathematician"

    def test_fetch_one_missing(self, adapter: MongoAdapter, blog: dict[str, Document]) -> None:
        loner = Author(name="Nobody")
        assert adapter.fetch_one_unscoped(loner, association(adapter, Author, "profile")) is None

    def test_no_database(self) -> None:
        adapter = MongoAdapter()
        with pytest.raises(MongoConnectionError):
            adapter.where(Article, {})

    def test_database_factory(self, db: Any, blog: dict[str, Document]) -> None:
        calls: list[int] = []

        def factory() -> Any:
            calls.append(1)
            return db

        adapter = MongoAdapter(database_factory=factory)
        assert len(list(adapter.where(Article, {}))) == 1
        assert calls == [1]


class TestThroughRegistry:
    @pytest.fixture
    def registry(self, adapter: MongoAdapter) -> ModelRegistry:
        return ModelRegistry(
            AdminBackendsConfig(
                included_models=(
                    "blog_documents.Author",
                    "blog_documents.Article",
                    "blog_documents.Gallery",
                    "blog_documents.Note",
                    "blog_documents.ArchivableDocument",
                )
            ),
            adapters=[adapter],
        )

    def test_all(self, registry: ModelRegistry) -> None:
        assert [m.model_name for m in registry.all(AdapterKind.DOCUMENT)] == [
            "blog_documents.Author",
            "blog_documents.Article",
            "blog_documents.Gallery",
            "blog_documents.Note",
        ]

    def test_polymorphic_parents(self, registry: ModelRegistry) -> None:
        assert registry.polymorphic_parents("document", "blog_documents.Note", "notable") == [
            "blog_documents.Article",
            "blog_documents.Gallery",
        ]

    def test_associated_children(
        self, registry: ModelRegistry, blog: dict[str, Document]
    ) -> None:
        model = registry.get(Gallery)
        children = list(model.each_associated_children(blog["gallery"]))
        assert [(a.name, child.body) for a, child in children] == [("notes", "pretty")]

    def test_author_children(self, registry: ModelRegistry, blog: dict[str, Document]) -> None:
        model = registry.get("blog_documents.Author")
        children = {a.name: child for a, child in model.each_associated_children(blog["author"])}
        assert set(children) == {"articles", "profile"}
        assert children["profile"].author_id == blog["author"].id

    def test_model_where(self, registry: ModelRegistry, blog: dict[str, Document]) -> None:
        cursor = registry.get(Note).where(notable_type="blog_documents.Gallery")
        assert sorted(doc["body"] for doc in cursor) == ["impostor", "pretty"]


def test_object_ids_are_stored_natively(db: Any, blog: dict[str, Document]) -> None:
    raw = db.notes.find_one({"body": "nice"})
    assert isinstance(raw["_id"], ObjectId)
    assert raw["notable_id"] == blog["article"].id
