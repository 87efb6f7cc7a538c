"""Tests for MongoDocumentMapper."""

from __future__ import annotations

from decimal import Decimal

import pytest
from bson import ObjectId
from bson.decimal128 import Decimal128

from admin_backends_mongo import MongoDocumentMapper, MongoMappingError
from blog_documents import Article, Note


def test_id_is_stored_as_underscore_id() -> None:
    article = Article(title="Engines")
    doc = MongoDocumentMapper(Article).to_doc(article)

    assert doc["_id"] == article.id
    assert "id" not in doc
    assert isinstance(doc["_id"], ObjectId)


def test_decimal_round_trip() -> None:
    mapper = MongoDocumentMapper(Article)
    doc = mapper.to_doc(Article(title="Priced", price=Decimal("9.99")))

    assert doc["price"] == Decimal128("9.99")
    assert mapper.from_doc(doc).price == Decimal("9.99")


def test_from_doc_restores_the_document() -> None:
    oid = ObjectId()
    note = MongoDocumentMapper(Note).from_doc(
        {"_id": oid, "body": "hi", "notable_id": None, "notable_type": None}
    )
    assert note.id == oid
    assert note.body == "hi"
    assert note.archived_at is None


def test_from_docs() -> None:
    docs = [{"_id": ObjectId(), "title": "a"}, {"_id": ObjectId(), "title": "b"}]
    assert [a.title for a in MongoDocumentMapper(Article).from_docs(iter(docs))] == ["a", "b"]


def test_invalid_document_raises_mapping_error() -> None:
    oid = ObjectId()
    with pytest.raises(MongoMappingError, match="Article") as exc_info:
        MongoDocumentMapper(Article).from_doc({"_id": oid})
    assert str(oid) in str(exc_info.value)
    assert exc_info.value.to_dict()["error"] == "MongoMappingError"


def test_custom_id_field() -> None:
    mapper = MongoDocumentMapper(Article, id_field="title")
    doc = mapper.to_doc(Article(title="slug"))
    assert doc["_id"] == "slug"
