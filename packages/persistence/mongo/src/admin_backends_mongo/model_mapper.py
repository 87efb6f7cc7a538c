"""Document class <-> MongoDB document mapping with BSON type preservation."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Generic, TypeVar

from bson.decimal128 import Decimal128
from pydantic import BaseModel, ValidationError

from .exceptions import MongoMappingError

T_Document = TypeVar("T_Document", bound=BaseModel)


class MongoDocumentMapper(Generic[T_Document]):
    """
    Converts between pydantic documents and raw MongoDB documents.

    Uses ``model_dump(mode="python")`` so datetimes, ObjectIds and bytes
    reach PyMongo natively; ``Decimal`` is stored as ``Decimal128``.
    ``id`` is stored as ``_id``.
    """

    def __init__(self, document_cls: type[T_Document], *, id_field: str = "id") -> None:
        self.document_cls = document_cls
        self._id_field = id_field

    def to_doc(self, document: T_Document) -> dict[str, Any]:
        data = document.model_dump(mode="python")
        if self._id_field in data:
            data["_id"] = data.pop(self._id_field)
        return _convert(data, _to_bson)

    def from_doc(self, doc: dict[str, Any]) -> T_Document:
        data = dict(doc)
        if "_id" in data:
            data[self._id_field] = data.pop("_id")
        try:
            return self.document_cls.model_validate(_convert(data, _from_bson))
        except ValidationError as e:
            raise MongoMappingError(
                f"Cannot load {self.document_cls.__name__} from document "
                f"{doc.get('_id')!r}: {e}"
            ) from e

    def from_docs(self, docs: Any) -> list[T_Document]:
        return [self.from_doc(d) for d in docs]


def _to_bson(value: Any) -> Any:
    return Decimal128(str(value)) if isinstance(value, Decimal) else value


def _from_bson(value: Any) -> Any:
    return value.to_decimal() if isinstance(value, Decimal128) else value


def _convert(value: Any, leaf: Any) -> Any:
    if isinstance(value, dict):
        return {k: _convert(v, leaf) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert(v, leaf) for v in value]
    return leaf(value)
