"""Class-name helpers shared by the registry and the adapters."""

from __future__ import annotations

import importlib
import re
from typing import Any

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """
    Convert a (dotted) class name to its underscored form.

    ``"BlogPost"`` -> ``"blog_post"``, ``"HTMLParser"`` -> ``"html_parser"``,
    ``"shop.models.BlogPost"`` -> ``"shop/models/blog_post"``.  The result
    does not depend on the locale.
    """
    word = name.replace(".", "/")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def humanize(name: str) -> str:
    """``"BlogPost"`` -> ``"Blog post"``; a trailing ``_id`` is dropped."""
    words = underscore(name.rsplit(".", 1)[-1])
    if words.endswith("_id"):
        words = words[:-3]
    words = words.replace("_", " ").strip()
    return words[:1].upper() + words[1:]


def class_path(cls: type[Any]) -> str:
    """Fully-qualified, importable name of *cls*."""
    return f"{cls.__module__}.{cls.__qualname__}"


def import_string(dotted_path: str) -> Any:
    """
    Import ``"package.module.Attr"`` (nested attributes allowed).

    Raises:
        ImportError: the path is malformed or no prefix is importable.
        AttributeError: the module exists but the attribute does not.
    """
    if not dotted_path or dotted_path.startswith(".") or "." not in dotted_path:
        raise ImportError(f"{dotted_path!r} is not a dotted import path")

    parts = dotted_path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # Only swallow "this prefix is not a module", not errors raised
            # while importing a module that does exist.
            missing = exc.name or ""
            if module_name != missing and not module_name.startswith(missing + "."):
                raise
            continue
        for attr in parts[split:]:
            obj = getattr(obj, attr)
        return obj
    raise ImportError(f"No importable module in {dotted_path!r}")
