"""Field types for the read path of provider payloads.

Providers send ``null``, omit keys or use unexpected types for fields the
connector does not rely on. The annotated types below turn a wrong-typed
value into ``None`` before validation, so only the nested path a schema
actually reads decides what text a payload yields, and a payload that is a
JSON object never fails validation because of it.
"""
from __future__ import annotations

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


class Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


def _text_or_none(value: Any) -> Any:
    return value if isinstance(value, str) else None


def object_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


def leading_object(value: Any) -> Any:
    """``[first]`` when ``value`` is a non-empty list, else ``None``."""
    if isinstance(value, list) and value:
        return [object_or_none(value[0])]
    return None


def objects_only(value: Any) -> Any:
    """Drop list entries that are not JSON objects; non-lists become ``[]``."""
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return []


OptionalText = Annotated[Optional[str], BeforeValidator(_text_or_none)]


def first_text(items: Optional[List[Any]], attr: str) -> str:
    """Text at ``items[0].<attr>.content`` or ``""`` when any step is missing."""
    if not items or items[0] is None:
        return ""
    inner = getattr(items[0], attr)
    if inner is None or inner.content is None:
        return ""
    return inner.content


__all__ = [
    "Lenient",
    "OptionalText",
    "first_text",
    "leading_object",
    "object_or_none",
    "objects_only",
]
