"""
ModelInfo DTO for provider model listings.

Uniform ``{id, label, provider}`` record produced from each provider's own
listing shape.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ModelInfo:
    """A single model listing entry."""

    id: str
    label: str
    provider: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ModelInfo"]
