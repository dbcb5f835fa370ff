"""
Shared schemas: the loose record base and the response envelope.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator


class LooseRecord(BaseModel):
    """Base for request bodies stored as‑is.

    Subclasses declare only the fields that must be present; every
    other field the client sends is kept, in the order it was sent.
    """

    model_config = ConfigDict(extra="allow")

    _field_order: List[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def remember_field_order(cls, data: Any, handler: Any) -> "LooseRecord":
        record = handler(data)
        if isinstance(data, dict):
            record._field_order = list(data)
        return record

    def to_record(self) -> Dict[str, Any]:
        dumped = self.model_dump()
        ordered = {field: dumped[field] for field in self._field_order if field in dumped}
        ordered.update((field, value) for field, value in dumped.items() if field not in ordered)
        return ordered


class ActionResult(BaseModel):
    """Envelope returned by every mutating endpoint."""

    success: bool
    message: Optional[str] = None
