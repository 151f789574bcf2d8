"""
Схема документа экспорта дерева блоков.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentNode(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: str                           # "if" | "elif" | "else" | "for"
    line: int = Field(ge=1)             # номер строки (1-based)
    condition: Optional[str] = None     # None для else
    children: List[DocumentNode] = Field(default_factory=list)


DocumentNode.model_rebuild()

__all__ = ["DocumentNode"]
