# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

"""
Entidades em memória (linhas de `authors`/`blogs`).


- `Author` e `Blog` construídos a partir de `RowMapping`.
- `Blog.author` só é preenchido quando a consulta faz JOIN com `authors`.
"""


@dataclass
class Author:
    id: int
    name: str
    email: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Author":
        return cls(id=row["id"], name=row["name"], email=row["email"])


@dataclass
class Blog:
    title: str
    content: str
    author_id: int
    tags: List[str] = field(default_factory=list)
    id: Optional[int] = None
    version: int = 1
    author: Optional[Author] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Blog":
        author = None
        # colunas do JOIN vêm com prefixo author_ (author_id é a própria FK)
        if row.get("author_name") is not None:
            author = Author(id=row["author_id"], name=row["author_name"], email=row["author_email"])
        return cls(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            tags=list(row["tags"] or []),
            author_id=row["author_id"],
            version=row["version"],
            author=author,
        )
