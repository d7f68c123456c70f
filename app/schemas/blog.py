# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from app.db.base import MAX_KEY
from app.db.entities import Author, Blog

"""
DTOs da API (formato de transferência, camelCase no wire).


- `AuthorDTO` e `BlogDTO` (com `author` opcional, nulo quando não há JOIN).
- `version` é o token de concorrência otimista: devolvido nas leituras, opcional no PUT.
- `to_author_dto()` / `to_blog_dto()` convertem entidades em DTOs.
"""


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorDTO(_WireModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1, "name": "Ada", "email": "ada@x.com"}},
    )


class BlogDTO(_WireModel):
    id: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    tags: Optional[List[str]] = Field(default_factory=list)
    author_id: int = Field(..., ge=1, le=MAX_KEY)
    author: Optional[AuthorDTO] = None
    version: Optional[int] = Field(None, ge=1, le=MAX_KEY, description="Token de concorrência otimista")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 2,
                "title": "Hi",
                "content": "Body",
                "tags": ["a", "b"],
                "authorId": 1,
                "author": {"id": 1, "name": "Ada", "email": "ada@x.com"},
                "version": 1,
            }
        },
    )


def to_author_dto(author: Author) -> AuthorDTO:
    return AuthorDTO(id=author.id, name=author.name, email=author.email)


def to_blog_dto(blog: Blog) -> BlogDTO:
    return BlogDTO(
        id=blog.id,
        title=blog.title,
        content=blog.content,
        tags=list(blog.tags),
        author_id=blog.author_id,
        author=to_author_dto(blog.author) if blog.author else None,
        version=blog.version,
    )
