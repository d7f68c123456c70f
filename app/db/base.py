# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from sqlalchemy import JSON, Column, ForeignKey, Integer, MetaData, String, Table, Text

"""
Tabelas do schema (SQLAlchemy Core, sem mapeamento ORM).


- `authors`: id, name (<= 50), email.
- `blogs`: id, title (<= 200), content, tags (JSON), author_id (FK), version.
- `version` é o token de concorrência otimista, incrementado a cada UPDATE.
"""

metadata = MetaData()

authors = Table(
    "authors",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),
    Column("email", String(254), nullable=False),
)

blogs = Table(
    "blogs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("tags", JSON, nullable=True),
    Column("author_id", Integer, ForeignKey("authors.id"), nullable=False),
    Column("version", Integer, nullable=False, default=1),
)

# maior valor de INTEGER (int4) no PostgreSQL; ids acima disso nunca existem
MAX_KEY = 2_147_483_647
