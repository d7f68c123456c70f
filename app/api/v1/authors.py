# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import List
import logging
from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.deps import get_db
from app.core.errors import NotFound
from app.schemas.blog import AuthorDTO, to_author_dto
from app.services import author_store
from app.services.store import commit

"""
Endpoints de autores.


- `GET /authors` lista autores.
- `GET /authors/{author_id}` detalhes do autor.
- `POST /authors` cria autor (201 + Location); id enviado é ignorado.
"""

log = logging.getLogger("authors")

router = APIRouter()

@router.get("", response_model=List[AuthorDTO], summary="Listar autores")
async def list_authors(db: AsyncSession = Depends(get_db)) -> List[AuthorDTO]:
    return [to_author_dto(a) for a in await author_store.fetch_authors(db)]


@router.get("/{author_id}", response_model=AuthorDTO, summary="Detalhar um autor por id")
async def get_author(
    author_id: int = Path(..., description="Id do autor"),
    db: AsyncSession = Depends(get_db),
) -> AuthorDTO:
    author = await author_store.fetch_author(db, author_id)
    if author is None:
        raise NotFound("Author not found")
    return to_author_dto(author)


@router.post("", response_model=AuthorDTO, status_code=status.HTTP_201_CREATED, summary="Criar autor")
async def create_author(
    payload: AuthorDTO,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> AuthorDTO:
    author = await author_store.insert_author(db, payload.name, str(payload.email))
    await commit(db)
    log.info("autor %s criado", author.id)
    response.headers["Location"] = str(request.url_for("get_author", author_id=author.id).path)
    return to_author_dto(author)
