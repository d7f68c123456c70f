# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import List
from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.deps import get_db
from app.schemas.blog import BlogDTO
from app.services import blog_service

"""
Endpoints de blogs (CRUD).


- `GET /blogs` lista blogs com autor.
- `GET /blogs/{blog_id}` detalhes do blog (404 se não existe).
- `POST /blogs` cria e devolve 201 + Location.
- `PUT /blogs/{blog_id}` atualiza (400 id divergente, 404, 409 conflito de versão).
- `DELETE /blogs/{blog_id}` remove (404 se não existe).
"""

router = APIRouter()

@router.get("", response_model=List[BlogDTO], summary="Listar blogs (com autor)")
async def list_blogs(db: AsyncSession = Depends(get_db)) -> List[BlogDTO]:
    return await blog_service.list_blogs(db)


@router.get("/{blog_id}", response_model=BlogDTO, summary="Detalhar um blog por id")
async def get_blog(
    blog_id: int = Path(..., description="Id do blog"),
    db: AsyncSession = Depends(get_db),
) -> BlogDTO:
    return await blog_service.get_blog(db, blog_id)


@router.post("", response_model=BlogDTO, status_code=status.HTTP_201_CREATED, summary="Criar blog")
async def create_blog(
    payload: BlogDTO,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> BlogDTO:
    created = await blog_service.create_blog(db, payload)
    response.headers["Location"] = str(request.url_for("get_blog", blog_id=created.id).path)
    return created


@router.put("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Atualizar blog (concorrência otimista)")
async def update_blog(
    payload: BlogDTO,
    blog_id: int = Path(..., description="Id do blog"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await blog_service.update_blog(db, blog_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remover blog")
async def delete_blog(
    blog_id: int = Path(..., description="Id do blog"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await blog_service.delete_blog(db, blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
