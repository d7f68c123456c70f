# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter
from app.api.v1 import authors, blogs, health

"""
Roteador principal da API v1.


- Agrega e inclui sub-routers (blogs, authors, health).
- Centraliza prefixos/tags; importado por `main.py` como `/api/v1`.
"""

router_v1 = APIRouter(tags=["v1"])

# Sub-rotas
router_v1.include_router(blogs.router,   prefix="/blogs",   tags=["blogs"])
router_v1.include_router(authors.router, prefix="/authors", tags=["authors"])
router_v1.include_router(health.router,  prefix="/health",  tags=["health"])
