# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any

"""
Taxonomia de erros da API.


- `BlogApiError` carrega `status_code` e o tipo (`error`) devolvido no corpo.
- NotFound/BadRequest/ValidationFailed/ConcurrencyConflict/StoreUnavailable.
- Convertidos em resposta JSON pelos handlers registrados em `main.py`.
"""


class BlogApiError(Exception):
    """Erro de domínio com mapeamento direto para HTTP."""

    status_code: int = 500
    error: str = "internal_error"

    def __init__(self, detail: Any = None):
        self.detail = detail if detail is not None else self.error.replace("_", " ")
        super().__init__(str(self.detail))

    def to_body(self) -> dict[str, Any]:
        return {"detail": self.detail, "error": self.error}


class NotFound(BlogApiError):
    status_code = 404
    error = "not_found"


class BadRequest(BlogApiError):
    status_code = 400
    error = "bad_request"


class ValidationFailed(BlogApiError):
    status_code = 400
    error = "validation_failed"


class ConcurrencyConflict(BlogApiError):
    """A linha mudou entre a leitura e a escrita (versão divergente)."""

    status_code = 409
    error = "concurrency_conflict"


class StoreUnavailable(BlogApiError):
    status_code = 503
    error = "store_unavailable"
