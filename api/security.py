from __future__ import annotations
from typing import Optional

from fastapi import Header, HTTPException

from .config import settings

def get_current_user(
    x_api_key: Optional[str] = Header(default=None, alias="X-API-Key"),
) -> str:
    """
    Resuelve el usuario de la petición. No hay autenticación real:
    1) API key configurada en settings.api_keys (token -> user_id)
    2) Usuario por defecto (settings.default_user_id)
    """
    api_key = x_api_key.strip() if x_api_key else None
    if api_key:
        user_id = settings.parsed_api_keys().get(api_key)
        if not user_id:
            raise HTTPException(status_code=401, detail="Invalid API key")
        return user_id
    return settings.default_user_id
