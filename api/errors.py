from __future__ import annotations
import logging
from typing import Dict
from fastapi import FastAPI, Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

class ErrorResponse(BaseModel):
    code: str = Field(examples=["bad_request"])
    detail: str = Field(examples=["Invalid input"])
    meta: dict | None = Field(default=None, examples=[{"field": "ingredient1"}])

def install_exception_handlers(app: FastAPI):
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        code_map: Dict[int, str] = {
            400: "bad_request",
            401: "unauthorized",
            403: "forbidden",
            404: "not_found",
            409: "conflict",
            413: "payload_too_large",
            422: "validation_error",
            500: "internal_error",
        }
        payload = ErrorResponse(code=code_map.get(exc.status_code, "error"), detail=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=payload.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(p) for p in e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
            for e in exc.errors()
        ]
        payload = ErrorResponse(code="validation_error", detail="Validation failed", meta={"errors": jsonable_encoder(errors)})
        return JSONResponse(status_code=422, content=payload.model_dump())

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        payload = ErrorResponse(code="internal_error", detail="Storage error")
        return JSONResponse(status_code=500, content=payload.model_dump())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        payload = ErrorResponse(code="internal_error", detail="Internal server error")
        return JSONResponse(status_code=500, content=payload.model_dump())
