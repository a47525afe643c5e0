"""
interfaces/api.py
──────────────────────────────────────────────────────────────────────────────
FastAPI delivery layer.

Run:
  uvicorn pdgen.interfaces.api:app --reload

Endpoints:
  POST /api/generate-description          validate → generate
  GET  /api/taxonomy/groups               job family dropdown
  GET  /api/taxonomy/groups/{code}/series series dropdown (unknown → [])
  GET  /api/pay-grades                    pay scale / grade dropdown
  GET  /health

Status mapping for /api/generate-description:
  200 {success: true, description}
  400 {success: false, error, details: [{field, message}]}  validation
  500 {success: false, error}                               generation

The request body is validated here with validate_for_api() independently of
any client-side validation; the generator is only resolved once the body has
passed, so a misconfigured provider never masks a 400.
"""
from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from pdgen import __version__
from pdgen.config.log import configure_logging
from pdgen.config.settings import get_settings
from pdgen.domain.exceptions import (
    AuthenticationError,
    ModelNotFoundError,
    PDGenError,
)
from pdgen.domain.models import (
    ApiErrorResponse,
    GenerateDescriptionResponse,
    OccupationalGroup,
    PayScaleGrade,
    SeriesEntry,
)
from pdgen.services.catalog import TaxonomyCatalog, get_catalog
from pdgen.services.container import get_generator
from pdgen.services.generator import DescriptionGenerator
from pdgen.services.validation import validate_for_api

logger = logging.getLogger(__name__)

_MODEL_NOT_FOUND_MESSAGE = (
    "The specified model was not found. Please check your model ID configuration."
)
_ACCESS_DENIED_MESSAGE = (
    "Access denied to the generation service. "
    "Please check your credentials and permissions."
)
_GENERIC_FAILURE_MESSAGE = "Failed to generate job description. Please try again."


# ── Dependencies ───────────────────────────────────────────────────────────

def get_generator_provider() -> Callable[[], DescriptionGenerator]:
    """Return a callable that builds the generator on demand.

    Overridden in tests via ``app.dependency_overrides``.
    """
    return get_generator


def _error(status_code: int, body: ApiErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_dict())


# ── App factory ────────────────────────────────────────────────────────────

@asynccontextmanager
async def _lifespan(app: FastAPI):
    # Build the catalog before serving so integrity errors stop startup.
    get_catalog()
    yield


def create_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="HR Position Description Generator",
        description="Validates OPM job family / series selections and generates position descriptions.",
        version=__version__,
        lifespan=_lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/taxonomy/groups", response_model=list[OccupationalGroup])
    def list_groups(catalog: TaxonomyCatalog = Depends(get_catalog)):
        return list(catalog.list_occupational_groups())

    @app.get("/api/taxonomy/groups/{code}/series", response_model=list[SeriesEntry])
    def list_series(code: str, catalog: TaxonomyCatalog = Depends(get_catalog)):
        return list(catalog.list_series_for_group(code))

    @app.get("/api/pay-grades", response_model=list[str])
    def list_pay_grades():
        return PayScaleGrade.values()

    @app.post("/api/generate-description")
    async def generate_description(
        request: Request,
        catalog: TaxonomyCatalog = Depends(get_catalog),
        generator_provider: Callable[[], DescriptionGenerator] = Depends(get_generator_provider),
    ):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error(400, ApiErrorResponse(error="Request body must be valid JSON"))

        if not isinstance(body, dict):
            return _error(400, ApiErrorResponse(error="Request body must be a JSON object"))

        validation = validate_for_api(body, catalog)
        if not validation.ok:
            logger.info("Rejected request | fields=%s", sorted(validation.errors))
            return _error(
                400,
                ApiErrorResponse(error="Validation failed", details=validation.error_list()),
            )

        try:
            generator = generator_provider()
            result = await run_in_threadpool(generator.generate, validation.request)
        except ModelNotFoundError:
            logger.exception("Generation failed: model not found")
            return _error(500, ApiErrorResponse(error=_MODEL_NOT_FOUND_MESSAGE))
        except AuthenticationError:
            logger.exception("Generation failed: access denied")
            return _error(500, ApiErrorResponse(error=_ACCESS_DENIED_MESSAGE))
        except PDGenError as exc:
            logger.exception("Generation failed")
            return _error(500, ApiErrorResponse(error=str(exc) or _GENERIC_FAILURE_MESSAGE))
        except Exception:
            # Provider SDKs raise outside the domain hierarchy (e.g. unresolved AWS credentials).
            logger.exception("Generation failed: unexpected error")
            return _error(500, ApiErrorResponse(error=_GENERIC_FAILURE_MESSAGE))

        return GenerateDescriptionResponse(description=result.text)

    return app


app = create_app()
