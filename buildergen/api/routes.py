"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from buildergen.api.schemas import (
    ErrorDetail, GenerateRequest, GenerateResponse, RuleInfo,
)
from buildergen.core.config import load_config
from buildergen.core.errors import BuilderGenerationError, NameCollisionError
from buildergen.core.registry import create_default_registry
from buildergen.host.memory import InMemorySourceTree
from buildergen.host.preferences import (
    InMemoryKeyValueStore, JsonFileKeyValueStore, RecentPackages,
)
from buildergen.services.builder_service import BuilderService
from buildergen.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

# Shared across requests
_config = load_config()
_registry = create_default_registry()
_recent_packages = RecentPackages(
    JsonFileKeyValueStore(_config.preferences.store_path)
    if _config.preferences.store_path else InMemoryKeyValueStore(),
    key=_config.preferences.recent_packages_key,
    max_count=_config.preferences.max_recent_packages,
)


def _service_for(request: GenerateRequest) -> BuilderService:
    """A fresh source tree per request, seeded with what the caller says exists."""
    tree = InMemorySourceTree()
    target = request.metadata
    for name in request.existing_inner_types:
        tree.inner_types.setdefault(target.qualified_name, {})[name] = ""
    for file_name in request.existing_files:
        tree.files.setdefault(target.source_directory, {})[file_name] = ""
    return BuilderService(tree, _recent_packages, config=_config, registry=_registry)


@router.post("/generate", response_model=GenerateResponse)
async def generate_builder(request: GenerateRequest) -> GenerateResponse:
    """Generate a builder for the given class metadata and options."""
    service = _service_for(request)
    try:
        outcome = service.generate(request.metadata, request.options)
    except BuilderGenerationError as exc:
        logger.warning("Rejected /generate for %s: %s", request.metadata.name, exc.kind)
        status = 409 if isinstance(exc, NameCollisionError) else 422
        detail = ErrorDetail(error=exc.kind, message=str(exc))
        raise HTTPException(status_code=status, detail=detail.model_dump()) from exc
    except ValidationError as exc:
        detail = ErrorDetail(error="InvalidSettings", message=str(exc))
        raise HTTPException(status_code=422, detail=detail.model_dump()) from exc

    return GenerateResponse(
        class_name=outcome.builder.class_name,
        inner=outcome.inner,
        text=outcome.builder.text,
        file_name=outcome.file_name,
        file_content=outcome.file_content,
        warnings=outcome.builder.warnings,
        rule_count=len(service.list_rules()),
    )


@router.get("/recent-packages", response_model=list[str])
async def recent_packages(package: str = Query(default="")) -> list[str]:
    """Package choices for a class living in ``package``."""
    return _recent_packages.choices(package)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available member rules."""
    return [
        RuleInfo(id=r.get_id(), name=r.get_name())
        for r in _registry.list_rules()
    ]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
