"""FastAPI REST API server for codeoutline."""

import logging

from fastapi import FastAPI
from pydantic import BaseModel, Field

from ..analyzers.base import OutlineProvider
from ..extractors.outline import parse_file

logger = logging.getLogger(__name__)


# Request/Response Models
class OutlineRequest(BaseModel):
    """Outline request body."""
    file_path: str = Field(..., description="Path used to pick the grammar")
    content: str = Field(..., description="Full file contents")


class OutlineResponse(BaseModel):
    """Outline of one file."""
    file_path: str
    language: str | None = None
    supported: bool
    outline: str | None = None


class LanguageInfo(BaseModel):
    """A supported language."""
    language: str
    extensions: list[str]


def create_app(provider: OutlineProvider | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if provider is None:
        from ..analyzers.treesitter import TreeSitterProvider
        provider = TreeSitterProvider()

    app = FastAPI(
        title="codeoutline API",
        description="Condense source files into signature outlines",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.provider = provider

    # Health check
    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/languages", response_model=list[LanguageInfo])
    def languages():
        """List supported languages."""
        registry = getattr(app.state.provider, "registry", None)
        if registry is None:
            return []

        by_language: dict[str, list[str]] = {}
        for ext, language in registry.extensions().items():
            by_language.setdefault(language, []).append(ext)
        return [
            LanguageInfo(language=language, extensions=by_language.get(language, []))
            for language in registry.languages()
        ]

    @app.post("/outline", response_model=OutlineResponse)
    def outline(request: OutlineRequest):
        """Outline one file. Unsupported languages are not an error."""
        language = app.state.provider.resolve(request.file_path)
        result = parse_file(request.content, request.file_path, app.state.provider)

        if result is None:
            logger.info("No grammar for %s", request.file_path)

        return OutlineResponse(
            file_path=request.file_path,
            language=language,
            supported=result is not None,
            outline=result,
        )

    return app
