"""
FastAPI Main Application

Soulscape HTTP entry point: emotion analysis and palette lookup.
"""

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from soulscape import __version__
from soulscape.config.settings import SoulscapeConfig, get_config
from soulscape.config.tables import EmotionTables, load_tables
from soulscape.models.response import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from soulscape.services.analysis_service import AnalysisService
from soulscape.services.sentiment_service import PolaritySource

logger = logging.getLogger(__name__)

TEXT_REQUIRED = "Text is required"


class HealthResponse(BaseModel):
    """Health check response"""

    status: str


def create_app(
    config: Optional[SoulscapeConfig] = None,
    tables: Optional[EmotionTables] = None,
    polarity_source: Optional[PolaritySource] = None,
) -> FastAPI:
    """
    Build the Soulscape API application.

    Args:
        config: Runtime configuration (environment if not given)
        tables: Emotion tables (loaded from config.tables_path if not given)
        polarity_source: Sentiment polarity callable (VADER if not given)

    Returns:
        FastAPI application
    """
    config = config or get_config()
    if tables is None:
        tables = load_tables(config.tables_path)

    analysis_service = AnalysisService(tables, polarity_source)

    app = FastAPI(
        title="Soulscape API",
        description="Emotion analysis and risk detection for journal entries",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Missing or non-string text is a plain client error
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(detail=TEXT_REQUIRED).model_dump(),
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint"""
        return HealthResponse(status="healthy")

    @app.post(
        "/api/analyzeEmotion",
        response_model=AnalyzeResponse,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}},
    )
    async def analyze_emotion(request: AnalyzeRequest) -> AnalyzeResponse:
        """
        Emotion analysis endpoint

        Args:
            request: Body with the journal entry text

        Returns:
            AnalyzeResponse: emotion, palette, support prompt and coping suggestions

        Raises:
            HTTPException: If text is empty
        """
        try:
            return analysis_service.analyze(request.text)
        except ValueError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=TEXT_REQUIRED)

    @app.get("/api/palettes", response_model=Dict[str, List[str]])
    async def get_palettes() -> Dict[str, List[str]]:
        """Palette table used by the soulscape renderer."""
        return {category: list(colors) for category, colors in tables.palettes.items()}

    logger.info(f"Soulscape API initialized (version {__version__})")
    return app

