# api.py
"""
Expression evaluation API with FastAPI.

Exposes infix-to-postfix conversion and postfix evaluation over HTTP. Every
request runs on its own freshly built stacks, so concurrent requests never
share state.
"""

import logging
import math
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .calculator import calculate, check_input_length, format_result
from .config import Settings, configure_logging, load_settings
from .converter import infix_to_postfix
from .errors import CalculatorError, InputTooLongError
from .evaluator import evaluate_postfix

logger = logging.getLogger(__name__)

# ----- Pydantic Models -----

class ExpressionRequest(BaseModel):
    """Model for an infix expression request."""
    expression: str = Field(..., description="Infix expression, e.g. (3 + 4) * 2")


class PostfixRequest(BaseModel):
    """Model for a postfix expression request."""
    postfix: str = Field(..., description="Space-delimited postfix expression, e.g. 3 4 + 2 *")


class ConversionResponse(BaseModel):
    """Model for a conversion response."""
    expression: str
    postfix: str


class EvaluationResponse(BaseModel):
    """Model for an evaluation response. A NaN or infinite result is null, see `formatted`."""
    expression: Optional[str] = None
    postfix: str
    result: Optional[float]
    formatted: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    detail: str
    error: str


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


# ----- Application Lifecycle -----

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Settings are resolved once here so a bad configuration fails at startup.
    """
    provider = app.dependency_overrides.get(get_settings, get_settings)
    try:
        provider()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise
    logger.info("Expression evaluation API starting up")
    yield
    logger.info("Expression evaluation API shutting down")


app = FastAPI(
    title="Postfix Calculator API",
    description="Convert infix arithmetic to postfix notation and evaluate it",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(CalculatorError)
async def calculator_error_handler(request: Request, exc: CalculatorError) -> JSONResponse:
    status_code = 413 if isinstance(exc, InputTooLongError) else 400
    logger.info(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=str(exc), error=type(exc).__name__).model_dump(),
    )


# ----- Dependency Injection -----

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Dependency for settings.
    In normal operation, loads them from the environment once and reuses them.
    For testing, this can be overridden.
    """
    return load_settings()


# ----- API Routes -----

_ERRORS = {400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}}


@app.get("/health", summary="Health check")
async def health():
    return {"status": "ok"}


@app.post(
    "/convert",
    response_model=ConversionResponse,
    responses=_ERRORS,
    summary="Convert infix to postfix",
)
async def convert(body: ExpressionRequest, settings: Settings = Depends(get_settings)):
    logger.info(f"Processing conversion request: {body.expression!r}")
    text = check_input_length(body.expression, settings.max_input_length)
    postfix = infix_to_postfix(text, capacity=settings.stack_capacity, strict=settings.strict_tokens)
    return ConversionResponse(expression=text, postfix=postfix)


@app.post(
    "/evaluate",
    response_model=EvaluationResponse,
    responses=_ERRORS,
    summary="Evaluate an infix expression",
)
async def evaluate(body: ExpressionRequest, settings: Settings = Depends(get_settings)):
    logger.info(f"Processing evaluation request: {body.expression!r}")
    evaluation = calculate(body.expression, settings)
    return EvaluationResponse(
        expression=evaluation.expression,
        postfix=evaluation.postfix,
        result=_finite_or_none(evaluation.result),
        formatted=evaluation.formatted,
    )


@app.post(
    "/evaluate/postfix",
    response_model=EvaluationResponse,
    responses=_ERRORS,
    summary="Evaluate a postfix expression",
)
async def evaluate_postfix_route(body: PostfixRequest, settings: Settings = Depends(get_settings)):
    logger.info(f"Processing postfix evaluation request: {body.postfix!r}")
    postfix = check_input_length(body.postfix, settings.max_input_length)
    result = evaluate_postfix(postfix, capacity=settings.stack_capacity)
    return EvaluationResponse(
        postfix=postfix,
        result=_finite_or_none(result),
        formatted=format_result(result, settings.precision),
    )


# ----- Main Entry Point -----

def serve() -> int:
    """Run the API under uvicorn with host and port from settings. Returns an exit status."""
    import uvicorn

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(serve())
