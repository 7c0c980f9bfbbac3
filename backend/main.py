"""
validity API - FastAPI service for string rule checking.

Run with: uvicorn main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import pandas as pd
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from validity import (
    Category,
    CheckContext,
    CheckOptions,
    RuleDispatcher,
    ValidationEngine,
    ValidationSubject,
    create_default_registry,
)

logger = logging.getLogger("validity.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("validity API starting with %d rules", len(registry.get_rule_ids()))
    yield
    logger.info("validity API stopped")


app = FastAPI(
    title="validity API",
    description="String rule checking service",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

registry = create_default_registry()


# Pydantic models for API
class OptionsModel(BaseModel):
    strict_arguments: bool = False
    strict_calendar: bool = False
    minimum_age: int = 14


class SubjectRequest(BaseModel):
    key: str
    item: str
    rules: List[str]
    options: Optional[OptionsModel] = None


class BatchRequest(BaseModel):
    key: str
    items: List[Optional[str]]
    rules: List[str]
    options: Optional[OptionsModel] = None


class SubjectResponse(BaseModel):
    key: str
    errors: List[str]


def build_dispatcher(options: Optional[OptionsModel]) -> RuleDispatcher:
    opts = options or OptionsModel()
    context = CheckContext(options=CheckOptions(
        strict_arguments=opts.strict_arguments,
        strict_calendar=opts.strict_calendar,
        minimum_age=opts.minimum_age,
    ))
    return RuleDispatcher(registry, context)


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "validity API", "version": "1.0.0"}


@app.get("/api/rules")
async def get_rules():
    """Get documentation for all rules."""
    return {"rules": registry.get_documentation()}


@app.get("/api/rules/{category}")
async def get_rules_by_category(category: str):
    """Get rules by category."""
    try:
        cat = Category(category)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid category: {category}")
    rules = registry.get_rules_by_category(cat)
    return {"rules": [r.metadata.to_dict() for r in rules]}


@app.post("/api/validate", response_model=SubjectResponse)
async def validate_subject(request: SubjectRequest):
    """
    Check one value against its rules.

    The first rule is the required gate and is not reported here.
    """
    dispatcher = build_dispatcher(request.options)
    subject = ValidationSubject(key=request.key, item=request.item, rules=request.rules)
    return SubjectResponse(key=request.key, errors=dispatcher.get_errors(subject))


@app.post("/api/validate/batch")
async def validate_batch(request: BatchRequest):
    """
    Check many values of one field against the same rules.

    Returns per-row failures with counts by rule and by outcome.
    """
    engine = ValidationEngine(build_dispatcher(request.options))
    values = pd.Series(request.items, dtype=object)
    result = engine.validate(values, request.key, request.rules)
    return result.to_dict()


# ============================================================================
# Run server (development)
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
