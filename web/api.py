"""FastAPI application for report computation and validation"""

import asyncio
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import settings
from core.enums import ReportType
from core.exceptions import (
    DataSourceError,
    InvalidCellError,
    InvalidValueError,
    UnknownCellError,
)
from core.models import Cell, ValidationResult
from db.sources import create_source
from engine.validator import summarize
from orchestrator import ReportingOrchestrator

app = FastAPI(
    title="Hesabu API",
    description="BOT regulatory return computation and cross-sheet validation",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_orchestrator: Optional[ReportingOrchestrator] = None
_orchestrator_lock = asyncio.Lock()


async def get_orchestrator() -> ReportingOrchestrator:
    """Shared orchestrator, loaded on first use"""
    global _orchestrator
    async with _orchestrator_lock:
        if _orchestrator is None:
            orchestrator = ReportingOrchestrator(source=create_source())
            await orchestrator.run()
            _orchestrator = orchestrator
    return _orchestrator


# Pydantic models for request/response bodies
class CellUpdate(BaseModel):
    value: float


class ReportInfo(BaseModel):
    report_type: ReportType
    form_code: str
    loaded: bool
    error: Optional[str] = None


class ReportSnapshot(BaseModel):
    report_type: ReportType
    form_code: str
    cells: List[Cell]
    validations: List[ValidationResult]


class ValidationBatch(BaseModel):
    summary: Dict[str, int]
    results: List[ValidationResult]


def _store_or_error(orchestrator: ReportingOrchestrator, report_type: ReportType):
    try:
        return orchestrator.store(report_type)
    except DataSourceError as e:
        raise HTTPException(status_code=502, detail=str(e))


def _snapshot(orchestrator: ReportingOrchestrator, report_type: ReportType) -> ReportSnapshot:
    store = _store_or_error(orchestrator, report_type)
    return ReportSnapshot(
        report_type=report_type,
        form_code=report_type.form_code,
        cells=store.cells(),
        validations=orchestrator.results_for(report_type),
    )


@app.get("/api/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok", "source": settings.REPORT_SOURCE}


@app.get("/api/reports", response_model=List[ReportInfo])
async def list_reports(orchestrator: ReportingOrchestrator = Depends(get_orchestrator)):
    ctx = orchestrator.context
    return [
        ReportInfo(
            report_type=report_type,
            form_code=report_type.form_code,
            loaded=report_type in ctx.stores,
            error=ctx.failures.get(report_type),
        )
        for report_type in orchestrator.formula_registry.report_types()
    ]


@app.get("/api/reports/{report_type}", response_model=ReportSnapshot)
async def get_report(
    report_type: ReportType,
    orchestrator: ReportingOrchestrator = Depends(get_orchestrator),
):
    return _snapshot(orchestrator, report_type)


@app.put("/api/reports/{report_type}/cells/{cell_id}", response_model=ReportSnapshot)
async def set_cell(
    report_type: ReportType,
    cell_id: str,
    update: CellUpdate,
    orchestrator: ReportingOrchestrator = Depends(get_orchestrator),
):
    _store_or_error(orchestrator, report_type)
    try:
        orchestrator.update_input(report_type, cell_id, update.value)
    except UnknownCellError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidCellError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _snapshot(orchestrator, report_type)


@app.post("/api/reports/{report_type}/refresh", response_model=ReportSnapshot)
async def refresh_report(
    report_type: ReportType,
    orchestrator: ReportingOrchestrator = Depends(get_orchestrator),
):
    try:
        await orchestrator.refresh(report_type)
    except DataSourceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _snapshot(orchestrator, report_type)


@app.get("/api/validations", response_model=ValidationBatch)
async def list_validations(
    report_type: Optional[ReportType] = None,
    orchestrator: ReportingOrchestrator = Depends(get_orchestrator),
):
    results = (
        orchestrator.results_for(report_type)
        if report_type is not None
        else orchestrator.context.results
    )
    return ValidationBatch(summary=summarize(results).model_dump(), results=results)


@app.post("/api/cache/clear")
async def clear_cache(
    report_type: Optional[ReportType] = None,
    orchestrator: ReportingOrchestrator = Depends(get_orchestrator),
) -> Dict[str, Any]:
    clear = getattr(orchestrator.source, "clear_cache", None)
    if clear is None:
        return {"cleared": False}
    clear(report_type)
    return {"cleared": True, "report_type": report_type.value if report_type else None}
