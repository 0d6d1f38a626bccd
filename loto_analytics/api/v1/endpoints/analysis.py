"""Analysis API endpoints."""

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from loto_analytics.config import settings
from loto_analytics.engine.errors import AnalysisError
from loto_analytics.engine.summary import analyze_draws_async
from loto_analytics.engine.validator import ValidationMode
from loto_analytics.ingest.sheet_parser import SheetParseError
from loto_analytics.schemas.analysis import (
    AdvisoryContextResponse,
    AnalysisReport,
    AnalysisRequest,
)
from loto_analytics.services import analysis_service
from loto_analytics.services.advisory_context import build_advisory_context

router = APIRouter()


def _unprocessable(e: AnalysisError) -> HTTPException:
    return HTTPException(status_code=422, detail=e.to_detail())


@router.post("", response_model=AnalysisReport)
async def analyze(request: AnalysisRequest):
    """Análise completa do histórico enviado (frequência, atrasos, ciclos, alertas)."""
    try:
        return await analysis_service.build_report(
            [d.model_dump() for d in request.draws],
            request.mode,
            trend_window=request.trend_window,
        )
    except AnalysisError as e:
        raise _unprocessable(e)


@router.post("/upload", response_model=AnalysisReport)
async def analyze_upload(
    file: UploadFile = File(..., description="lotofacil.xlsx ou CSV"),
    mode: ValidationMode = Query(ValidationMode.STRICT, description="strict ou lenient"),
):
    """Carrega a planilha oficial da CAIXA e devolve a análise."""
    too_large = HTTPException(status_code=413, detail="Arquivo muito grande.")
    if file.size is not None and file.size > settings.MAX_UPLOAD_BYTES:
        raise too_large

    content = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if not content:
        raise HTTPException(status_code=400, detail="Arquivo vazio.")
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise too_large

    try:
        return await analysis_service.build_report_from_sheet(
            content, file.filename or "", mode
        )
    except SheetParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AnalysisError as e:
        raise _unprocessable(e)


@router.post("/context", response_model=AdvisoryContextResponse)
async def advisory_context(request: AnalysisRequest):
    """Resumo textual dos dados para o assistente."""
    try:
        summary = await analyze_draws_async(
            [d.model_dump() for d in request.draws], request.mode
        )
    except AnalysisError as e:
        raise _unprocessable(e)

    return AdvisoryContextResponse(
        total_draws=summary.total_draws,
        context=build_advisory_context(summary),
    )
