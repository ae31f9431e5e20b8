"""
Report endpoint.

POST /api/reports/ builds a PDF from the calculation runs stored in the
requested period. Returns: application/pdf
"""

import logging
import re
from datetime import datetime, time, timedelta

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import settings
from ..database import get_db
from ..report_generator import (
    REPORT_FORMATS,
    REPORT_TYPES,
    SUPPORTED_FORMATS,
    generate_report_pdf,
    report_calculators,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/types")
def list_report_types():
    return {"types": REPORT_TYPES, "formats": REPORT_FORMATS}


@router.post("/")
def create_report(request: schemas.ReportRequest, db: Session = Depends(get_db)):
    if request.format not in REPORT_FORMATS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown report format: {request.format}. Available: {REPORT_FORMATS}",
        )
    if request.format not in SUPPORTED_FORMATS:
        raise HTTPException(
            status_code=400,
            detail=f"{request.format} reports are not available; use PDF.",
        )
    try:
        slugs = report_calculators(request.type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if request.start and request.end and request.start > request.end:
        raise HTTPException(status_code=400, detail="start must not be after end")

    unknown = [s for s in request.sections if s not in REPORT_TYPES[request.type]]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown sections for {request.type}: {unknown}")

    query = db.query(models.CalculationRecord).filter(
        models.CalculationRecord.calculator.in_(slugs)
    )
    if request.start:
        query = query.filter(
            models.CalculationRecord.created_at >= datetime.combine(request.start, time.min)
        )
    if request.end:
        query = query.filter(
            models.CalculationRecord.created_at
            < datetime.combine(request.end + timedelta(days=1), time.min)
        )
    records = query.order_by(models.CalculationRecord.created_at).all()
    logger.info(f"Report '{request.type}': {len(records)} runs")

    pdf_bytes = generate_report_pdf(
        request.type,
        records,
        title=request.title,
        organization=settings.REPORT_ORGANIZATION,
        start=request.start,
        end=request.end,
        sections=request.sections,
    )
    filename = re.sub(r"[^A-Za-z0-9_-]+", "_", request.title or request.type).strip("_") or "report"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}.pdf"'},
    )
