"""
Calculator endpoints.

GET  /api/calculators/               tool catalog
GET  /api/calculators/{slug}         one catalog entry
POST /api/calculators/{slug}         run a calculator, optionally store the run
GET  /api/calculators/{slug}/history stored runs, newest first
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from .. import models, schemas
from ..calculators.base import CalculationError
from ..calculators.registry import catalog, catalog_entry, get_calculator, has_calculator
from ..config import settings
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.get("/", response_model=List[schemas.CatalogEntry])
def list_calculators():
    return catalog()


@router.get("/{slug}", response_model=schemas.CatalogEntry)
def get_calculator_entry(slug: str):
    try:
        return catalog_entry(slug)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{slug}", response_model=schemas.CalculationResponse)
def run_calculator(slug: str, request: schemas.CalculationRequest, db: Session = Depends(get_db)):
    try:
        calculator = get_calculator(slug)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        result = calculator.calculate(request.fields)
    except CalculationError as e:
        logger.info(f"Rejected {slug} input ({e.field}): {e}")
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})

    record_id = None
    if settings.SAVE_CALCULATIONS and request.save:
        record = models.CalculationRecord(
            calculator=slug,
            inputs_json=request.fields,
            result_json=result,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        record_id = record.id

    return {"calculator": slug, "result": result, "record_id": record_id}


@router.get("/{slug}/history", response_model=List[schemas.CalculationRecord])
def calculation_history(
    slug: str,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    if not has_calculator(slug):
        raise HTTPException(status_code=404, detail=f"No calculator registered for slug: {slug}")
    limit = min(limit or settings.HISTORY_LIMIT, settings.HISTORY_LIMIT)
    return (
        db.query(models.CalculationRecord)
        .filter(models.CalculationRecord.calculator == slug)
        .order_by(models.CalculationRecord.created_at.desc(), models.CalculationRecord.id.desc())
        .limit(limit)
        .all()
    )
