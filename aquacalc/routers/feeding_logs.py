from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
import logging

from .. import models, schemas
from ..database import get_db
from ..reminders import MAX_REMINDERS, reminder_schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feeding-logs", tags=["feeding-logs"])


# Declared before /{log_id} so "reminders" is not parsed as an id
@router.get("/reminders", response_model=schemas.ReminderSchedule)
def get_reminders(
    species: str,
    growth_stage: str,
    start: Optional[datetime] = None,
    count: Optional[int] = Query(None, ge=1, le=MAX_REMINDERS),
):
    try:
        return reminder_schedule(species, growth_stage, start=start, count=count)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/", response_model=schemas.FeedingLog)
def create_feeding_log(log: schemas.FeedingLogCreate, db: Session = Depends(get_db)):
    data = log.model_dump()
    if data.get("fed_at") is None:
        data.pop("fed_at")
    db_log = models.FeedingLog(**data)
    db.add(db_log)
    db.commit()
    db.refresh(db_log)
    logger.info(f"Feeding logged: {db_log.amount_kg} kg ({db_log.species})")
    return db_log

@router.get("/", response_model=List[schemas.FeedingLog])
def list_feeding_logs(
    species: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    query = db.query(models.FeedingLog)
    if species:
        query = query.filter(models.FeedingLog.species == species)
    return query.order_by(models.FeedingLog.fed_at.desc()).offset(skip).limit(limit).all()

@router.get("/{log_id}", response_model=schemas.FeedingLog)
def get_feeding_log(log_id: int, db: Session = Depends(get_db)):
    log = db.query(models.FeedingLog).filter(models.FeedingLog.id == log_id).first()
    if not log:
        raise HTTPException(status_code=404, detail="Feeding log not found")
    return log

@router.put("/{log_id}", response_model=schemas.FeedingLog)
def update_feeding_log(log_id: int, update: schemas.FeedingLogUpdate, db: Session = Depends(get_db)):
    log = db.query(models.FeedingLog).filter(models.FeedingLog.id == log_id).first()
    if not log:
        raise HTTPException(status_code=404, detail="Feeding log not found")
    for field, value in update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(log, field, value)
    db.commit()
    db.refresh(log)
    return log

@router.delete("/{log_id}")
def delete_feeding_log(log_id: int, db: Session = Depends(get_db)):
    log = db.query(models.FeedingLog).filter(models.FeedingLog.id == log_id).first()
    if not log:
        raise HTTPException(status_code=404, detail="Feeding log not found")
    db.delete(log)
    db.commit()
    return {"ok": True}
