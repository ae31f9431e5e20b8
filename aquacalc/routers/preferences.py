"""
Theme preference per client.

The client sends its own id (any stable string, e.g. a random id kept in the
browser) and optionally the OS theme so 'system' can be resolved.
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import settings
from ..database import get_db
from ..theme import palette_for, resolve_theme

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/preferences", tags=["preferences"])

SYSTEM_THEME_PATTERN = "^(light|dark)$"


def _response(client_id: str, mode: str, system_theme: str) -> dict:
    return {
        "client_id": client_id,
        "mode": mode,
        "resolved": resolve_theme(mode, system_theme),
        "palette": palette_for(mode, system_theme),
    }


@router.get("/theme", response_model=schemas.ThemePreference)
def get_theme(
    client_id: str = Query(..., min_length=1),
    system_theme: str = Query("light", pattern=SYSTEM_THEME_PATTERN),
    db: Session = Depends(get_db),
):
    pref = db.query(models.ThemePreference).filter(
        models.ThemePreference.client_id == client_id
    ).first()
    mode = pref.mode if pref else settings.DEFAULT_THEME_MODE
    return _response(client_id, mode, system_theme)


@router.put("/theme", response_model=schemas.ThemePreference)
def set_theme(
    update: schemas.ThemePreferenceUpdate,
    client_id: str = Query(..., min_length=1),
    system_theme: str = Query("light", pattern=SYSTEM_THEME_PATTERN),
    db: Session = Depends(get_db),
):
    pref = db.query(models.ThemePreference).filter(
        models.ThemePreference.client_id == client_id
    ).first()
    if not pref:
        pref = models.ThemePreference(client_id=client_id)
        db.add(pref)
    pref.mode = update.mode.value
    db.commit()
    logger.info(f"Theme for {client_id} set to {pref.mode}")
    return _response(client_id, pref.mode, system_theme)
