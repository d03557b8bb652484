from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from fastapi import HTTPException

from mei_dashboard.core.config import DEFAULT_TIMEZONE


def local_today(tz: Optional[str] = None) -> date:
    """Dia corrente no fuso IANA informado (padrão: DEFAULT_TIMEZONE)."""
    try:
        zone = ZoneInfo(tz or DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Fuso horário inválido: {tz}")
    return datetime.now(timezone.utc).astimezone(zone).date()
