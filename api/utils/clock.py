from datetime import datetime, timezone


def utcnow() -> datetime:
    """Instante actual en UTC, siempre con tzinfo (las columnas datetime lo exigen)."""
    return datetime.now(timezone.utc)
