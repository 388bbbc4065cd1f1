from datetime import datetime, timezone
from typing import Optional


def start_of_current_month(now: Optional[datetime] = None) -> datetime:
    """
    Minuit local du premier jour du mois courant, converti en UTC naïf
    pour être comparé aux dates d'événements stockées (datetime.utcnow).
    """
    local_now = now or datetime.now()
    local_start = local_now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return local_start.astimezone(timezone.utc).replace(tzinfo=None)
