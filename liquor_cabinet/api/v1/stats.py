from fastapi import APIRouter, Depends

from liquor_cabinet.core.dependencies import get_stats_service
from liquor_cabinet.core.security import get_current_user_id
from liquor_cabinet.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("")
def get_stats(
    user_id: int = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
):
    stats = service.get_stats(user_id)
    return {"success": True, "stats": stats.model_dump(by_alias=True)}
