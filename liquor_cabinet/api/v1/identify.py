from fastapi import APIRouter, Depends

from liquor_cabinet.core.dependencies import get_identification_service
from liquor_cabinet.core.security import get_current_user_id
from liquor_cabinet.schemas.identification import IdentifyRequest
from liquor_cabinet.services.identification_service import IdentificationService

router = APIRouter(prefix="/identify", tags=["Identification"])


@router.post("")
async def identify_bottle(
    request: IdentifyRequest,
    user_id: int = Depends(get_current_user_id),
    service: IdentificationService = Depends(get_identification_service),
):
    """Photo (data URI base64) -> proposition de fiche bouteille, non enregistrée"""
    identification = await service.identify(request.image)
    return {
        "success": True,
        "bottle": identification.model_dump(by_alias=True, exclude_none=True),
    }
