from fastapi import APIRouter, Depends

from chat_relay.core.clock import utc_now_iso
from chat_relay.core.settings import Settings, get_settings
from chat_relay.models.chat import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        service=settings.service_name,
        timestamp=utc_now_iso(),
    )
