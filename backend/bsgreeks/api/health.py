from fastapi import APIRouter, Depends

from bsgreeks import __version__
from bsgreeks.core.config import Settings, get_settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health(config: Settings = Depends(get_settings)):
    return {"status": "ok", "env": config.app_env, "version": __version__}
