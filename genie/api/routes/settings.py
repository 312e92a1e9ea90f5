from fastapi import APIRouter, Depends
import logging

from genie.api.context import GenieContext, get_genie

router = APIRouter(prefix="/api/settings", tags=["settings"])
logger = logging.getLogger(__name__)


@router.get("")
def get_settings(genie: GenieContext = Depends(get_genie)):
    return {"signed_in": genie.auth.signed_in, "user": genie.auth.user}


@router.post("/logout")
async def logout(genie: GenieContext = Depends(get_genie)):
    """Sign the user out. Failures are logged only; the client always gets ok."""
    try:
        await genie.auth.sign_out()
    except Exception:
        logger.exception("Sign-out failed")
    return {"status": "ok"}
