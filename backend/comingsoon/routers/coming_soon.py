# backend/comingsoon/routers/coming_soon.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from ..config import Settings
from ..models.email_request import EmailRequest
from ..models.submit_result import SubmitResult
from ..services.registry import EmailRegistry

logger = logging.getLogger("comingsoon.routes")

router = APIRouter()

_SUBMIT_RESPONSES = {
    SubmitResult.created: (201, {"message": "Email registered successfully."}),
    SubmitResult.duplicate: (409, {"message": "Email already registered."}),
    SubmitResult.invalid: (400, {"error": "Invalid email format."}),
    SubmitResult.persist_failed: (500, {"error": "Could not save email. Please try again."}),
}


# ---------------------------------------------------
# Dependencies
# ---------------------------------------------------
def get_registry(request: Request) -> EmailRegistry:
    return request.app.state.registry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_secret_token(
    x_secret_token: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
):
    if not x_secret_token:
        logger.warning("Rejected listing request: missing X-Secret-Token")
        raise HTTPException(status_code=401, detail="Missing X-Secret-Token header")

    # plain equality, not constant-time
    if x_secret_token != settings.SECRET_TOKEN:
        logger.warning("Rejected listing request: invalid X-Secret-Token")
        raise HTTPException(status_code=403, detail="Invalid secret token")


# ---------------------------------------------------
# Routes (sync handlers run in the threadpool)
# ---------------------------------------------------
@router.post("/coming-soon")
def submit_email(
    payload: EmailRequest,
    registry: EmailRegistry = Depends(get_registry),
):
    result = registry.submit(payload.email)
    status_code, body = _SUBMIT_RESPONSES[result]
    return JSONResponse(status_code=status_code, content=body)


@router.get(
    "/coming-soon",
    response_model=List[str],
    dependencies=[Depends(require_secret_token)],
)
def list_emails(registry: EmailRegistry = Depends(get_registry)):
    return registry.list_all()
