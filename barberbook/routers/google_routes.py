# barberbook/routers/google_routes.py

from fastapi import APIRouter, Depends, HTTPException, Query

from barberbook.deps import get_google_client
from barberbook.google_oauth import GoogleOAuthClient, GoogleOAuthError
from barberbook.schemas import GoogleAuthUrl, GoogleConnection, GoogleRefreshRequest

router = APIRouter(
    prefix="/auth/google",
    tags=["google"],
)


def require_configured(client: GoogleOAuthClient) -> None:
    if not client.configured:
        raise HTTPException(status_code=503, detail="Google Calendar integration is not configured")


@router.get("", response_model=GoogleAuthUrl)
def google_auth_url(
    user_id: str = Query(alias="userId", min_length=1),
    client: GoogleOAuthClient = Depends(get_google_client),
):
    require_configured(client)
    return {"auth_url": client.get_auth_url(user_id)}

@router.get("/callback", response_model=GoogleConnection)
def google_callback(
    code: str = Query(),
    state: str = Query(),
    client: GoogleOAuthClient = Depends(get_google_client),
):
    require_configured(client)
    try:
        result = client.connect(code, state)
    except GoogleOAuthError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"connected": True, "user_id": result["user_id"], "expiry_date": result["expiry_date"]}

@router.post("/refresh", response_model=GoogleConnection)
def google_refresh(
    body: GoogleRefreshRequest,
    client: GoogleOAuthClient = Depends(get_google_client),
):
    require_configured(client)
    try:
        stored = client.refresh_user(body.user_id)
    except GoogleOAuthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if stored is None:
        raise HTTPException(status_code=404, detail="Google Calendar not connected")

    return {"connected": True, "user_id": body.user_id, "expiry_date": stored["expiry_date"]}
