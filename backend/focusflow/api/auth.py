from fastapi import APIRouter, Depends, HTTPException, status, Header
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..services.auth_service import AuthService, create_access_token, decode_subject
from ..services.demo_user import get_or_create_demo_user

router = APIRouter(prefix="/auth", tags=["auth"])


class TokenRequest(BaseModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@router.post("/token")
def issue_token(body: TokenRequest, db: Session = Depends(get_db)):
    # Dev convenience: registers the email on first use
    user = AuthService(db).register_if_absent(body.email)
    token = create_access_token(user.id)
    return {"access_token": token, "token_type": "bearer", "user_id": user.id}


def get_current_user_id(
    db: Session = Depends(get_db),
    authorization: str | None = Header(None),
    x_user_id: str | None = Header(None),
) -> str:
    """Resolve the caller's identity for this request.

    Bearer token first, then the X-User-Id header, then the demo user.
    The result is passed explicitly into every service call.
    """
    if authorization and authorization.lower().startswith("bearer "):
        sub = decode_subject(authorization.split(None, 1)[1])
        if not sub:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"code": "INVALID_TOKEN", "message": "invalid token"},
            )
        return sub
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return get_or_create_demo_user(db).id
