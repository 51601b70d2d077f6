"""Auth Routes - credential check only; token issuance is handled upstream."""

from fastapi import APIRouter, Depends, status

from neighborhood.api.dependencies import get_user_service
from neighborhood.schemas.user import LoginRequest, serialize_user
from neighborhood.services.user_service import UserService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(
    body: LoginRequest, service: UserService = Depends(get_user_service),
):
    user = await service.authenticate(body.email, body.password)
    return {"user": serialize_user(user)}
