import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from app.auth import authenticate_admin
from app.routers import error_response
from app.schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])

@router.post("/login", response_model=LoginResponse)
async def login(request: Request):
    try:
        try:
            body = await request.json()
        except ValueError:
            return error_response(400, "Invalid login data")

        try:
            credentials = LoginRequest.model_validate(body)
        except ValidationError:
            # Missing or non-string fields can never match the admin pair
            return error_response(401, "Invalid credentials")

        if authenticate_admin(credentials.username, credentials.password):
            return {"success": True, "message": "Login successful"}

        return error_response(401, "Invalid credentials")
    except Exception:
        logger.exception("Login failed unexpectedly")
        return error_response(500, "Authentication failed")
