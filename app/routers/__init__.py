from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError


def error_response(status_code: int, message: str, errors=None) -> JSONResponse:
    """JSON error body shared by every router: {"message": ..., "errors": [...]}"""
    content = {"message": message}
    if errors is not None:
        content["errors"] = jsonable_encoder(errors)
    return JSONResponse(status_code=status_code, content=content)


def validation_errors(exc: ValueError) -> list:
    """Per-field details for a pydantic ValidationError, a single entry for a bad JSON body"""
    if isinstance(exc, ValidationError):
        return exc.errors(include_url=False)
    return [{"msg": str(exc)}]
