from fastapi import Request
from app.database import Storage

async def get_storage(request: Request) -> Storage:
    return request.app.state.storage
