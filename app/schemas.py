from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Literal

from app.models import GAME_CATEGORIES

# Wire format is camelCase (imageUrl, embedUrl), Python attributes stay snake_case
CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)

GameCategory = Literal[GAME_CATEGORIES]

# Game Schemas
class GameCreate(BaseModel):
    # Requests accept the camelCase spelling only
    model_config = ConfigDict(alias_generator=to_camel)

    title: str
    category: GameCategory
    image_url: str
    embed_url: str
    size: Optional[str] = "medium"
    tag: Optional[str] = None

class GameStatsUpdate(BaseModel):
    """Only likes/dislikes may change here; keys that are not sent stay untouched."""
    likes: Optional[int] = Field(default=None, ge=0, strict=True)
    dislikes: Optional[int] = Field(default=None, ge=0, strict=True)

class GameResponse(BaseModel):
    model_config = ConfigDict(**CAMEL_CONFIG, from_attributes=True)

    id: int
    title: str
    category: str
    image_url: str
    embed_url: str
    likes: int
    dislikes: int
    size: Optional[str] = "medium"
    tag: Optional[str] = None

# Auth Schemas
class LoginRequest(BaseModel):
    username: str
    password: str

class LoginResponse(BaseModel):
    success: bool
    message: str
