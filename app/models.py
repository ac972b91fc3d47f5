from typing import Optional

GAME_CATEGORIES = (
    "action",
    "adventure",
    "puzzle",
    "strategy",
    "racing",
    "sports",
)


class User:
    def __init__(self, id: int, username: str, password: str):
        self.id = id
        self.username = username
        self.password = password


class Game:
    # Attributes a partial update is allowed to touch
    FIELDS = ("title", "category", "image_url", "embed_url", "likes", "dislikes", "size", "tag")

    def __init__(self, id: int, title: str, category: str, image_url: str, embed_url: str,
                 likes: int = 0, dislikes: int = 0, size: str = "medium", tag: Optional[str] = None):
        self.id = id
        self.title = title
        self.category = category
        self.image_url = image_url
        self.embed_url = embed_url
        self.likes = likes
        self.dislikes = dislikes
        self.size = size
        self.tag = tag

    def to_dict(self) -> dict:
        return {"id": self.id, **{field: getattr(self, field) for field in self.FIELDS}}

    def __repr__(self):
        return f"Game(id={self.id!r}, title={self.title!r}, category={self.category!r})"
