import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from app.models import Game, User

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=400"
EMBED = "https://www.addictinggames.com/embed/html5-games/{}"

INITIAL_GAMES = [
    {"title": "Space Adventure", "category": "action",
     "image_url": UNSPLASH.format("1550745165-9bc0b252726f"), "embed_url": EMBED.format(23635)},
    {"title": "Puzzle Master", "category": "puzzle",
     "image_url": UNSPLASH.format("1611996575749-79a3a250f948"), "embed_url": EMBED.format(24825)},
    {"title": "Turbo Racer", "category": "racing",
     "image_url": UNSPLASH.format("1547949003-9792a18a2601"), "embed_url": EMBED.format(25632)},
    {"title": "Fantasy Quest", "category": "adventure",
     "image_url": UNSPLASH.format("1600861194942-f883de0dfe96"), "embed_url": EMBED.format(25203)},
    {"title": "Battle Tactics", "category": "strategy",
     "image_url": UNSPLASH.format("1522069213448-443a614da9b6"), "embed_url": EMBED.format(24030)},
    {"title": "Pro Soccer", "category": "sports",
     "image_url": UNSPLASH.format("1579952363873-27f3bade9f55"), "embed_url": EMBED.format(24356)},
    {"title": "Combat Zone", "category": "action",
     "image_url": UNSPLASH.format("1542751371-adc38448a05e"), "embed_url": EMBED.format(24350)},
    {"title": "Block Blast", "category": "puzzle",
     "image_url": UNSPLASH.format("1580234811497-9df7fd2f357e"), "embed_url": EMBED.format(24674)},
]


class Storage(ABC):
    """Capability set every catalog backend provides.

    Lookups return ``None`` (or ``False`` for deletes) when nothing matches;
    absence is a normal outcome, not an error.
    """

    # ── users ───────────────────────────────────────────────────
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def create_user(self, data: dict) -> User: ...

    # ── games ───────────────────────────────────────────────────
    @abstractmethod
    async def get_all_games(self) -> List[Game]: ...

    @abstractmethod
    async def get_game_by_id(self, game_id: int) -> Optional[Game]: ...

    @abstractmethod
    async def get_games_by_category(self, category: str) -> List[Game]: ...

    @abstractmethod
    async def search_games(self, term: str) -> List[Game]: ...

    @abstractmethod
    async def create_game(self, data: dict) -> Game: ...

    @abstractmethod
    async def update_game(self, game_id: int, partial: dict) -> Optional[Game]: ...

    @abstractmethod
    async def delete_game(self, game_id: int) -> bool: ...


class MemStorage(Storage):
    """Keeps users and games in process memory, keyed by auto-incrementing ids."""

    def __init__(self, seed: bool = True, admin_username: str = "admin", admin_password: str = "2729"):
        self._users: Dict[int, User] = {}
        self._games: Dict[int, Game] = {}
        self._user_current_id = 1
        self._game_current_id = 1

        if seed:
            self._seed(admin_username, admin_password)

    def _seed(self, admin_username: str, admin_password: str):
        # Nothing here awaits, so the sync helpers can run from __init__
        self._insert_user({"username": admin_username, "password": admin_password})
        for data in INITIAL_GAMES:
            self._insert_game(data)
        logger.info("Seeded %d user(s) and %d game(s)", len(self._users), len(self._games))

    def _insert_user(self, data: dict) -> User:
        user_id = self._user_current_id
        self._user_current_id += 1
        user = User(id=user_id, username=data["username"], password=data["password"])
        self._users[user_id] = user
        logger.debug("Created user %s (%s)", user_id, user.username)
        return user

    def _insert_game(self, data: dict) -> Game:
        game_id = self._game_current_id
        self._game_current_id += 1
        game = Game(
            id=game_id,
            title=data["title"],
            category=data["category"],
            image_url=data["image_url"],
            embed_url=data["embed_url"],
            likes=0,
            dislikes=0,
            size="medium" if data.get("size") is None else data["size"],
            tag=data.get("tag"),
        )
        self._games[game_id] = game
        logger.debug("Created game %s", game)
        return game

    # ── users ───────────────────────────────────────────────────
    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, data: dict) -> User:
        return self._insert_user(data)

    # ── games ───────────────────────────────────────────────────
    async def get_all_games(self) -> List[Game]:
        return list(self._games.values())

    async def get_game_by_id(self, game_id: int) -> Optional[Game]:
        return self._games.get(game_id)

    async def get_games_by_category(self, category: str) -> List[Game]:
        return [game for game in self._games.values() if game.category == category]

    async def search_games(self, term: str) -> List[Game]:
        search_term = term.lower()
        return [game for game in self._games.values() if search_term in game.title.lower()]

    async def create_game(self, data: dict) -> Game:
        return self._insert_game(data)

    async def update_game(self, game_id: int, partial: dict) -> Optional[Game]:
        game = self._games.get(game_id)
        if game is None:
            return None

        updated = Game(**game.to_dict())
        for key, value in partial.items():
            if key in Game.FIELDS:
                setattr(updated, key, value)
        self._games[game_id] = updated
        logger.debug("Updated game %s with %s", game_id, sorted(partial))
        return updated

    async def delete_game(self, game_id: int) -> bool:
        if self._games.pop(game_id, None) is None:
            return False
        logger.debug("Deleted game %s", game_id)
        return True
