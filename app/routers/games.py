import logging
import re
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from app.database import Storage
from app.dependencies import get_storage
from app.routers import error_response, validation_errors
from app.schemas import GameCreate, GameResponse, GameStatsUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


GAME_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_game_id(raw: str):
    """Return the id as an int, or None when it is not a plain ASCII base-10 integer"""
    if not GAME_ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


@router.get("", response_model=List[GameResponse])
async def list_games(storage: Storage = Depends(get_storage)):
    """List every game in insertion order"""
    try:
        return await storage.get_all_games()
    except Exception:
        logger.exception("Failed to fetch games")
        return error_response(500, "Failed to fetch games")


@router.get("/category/{category}", response_model=List[GameResponse])
async def list_games_by_category(category: str, storage: Storage = Depends(get_storage)):
    """Games whose category matches exactly; unknown categories just come back empty"""
    try:
        return await storage.get_games_by_category(category)
    except Exception:
        logger.exception("Failed to fetch games for category %r", category)
        return error_response(500, "Failed to fetch games by category")


# Registered before /{game_id} so "search" is never read as an id
@router.get("/search", response_model=List[GameResponse])
async def search_games(term: str = "", storage: Storage = Depends(get_storage)):
    """Case-insensitive title search; an empty term returns everything"""
    try:
        return await storage.search_games(term)
    except Exception:
        logger.exception("Failed to search games for %r", term)
        return error_response(500, "Failed to search games")


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(game_id: str, storage: Storage = Depends(get_storage)):
    try:
        parsed_id = parse_game_id(game_id)
        if parsed_id is None:
            return error_response(400, "Invalid game ID")

        game = await storage.get_game_by_id(parsed_id)
        if not game:
            return error_response(404, "Game not found")

        return game
    except Exception:
        logger.exception("Failed to fetch game %r", game_id)
        return error_response(500, "Failed to fetch game")


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(request: Request, storage: Storage = Depends(get_storage)):
    """Validate the payload, then add the game with zeroed stats"""
    try:
        try:
            payload = GameCreate.model_validate(await request.json())
        except ValueError as e:
            return error_response(400, "Invalid game data", validation_errors(e))

        game = await storage.create_game(payload.model_dump())
        logger.info("Created game %s (%s)", game.id, game.title)
        return game
    except Exception:
        logger.exception("Failed to create game")
        return error_response(500, "Failed to create game")


@router.patch("/{game_id}/stats", response_model=GameResponse)
async def update_game_stats(game_id: str, request: Request, storage: Storage = Depends(get_storage)):
    """Stats update: only likes/dislikes are written, and only the ones sent"""
    try:
        parsed_id = parse_game_id(game_id)
        if parsed_id is None:
            return error_response(400, "Invalid game ID")

        game = await storage.get_game_by_id(parsed_id)
        if not game:
            return error_response(404, "Game not found")

        try:
            stats = GameStatsUpdate.model_validate(await request.json())
        except ValueError as e:
            return error_response(400, "Invalid data", validation_errors(e))

        # The body read can suspend, so the game may be gone by now
        updated = await storage.update_game(parsed_id, stats.model_dump(exclude_unset=True, exclude_none=True))
        if updated is None:
            return error_response(404, "Game not found")

        return updated
    except Exception:
        logger.exception("Failed to update stats for game %r", game_id)
        return error_response(500, "Failed to update game stats")


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str, storage: Storage = Depends(get_storage)):
    try:
        parsed_id = parse_game_id(game_id)
        if parsed_id is None:
            return error_response(400, "Invalid game ID")

        if not await storage.delete_game(parsed_id):
            return error_response(404, "Game not found")

        logger.info("Deleted game %s", parsed_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception:
        logger.exception("Failed to delete game %r", game_id)
        return error_response(500, "Failed to delete game")
