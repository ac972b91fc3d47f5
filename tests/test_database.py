import asyncio

from app.database import INITIAL_GAMES, MemStorage
from app.models import GAME_CATEGORIES


def run(coro):
    return asyncio.run(coro)


NEW_GAME = {
    "title": "Lunar Lander",
    "category": "action",
    "image_url": "https://example.com/lander.png",
    "embed_url": "https://example.com/embed/lander",
}


def test_seed_data_loaded(storage):
    games = run(storage.get_all_games())

    assert [g.title for g in games] == [g["title"] for g in INITIAL_GAMES]
    assert [g.id for g in games] == list(range(1, 9))
    assert all(g.likes == 0 and g.dislikes == 0 for g in games)
    assert all(g.size == "medium" and g.tag is None for g in games)
    assert all(g.category in GAME_CATEGORIES for g in games)

    admin = run(storage.get_user(1))
    assert admin.username == "admin"
    assert admin.password == "2729"


def test_unseeded_storage_is_empty(empty_storage):
    assert run(empty_storage.get_all_games()) == []
    assert run(empty_storage.get_user(1)) is None


def test_create_game_zeroes_stats_and_increments_id(storage):
    before = max(g.id for g in run(storage.get_all_games()))

    game = run(storage.create_game({**NEW_GAME, "likes": 40, "dislikes": 2}))

    assert game.id > before
    assert game.likes == 0
    assert game.dislikes == 0
    assert game.size == "medium"

    second = run(storage.create_game(NEW_GAME))
    assert second.id > game.id


def test_created_game_is_retrievable(storage):
    game = run(storage.create_game({**NEW_GAME, "size": "large", "tag": "new"}))

    fetched = run(storage.get_game_by_id(game.id))

    assert fetched.id == game.id
    assert fetched.title == "Lunar Lander"
    assert fetched.category == "action"
    assert fetched.image_url == NEW_GAME["image_url"]
    assert fetched.embed_url == NEW_GAME["embed_url"]
    assert fetched.size == "large"
    assert fetched.tag == "new"


def test_get_game_by_id_missing(storage):
    assert run(storage.get_game_by_id(999)) is None


def test_delete_game_only_once(storage):
    game = run(storage.create_game(NEW_GAME))

    assert run(storage.delete_game(game.id)) is True
    assert run(storage.delete_game(game.id)) is False
    assert run(storage.get_game_by_id(game.id)) is None


def test_ids_not_reused_after_delete(storage):
    game = run(storage.create_game(NEW_GAME))
    run(storage.delete_game(game.id))

    again = run(storage.create_game(NEW_GAME))

    assert again.id == game.id + 1


def test_search_empty_term_returns_everything(storage):
    assert len(run(storage.search_games(""))) == len(INITIAL_GAMES)


def test_search_is_case_insensitive_substring(storage):
    titles = [g.title for g in run(storage.search_games("BLA"))]
    assert titles == ["Block Blast"]

    titles = [g.title for g in run(storage.search_games("eR"))]
    assert titles == ["Puzzle Master", "Turbo Racer", "Pro Soccer"]

    assert run(storage.search_games("no such game")) == []


def test_games_by_category_preserves_order(storage):
    puzzles = run(storage.get_games_by_category("puzzle"))

    assert [g.title for g in puzzles] == ["Puzzle Master", "Block Blast"]
    assert all(g.category == "puzzle" for g in puzzles)


def test_games_by_category_is_exact_match(storage):
    assert run(storage.get_games_by_category("Puzzle")) == []
    assert run(storage.get_games_by_category("arcade")) == []


def test_update_game_merges_only_given_fields(storage):
    original = run(storage.get_game_by_id(3))

    updated = run(storage.update_game(3, {"likes": 5}))

    assert updated.likes == 5
    assert updated.dislikes == original.dislikes
    assert updated.title == original.title
    assert updated.category == original.category
    assert updated.embed_url == original.embed_url
    assert run(storage.get_game_by_id(3)).likes == 5


def test_update_game_never_changes_id(storage):
    updated = run(storage.update_game(2, {"id": 77, "title": "Puzzle Master II"}))

    assert updated.id == 2
    assert updated.title == "Puzzle Master II"
    assert run(storage.get_game_by_id(77)) is None


def test_update_missing_game_creates_nothing(storage):
    count = len(run(storage.get_all_games()))

    assert run(storage.update_game(999, {"likes": 5})) is None
    assert len(run(storage.get_all_games())) == count
    assert run(storage.get_game_by_id(999)) is None


def test_users(empty_storage):
    first = run(empty_storage.create_user({"username": "alice", "password": "pw"}))
    second = run(empty_storage.create_user({"username": "alice", "password": "other"}))

    assert second.id == first.id + 1
    assert run(empty_storage.get_user(first.id)) is first
    # Usernames are not checked for uniqueness; lookup returns the first match
    assert run(empty_storage.get_user_by_username("alice")) is first
    assert run(empty_storage.get_user_by_username("bob")) is None


def test_admin_credentials_configurable():
    storage = MemStorage(admin_username="root", admin_password="secret")

    admin = run(storage.get_user_by_username("root"))

    assert admin.password == "secret"


def test_create_game_size_defaults_only_when_missing(empty_storage):
    missing = run(empty_storage.create_game(NEW_GAME))
    explicit_none = run(empty_storage.create_game({**NEW_GAME, "size": None}))
    empty = run(empty_storage.create_game({**NEW_GAME, "size": ""}))

    assert missing.size == "medium"
    assert explicit_none.size == "medium"
    assert empty.size == ""
