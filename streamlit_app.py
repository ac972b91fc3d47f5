import logging
import os

import pandas as pd
import plotly.express as px
import requests
import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Get API URL from environment variables, with fallback to localhost
API_URL = os.getenv("API_URL", "http://localhost:8000/api")

CATEGORIES = ["action", "adventure", "puzzle", "strategy", "racing", "sports"]

logger = logging.getLogger(__name__)


def make_request(method, endpoint, data=None, params=None):
    """Call the catalog API and surface failures as Streamlit messages"""
    url = f"{API_URL}{endpoint}"
    logger.debug("Making %s request to %s", method, url)

    try:
        if method == "GET":
            response = requests.get(url, params=params, timeout=10)
        elif method == "POST":
            response = requests.post(url, json=data, timeout=10)
        elif method == "PATCH":
            response = requests.patch(url, json=data, timeout=10)
        elif method == "DELETE":
            response = requests.delete(url, timeout=10)
        else:
            st.error(f"Unsupported method: {method}")
            return None

        if response.status_code >= 400:
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, response.text[:200])

            if response.status_code == 400:
                st.error(f"Invalid request: {response.json().get('message', 'check your input')}")
            elif response.status_code == 404:
                st.error("That game no longer exists.")
            elif response.status_code >= 500:
                st.error("Server error. Please try again later.")

        return response

    except requests.exceptions.ConnectionError:
        logger.exception("Connection to %s failed", url)
        st.error(f"Failed to connect to API at {url}. Please make sure the API server is running.")
        return None
    except requests.exceptions.Timeout:
        logger.exception("Request to %s timed out", url)
        st.error("API request timed out.")
        return None
    except requests.exceptions.RequestException as e:
        logger.exception("Request to %s failed", url)
        st.error(f"Request error: {str(e)}")
        return None


def fetch_games(category=None, term=""):
    if term:
        response = make_request("GET", "/games/search", params={"term": term})
    elif category:
        response = make_request("GET", f"/games/category/{category}")
    else:
        response = make_request("GET", "/games")

    if response is None or response.status_code != 200:
        return []

    games = response.json()
    # Search ignores the category filter server-side, so narrow it here
    if term and category:
        games = [game for game in games if game["category"] == category]
    return games


def rate_game(game, field):
    response = make_request("PATCH", f"/games/{game['id']}/stats", data={field: game[field] + 1})
    if response is not None and response.status_code == 200:
        st.rerun()


# Initialize session state
if 'is_admin' not in st.session_state:
    st.session_state.is_admin = False
if 'playing' not in st.session_state:
    st.session_state.playing = None


def browse_page():
    """Game grid with filters, ratings and the embedded player"""
    st.title("🕹️ Game Catalog")

    col1, col2 = st.columns([1, 2])
    with col1:
        category = st.selectbox("Category", ["All"] + CATEGORIES)
    with col2:
        term = st.text_input("Search by title")

    games = fetch_games(None if category == "All" else category, term.strip())
    if not games:
        st.info("No games found.")
        return

    if st.session_state.playing:
        playing = next((game for game in games if game["id"] == st.session_state.playing), None)
        if playing:
            st.subheader(f"Now playing: {playing['title']}")
            components.iframe(playing["embedUrl"], height=600, scrolling=False)
            if st.button("Close game"):
                st.session_state.playing = None
                st.rerun()
            st.write("---")

    for row_start in range(0, len(games), 3):
        columns = st.columns(3)
        for column, game in zip(columns, games[row_start:row_start + 3]):
            with column:
                st.image(game["imageUrl"], use_container_width=True)
                st.markdown(f"**{game['title']}**")
                caption = game["category"].title()
                if game.get("tag"):
                    caption += f" · {game['tag']}"
                st.caption(caption)

                like_col, dislike_col, play_col = st.columns(3)
                if like_col.button(f"👍 {game['likes']}", key=f"like_{game['id']}"):
                    rate_game(game, "likes")
                if dislike_col.button(f"👎 {game['dislikes']}", key=f"dislike_{game['id']}"):
                    rate_game(game, "dislikes")
                if play_col.button("▶ Play", key=f"play_{game['id']}"):
                    st.session_state.playing = game["id"]
                    st.rerun()


def login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")

        if st.form_submit_button("Login"):
            response = make_request("POST", "/auth/login", data={"username": username, "password": password})
            if response is not None and response.status_code == 200:
                st.session_state.is_admin = True
                st.success(response.json().get("message", "Login successful"))
                st.rerun()
            elif response is not None and response.status_code == 401:
                st.error("Invalid credentials")


def admin_page():
    """Add, review and remove games once logged in as admin"""
    st.title("🔧 Catalog Admin")

    if not st.session_state.is_admin:
        login_form()
        return

    if st.sidebar.button("Logout"):
        st.session_state.is_admin = False
        st.rerun()

    with st.expander("➕ Add a game", expanded=False):
        with st.form("add_game_form", clear_on_submit=True):
            title = st.text_input("Title")
            category = st.selectbox("Category", CATEGORIES)
            image_url = st.text_input("Image URL")
            embed_url = st.text_input("Embed URL")
            size = st.selectbox("Size", ["small", "medium", "large"], index=1)
            tag = st.text_input("Tag (optional)")

            if st.form_submit_button("Add game"):
                data = {
                    "title": title,
                    "category": category,
                    "imageUrl": image_url,
                    "embedUrl": embed_url,
                    "size": size,
                }
                if tag.strip():
                    data["tag"] = tag.strip()
                response = make_request("POST", "/games", data=data)
                if response is not None and response.status_code == 201:
                    st.success(f"Added {response.json()['title']}")

    games = fetch_games()
    if not games:
        st.info("The catalog is empty.")
        return

    df = pd.DataFrame(games)[["id", "title", "category", "likes", "dislikes", "size", "tag"]]
    st.dataframe(df, use_container_width=True, hide_index=True)

    fig = px.bar(
        df,
        x="title",
        y=["likes", "dislikes"],
        barmode="group",
        title="Ratings per game",
    )
    st.plotly_chart(fig, use_container_width=True)

    st.subheader("Remove a game")
    titles = {f"#{game['id']} {game['title']}": game["id"] for game in games}
    selected = st.selectbox("Game", list(titles))
    if st.button("Delete", type="primary"):
        response = make_request("DELETE", f"/games/{titles[selected]}")
        if response is not None and response.status_code == 204:
            st.success(f"Deleted {selected}")
            st.rerun()


page = st.sidebar.radio("Navigate", ["Browse", "Admin"])
if page == "Browse":
    browse_page()
else:
    admin_page()
