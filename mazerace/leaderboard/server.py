"""FastAPI leaderboard service."""

import argparse
import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .models import LeaderboardStore, ScoreEntry

logger = logging.getLogger(__name__)


def create_app(store: Optional[LeaderboardStore] = None) -> FastAPI:
    """Build the FastAPI app around a score store."""
    if store is None:
        store = LeaderboardStore()

    app = FastAPI(title="Maze Race Leaderboard", version="1.0.0")
    app.state.store = store

    # the game may be served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/ping")
    async def ping():
        return {"status": "ok"}

    @app.get("/leaderboard", response_model=List[ScoreEntry])
    async def get_leaderboard():
        return store.top()

    @app.post("/leaderboard", response_model=List[ScoreEntry])
    async def submit_score(entry: ScoreEntry):
        logger.info("Score submitted: %s %.2f", entry.name, entry.score)
        return store.add(entry)

    return app


def main(argv=None) -> int:
    """Run the leaderboard service with uvicorn."""
    import uvicorn

    parser = argparse.ArgumentParser(description="Maze Race leaderboard service")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    parser.add_argument("--size", type=int, default=10, help="Number of scores kept")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = create_app(LeaderboardStore(size=args.size))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0
