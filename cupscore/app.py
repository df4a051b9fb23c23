from __future__ import annotations

import time
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cupscore import __version__
from cupscore.api.routers.games import router as games_router
from cupscore.api.routers.scoring import router as scoring_router
from cupscore.api.routers.tournaments import router as tournaments_router
from cupscore.config import get_settings

app = FastAPI(title="cupscore", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok", "version": __version__, "ts": time.time()}


app.include_router(tournaments_router)
app.include_router(games_router)
app.include_router(scoring_router)
