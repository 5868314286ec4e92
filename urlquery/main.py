from __future__ import annotations
from dotenv import load_dotenv

load_dotenv()

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .registry import Registry
from .routes import make_router

log = logging.getLogger("urlquery")

REG = Registry()

app = FastAPI(title="urlquery SQL translator", version="0.1.0")

origins_raw = os.getenv("CORS_ALLOW_ORIGINS", "")
origins = [o.strip() for o in origins_raw.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(make_router(REG))


@app.on_event("startup")
def _startup():
    try:
        REG.load()
    except RuntimeError as e:
        # Serve with an empty registry so /healthz still answers
        log.warning("%s", e)


@app.get("/healthz")
def health():
    return {"ok": True, "endpoints": sorted(REG.endpoints)}
