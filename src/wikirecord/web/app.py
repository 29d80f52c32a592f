"""FastAPI application exposing WikiRecord over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import requests
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wikirecord.config import AppConfig
from wikirecord.errors import InvalidRecordTypeError
from wikirecord.fetch import fetch_raw_document
from wikirecord.loader import get_default_loader
from wikirecord.sink import ImportRequest, import_record

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="WikiRecord", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class ImportPayload(BaseModel):
    title: str
    record_type: str
    record_subtype: str
    birth_date: str = ""
    death_date: str = ""
    longitude: Optional[float] = None
    latitude: Optional[float] = None


def _join_name(name: List[str]) -> str:
    return " ".join(name).strip()


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/api/read_wkpd")
async def read_wikipedia(name: List[str] = Query(default=[])) -> JSONResponse:
    """Proxy the raw article markup, or 404 with an empty string."""
    article = _join_name(name)
    config = get_default_loader().config
    try:
        status, markup = await asyncio.to_thread(fetch_raw_document, article, config)
    except requests.RequestException as exc:
        LOGGER.warning("Fetching %r failed: %s", article, exc)
        return JSONResponse(status_code=404, content="")

    if status != 200:
        return JSONResponse(status_code=404, content="")
    return JSONResponse(content=markup)


@app.get("/records")
async def read_record(name: List[str] = Query(default=[])) -> dict[str, Any]:
    article = _join_name(name)
    if not article:
        raise HTTPException(status_code=400, detail="Empty name")

    try:
        record = await get_default_loader().load(article)
    except requests.RequestException as exc:
        LOGGER.error("Loading %r failed: %s", article, exc)
        raise HTTPException(status_code=502, detail=f"Wikipedia unavailable: {exc}") from exc

    if record is None:
        raise HTTPException(status_code=404, detail="Data not found")
    return record.to_dict()


@app.post("/import")
async def import_payload(payload: ImportPayload) -> dict[str, Any]:
    request = ImportRequest(**payload.model_dump())
    config: AppConfig = get_default_loader().config
    try:
        record = import_record(request, config.import_path)
    except InvalidRecordTypeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"status": "ok", "record": record}
