from fastapi import APIRouter
from fastapi.responses import JSONResponse, RedirectResponse
import logging
import traceback
from typing import Optional
from urllib.parse import quote
from hqstreams.schemas.stremio import BehaviorHints, Stream, StreamResponse
from hqstreams.schemas.type_defs import CandidateStream
from hqstreams.providers.resolver import resolve_streams
from hqstreams.utils.user_agent import get_stream_user_agent

router = APIRouter()
logger = logging.getLogger(__name__)


def _build_stream_from_candidate(candidate: CandidateStream) -> Stream:
    """Build a Stream object from a resolved candidate."""
    return Stream(
        name=candidate["provider_name"],
        title=candidate["title"],
        url=candidate["url"],
        description=candidate["description"],
        behaviorHints=BehaviorHints(
            notWebReady=False,
            bingeGroup=candidate["provider_name"],
            proxyHeaders={"User-Agent": get_stream_user_agent()},
        ),
        externalUrl=candidate["url"],
        subtitles=[] if "subtitles" in candidate["features"] else None,
    )


def _handle_stream_request(type: Optional[str], id: Optional[str]):
    """Shared handler for the path and query-string stream routes."""
    logger.info(f"🔍 STREAM REQUEST: type={type}, id={id}")

    if not type or not id or not id.strip():
        logger.warning("⚠️ Missing type or id parameter")
        return JSONResponse(status_code=400, content={"error": "Missing type or id parameter"})

    try:
        candidates = resolve_streams(type, id.strip())
        return StreamResponse(streams=[_build_stream_from_candidate(c) for c in candidates])
    except Exception as e:
        logger.error(f"❌ General error resolving {type} {id}: {e}")
        logger.error("   Full traceback:")
        logger.error(traceback.format_exc())
        return JSONResponse(status_code=500, content={"streams": []})


@router.get("/stream/{type}/{id}.json", response_model=StreamResponse)
async def get_stream(type: str, id: str):
    """Stremio stream resource."""
    return _handle_stream_request(type, id)


@router.get("/api/streams", response_model=StreamResponse)
async def get_stream_query(type: Optional[str] = None, id: Optional[str] = None):
    """Serverless-style variant where path parameters arrive as query strings."""
    return _handle_stream_request(type, id)


@router.get("/{type}/{id}/streams.json")
async def legacy_stream_redirect(type: str, id: str):
    """Older clients used /{type}/{id}/streams.json"""
    return RedirectResponse(
        url=f"/stream/{quote(type, safe='')}/{quote(id, safe=':')}.json",
        status_code=302,
    )
