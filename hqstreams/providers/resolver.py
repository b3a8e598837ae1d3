"""
Candidate stream resolution: parse the media id, build one candidate per
provider, keep only high-quality labels.
"""

import logging
import traceback
from typing import List, Optional

from hqstreams.providers.base_provider import BaseProvider
from hqstreams.providers.common import ProviderFactory
from hqstreams.schemas.type_defs import CandidateStream
from hqstreams.utils.env import get_disabled_providers
from hqstreams.utils.ids import parse_media_id, has_episode
from hqstreams.utils.quality import filter_high_quality

logger = logging.getLogger(__name__)


def build_candidates(media_type: str, media_id: str,
                     providers: Optional[List[BaseProvider]] = None) -> List[CandidateStream]:
    """Build one candidate per provider. A failing provider is logged and skipped."""
    parsed = parse_media_id(media_id)

    if media_type == "series" and has_episode(parsed):
        logger.info(f"📺 Processing series: {parsed['primary_id']}, "
                    f"Season: {parsed['season']}, Episode: {parsed['episode']}")
    else:
        logger.info(f"🎬 Processing {media_type} without specific episode: {parsed['primary_id']}")

    if providers is None:
        disabled = get_disabled_providers()
        providers = [p for p in ProviderFactory.create_all() if p.provider_key not in disabled]

    candidates: List[CandidateStream] = []
    for provider in providers:
        try:
            candidates.append(provider.build_candidate(media_type, parsed))
        except Exception as e:
            logger.error(f"❌ {provider.log_prefix} error: {e}")
            logger.debug(traceback.format_exc())
    return candidates


def resolve_streams(media_type: str, media_id: str,
                    providers: Optional[List[BaseProvider]] = None) -> List[CandidateStream]:
    """Return the high-quality candidate streams for a media id."""
    candidates = build_candidates(media_type, media_id, providers)
    hq_candidates = filter_high_quality(candidates)
    logger.info(f"✅ Returning {len(hq_candidates)} high-quality streams "
                f"({len(candidates) - len(hq_candidates)} filtered out)")
    return hq_candidates
