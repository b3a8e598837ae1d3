from hqstreams.schemas.type_defs import ParsedIdentifier

TMDB_PREFIX = "tmdb:"


def parse_media_id(media_id: str) -> ParsedIdentifier:
    """
    Parse a Stremio media ID into its components.

    Supported formats (first match wins):
    - tmdb:{tmdb_id}               -> alternate_id is the TMDB id, primary_id stays the full ID
    - {imdb_id}:{season}:{episode} -> series episode
    - {imdb_id}                    -> used verbatim
    """
    parsed: ParsedIdentifier = {
        "primary_id": media_id,
        "alternate_id": None,
        "season": None,
        "episode": None,
    }

    if media_id.startswith(TMDB_PREFIX):
        parsed["alternate_id"] = media_id[len(TMDB_PREFIX):]
    elif ":" in media_id:
        parts = media_id.split(":")
        parsed["primary_id"] = parts[0]
        parsed["season"] = parts[1] if len(parts) > 1 and parts[1] else None
        parsed["episode"] = parts[2] if len(parts) > 2 and parts[2] else None

    return parsed


def has_episode(parsed: ParsedIdentifier) -> bool:
    """Return True when both season and episode were supplied"""
    return bool(parsed["season"] and parsed["episode"])
