import os

# User-Agent advertised to players through behaviorHints.proxyHeaders
DEFAULT_STREAM_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36'
)


def get_stream_user_agent() -> str:
    """Return the configured stream User-Agent, STREAM_USER_AGENT overrides the default."""
    return os.getenv('STREAM_USER_AGENT') or DEFAULT_STREAM_USER_AGENT
