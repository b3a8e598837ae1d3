def get_manifest():
    return {
        "id": "community.hqstreams.aggregator",
        "version": "1.0.0",
        "name": "HQ Streams Aggregator",
        "description": "Aggregates high-quality (1080p+) streaming links from multiple providers",
        "logo": "https://i.imgur.com/3XwJQ5l.png",
        "background": "https://i.imgur.com/8fGhJ9a.png",
        "resources": [
            "stream"
        ],
        "types": [
            "movie",
            "series"
        ],
        "catalogs": [],
        "idPrefixes": [
            "tt",
            "tmdb:"
        ]
    }
