from pydantic import BaseModel
from typing import Optional, List, Dict, Any


class Manifest(BaseModel):
    id: str
    version: str
    name: str
    description: str
    logo: Optional[str] = None
    background: Optional[str] = None
    resources: List[str]
    types: List[str]
    catalogs: List[Dict[str, Any]]
    idPrefixes: Optional[List[str]] = None
    behaviorHints: Optional[Dict[str, Any]] = None


class BehaviorHints(BaseModel):
    notWebReady: bool = False
    bingeGroup: Optional[str] = None
    proxyHeaders: Optional[Dict[str, str]] = None


class Stream(BaseModel):
    name: str
    title: Optional[str] = None
    url: str
    description: Optional[str] = None
    behaviorHints: Optional[BehaviorHints] = None
    externalUrl: Optional[str] = None
    # [] when the provider advertises subtitles, None otherwise
    subtitles: Optional[List[Dict[str, Any]]] = None


class StreamResponse(BaseModel):
    streams: List[Stream]


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    providers: List[str]
