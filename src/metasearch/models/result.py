"""Result model — Normalized search result produced by every provider.

Each provider maps its own raw response records to ``Result`` so that an
orchestrator can merge the lists it receives without knowing which engine
produced them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Result(BaseModel):
    """A single normalized search result.

    Instances are immutable once constructed and are owned by the caller
    after they have been delivered on the results queue.
    """

    model_config = ConfigDict(frozen=True)

    engine: str = Field(description="Name of the search engine that produced the result")
    title: str = Field(default="", description="Result title")
    link: str = Field(default="", description="URL of the result")
    content: str = Field(default="", description="Content snippet returned by the engine")
