"""Structured header directives (Warning and Link)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class WarningDirective(BaseModel):
    """One Warning header line: ``code [agent] ["text"] ["date"]``."""

    model_config = ConfigDict(frozen=True)

    code: int
    agent: str = ""
    text: str = ""
    date: datetime | None = None


class LinkDirective(BaseModel):
    """One Link header line: ``<uri>; rel="..."[; type="..."][; title="..."]``."""

    model_config = ConfigDict(frozen=True)

    uri: str
    rel: str
    type: str = ""
    title: str = ""
