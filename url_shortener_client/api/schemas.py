"""
API Request and Response Schemas

This module defines the Pydantic models for the JSON documents exchanged
with the URL shortener API.

Design Principles:
- Field names follow the wire format through aliases (longUrl, shortUrlClicks)
- Unknown response fields are ignored, so additions upstream do not break us
- Analytics breakdowns (browsers, countries, ...) are kept in upstream order
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class ShortenRequest(BaseModel):
    """Request body for the shorten operation."""
    model_config = ConfigDict(populate_by_name=True)

    long_url: str = Field(..., alias="longUrl", description="The long URL to shorten")


class ShortenResponse(BaseModel):
    """Response body of the shorten operation."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="The shortened URL")
    long_url: Optional[str] = Field(default=None, alias="longUrl")


class ExpandResponse(BaseModel):
    """Response body of the expand operation."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, description="The short URL that was expanded")
    long_url: str = Field(..., alias="longUrl", description="The original long URL")
    status: Optional[str] = None


class BreakdownEntry(BaseModel):
    """One (id, count) pair of an analytics breakdown."""
    id: Union[int, str]
    count: Union[int, str]


_BREAKDOWN = TypeAdapter(List[BreakdownEntry])


class PeriodStats(BaseModel):
    """
    Click statistics for one time range (allTime, month, week, day, twoHours).

    The click counters are declared fields. Breakdowns arrive as extra
    fields so that their order matches the upstream document.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    short_url_clicks: Optional[Union[int, str]] = Field(default=None, alias="shortUrlClicks")
    long_url_clicks: Optional[Union[int, str]] = Field(default=None, alias="longUrlClicks")

    @model_validator(mode="after")
    def _parse_breakdowns(self) -> "PeriodStats":
        extra = self.__pydantic_extra__ or {}
        for name, value in extra.items():
            if isinstance(value, list):
                extra[name] = _BREAKDOWN.validate_python(value)
        return self

    @property
    def breakdowns(self) -> Dict[str, List[BreakdownEntry]]:
        """Breakdown name -> entries, for every list-valued field."""
        return {
            name: value
            for name, value in (self.model_extra or {}).items()
            if isinstance(value, list)
        }


class AnalyticsReport(BaseModel):
    """Response body of the analytics operation (projection=FULL)."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    long_url: Optional[str] = Field(default=None, alias="longUrl")
    status: Optional[str] = None
    analytics: Dict[str, PeriodStats] = Field(default_factory=dict)
