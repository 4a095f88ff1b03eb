from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator
from typing import List, Optional


class KeywordSearchRequest(BaseModel):
    query_text: str = Field(min_length=1, description="Free text query, passed to the engine verbatim")
    after: Optional[str] = Field(default=None, description="ISO-8601 inclusive lower bound")
    before: Optional[str] = Field(default=None, description="ISO-8601 inclusive upper bound")
    interval: str = Field(default="1d", description="Histogram bucket width, e.g. 1d, 5d, 12h")


# Raw engine response. Auxiliary fields (error bounds, other counts) are ignored.


class EngineMediumBucket(BaseModel):
    key: StrictStr
    doc_count: StrictInt = Field(ge=0)


class EngineTermsAggregation(BaseModel):
    buckets: List[EngineMediumBucket]


class EngineDateBucket(BaseModel):
    # Zone kept as written; only the date part is exposed
    key_as_string: datetime
    key: StrictInt
    doc_count: StrictInt = Field(ge=0)
    second_agg: EngineTermsAggregation

    @field_validator("key_as_string", mode="before")
    @classmethod
    def label_is_text(cls, v):
        # lax datetime parsing would also take epoch numbers
        if not isinstance(v, str):
            raise ValueError("bucket date label must be an ISO-8601 string")
        return v


class EngineDateHistogram(BaseModel):
    buckets: List[EngineDateBucket]


class EngineAggregations(BaseModel):
    first_agg: EngineDateHistogram


# API response


class MediumBucket(BaseModel):
    doc_count: int
    key: str


class MediumBreakdown(BaseModel):
    buckets: List[MediumBucket] = Field(default_factory=list)


class DateBucket(BaseModel):
    doc_count: int
    key: int = Field(description="Bucket start, epoch milliseconds")
    key_as_string: str = Field(description="Bucket start as a calendar date (YYYY-MM-DD)")
    second_agg: MediumBreakdown


class DateHistogram(BaseModel):
    buckets: List[DateBucket] = Field(default_factory=list)


class Aggregations(BaseModel):
    first_agg: DateHistogram


class KeywordTrendsResponse(BaseModel):
    aggregations: Aggregations


class ErrorResponse(BaseModel):
    error: str
