from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from ..api.schemas import (
    Aggregations,
    DateBucket,
    DateHistogram,
    EngineAggregations,
    MediumBreakdown,
    MediumBucket,
)
from ..errors import MalformedAggregation


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def parse_aggregations(raw: Any) -> EngineAggregations:
    """Validate the engine's ``aggregations`` object against the expected nesting."""
    if not isinstance(raw, dict):
        raise MalformedAggregation("Malformed aggregation response: 'aggregations' is missing or not an object")
    try:
        return EngineAggregations.model_validate(raw)
    except ValidationError as exc:
        raise MalformedAggregation(f"Malformed aggregation response: {_describe(exc)}") from exc


def transform_aggregations(raw: Any) -> Aggregations:
    """Reshape the engine's date histogram / medium terms result for the dashboard.

    Buckets keep the engine's order and counts. Inner medium buckets are
    relabelled only: never sorted, filtered or merged.
    Date labels are reduced to the calendar date as written, with no zone
    conversion: ``2019-08-22T23:00:00.000-05:00`` becomes ``2019-08-22``.
    """
    parsed = parse_aggregations(raw)

    buckets = []
    for bucket in parsed.first_agg.buckets:
        buckets.append(
            DateBucket(
                doc_count=bucket.doc_count,
                key=bucket.key,
                key_as_string=bucket.key_as_string.date().isoformat(),
                second_agg=MediumBreakdown(
                    buckets=[MediumBucket(doc_count=b.doc_count, key=b.key) for b in bucket.second_agg.buckets]
                ),
            )
        )
    return Aggregations(first_agg=DateHistogram(buckets=buckets))


def transform_response(resp: Dict[str, Any]) -> Aggregations:
    if not isinstance(resp, dict) or "aggregations" not in resp:
        raise MalformedAggregation("Malformed aggregation response: 'aggregations' is missing")
    return transform_aggregations(resp["aggregations"])
