"""Request-to-output listing pipeline.

Validation happens before any directory is read:
- filter options compile into a ``FilterConfig``
- the column selector and effective output format are resolved
Then entries are listed, filtered, sorted, and rendered into one payload.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .filters import FilterConfig, apply_filters, build_filter_config
from .listing import EntryRecord, list_entries
from .render import COLUMN_KEYS, parse_columns, render_entries
from .request import ListingRequest, OutputFormat, effective_format
from .sorting import sort_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedRequest:
    """Pre-compiled pieces of a request that passed validation."""

    request: ListingRequest
    filters: FilterConfig
    output_format: OutputFormat
    columns: tuple[str, ...] = COLUMN_KEYS


def validate_request(request: ListingRequest) -> ValidatedRequest:
    """Compile filters and resolve format and columns.

    Raises an ``InvalidRequestError`` subclass on bad input.
    """
    filters = build_filter_config(
        filter_ext=request.filter_ext,
        filter_name=request.filter_name,
        min_size=request.min_size,
        max_size=request.max_size,
    )
    output_format = effective_format(request)
    columns = parse_columns(request.columns)
    return ValidatedRequest(
        request=request,
        filters=filters,
        output_format=output_format,
        columns=columns,
    )


def collect_entries(validated: ValidatedRequest) -> list[EntryRecord]:
    """List, filter, and sort entries for a validated request.

    Raises ``RootReadError`` when the root directory cannot be read.
    """
    request = validated.request
    records = list_entries(
        request.path,
        request.include_hidden,
        tree=request.tree,
        max_depth=request.max_depth if request.tree else None,
    )
    listed = len(records)
    records = apply_filters(records, validated.filters)
    sort_entries(records, request.sort_by)
    logger.debug("listed %d entries under %s, %d kept after filters", listed, request.path, len(records))
    return records


def run_listing(request: ListingRequest) -> str:
    """Run the full pipeline and return the rendered payload."""
    validated = validate_request(request)
    records = collect_entries(validated)
    return render_entries(
        records,
        validated.output_format,
        compact=request.compact,
        use_color=request.use_color,
        theme=request.theme,
        columns=validated.columns,
    )


__all__ = [
    "ValidatedRequest",
    "validate_request",
    "collect_entries",
    "run_listing",
]
