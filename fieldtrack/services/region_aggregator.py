"""
Region Aggregation Service.

Buckets stored visit records into per-region counts for the admin heat map
and the activity bar chart. Stored country/state always win over the
bounding-box classifier.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional
import logging

from fieldtrack.data.bounding_boxes import MEXICO
from fieldtrack.models.location import LocationRecord, RegionCount
from fieldtrack.services.region_classifier import (
    RegionDefaultMode,
    classify_country,
    classify_region,
    known_regions,
    normalize_country_name,
)

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def filter_records(
    records: Iterable[LocationRecord],
    user_id: Optional[str] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> List[LocationRecord]:
    """
    Keep records matching the user and inclusive date range.

    Naive timestamps and bounds are read as UTC, so stored ``+00:00`` values
    compare against plain ``YYYY-MM-DD`` filters. ``date_to`` covers its whole
    calendar day. Records without created_at are dropped whenever a date
    bound is given.
    """
    lower = _as_utc(date_from) if date_from is not None else None
    upper = None
    if date_to is not None:
        end_day = date_to.replace(hour=0, minute=0, second=0, microsecond=0)
        upper = _as_utc(end_day + timedelta(days=1))

    selected = []
    for record in records:
        if user_id is not None and record.user_id != user_id:
            continue
        if lower is not None or upper is not None:
            if record.created_at is None:
                continue
            created_at = _as_utc(record.created_at)
            if lower is not None and created_at < lower:
                continue
            if upper is not None and created_at >= upper:
                continue
        selected.append(record)
    return selected


def count_regions(
    records: Iterable[LocationRecord],
    country: str,
    mode: RegionDefaultMode = RegionDefaultMode.HEAT_MAP,
) -> Dict[str, int]:
    """
    Count visits per region for one country.

    Args:
        records: Visit records
        country: Country to count (any accent/alias variant)
        mode: Default label family for classifier fallbacks

    Returns:
        Region name -> count, in first-seen order
    """
    target = normalize_country_name(country)
    counts: Dict[str, int] = {}
    if not target:
        return counts

    for record in records:
        detected = normalize_country_name(record.country) or classify_country(record.latitude, record.longitude)
        if detected != target:
            continue
        region = (record.state or "").strip() or classify_region(record.latitude, record.longitude, detected, mode)
        counts[region] = counts.get(region, 0) + 1

    logger.debug(f"Region counts for {target}: {counts}")
    return counts


def build_heat_map(
    records: Iterable[LocationRecord],
    country: str,
    mode: RegionDefaultMode = RegionDefaultMode.HEAT_MAP,
) -> List[RegionCount]:
    """
    Heat-map buckets: only regions with visits, intensity relative to the busiest.

    Returns:
        RegionCount list with intensity = count / max count * 100
    """
    counts = count_regions(records, country, mode)
    max_count = max(list(counts.values()) + [1])
    return [
        RegionCount(region=region, count=count, intensity=count / max_count * 100)
        for region, count in counts.items()
    ]


def build_activity_chart(
    records: Iterable[LocationRecord],
    country: str,
    mode: RegionDefaultMode = RegionDefaultMode.HEAT_MAP,
) -> List[RegionCount]:
    """
    Activity chart buckets: every catalog region, zero-filled, busiest first.

    Labels outside the catalog are dropped, except for México where any
    label (including "Otra región") gets its own bar.
    """
    target = normalize_country_name(country)
    catalog = known_regions(target)
    chart: Dict[str, int] = {region: 0 for region in catalog}

    for region, count in count_regions(records, target, mode).items():
        if region in chart or target == MEXICO:
            chart[region] = chart.get(region, 0) + count

    max_count = max(list(chart.values()) + [1])
    buckets = [
        RegionCount(region=region, count=count, intensity=count / max_count * 100)
        for region, count in chart.items()
    ]
    # sorted() is stable: ties keep catalog order
    return sorted(buckets, key=lambda b: b.count, reverse=True)
