"""Local filter over the loaded facility dataset.

A term matches a facility when, after lower-casing and trimming, it is a
substring of the name, the neighborhood, or at least one service. An
empty term returns the dataset unchanged. Input order is preserved.
"""
from typing import List, Sequence

from facility_directory.models.facility import FacilityRecord


def normalize_term(term) -> str:
    if term is None:
        return ""
    return str(term).lower().strip()


def matches(record: FacilityRecord, normalized_term: str) -> bool:
    if normalized_term in record.name.lower():
        return True
    if normalized_term in record.neighborhood.lower():
        return True
    return any(normalized_term in service.lower() for service in record.services)


def filter_facilities(dataset: Sequence[FacilityRecord], term) -> List[FacilityRecord]:
    normalized = normalize_term(term)
    if not normalized:
        return list(dataset)
    return [record for record in dataset if matches(record, normalized)]
