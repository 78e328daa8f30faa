from .normalize import (
    is_number,
    is_temporal,
    normalize_records,
    require_finite_number,
    require_number,
    sort_by_ordinal,
    validate_data_types,
)

__all__ = [
    "is_number",
    "is_temporal",
    "normalize_records",
    "require_finite_number",
    "require_number",
    "sort_by_ordinal",
    "validate_data_types",
]
