from barangay_records.shared.utils.datetime import utc_now
from barangay_records.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
]
