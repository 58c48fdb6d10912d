from cardprint.models.descriptor import CardDescriptor
from cardprint.models.fingerprint import (
    FINGERPRINT_DELIMITER,
    FINGERPRINT_FIELDS,
    FingerprintKind,
    ParsedFingerprint,
)

__all__ = [
    "CardDescriptor",
    "FINGERPRINT_DELIMITER",
    "FINGERPRINT_FIELDS",
    "FingerprintKind",
    "ParsedFingerprint",
]
