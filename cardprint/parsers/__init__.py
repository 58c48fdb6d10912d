from cardprint.parsers.descriptor_import import (
    DescriptorImportError,
    descriptor_from_record,
    parse_descriptors,
)
from cardprint.parsers.psa_cert import (
    PsaCert,
    PsaCertError,
    descriptor_from_psa_cert,
    load_psa_cert,
    psa_cert_title,
)

__all__ = [
    "DescriptorImportError",
    "PsaCert",
    "PsaCertError",
    "descriptor_from_psa_cert",
    "descriptor_from_record",
    "load_psa_cert",
    "parse_descriptors",
    "psa_cert_title",
]
