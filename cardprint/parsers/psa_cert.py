"""
PSA certificate payload mapping.

Maps a PSA cert lookup response (GET /cert/GetByCertNumber/{certNumber})
into a CardDescriptor. PSA uses PascalCase keys:

    {"CertNumber": 82104556, "Subject": "LUKA DONCIC", "Brand": "PANINI PRIZM",
     "Year": "2018", "CardNumber": "280", "Variety": "SILVER",
     "GradeDescription": "GEM MT 10", ...}

Population, signer, and image fields are ignored; only fields that take
part in fingerprinting are kept.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cardprint.config import settings
from cardprint.models.descriptor import CardDescriptor


class PsaCertError(Exception):
    """Raised when a PSA cert payload cannot be mapped."""


class PsaCert(BaseModel):
    """Fingerprint-relevant subset of a PSA cert response."""

    model_config = ConfigDict(extra="ignore")

    cert_number: str | None = Field(default=None, alias="CertNumber")
    subject: str | None = Field(default=None, alias="Subject")
    brand: str | None = Field(default=None, alias="Brand")
    year: str | None = Field(default=None, alias="Year")
    card_number: str | None = Field(default=None, alias="CardNumber")
    variety: str | None = Field(default=None, alias="Variety")
    grade_description: str | None = Field(default=None, alias="GradeDescription")

    @field_validator("*", mode="before")
    @classmethod
    def _stringify_numbers(cls, value: Any) -> Any:
        # PSA returns CertNumber (and sometimes Year) as a JSON number
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("*")
    @classmethod
    def _empty_to_none(cls, value: str | None) -> str | None:
        return value or None


def load_psa_cert(payload: Mapping[str, Any]) -> PsaCert:
    """
    Validate a PSA cert payload.

    Raises:
        PsaCertError: If the payload is missing or has invalid field types
    """
    if not isinstance(payload, Mapping):
        raise PsaCertError(
            f"PSA cert payload must be a JSON object, got {type(payload).__name__}"
        )

    try:
        return PsaCert.model_validate(dict(payload))
    except ValidationError as exc:
        raise PsaCertError(f"Invalid PSA cert payload: {exc}") from exc


def descriptor_from_psa_cert(payload: Mapping[str, Any] | PsaCert) -> CardDescriptor:
    """
    Map a PSA cert payload to a CardDescriptor.

    The grading authority is always the configured default ("PSA").
    The cert number is kept as PSA issued it, so the descriptor
    fingerprints as CERTIFIED.

    Raises:
        PsaCertError: If the payload is invalid
    """
    cert = payload if isinstance(payload, PsaCert) else load_psa_cert(payload)

    return CardDescriptor(
        certification_number=cert.cert_number,
        player_name=cert.subject,
        set_name=cert.brand,
        year=cert.year,
        card_number=cert.card_number,
        variant=cert.variety,
        grade=cert.grade_description,
        grading_authority=settings.default_grading_authority,
    )


def psa_cert_title(payload: Mapping[str, Any] | PsaCert) -> str:
    """
    Human readable title for a PSA cert.

    Example:
        "LUKA DONCIC 2018 PANINI PRIZM #280 (SILVER) GEM MT 10"
    """
    cert = payload if isinstance(payload, PsaCert) else load_psa_cert(payload)

    parts = [
        cert.subject,
        cert.year,
        cert.brand,
        f"#{cert.card_number}" if cert.card_number else None,
        f"({cert.variety})" if cert.variety else None,
        cert.grade_description,
    ]
    return " ".join(part for part in parts if part)
