import pytest

from cardprint.models.descriptor import CardDescriptor


@pytest.fixture
def sample_psa_cert() -> dict:
    """PSA cert lookup response, trimmed to a realistic subset."""
    return {
        "CertNumber": 82104556,
        "SpecID": 1234567,
        "SpecNumber": "PCR8JD4H",
        "LabelType": "LighthouseLabel",
        "ReverseBarCode": True,
        "Year": "2018",
        "Brand": "PANINI PRIZM",
        "Category": "BASKETBALL CARDS",
        "CardNumber": "280",
        "Subject": "LUKA DONCIC",
        "Variety": "SILVER",
        "GradeDescription": "GEM MT 10",
        "IsPSADNA": False,
        "IsDualCert": False,
        "TotalPopulation": 1520,
        "PopulationHigher": 0,
    }


@pytest.fixture
def sample_descriptors() -> list[CardDescriptor]:
    """Descriptors of the same two cards entered from different sources."""
    return [
        CardDescriptor(player_name="Lionel Messi / Steph Curry", set_name="Topps", year="2023"),
        CardDescriptor(player_name="Mike Trout", set_name="Topps Update", year="2011"),
        CardDescriptor(player_name="Steph Curry and Lionel Messi", set_name="TOPPS", year="2023"),
        CardDescriptor(certification_number="82104556", player_name="Luka Doncic"),
        CardDescriptor(certification_number="82104556"),
    ]


@pytest.fixture
def sample_jsonl() -> str:
    """JSON Lines export from the ingestion layer."""
    return "\n".join(
        [
            '{"playerName": "Messi/Curry", "setName": "Topps", "year": 2023, "source": "manual"}',
            '{"player_name": "Curry & Messi", "set_name": "topps", "year": "2023"}',
            "",
            '{"certNumber": 82104556, "grader": "PSA"}',
        ]
    )
