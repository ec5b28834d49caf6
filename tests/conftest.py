from typing import Any

import pytest

from oboini import decode

SAMPLE_OBO = """format-version: 1.2
! a header line the parser ignores

[Term]
id: GO:0000001
name: mitochondrion inheritance
namespace: biological_process
def: "The distribution of mitochondria." [GOC:mcc, PMID:10873824]
synonym: "mitochondrial inheritance" EXACT []
is_a: GO:0048308 ! organelle inheritance
relationship: part_of GO:0007005 ! mitochondrion organization
xref: Wikipedia:Mitochondrion "Mitochondrion article"

[Term]
id: GO:0048308
name: organelle inheritance
xref: GO:0000001
xref: Wikipedia:Mitochondrion

[Typedef]
id: part_of
name: part of
is_a: overlaps
"""


@pytest.fixture
def sample_obo_text() -> str:
    return SAMPLE_OBO


@pytest.fixture
def decoded_sample(sample_obo_text: str) -> dict[str, Any]:
    """Sample ontology decoded with default options."""
    return decode(sample_obo_text)
