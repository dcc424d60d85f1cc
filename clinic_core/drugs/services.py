# clinic_core/drugs/services.py
from __future__ import annotations

from typing import Any, Mapping

from clinic_core.common.services import ResourceService, clean_text, merged, require
from clinic_core.drugs.models import Drug

REQUIRED = ("drug_name", "side_effects", "benefits")
REQUIRED_MSG = "Drug has to have name, side effects and benefits"


class DrugService(ResourceService):
    name = "drug"
    not_found_message = "Drug not found"

    def create(self, data: Mapping[str, Any]) -> Drug:
        require(data, REQUIRED, REQUIRED_MSG)
        return self._insert(**{f: clean_text(data[f]) for f in REQUIRED})

    def update(self, drug: Drug, data: Mapping[str, Any]) -> Drug:
        changes = {f: clean_text(data[f]) for f in REQUIRED if f in data}
        require(merged(drug, changes, REQUIRED), REQUIRED, REQUIRED_MSG)
        return self._save(drug, changes)
