# clinic_core/insurance/services.py
from __future__ import annotations

from typing import Any, Mapping

from clinic_core.common.services import ResourceService, clean_text, merged, require
from clinic_core.insurance.models import InsuranceCompany

REQUIRED = ("name", "phone")
REQUIRED_MSG = "Insurance company has to have a name and phone number"


class InsuranceCompanyService(ResourceService):
    name = "insurance company"
    not_found_message = "Insurance company not found"
    delete_conflict_message = "Insurance company still insures patients"

    def create(self, data: Mapping[str, Any]) -> InsuranceCompany:
        require(data, REQUIRED, REQUIRED_MSG)
        return self._insert(name=clean_text(data["name"]), phone=clean_text(data["phone"]))

    def update(self, company: InsuranceCompany, data: Mapping[str, Any]) -> InsuranceCompany:
        changes = {f: clean_text(data[f]) for f in REQUIRED if f in data}
        require(merged(company, changes, REQUIRED), REQUIRED, REQUIRED_MSG)
        return self._save(company, changes)
