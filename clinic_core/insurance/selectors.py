# clinic_core/insurance/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.insurance.models import InsuranceCompany


def insurance_company_repository() -> Repository[InsuranceCompany]:
    return Repository(InsuranceCompany, ordering=("id",))
