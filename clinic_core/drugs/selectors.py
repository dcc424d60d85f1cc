# clinic_core/drugs/selectors.py
from __future__ import annotations

from clinic_core.common.repository import Repository
from clinic_core.drugs.models import Drug


def drug_repository() -> Repository[Drug]:
    return Repository(Drug, ordering=("id",))
