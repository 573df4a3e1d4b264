# patron_api/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from patron_api.core.use_cases import (
    CreatePatron,
    DeletePatron,
    GetPatron,
    ListPatrons,
    RenewPatron,
    UpdatePatron,
)
from patron_api.shared.container import Container

# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------
@inject
def get_create_patron_use_case(
    use_case: CreatePatron = Depends(Provide[Container.create_patron_use_case]),
) -> CreatePatron:
    return use_case


@inject
def get_get_patron_use_case(
    use_case: GetPatron = Depends(Provide[Container.get_patron_use_case]),
) -> GetPatron:
    return use_case


@inject
def get_list_patrons_use_case(
    use_case: ListPatrons = Depends(Provide[Container.list_patrons_use_case]),
) -> ListPatrons:
    return use_case


@inject
def get_update_patron_use_case(
    use_case: UpdatePatron = Depends(Provide[Container.update_patron_use_case]),
) -> UpdatePatron:
    return use_case


@inject
def get_delete_patron_use_case(
    use_case: DeletePatron = Depends(Provide[Container.delete_patron_use_case]),
) -> DeletePatron:
    return use_case


@inject
def get_renew_patron_use_case(
    use_case: RenewPatron = Depends(Provide[Container.renew_patron_use_case]),
) -> RenewPatron:
    return use_case
