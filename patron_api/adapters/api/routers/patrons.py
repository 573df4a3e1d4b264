# patron_api/adapters/api/routers/patrons.py
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from patron_api.adapters.api.dependencies import (
    get_create_patron_use_case,
    get_delete_patron_use_case,
    get_get_patron_use_case,
    get_list_patrons_use_case,
    get_renew_patron_use_case,
    get_update_patron_use_case,
)
from patron_api.core.dtos import (
    CreatePatronCommand,
    ListPatronsQuery,
    RenewPatronCommand,
    UpdatePatronCommand,
)
from patron_api.core.use_cases import (
    CreatePatron,
    DeletePatron,
    GetPatron,
    ListPatrons,
    RenewPatron,
    UpdatePatron,
)

router = APIRouter(prefix="/patrons", tags=["Patrons"])

# --- Request Models ---

class PatronCreateRequest(BaseModel):
    email: str = Field(..., description="Contact email, unique per patron")
    given_name: str
    family_name: str
    role: str = Field(..., description="Board role, e.g. 'president' or 'vocal'")
    charge: str = Field(..., description="Office title, e.g. 'Treasurer of the Board'")
    renovation_date: datetime = Field(..., description="ISO-8601 start of the membership")
    ending_date: datetime = Field(..., description="ISO-8601 end of the membership")

class PatronUpdateRequest(BaseModel):
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    role: Optional[str] = None
    charge: Optional[str] = None
    renovation_date: Optional[datetime] = None
    ending_date: Optional[datetime] = None

class RenewRequest(BaseModel):
    ending_date: datetime = Field(..., description="ISO-8601 end of the new membership")

def success(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"status": "success", "data": data}
    if message:
        body["message"] = message
    return body

# --- Endpoints ---

@router.post("", status_code=status.HTTP_201_CREATED, summary="Register a Patron")
async def create_patron(
    request: PatronCreateRequest,
    use_case: CreatePatron = Depends(get_create_patron_use_case),
):
    patron = await use_case.execute(CreatePatronCommand(**request.model_dump()))
    return success(patron.model_dump(mode="json"), "Patron created successfully")

@router.get("", summary="List Patrons")
async def list_patrons(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    role: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Matches names, email and charge"),
    is_active: Optional[bool] = Query(None),
    use_case: ListPatrons = Depends(get_list_patrons_use_case),
):
    """
    Paginated listing. `total` and `total_pages` count every matching patron.
    """
    query = ListPatronsQuery(page=page, limit=limit, role=role, search=search, is_active=is_active)
    result = await use_case.execute(query)
    return success(result.model_dump(mode="json"))

@router.get("/{patron_id}", summary="Get a Patron")
async def get_patron(
    patron_id: str,
    use_case: GetPatron = Depends(get_get_patron_use_case),
):
    patron = await use_case.execute(patron_id)
    return success(patron.model_dump(mode="json"))

@router.put("/{patron_id}", summary="Update a Patron")
@router.patch("/{patron_id}", summary="Partially update a Patron")
async def update_patron(
    patron_id: str,
    request: PatronUpdateRequest,
    use_case: UpdatePatron = Depends(get_update_patron_use_case),
):
    """
    Only the fields present in the body are changed.
    """
    command = UpdatePatronCommand(id=patron_id, **request.model_dump(exclude_unset=True))
    patron = await use_case.execute(command)
    return success(patron.model_dump(mode="json"), "Patron updated successfully")

@router.delete("/{patron_id}", summary="Delete a Patron")
async def delete_patron(
    patron_id: str,
    use_case: DeletePatron = Depends(get_delete_patron_use_case),
):
    await use_case.execute(patron_id)
    return success(message="Patron deleted successfully")

@router.post("/{patron_id}/renew", summary="Renew a Patron's membership")
async def renew_patron(
    patron_id: str,
    request: RenewRequest,
    use_case: RenewPatron = Depends(get_renew_patron_use_case),
):
    """
    Starts a new membership (from now until `ending_date`).
    Rejected with 400 while the current membership is still running.
    """
    patron = await use_case.execute(RenewPatronCommand(id=patron_id, ending_date=request.ending_date))
    return success(patron.model_dump(mode="json"), "Patron renewed successfully")
