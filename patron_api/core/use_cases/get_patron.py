# patron_api/core/use_cases/get_patron.py
import structlog

from patron_api.core.domain.exceptions import NotFoundError
from patron_api.core.domain.value_objects import PatronId
from patron_api.core.dtos import PatronDTO
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class GetPatron:
    """
    Use Case: Fetches a single patron by identifier.
    """

    def __init__(self, repository: PatronRepository):
        self.repository = repository

    async def execute(self, patron_id: str) -> PatronDTO:
        with tracer.start_as_current_span("use_case.get_patron") as span:
            span.set_attribute("app.patron_id", patron_id)

            identifier = PatronId(patron_id).value
            patron = await self.repository.find_by_id(identifier)
            if not patron:
                logger.info("patron_not_found", patron_id=identifier)
                raise NotFoundError("Patron", identifier)

            return PatronDTO.from_entity(patron)
