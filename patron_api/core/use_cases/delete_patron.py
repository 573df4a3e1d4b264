# patron_api/core/use_cases/delete_patron.py
import structlog

from patron_api.core.domain.exceptions import DomainError, NotFoundError
from patron_api.core.domain.value_objects import PatronId
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class DeletePatron:
    """
    Use Case: Removes a patron from the registry.
    """

    def __init__(self, repository: PatronRepository):
        self.repository = repository

    async def execute(self, patron_id: str) -> None:
        with tracer.start_as_current_span("use_case.delete_patron") as span:
            identifier = PatronId(patron_id).value
            span.set_attribute("app.patron_id", identifier)

            patron = await self.repository.find_by_id(identifier)
            if not patron:
                raise NotFoundError("Patron", identifier)

            deleted = await self.repository.delete(identifier)
            if not deleted:
                logger.error("patron_delete_failed", patron_id=identifier)
                raise DomainError(f"Failed to delete patron with id {identifier}")

            logger.info("patron_deleted", patron_id=identifier)
