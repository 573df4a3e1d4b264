# patron_api/core/use_cases/renew_patron.py
import structlog

from patron_api.core.domain.exceptions import NotFoundError
from patron_api.core.domain.value_objects import PatronId
from patron_api.core.dtos import PatronDTO, RenewPatronCommand
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class RenewPatron:
    """
    Use Case: Starts a new membership window for a patron whose membership ended.

    The renovation date becomes "now" and the ending date the requested one.
    """

    def __init__(self, repository: PatronRepository):
        self.repository = repository

    async def execute(self, command: RenewPatronCommand) -> PatronDTO:
        with tracer.start_as_current_span("use_case.renew_patron") as span:
            identifier = PatronId(command.id).value
            span.set_attribute("app.patron_id", identifier)

            patron = await self.repository.find_by_id(identifier)
            if not patron:
                raise NotFoundError("Patron", identifier)

            # Raises ValidationError while the current membership is still running
            renewed = patron.renew(command.ending_date)

            updated = await self.repository.update(
                identifier,
                {
                    "renovation_date": renewed.renovation_date,
                    "ending_date": renewed.ending_date,
                },
            )
            if not updated:
                raise NotFoundError("Patron", identifier)

            logger.info("patron_renewed", patron_id=identifier, ending_date=updated.ending_date.isoformat())
            return PatronDTO.from_entity(updated)
