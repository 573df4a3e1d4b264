# patron_api/core/use_cases/create_patron.py
import structlog

from patron_api.core.domain.exceptions import ConflictError
from patron_api.core.domain.patron import Patron
from patron_api.core.dtos import CreatePatronCommand, PatronDTO
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class CreatePatron:
    """
    Use Case: Registers a new patron.

    Responsibilities:
    1. Builds the Patron aggregate (all value objects validated).
    2. Rejects the request if the email is already registered.
    3. Persists the aggregate via the Repository Port.
    """

    def __init__(self, repository: PatronRepository):
        self.repository = repository

    async def execute(self, command: CreatePatronCommand) -> PatronDTO:
        """
        Args:
            command: The new patron's fields (dates already parsed).

        Returns:
            PatronDTO: The stored patron, including its new identifier.

        Raises:
            ValidationError: If any field is invalid.
            ConflictError: If a patron with the same email exists.
        """
        with tracer.start_as_current_span("use_case.create_patron") as span:
            patron = Patron.create(
                email=command.email,
                given_name=command.given_name,
                family_name=command.family_name,
                role=command.role,
                charge=command.charge,
                renovation_date=command.renovation_date,
                ending_date=command.ending_date,
            )
            span.set_attribute("app.patron_role", patron.role)

            # Pre-check on the normalized email; the unique index is still the final word
            existing = await self.repository.find_by_email(patron.email)
            if existing:
                logger.warning("patron_email_conflict", email_domain=patron.email_domain)
                raise ConflictError("Patron with this email already exists")

            saved = await self.repository.create(patron)

            logger.info("patron_created", patron_id=saved.id, role=saved.role)
            return PatronDTO.from_entity(saved)
