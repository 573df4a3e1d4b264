# patron_api/core/use_cases/update_patron.py
import structlog

from patron_api.core.domain.exceptions import ConflictError, NotFoundError, ValidationError
from patron_api.core.domain.value_objects import Email, PatronId
from patron_api.core.dtos import PatronDTO, UpdatePatronCommand
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class UpdatePatron:
    """
    Use Case: Partial update of an existing patron.

    Responsibilities:
    1. Ensures the patron exists before any write.
    2. Re-checks email uniqueness when the email changes.
    3. Applies the changes to the aggregate so every value object and the
       date ordering are re-validated.
    4. Persists only the changed (normalized) fields.
    """

    def __init__(self, repository: PatronRepository):
        self.repository = repository

    async def execute(self, command: UpdatePatronCommand) -> PatronDTO:
        with tracer.start_as_current_span("use_case.update_patron") as span:
            if not command.id or not command.id.strip():
                raise ValidationError("Patron ID is required")

            identifier = PatronId(command.id).value
            span.set_attribute("app.patron_id", identifier)

            patron = await self.repository.find_by_id(identifier)
            if not patron:
                logger.info("patron_not_found", patron_id=identifier)
                raise NotFoundError("Patron", identifier)

            changes = command.changes()

            if "email" in changes:
                new_email = Email(changes["email"]).value
                if new_email != patron.email:
                    owner = await self.repository.find_by_email(new_email)
                    if owner and owner.id != patron.id:
                        raise ConflictError("Email already exists")

            patron.apply_changes(changes)

            normalized = patron.to_primitives()
            updated = await self.repository.update(
                identifier, {field: normalized[field] for field in changes}
            )
            if not updated:
                # Deleted between the existence check and the write
                raise NotFoundError("Patron", identifier)

            logger.info("patron_updated", patron_id=identifier, fields=sorted(changes))
            return PatronDTO.from_entity(updated)
