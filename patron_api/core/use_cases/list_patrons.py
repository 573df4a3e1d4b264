# patron_api/core/use_cases/list_patrons.py
import math

import structlog

from patron_api.core.dtos import ListPatronsQuery, PatronDTO, PatronListDTO
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class ListPatrons:
    """
    Use Case: Paginated listing of patrons.

    The total is the count of every matching patron, not the size of the
    returned page, so `total_pages` reflects the whole collection.
    """

    def __init__(self, repository: PatronRepository):
        self.repository = repository

    async def execute(self, query: ListPatronsQuery) -> PatronListDTO:
        with tracer.start_as_current_span("use_case.list_patrons") as span:
            span.set_attribute("app.page", query.page)
            span.set_attribute("app.limit", query.limit)

            criteria = query.criteria()
            patrons = await self.repository.find(criteria, page=query.page, limit=query.limit)
            total = await self.repository.count(criteria)

            logger.debug("patrons_listed", page=query.page, returned=len(patrons), total=total)

            return PatronListDTO(
                patrons=[PatronDTO.from_entity(patron) for patron in patrons],
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=math.ceil(total / query.limit),
            )
