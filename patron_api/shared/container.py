# patron_api/shared/container.py
from dependency_injector import containers, providers

from patron_api.adapters.persistence.mongo_connection import MongoConnection
from patron_api.adapters.persistence.mongo_patron_repository import MongoPatronRepository
from patron_api.core.use_cases.create_patron import CreatePatron
from patron_api.core.use_cases.delete_patron import DeletePatron
from patron_api.core.use_cases.get_patron import GetPatron
from patron_api.core.use_cases.list_patrons import ListPatrons
from patron_api.core.use_cases.renew_patron import RenewPatron
from patron_api.core.use_cases.update_patron import UpdatePatron
from patron_api.shared.config import Settings

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    One instance is built per application by `create_app`; tests override providers.
    """

    # 1. Configuration (read from the environment once, on first use)
    settings = providers.Singleton(Settings)

    # 2. Gateways (Infrastructure Adapters)

    # One motor client per process
    mongo_connection = providers.Singleton(
        MongoConnection,
        uri=settings.provided.MONGODB_URI,
        database=settings.provided.MONGODB_DATABASE,
        timeout_ms=settings.provided.MONGODB_TIMEOUT_MS,
    )

    patron_repository = providers.Singleton(
        MongoPatronRepository,
        connection=mongo_connection,
        collection_name=settings.provided.MONGODB_COLLECTION,
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance created for every request (stateless logic),
    # but with Singleton dependencies injected.

    create_patron_use_case = providers.Factory(CreatePatron, repository=patron_repository)

    get_patron_use_case = providers.Factory(GetPatron, repository=patron_repository)

    list_patrons_use_case = providers.Factory(ListPatrons, repository=patron_repository)

    update_patron_use_case = providers.Factory(UpdatePatron, repository=patron_repository)

    delete_patron_use_case = providers.Factory(DeletePatron, repository=patron_repository)

    renew_patron_use_case = providers.Factory(RenewPatron, repository=patron_repository)
