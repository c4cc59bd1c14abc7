from dataclasses import dataclass

from user_service.app.core.services import DbSessionService, PasswordHasher


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    password_hasher: PasswordHasher
