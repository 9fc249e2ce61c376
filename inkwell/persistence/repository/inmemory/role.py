"""In-memory role repository for testing."""

from inkwell.domain.repository.role import RoleRepository
from inkwell.domain.value import Role, UserId


class InMemoryRoleRepository(RoleRepository):
    """In-memory implementation of RoleRepository for testing."""

    def __init__(self) -> None:
        self._roles: set[tuple[UserId, Role]] = set()

    def grant(self, user_id: UserId, role: Role) -> None:
        self._roles.add((user_id, role))

    async def has_role(self, user_id: UserId, role: Role) -> bool:
        return (user_id, role) in self._roles
