"""Role repository backed by the hosted record store."""

from inkwell.adapter.backend.client import RecordStoreClient
from inkwell.domain.repository.role import RoleRepository
from inkwell.domain.value import Role, UserId

TABLE = "user_roles"


class RemoteRoleRepository(RoleRepository):
    """Role lookups over the ``user_roles`` collection."""

    def __init__(self, client: RecordStoreClient) -> None:
        self.client = client

    async def has_role(self, user_id: UserId, role: Role) -> bool:
        rows = await (
            self.client.table(TABLE)
            .select("role")
            .eq("user_id", str(user_id))
            .eq("role", role.value)
            .limit(1)
            .fetch()
        )
        return bool(rows)
