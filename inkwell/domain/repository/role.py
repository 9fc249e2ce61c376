"""User role repository interface."""

from abc import ABC, abstractmethod

from inkwell.domain.value import Role, UserId


class RoleRepository(ABC):
    """Read access to the backend's user_roles collection."""

    @abstractmethod
    async def has_role(self, user_id: UserId, role: Role) -> bool:
        """Check whether a user holds a role.

        Args:
            user_id: Auth provider user ID
            role: Role to check

        Returns:
            True if a matching user_roles row exists
        """
        pass
