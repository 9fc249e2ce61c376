"""Admin session."""

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import UserId


class AdminSession(DomainModel):
    """Authenticated console session.

    ``access_token`` is the auth provider's JWT; it is what the session
    cookie carries.
    """

    user_id: UserId
    email: str
    access_token: str
    is_admin: bool = False
