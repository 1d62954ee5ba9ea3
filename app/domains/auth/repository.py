from advanced_alchemy.repository import (
    SQLAlchemyAsyncRepository,
)
from database.models.user import User


class UserRepository(SQLAlchemyAsyncRepository[User]):
    """User SQLAlchemy Repository."""
    model_type = User
