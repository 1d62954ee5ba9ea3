"""
Login credentials for owners created from approved visit reports.

Login ids look like ``KO4821``: the normalized location code followed by a
random numeric suffix. A candidate is only handed out after checking that no
owner or user already carries it; the unique constraints on
``owners.login_id`` and ``users.login_id`` catch the remaining race between
two approvals drawing the same suffix at the same time.
"""
import logging
import re
import secrets
import string
from sqlalchemy import exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from configs.settings import ApprovalPolicy
from database.models.owner import Owner
from database.models.user import User
from utils.exceptions import ConflictException

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = string.ascii_lowercase + string.digits


def normalize_location_code(code: str | None, fallback: str = "GEN") -> str:
    cleaned = re.sub(r"[^A-Za-z0-9]", "", code or "").upper()
    return cleaned or fallback.upper()


def generate_temp_password(length: int = 8) -> str:
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


class LoginIdGenerator:
    def __init__(self, session: AsyncSession, policy: ApprovalPolicy) -> None:
        self.session = session
        self.policy = policy

    def candidate(self, prefix: str) -> str:
        digits = self.policy.login_id_digits
        return f"{prefix}{secrets.randbelow(10 ** digits):0{digits}d}"

    async def is_taken(self, login_id: str) -> bool:
        query = select(
            or_(
                exists().where(Owner.login_id == login_id),
                exists().where(User.login_id == login_id),
            )
        )
        return bool(await self.session.scalar(query))

    async def generate(self, location_code: str | None) -> str:
        prefix = normalize_location_code(
            location_code, self.policy.fallback_location_code
        )
        for _ in range(self.policy.login_id_max_attempts):
            login_id = self.candidate(prefix)
            if not await self.is_taken(login_id):
                return login_id
        logger.warning("Exhausted login id candidates for prefix %s", prefix)
        raise ConflictException(f"Could not allocate a unique login id for {prefix}")
