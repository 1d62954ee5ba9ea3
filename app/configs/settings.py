import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


class ApprovalPolicy(BaseModel):
    """Defaults applied when a visit report is turned into live records."""

    fallback_location_code: str = "GEN"
    default_owner_name: str = "Owner"
    default_owner_phone: str = "0000000000"
    temp_password_length: int = Field(8, ge=6, le=64)
    login_id_digits: int = Field(4, ge=2, le=12)
    login_id_max_attempts: int = Field(25, ge=1)

    @classmethod
    def from_env(cls) -> "ApprovalPolicy":
        values = {
            "fallback_location_code": os.environ.get("APPROVAL_FALLBACK_LOCATION_CODE"),
            "default_owner_name": os.environ.get("APPROVAL_DEFAULT_OWNER_NAME"),
            "default_owner_phone": os.environ.get("APPROVAL_DEFAULT_OWNER_PHONE"),
            "temp_password_length": os.environ.get("APPROVAL_TEMP_PASSWORD_LENGTH"),
            "login_id_digits": os.environ.get("APPROVAL_LOGIN_ID_DIGITS"),
            "login_id_max_attempts": os.environ.get("APPROVAL_LOGIN_ID_MAX_ATTEMPTS"),
        }
        return cls(**{key: value for key, value in values.items() if value})


approval_policy = ApprovalPolicy.from_env()


def provide_approval_policy() -> ApprovalPolicy:
    return approval_policy


JWT_SECRET = os.environ.get("JWT_SECRET", "roomhy-dev-secret-change-me")
JWT_EXPIRATION_HOURS = int(os.environ.get("JWT_EXPIRATION_HOURS", "24"))
DEBUG = os.environ.get("ENVIRONMENT") == "dev"
SEED_DEMO_DATA = os.environ.get("SEED_DEMO_DATA", "false").lower() == "true"
SEED_VISIT_REPORTS = int(os.environ.get("SEED_VISIT_REPORTS", "10"))
SUPERADMIN_LOGIN_ID = os.environ.get("SUPERADMIN_LOGIN_ID", "superadmin")
SUPERADMIN_PASSWORD = os.environ.get("SUPERADMIN_PASSWORD")
