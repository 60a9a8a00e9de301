from volunteer_match.schemas.base import CamelModel, RequestModel
from volunteer_match.schemas.profile import ProfileResponse


class LoginRequest(RequestModel):
    email: str = ""
    # Accepted for client compatibility, never checked
    password: str = ""


class LoginResponse(CamelModel):
    token: str
    user: ProfileResponse


class RegisterRequest(RequestModel):
    # Checked against UserRole by the handler
    role: str = ""
    full_name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    password: str = ""
    skills: list[str] = []
    interests: list[str] = []
    biography: str = ""
