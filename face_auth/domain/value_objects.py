# face_auth/domain/value_objects.py
from dataclasses import dataclass
from typing import Any, Optional

@dataclass(frozen=True)
class Credentials:
    token: str
    client_id: str
    client_secret: str
    person_id: str

@dataclass(frozen=True)
class LivenessOutcome:
    """Resultado crudo del SDK de liveness (un intento)."""
    real: Optional[bool] = None
    session_id: Optional[str] = None
    base64_image: Optional[str] = None

@dataclass(frozen=True)
class VerificationResult:
    is_alive: bool
    is_match: bool
    session_id: Optional[str] = None
    base64_image: Optional[str] = None
    error_message: Optional[str] = None

@dataclass(frozen=True)
class VerificationRequest:
    person_id: str
    session_id: str
    sdk_version: str

    def to_json(self) -> dict:
        return {
            "personId": self.person_id,
            "sessionId": self.session_id,
            "sdkVersion": self.sdk_version,
        }

@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: Any = None            # JSON decodificado (o None si no es JSON)
    response: Any = None        # respuesta HTTP original, para inspección

    @property
    def ok(self) -> bool:
        return self.status_code == 200
