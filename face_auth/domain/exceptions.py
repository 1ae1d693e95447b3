# face_auth/domain/exceptions.py
from enum import Enum
from typing import Any, Optional


class LivenessSdkErrorKind(Enum):
    AUTH = "auth"
    PERMISSION = "permission"
    CANCELLED_BY_USER = "cancelled_by_user"
    GENERIC = "generic"


class LivenessCaptureError(Exception):
    """Error nombrado del SDK de liveness, tal como lo reporta el adaptador."""

    def __init__(self, kind: LivenessSdkErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message


class FaceAuthenticatorException(Exception):
    pass


class FaceAuthenticatorLivenessSdkException(FaceAuthenticatorException):
    def __init__(self, kind: LivenessSdkErrorKind, message: str = ""):
        super().__init__(f"Liveness SDK error ({kind.value}): {message}" if message else f"Liveness SDK error ({kind.value})")
        self.kind = kind
        self.message = message


class FaceAuthenticatorApiException(FaceAuthenticatorException):
    """La llamada HTTP en sí falló (transporte, JSON roto), no un simple status != 200."""

    def __init__(self, response: Optional[Any] = None, message: str = ""):
        status = getattr(response, "status_code", None)
        super().__init__(message or f"Face authenticator API error (status={status})")
        self.response = response


class FaceAuthenticatorLivenessApiException(FaceAuthenticatorApiException):
    pass


class FaceAuthenticatorFaceMatchApiException(FaceAuthenticatorApiException):
    pass


class FaceAuthenticatorUnknownException(FaceAuthenticatorException):
    pass
