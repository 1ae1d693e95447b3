# face_auth/domain/interfaces.py
from __future__ import annotations
from typing import Protocol

from .value_objects import ApiResponse, LivenessOutcome, VerificationRequest

# ---- Captura de liveness (puerto hacia el SDK) ----

class LivenessCapture(Protocol):
    def start(self) -> LivenessOutcome:
        """
        Ejecuta la captura de liveness.
        Debe lanzar LivenessCaptureError(kind, message) para los errores propios del SDK.
        """
        ...

# ---- API remota de verificación (puerto HTTP) ----

class FaceAuthenticatorApi(Protocol):
    def verify_liveness(self, request: VerificationRequest) -> ApiResponse:
        """Registra el uso de liveness. Lanza FaceAuthenticatorLivenessApiException si falla el transporte."""
        ...

    def verify_face_match(self, request: VerificationRequest) -> ApiResponse:
        """Pide el face match. Lanza FaceAuthenticatorFaceMatchApiException si falla el transporte."""
        ...

    def close(self) -> None:
        """Libera las conexiones HTTP abiertas."""
        ...
