import logging
from typing import Optional, Type

import requests

from ...domain.exceptions import (
    FaceAuthenticatorApiException,
    FaceAuthenticatorFaceMatchApiException,
    FaceAuthenticatorLivenessApiException,
)
from ...domain.value_objects import ApiResponse, VerificationRequest

logger = logging.getLogger("face_auth.api")

DEFAULT_LIVENESS_URL = "https://api.public.caf.io/v1/sdks/faces/liveness-partner"
DEFAULT_FACE_MATCH_URL = "https://api.public.caf.io/v1/sdks/faces/authentication-partner"


class CafFaceAuthenticatorApi:
    """
    Cliente de la API de autenticación facial.
    - verify_liveness: registra el uso de liveness (POST liveness-partner).
    - verify_face_match: face match contra la persona (POST authentication-partner).
    Ambos devuelven ApiResponse; un status != 200 NO es excepción.
    Errores de transporte -> *ApiException con la respuesta (si la hubo).
    """
    def __init__(
        self,
        token: str,
        liveness_url: str = DEFAULT_LIVENESS_URL,
        face_match_url: str = DEFAULT_FACE_MATCH_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.token = (token or "").strip()
        self.liveness_url = liveness_url
        self.face_match_url = face_match_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    def _post(self, url: str, request: VerificationRequest, error_cls: Type[FaceAuthenticatorApiException]) -> ApiResponse:
        logger.info({"event": "api_request", "api_url": url, "session_id": request.session_id})
        try:
            resp = self.session.post(url, json=request.to_json(), headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.info({"event": "api_transport_error", "api_url": url, "error": str(e)})
            raise error_cls(e.response, str(e)) from e

        body = None
        try:
            body = resp.json()
        except ValueError:
            # cuerpo vacío o no-JSON; el orquestador decide si le importa
            pass

        logger.info({"event": "api_response", "api_url": url, "status": resp.status_code})
        return ApiResponse(status_code=resp.status_code, body=body, response=resp)

    def verify_liveness(self, request: VerificationRequest) -> ApiResponse:
        return self._post(self.liveness_url, request, FaceAuthenticatorLivenessApiException)

    def verify_face_match(self, request: VerificationRequest) -> ApiResponse:
        return self._post(self.face_match_url, request, FaceAuthenticatorFaceMatchApiException)

    def close(self) -> None:
        # solo cerramos la sesión si la creamos nosotros
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
