# face_auth/application/face_authenticator.py
import logging

import requests

from ..domain.exceptions import (
    FaceAuthenticatorApiException,
    FaceAuthenticatorFaceMatchApiException,
    FaceAuthenticatorLivenessSdkException,
    FaceAuthenticatorUnknownException,
    LivenessCaptureError,
)
from ..domain.interfaces import FaceAuthenticatorApi, LivenessCapture
from ..domain.value_objects import (
    ApiResponse,
    Credentials,
    LivenessOutcome,
    VerificationRequest,
    VerificationResult,
)

logger = logging.getLogger("face_auth.authenticate")

DEFAULT_SDK_VERSION = "Python-1.0.0"

REGISTER_LIVENESS_ERROR = "Fail to register liveness usage"
FACE_MATCH_ERROR = "Fail to try face match"


class FaceAuthenticator:
    """
    Orquesta el flujo completo:
      1) captura de liveness (SDK)
      2) registro del uso de liveness (API)
      3) face match contra la persona enrolada (API)

    Los negativos esperados (captura inválida, status != 200) se devuelven como
    VerificationResult con error_message. Las excepciones quedan para fallos de
    SDK, de transporte o inesperados.
    """

    def __init__(
        self,
        credentials: Credentials,
        liveness: LivenessCapture,
        api: FaceAuthenticatorApi,
        sdk_version: str = DEFAULT_SDK_VERSION,
    ):
        self.credentials = credentials
        self.liveness = liveness
        self.api = api
        self.sdk_version = sdk_version

    def start_liveness(self) -> LivenessOutcome:
        logger.info({"event": "liveness_started", "person_id": self.credentials.person_id})
        try:
            return self.liveness.start()
        except LivenessCaptureError as e:
            logger.info({"event": "liveness_sdk_error", "kind": e.kind.value, "error": e.message})
            raise FaceAuthenticatorLivenessSdkException(e.kind, e.message) from e
        except Exception as e:
            logger.info({"event": "liveness_unknown_error", "error": repr(e)})
            raise FaceAuthenticatorUnknownException(str(e) or type(e).__name__) from e

    @staticmethod
    def is_liveness_result_valid(outcome: LivenessOutcome) -> bool:
        return outcome.real is True and outcome.session_id is not None

    def initialize(self) -> VerificationResult:
        outcome = self.start_liveness()

        if not self.is_liveness_result_valid(outcome):
            # sesión e imagen se descartan a propósito en este camino
            logger.info({"event": "liveness_invalid", "real": outcome.real, "has_session": outcome.session_id is not None})
            return VerificationResult(is_alive=False, is_match=False)

        session_id = outcome.session_id
        image = outcome.base64_image
        request = VerificationRequest(
            person_id=self.credentials.person_id,
            session_id=session_id,
            sdk_version=self.sdk_version,
        )

        try:
            registration = self.api.verify_liveness(request)
            if not registration.ok:
                logger.info({"event": "liveness_registration_failed", "session_id": session_id, "status": registration.status_code})
                return VerificationResult(
                    is_alive=False,
                    is_match=False,
                    session_id=session_id,
                    base64_image=image,
                    error_message=REGISTER_LIVENESS_ERROR,
                )

            match = self.api.verify_face_match(request)
            if not match.ok:
                logger.info({"event": "face_match_failed", "session_id": session_id, "status": match.status_code})
                return VerificationResult(
                    is_alive=True,
                    is_match=False,
                    session_id=session_id,
                    base64_image=image,
                    error_message=FACE_MATCH_ERROR,
                )

            is_match = self._parse_is_match(match)
        except FaceAuthenticatorApiException:
            raise
        except requests.RequestException as e:
            raise FaceAuthenticatorApiException(e.response, str(e)) from e
        except Exception as e:
            logger.info({"event": "api_unknown_error", "session_id": session_id, "error": repr(e)})
            raise FaceAuthenticatorUnknownException(str(e) or type(e).__name__) from e

        logger.info({"event": "face_match_result", "session_id": session_id, "is_match": is_match})
        return VerificationResult(
            is_alive=True,
            is_match=is_match,
            session_id=session_id,
            base64_image=image,
        )

    @staticmethod
    def _parse_is_match(match: ApiResponse) -> bool:
        body = match.body
        value = body.get("isMatch") if isinstance(body, dict) else None
        if not isinstance(value, bool):
            raise FaceAuthenticatorFaceMatchApiException(match.response, "Face match response without boolean 'isMatch'")
        return value
