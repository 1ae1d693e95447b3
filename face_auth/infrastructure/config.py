# face_auth/infrastructure/config.py
import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from ..application.face_authenticator import DEFAULT_SDK_VERSION, FaceAuthenticator
from ..domain.exceptions import LivenessSdkErrorKind
from ..domain.interfaces import LivenessCapture
from ..domain.value_objects import Credentials
from .api.caf_api_client import DEFAULT_FACE_MATCH_URL, DEFAULT_LIVENESS_URL, CafFaceAuthenticatorApi
from .liveness.sdk_liveness_capture import SdkFactory, SdkLivenessCapture

@dataclass(frozen=True)
class ApiSettings:
    liveness_url: str = DEFAULT_LIVENESS_URL
    face_match_url: str = DEFAULT_FACE_MATCH_URL
    sdk_version: str = DEFAULT_SDK_VERSION
    timeout: float = 10.0

# --- Helpers ENV (soportan "10 # comentario") ---
def _env_float(var: str, default: float) -> float:
    raw = os.getenv(var, str(default))
    m = re.search(r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?", str(raw))
    return float(m.group(0)) if m else float(default)

def _env_str(var: str, default: str) -> str:
    return str(os.getenv(var, default) or default).strip()

def get_api_settings() -> ApiSettings:
    return ApiSettings(
        liveness_url=_env_str("FACE_AUTH_LIVENESS_URL", DEFAULT_LIVENESS_URL),
        face_match_url=_env_str("FACE_AUTH_FACE_MATCH_URL", DEFAULT_FACE_MATCH_URL),
        sdk_version=_env_str("FACE_AUTH_SDK_VERSION", DEFAULT_SDK_VERSION),
        timeout=_env_float("FACE_AUTH_TIMEOUT", 10.0),
    )

def build_face_authenticator(
    credentials: Credentials,
    liveness: LivenessCapture,
    settings: Optional[ApiSettings] = None,
) -> FaceAuthenticator:
    settings = settings or get_api_settings()
    api = CafFaceAuthenticatorApi(
        token=credentials.token,
        liveness_url=settings.liveness_url,
        face_match_url=settings.face_match_url,
        timeout=settings.timeout,
    )
    return FaceAuthenticator(
        credentials=credentials,
        liveness=liveness,
        api=api,
        sdk_version=settings.sdk_version,
    )

def build_face_authenticator_for_sdk(
    credentials: Credentials,
    sdk_factory: SdkFactory,
    error_kinds: Mapping[type, LivenessSdkErrorKind],
    settings: Optional[ApiSettings] = None,
) -> FaceAuthenticator:
    """El SDK se instancia con las credenciales del cliente y sin guía de voz."""
    sdk = sdk_factory(
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
        vocal_guidance=False,
    )
    return build_face_authenticator(credentials, SdkLivenessCapture(sdk, error_kinds), settings)
