"""
Tests de los adaptadores de captura de liveness.
"""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from face_auth.domain.exceptions import (
    FaceAuthenticatorLivenessSdkException,
    FaceAuthenticatorUnknownException,
    LivenessCaptureError,
    LivenessSdkErrorKind,
)
from face_auth.domain.value_objects import Credentials, LivenessOutcome
from face_auth.infrastructure.config import ApiSettings, build_face_authenticator_for_sdk
from face_auth.infrastructure.liveness.sdk_liveness_capture import (
    SdkLivenessCapture,
    SubmittedLivenessCapture,
    to_liveness_outcome,
)


class SdkAuthError(Exception):
    pass


class SdkPermissionError(Exception):
    pass


class SdkCancelByUserError(Exception):
    pass


class SdkGenericError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


ERROR_KINDS = {
    SdkAuthError: LivenessSdkErrorKind.AUTH,
    SdkPermissionError: LivenessSdkErrorKind.PERMISSION,
    SdkCancelByUserError: LivenessSdkErrorKind.CANCELLED_BY_USER,
    SdkGenericError: LivenessSdkErrorKind.GENERIC,
}


def test_outcome_from_dict():
    outcome = to_liveness_outcome({"real": True, "sessionId": "S", "base64Image": "B64"})
    assert outcome == LivenessOutcome(real=True, session_id="S", base64_image="B64")


def test_outcome_from_object_with_missing_fields():
    outcome = to_liveness_outcome(SimpleNamespace(real=False, session_id=None))
    assert outcome == LivenessOutcome(real=False, session_id=None, base64_image=None)


def test_sdk_capture_converts_result():
    sdk = MagicMock()
    sdk.start.return_value = {"real": True, "sessionId": "S"}

    outcome = SdkLivenessCapture(sdk, ERROR_KINDS).start()

    assert outcome == LivenessOutcome(real=True, session_id="S")


@pytest.mark.parametrize("exc, kind", [
    (SdkAuthError(), LivenessSdkErrorKind.AUTH),
    (SdkPermissionError(), LivenessSdkErrorKind.PERMISSION),
    (SdkCancelByUserError(), LivenessSdkErrorKind.CANCELLED_BY_USER),
    (SdkGenericError("Instance of 'SdkGenericError'"), LivenessSdkErrorKind.GENERIC),
])
def test_sdk_capture_maps_errors(exc, kind):
    sdk = MagicMock()
    sdk.start.side_effect = exc

    with pytest.raises(LivenessCaptureError) as exc_info:
        SdkLivenessCapture(sdk, ERROR_KINDS).start()
    assert exc_info.value.kind is kind
    assert exc_info.value.__cause__ is exc


def test_generic_error_keeps_message():
    sdk = MagicMock()
    sdk.start.side_effect = SdkGenericError("camera busy")

    with pytest.raises(LivenessCaptureError) as exc_info:
        SdkLivenessCapture(sdk, ERROR_KINDS).start()
    assert exc_info.value.message == "camera busy"


def test_unmapped_error_propagates():
    sdk = MagicMock()
    sdk.start.side_effect = KeyError("x")

    with pytest.raises(KeyError):
        SdkLivenessCapture(sdk, ERROR_KINDS).start()


def test_submitted_capture_returns_outcome():
    outcome = LivenessOutcome(real=True, session_id="S", base64_image="B64")
    assert SubmittedLivenessCapture(outcome).start() is outcome


class TestSdkThroughAuthenticator:
    """SDK real envuelto por SdkLivenessCapture dentro de FaceAuthenticator."""

    @staticmethod
    def _authenticator(exc):
        sdk = MagicMock()
        sdk.start.side_effect = exc
        credentials = Credentials(token="tok", client_id="cid", client_secret="secret", person_id="p1")
        return build_face_authenticator_for_sdk(credentials, lambda **kwargs: sdk, ERROR_KINDS, ApiSettings())

    @pytest.mark.parametrize("exc, kind", [
        (SdkAuthError(), LivenessSdkErrorKind.AUTH),
        (SdkPermissionError(), LivenessSdkErrorKind.PERMISSION),
        (SdkCancelByUserError(), LivenessSdkErrorKind.CANCELLED_BY_USER),
        (SdkGenericError("Instance of 'SdkGenericError'"), LivenessSdkErrorKind.GENERIC),
    ])
    def test_sdk_errors_surface_as_liveness_sdk_exception(self, exc, kind):
        authenticator = self._authenticator(exc)

        with pytest.raises(FaceAuthenticatorLivenessSdkException) as exc_info:
            authenticator.start_liveness()
        assert exc_info.value.kind is kind

        with pytest.raises(FaceAuthenticatorLivenessSdkException):
            authenticator.initialize()

    def test_unmapped_sdk_error_surfaces_as_unknown(self):
        authenticator = self._authenticator(KeyError("x"))

        with pytest.raises(FaceAuthenticatorUnknownException):
            authenticator.start_liveness()
        with pytest.raises(FaceAuthenticatorUnknownException):
            authenticator.initialize()
