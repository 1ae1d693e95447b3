from typing import Any, Callable, Mapping, Optional

from ...domain.exceptions import LivenessCaptureError, LivenessSdkErrorKind
from ...domain.value_objects import LivenessOutcome


def _pick(raw: Any, *names: str) -> Any:
    """Lee el primer campo presente, sea atributo o clave de dict."""
    for name in names:
        if isinstance(raw, Mapping):
            if name in raw:
                return raw[name]
        elif hasattr(raw, name):
            return getattr(raw, name)
    return None


def to_liveness_outcome(raw: Any) -> LivenessOutcome:
    """
    Acepta los formatos habituales del SDK:
      {"real": true, "sessionId": "...", "base64Image": "..."}
      objeto con .real / .session_id / .base64_image
    """
    if isinstance(raw, LivenessOutcome):
        return raw
    return LivenessOutcome(
        real=_pick(raw, "real"),
        session_id=_pick(raw, "sessionId", "session_id"),
        base64_image=_pick(raw, "base64Image", "base64_image"),
    )


class SdkLivenessCapture:
    """
    Adapta un SDK de liveness (cualquier objeto con start()) al puerto LivenessCapture.
    error_kinds mapea las clases de excepción del SDK a LivenessSdkErrorKind;
    lo que no está mapeado se propaga tal cual.
    """
    def __init__(self, sdk: Any, error_kinds: Optional[Mapping[type, LivenessSdkErrorKind]] = None):
        self.sdk = sdk
        self.error_kinds = dict(error_kinds or {})

    def _kind_for(self, exc: BaseException) -> Optional[LivenessSdkErrorKind]:
        for exc_type, kind in self.error_kinds.items():
            if isinstance(exc, exc_type):
                return kind
        return None

    def start(self) -> LivenessOutcome:
        try:
            raw = self.sdk.start()
        except Exception as e:
            kind = self._kind_for(e)
            if kind is None:
                raise
            message = getattr(e, "message", None) or str(e)
            raise LivenessCaptureError(kind, message) from e
        return to_liveness_outcome(raw)


class SubmittedLivenessCapture:
    """Captura ya realizada en el dispositivo y enviada al servidor."""
    def __init__(self, outcome: LivenessOutcome):
        self.outcome = outcome

    def start(self) -> LivenessOutcome:
        return self.outcome


SdkFactory = Callable[..., Any]
