# face_auth/presentation/api.py
import logging
import os
from typing import Optional

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from face_auth.domain.exceptions import FaceAuthenticatorApiException, FaceAuthenticatorException
from face_auth.domain.value_objects import Credentials, LivenessOutcome, VerificationResult
from face_auth.infrastructure.config import build_face_authenticator
from face_auth.infrastructure.liveness.sdk_liveness_capture import SubmittedLivenessCapture
from .schemas import FaceAuthenticateRequestSerializer, FaceAuthenticateResponseSerializer

logger = logging.getLogger("face_auth.authenticate")


def _bearer_token(request) -> Optional[str]:
    header = (request.META.get("HTTP_AUTHORIZATION") or "").strip()
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()

def _result_payload(result: VerificationResult) -> dict:
    return {
        "isAlive": result.is_alive,
        "isMatch": result.is_match,
        "sessionId": result.session_id,
        "base64Image": result.base64_image,
        "errorMessage": result.error_message,
    }

def _message_for(result: VerificationResult) -> str:
    if result.error_message:
        return result.error_message
    if not result.is_alive:
        return "Liveness inválido"
    return "OK" if result.is_match else "El rostro no coincide"


authorization_param = openapi.Parameter(
    "Authorization",
    openapi.IN_HEADER,
    description="Bearer <token> que se reenvía a la API de autenticación facial.",
    type=openapi.TYPE_STRING,
    required=True,
)

class FaceAuthenticateAPIView(APIView):
    """
    POST /api/face-auth/authenticate

    El dispositivo ya hizo la captura de liveness; aquí se registra y se pide el face match.
    {
      "personId": "123",
      "sessionId": "abc",
      "real": true,
      "base64Image": "..."
    }
    sessionId vacío ("") o real no booleano -> 400.
    """
    @swagger_auto_schema(
        operation_summary="Autenticación facial (liveness + face match)",
        operation_description=(
            "Registra el uso de liveness y pide el face match para `personId`.\n\n"
            "- Si la captura no es válida (`real` != true o sin `sessionId`) retorna isAlive=false.\n"
            "- Los fallos esperados de la API vienen en `errorMessage`."
        ),
        manual_parameters=[authorization_param],
        request_body=FaceAuthenticateRequestSerializer,
        responses={
            200: FaceAuthenticateResponseSerializer,
            400: "Falta el token o el body no es válido.",
            502: "Fallo de transporte con la API de autenticación facial.",
        },
        tags=["Autenticación facial"]
    )
    def post(self, request):
        token = _bearer_token(request)
        if not token:
            return Response({"status": "false", "message": "Falta el token Bearer", "data": None},
                            status=status.HTTP_400_BAD_REQUEST)

        serializer = FaceAuthenticateRequestSerializer(data=request.data or {})
        if not serializer.is_valid():
            return Response({"status": "false", "message": "Body inválido", "errors": serializer.errors, "data": None},
                            status=status.HTTP_400_BAD_REQUEST)
        body = serializer.validated_data

        credentials = Credentials(
            token=token,
            client_id=os.getenv("FACE_AUTH_CLIENT_ID", ""),
            client_secret=os.getenv("FACE_AUTH_CLIENT_SECRET", ""),
            person_id=body["personId"].strip(),
        )
        outcome = LivenessOutcome(
            real=body.get("real"),
            session_id=body.get("sessionId"),
            base64_image=body.get("base64Image"),
        )

        authenticator = build_face_authenticator(credentials, SubmittedLivenessCapture(outcome))
        try:
            result = authenticator.initialize()
        except FaceAuthenticatorApiException as ex:
            logger.info({"event": "authenticate_api_error", "person_id": credentials.person_id, "error": str(ex)})
            return Response({"status": "false", "message": "Error al comunicarse con la API de autenticación facial", "data": None},
                            status=status.HTTP_502_BAD_GATEWAY)
        except FaceAuthenticatorException as ex:
            logger.info({"event": "authenticate_error", "person_id": credentials.person_id, "error": str(ex)})
            return Response({"status": "false", "message": "Error no controlado en autenticación facial", "data": None},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        finally:
            authenticator.api.close()

        passed = result.is_alive and result.is_match
        return Response({
            "status": "success" if passed else "false",
            "message": _message_for(result),
            "data": _result_payload(result),
        }, status=200)
