# face_auth/presentation/schemas.py
from rest_framework import serializers

class StrictBooleanField(serializers.BooleanField):
    """Solo acepta true/false de JSON; nada de "true", "yes", 1..."""
    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid", input=data)
        return data

# ---------- Authenticate (POST) ----------
class FaceAuthenticateRequestSerializer(serializers.Serializer):
    personId = serializers.CharField(help_text="Identificador de la persona enrolada.")
    # "" se rechaza con 400: un sessionId vacío nunca viene del SDK
    sessionId = serializers.CharField(required=False, allow_null=True, allow_blank=False,
                                      help_text="sessionId devuelto por el SDK de liveness (no vacío).")
    real = StrictBooleanField(required=False, allow_null=True, default=None,
                              help_text="Veredicto de liveness del SDK (booleano JSON).")
    base64Image = serializers.CharField(required=False, allow_null=True,
                                        help_text="Imagen capturada en base64 (opcional).")

class FaceAuthenticateResultSerializer(serializers.Serializer):
    isAlive = serializers.BooleanField()
    isMatch = serializers.BooleanField()
    sessionId = serializers.CharField(allow_null=True)
    base64Image = serializers.CharField(allow_null=True)
    errorMessage = serializers.CharField(allow_null=True)

class FaceAuthenticateResponseSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()
    data = FaceAuthenticateResultSerializer()
