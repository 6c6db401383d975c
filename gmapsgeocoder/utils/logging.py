"""
Logging de gmapsgeocoder.

Las URLs de la API llevan la API key y la firma en la query, así que todo
lo que se registra pasa por redact_url. Las credenciales guardan sus
secretos como SecretStr y se serializan enmascaradas.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Parámetros de query cuyo valor nunca debe aparecer en logs ni errores
SENSITIVE_PARAMS = ("key", "signature")

_SENSITIVE_RE = re.compile(r"([?&](?:%s)=)[^&#]*" % "|".join(SENSITIVE_PARAMS))

_RESERVED_FIELDS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}


def redact_url(url: Optional[str]) -> Optional[str]:
    """Enmascara los valores de ``key`` y ``signature`` en una URL.

    Example:
        redact_url(".../json?key=AIza...&address=Diagonal")
        # '.../json?key=***&address=Diagonal'
    """
    if not url:
        return url
    return _SENSITIVE_RE.sub(r"\1***", url)


class StructuredJSONFormatter(logging.Formatter):
    """
    Formateador de logs en formato JSON, una línea por registro.

    Los campos pasados con ``extra=`` se añaden al objeto. Un extra ``url``
    se redacta siempre y los modelos Pydantic se vuelcan en modo JSON, con
    lo que los SecretStr salen como ``**********``.
    """

    def _serialize_value(self, key: str, value: Any) -> Any:
        if isinstance(value, str):
            return redact_url(value) if key == "url" else value
        if value is None or isinstance(value, (bool, int, float)):
            return value

        if isinstance(value, dict):
            return {k: self._serialize_value(k, v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(key, v) for v in value]

        if isinstance(value, datetime):
            return value.isoformat()

        # Modelos Pydantic (GeocodeResponse, credenciales...)
        if hasattr(value, "model_dump"):
            return value.model_dump(mode="json")

        return str(value)

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "funcName": record.funcName,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_FIELDS and not key.startswith("_"):
                log_data[key] = self._serialize_value(key, value)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    logger_name: str = "gmapsgeocoder"
) -> logging.Logger:
    """
    Configura el logging del paquete (usado por la CLI).

    Args:
        level: Nivel de logging (default: logging.INFO)
        json_format: Si es True, usa StructuredJSONFormatter
        logger_name: Nombre del logger raíz del paquete

    Returns:
        logging.Logger: Logger configurado
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # El cliente añade un NullHandler; solo cuentan los handlers reales
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            StructuredJSONFormatter() if json_format
            else logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger
