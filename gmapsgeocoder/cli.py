"""
Línea de comandos: geocodifica una dirección e imprime la respuesta en JSON.

    python -m gmapsgeocoder "Avinguda Diagonal 100, Barcelona" --region es

Las credenciales se leen de GMAPS_API_KEY / GMAPS_CLIENT_ID /
GMAPS_CRYPTO_KEY si no se pasan como argumentos.
"""

import argparse
import logging
import sys

from .client import GeocodeClient
from .exceptions import GeocodeError
from .utils.logging import setup_logging

logger = logging.getLogger("gmapsgeocoder.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gmapsgeocoder",
        description="Geocodifica una dirección con la API de Google Maps",
    )
    parser.add_argument("address", help="Dirección postal a geocodificar")
    parser.add_argument("--region", help="Código de región (ccTLD), ej: es")
    parser.add_argument("--api-key", help="API key (default: $GMAPS_API_KEY)")
    parser.add_argument("--client-id", help="Client id premium (default: $GMAPS_CLIENT_ID)")
    parser.add_argument("--crypto-key", help="Clave de firma premium (default: $GMAPS_CRYPTO_KEY)")
    parser.add_argument("--timeout", type=float, help="Timeout en segundos (default: $GMAPS_TIMEOUT o 10)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Nivel de logging (default: WARNING)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Logs en formato JSON")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(getattr(logging, args.log_level), json_format=args.json_logs)

    options = {}
    for name in ("api_key", "client_id", "crypto_key", "timeout"):
        value = getattr(args, name)
        if value is not None:
            options[name] = value

    try:
        client = GeocodeClient.from_env(**options)
        response = client.geocode_sync(args.address, args.region)
    except GeocodeError as e:
        logger.error("Error de geocodificación: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(response.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
