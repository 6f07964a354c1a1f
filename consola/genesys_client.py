"""Cliente de DataTables de Genesys Cloud.

Envuelve el SDK oficial (PureCloudPlatformClientV2) con una sesión explícita
que se construye una sola vez al arrancar y se inyecta en el cliente de tabla.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import PureCloudPlatformClientV2
from PureCloudPlatformClientV2.rest import ApiException

from .errors import (
    AuthError,
    NotAuthenticatedError,
    NotFoundError,
    RemoteReadError,
    RemoteWriteError,
)

logger = logging.getLogger(__name__)

# Regiones soportadas por la consola
REGIONES = {
    'us_east_1': PureCloudPlatformClientV2.PureCloudRegionHosts.us_east_1,
    'us_west_2': PureCloudPlatformClientV2.PureCloudRegionHosts.us_west_2,
    'eu_west_1': PureCloudPlatformClientV2.PureCloudRegionHosts.eu_west_1,
    'sa_east_1': PureCloudPlatformClientV2.PureCloudRegionHosts.sa_east_1,
}

# Genesys solo devuelve la primera página; no se pagina más allá.
PAGE_SIZE = 100


class GenesysSession:
    """Sesión autenticada (client credentials) contra una región de Genesys Cloud."""

    def __init__(self, region='us_east_1', client_id=None, client_secret=None):
        self.region = region or 'us_east_1'
        self.client_id = client_id
        self.client_secret = client_secret
        self.architect_api = None
        self.is_authenticated = False

    def authenticate(self):
        if not self.client_id or not self.client_secret:
            raise AuthError('Faltan credenciales Genesys (GENESYS_CLIENT_ID / GENESYS_CLIENT_SECRET)')

        region_host = REGIONES.get(self.region)
        if region_host is None:
            raise AuthError(f"Región Genesys desconocida: {self.region}")

        PureCloudPlatformClientV2.configuration.host = region_host.get_api_host()
        logger.info("Región Genesys: %s", self.region)

        try:
            api_client = PureCloudPlatformClientV2.api_client.ApiClient().get_client_credentials_token(
                self.client_id, self.client_secret
            )
        except ApiException as e:
            raise AuthError(f"Genesys rechazó las credenciales: {e.reason}", payload=_body(e)) from e
        except Exception as e:
            # Errores de red o de configuración del SDK durante el login
            raise AuthError(f"No se pudo autenticar en Genesys: {e}") from e

        self.architect_api = PureCloudPlatformClientV2.ArchitectApi(api_client)
        self.is_authenticated = True
        logger.info("Autenticado en Genesys Cloud")


class RemoteTableClient:
    """Lectura y escritura de filas de una DataTable de Architect."""

    def __init__(self, session, datatable_id: Optional[str]):
        self.session = session
        self.datatable_id = datatable_id

    def authenticate(self):
        self.session.authenticate()

    def _api(self):
        if not self.session.is_authenticated:
            raise NotAuthenticatedError('Genesys no autenticado')
        return self.session.architect_api

    def fetch_rows(self) -> List[Dict[str, Any]]:
        """Devuelve la primera página de filas: cada una con `key` más sus columnas."""
        api = self._api()
        if not self.datatable_id:
            raise RemoteReadError('GENESYS_DATATABLE_ID no está definido')
        try:
            response = api.get_flows_datatable_rows(
                self.datatable_id,
                page_number=1,
                page_size=PAGE_SIZE,
                showbrief=False,
            )
        except ApiException as e:
            raise RemoteReadError(f"Error leyendo la DataTable: {e.reason}", payload=_body(e)) from e

        entities = getattr(response, 'entities', None)
        return list(entities) if entities else []

    def fetch_row(self, key: str) -> Dict[str, Any]:
        api = self._api()
        if not self.datatable_id:
            raise RemoteReadError('GENESYS_DATATABLE_ID no está definido')
        try:
            row = api.get_flows_datatable_row(self.datatable_id, key, showbrief=False)
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError('No encontrado', payload=_body(e)) from e
            raise RemoteReadError(f"Error leyendo la fila {key}: {e.reason}", payload=_body(e)) from e
        if not row:
            raise NotFoundError('No encontrado')
        return dict(row)

    def write_row(self, key: str, columns: Dict[str, Any]) -> Dict[str, Any]:
        """
        Reemplaza la fila completa. Genesys borra las columnas que no se envían,
        así que `columns` debe ser el mapeo completo ya fusionado.
        """
        api = self._api()
        if not self.datatable_id:
            raise RemoteWriteError('GENESYS_DATATABLE_ID no está definido')

        body = dict(columns)
        body['key'] = key
        logger.debug("Payload enviado a Genesys (fila %s): %s", key, json.dumps(body, default=str))

        try:
            response = api.put_flows_datatable_row(self.datatable_id, key, body=body)
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError('No encontrado', payload=_body(e)) from e
            raise RemoteWriteError(f"Genesys rechazó la actualización de {key}: {e.reason}", payload=_body(e)) from e
        return dict(response) if response else body


def _body(error: ApiException):
    """Intenta decodificar el cuerpo de error de Genesys; si no es JSON lo deja como texto."""
    raw = getattr(error, 'body', None)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return raw
