# consola/extensions.py
import logging

from .errors import AuthError
from .genesys_client import GenesysSession, RemoteTableClient
from .models.configuracion import ConfigurationService
from .models.fuentes import MockSource, RemoteSource

logger = logging.getLogger(__name__)


class GenesysManager:
    """
    Construye una sola vez la sesión Genesys y el servicio de configuraciones.
    Si faltan credenciales o la autenticación falla, el proceso queda en modo mock.
    """

    def __init__(self, app=None):
        self.session = None
        self.client = None
        self.service = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        mock = MockSource()
        source = mock
        self.session = None
        self.client = None

        if app.config.get('MODO', 'genesys') != 'genesys':
            logger.info("Modo MOCK forzado")
        elif not app.config.get('GENESYS_DATATABLE_ID'):
            logger.warning("GENESYS_DATATABLE_ID NO está definido. Usando modo MOCK")
        else:
            self.session = GenesysSession(
                region=app.config.get('GENESYS_REGION'),
                client_id=app.config.get('GENESYS_CLIENT_ID'),
                client_secret=app.config.get('GENESYS_CLIENT_SECRET'),
            )
            self.client = RemoteTableClient(self.session, app.config.get('GENESYS_DATATABLE_ID'))

            logger.info("Inicializando Genesys...")
            try:
                self.client.authenticate()
                source = RemoteSource(self.client)
                logger.info("Genesys Cloud conectado")
            except AuthError as e:
                logger.warning("Genesys NO disponible: %s. Usando modo MOCK", e)

        self.service = ConfigurationService(source, fallback=mock)
        app.extensions['configuraciones'] = self.service
        logger.info("Modo: %s", source.fuente.upper())


genesys = GenesysManager()
