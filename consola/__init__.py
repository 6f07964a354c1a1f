# consola/__init__.py

# --- Importaciones de Librerías Externas ---
import logging
import sys

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

# --- Importaciones de Módulos Propios ---
from .errors import ConsolaError
from .extensions import genesys


def create_app(config_object):
    """
    Función "Application Factory".
    Construye y configura toda la aplicación Flask.
    """

    # 1. Creación de la Instancia de la Aplicación
    app = Flask(__name__)

    # 2. Carga de la Configuración (viene de config.py)
    app.config.from_object(config_object)

    # 3. Logging antes que nada, para ver el arranque de Genesys
    setup_logging(app)

    # 4. Inicialización de Extensiones
    #    El frontend puede servirse desde otro origen durante el desarrollo.
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    genesys.init_app(app)

    # 5. Registro de Componentes de la Aplicación
    register_blueprints(app)
    register_error_handlers(app)

    return app

# --- Funciones de Ayuda para la Configuración ---

def setup_logging(app):
    """Un único handler a stdout para la app y los módulos de `consola`."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    package_logger = logging.getLogger('consola')
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    app.logger.setLevel(level)


def register_blueprints(app):
    """
    Importa y registra todos los Blueprints (conjuntos de rutas) de la aplicación.
    """
    from .routes.main import main_bp
    from .routes.configuraciones import configuraciones_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(configuraciones_bp, url_prefix='/api')


def register_error_handlers(app):
    """
    Traduce los errores de la consola al sobre JSON {success: false, error}.
    """
    @app.errorhandler(ConsolaError)
    def handle_consola_error(error):
        if error.status_code >= 500:
            app.logger.error("Error %s en %s: %s (detalle: %s)",
                             type(error).__name__, request.path, error.message, error.payload)
        return jsonify({'success': False, 'error': error.message}), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        # Las excepciones HTTP (404 de rutas, 405...) conservan su código
        if isinstance(error, HTTPException):
            if not request.path.startswith('/api/'):
                return error
            return jsonify({'success': False, 'error': error.description}), error.code

        app.logger.exception("Error inesperado en %s", request.path)
        return jsonify({'success': False, 'error': str(error)}), 500
