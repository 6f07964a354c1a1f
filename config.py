import os

from dotenv import load_dotenv

# Carga las variables definidas en un archivo .env junto a este módulo (si existe).
load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'clave-de-desarrollo-cambiar-en-produccion')

    # Región de Genesys Cloud: us_east_1, us_west_2, eu_west_1 o sa_east_1
    GENESYS_REGION = os.getenv('GENESYS_REGION', 'us_east_1')

    # Credenciales OAuth (client credentials). Mantener fuera del frontend.
    GENESYS_CLIENT_ID = os.getenv('GENESYS_CLIENT_ID')
    GENESYS_CLIENT_SECRET = os.getenv('GENESYS_CLIENT_SECRET')

    # DataTable de Architect que contiene las filas IVR/PLATAFORMA/ESTADO/CORTE
    GENESYS_DATATABLE_ID = os.getenv('GENESYS_DATATABLE_ID')

    # 'genesys' intenta conectarse; 'mock' usa siempre los datos de ejemplo
    MODO = os.getenv('MODO', 'genesys')

    # Solo localhost por defecto: la consola no tiene autenticación propia
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', '3000'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    TESTING = True
    MODO = 'mock'
    GENESYS_CLIENT_ID = None
    GENESYS_CLIENT_SECRET = None
    GENESYS_DATATABLE_ID = None
