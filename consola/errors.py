# consola/errors.py


class ConsolaError(Exception):
    """
    Error base de la consola.
    `status_code` es el código HTTP con el que la API responde y `payload`
    guarda (si existe) el cuerpo de error devuelto por Genesys.
    """
    status_code = 500

    def __init__(self, message, payload=None):
        super().__init__(message)
        self.message = message
        self.payload = payload


class AuthError(ConsolaError):
    """Credenciales ausentes o rechazadas por Genesys."""


class NotAuthenticatedError(ConsolaError):
    """Se intentó leer o escribir antes de autenticar."""


class NotFoundError(ConsolaError):
    status_code = 404


class ValidationError(ConsolaError):
    status_code = 400


class RemoteReadError(ConsolaError):
    """Genesys rechazó una lectura."""


class RemoteWriteError(ConsolaError):
    """Genesys rechazó una escritura."""
