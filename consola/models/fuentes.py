# consola/models/fuentes.py
"""Orígenes de filas: la DataTable de Genesys o un conjunto de datos en memoria."""
import copy
import logging

from ..errors import NotFoundError
from .columnas import CAMPOS_EDITABLES, normalizar_fila, resolver_columna

logger = logging.getLogger(__name__)

# Datos de ejemplo usados en modo mock o cuando Genesys no responde
CONFIGURACIONES_MOCK = [
    {'id': '1', 'ivr': 'IVR_001', 'plataforma': 'Genesys', 'opc_menu': 'Menu 1', 'template': 'T1', 'corte': True, 'estado': True},
    {'id': '2', 'ivr': 'IVR_002', 'plataforma': 'Genesys', 'opc_menu': 'Menu 2', 'template': 'T2', 'corte': False, 'estado': True},
]


class RowSource:
    """Interfaz común; se elige una implementación una sola vez al arrancar."""
    fuente = None

    def list_rows(self):
        raise NotImplementedError

    def update_row(self, row_id, cambios):
        raise NotImplementedError


class MockSource(RowSource):
    fuente = 'mock'

    def __init__(self, filas=None):
        self._filas = copy.deepcopy(CONFIGURACIONES_MOCK if filas is None else filas)

    def list_rows(self):
        return copy.deepcopy(self._filas)

    def update_row(self, row_id, cambios):
        for fila in self._filas:
            if fila['id'] == row_id:
                fila.update(cambios)
                return dict(fila)
        raise NotFoundError('No encontrado')


class RemoteSource(RowSource):
    fuente = 'genesys'

    def __init__(self, client):
        self.client = client

    def list_rows(self):
        filas = [normalizar_fila(fila) for fila in self.client.fetch_rows()]
        logger.info("%s filas obtenidas desde Genesys", len(filas))
        return filas

    def update_row(self, row_id, cambios):
        logger.info("Actualizando fila %s de la DataTable %s con %s", row_id, self.client.datatable_id, cambios)

        # 1. Fila actual completa; Genesys exige reenviar todas las columnas
        actual = self.client.fetch_row(row_id)

        # 2. Solo se tocan ESTADO y CORTE, bajo el nombre real de la columna
        completa = {k: v for k, v in actual.items() if k != 'key'}
        for campo in CAMPOS_EDITABLES:
            if campo in cambios:
                completa[resolver_columna(actual, campo)] = cambios[campo]

        self.client.write_row(row_id, completa)

        # 3. Releer para devolver el estado autoritativo tras la escritura
        return normalizar_fila(self.client.fetch_row(row_id), clave=row_id)
