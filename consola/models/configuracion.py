# consola/models/configuracion.py
import logging
from typing import Any, Dict, List, Optional, Tuple, TypedDict

from ..errors import ValidationError
from .columnas import CAMPOS_EDITABLES, a_booleano
from .fuentes import MockSource, RowSource

logger = logging.getLogger(__name__)


class ConfigurationRow(TypedDict):
    id: str
    ivr: Optional[str]
    plataforma: Optional[str]
    opc_menu: Optional[str]
    template: Optional[str]
    estado: bool
    corte: bool


class ConfigurationService:
    """
    Puente entre el origen de filas elegido al arrancar y la API.
    Si la lectura remota falla, el listado se sirve desde `fallback` (mock).
    """

    def __init__(self, source: RowSource, fallback: Optional[MockSource] = None):
        self.source = source
        self.fallback = fallback if fallback is not None else MockSource()

    @property
    def fuente(self) -> str:
        return self.source.fuente

    def list_configurations(self) -> Tuple[List[ConfigurationRow], str]:
        if self.source is self.fallback:
            return self.fallback.list_rows(), self.fallback.fuente
        try:
            return self.source.list_rows(), self.fuente
        except Exception as e:
            # Cualquier fallo remoto (auth, red, API) degrada a datos de ejemplo
            logger.warning("Error leyendo de %s, usando MOCK: %s", self.source.fuente, e)
            return self.fallback.list_rows(), self.fallback.fuente

    def update_configuration(self, row_id: str, changes: Dict[str, Any]) -> Tuple[ConfigurationRow, str]:
        cambios = limpiar_cambios(changes)
        fila = self.source.update_row(str(row_id), cambios)
        return fila, self.fuente


def limpiar_cambios(changes) -> Dict[str, bool]:
    """Se queda solo con estado/corte (como booleanos). Cualquier otro campo se ignora."""
    if not isinstance(changes, dict):
        raise ValidationError('Debes enviar estado o corte')
    cambios = {campo: a_booleano(changes[campo]) for campo in CAMPOS_EDITABLES if campo in changes}
    if not cambios:
        raise ValidationError('Debes enviar estado o corte')
    return cambios
