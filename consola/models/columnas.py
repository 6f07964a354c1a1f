# consola/models/columnas.py
"""
Normalización de nombres de columna de la DataTable.

El esquema remoto no garantiza mayúsculas ni nombres exactos, así que cada
campo lógico declara una lista ordenada de candidatos y un valor por defecto.
"""
from typing import Any, Dict, Mapping, Optional

# campo lógico -> (candidatos en orden de preferencia, valor por defecto)
COLUMNAS = {
    'ivr': (('IVR', 'ivr', 'Ivr'), None),
    'plataforma': (('PLATAFORMA', 'plataforma', 'Plataforma', 'PLATFORM', 'platform'), None),
    'opc_menu': (('OPC_MENU', 'opc_menu', 'Opc_Menu', 'OPCION_MENU', 'MENU'), None),
    'template': (('TEMPLATE', 'template', 'Template', 'PLANTILLA'), None),
    'estado': (('ESTADO', 'estado', 'Estado', 'STATUS', 'status'), False),
    'corte': (('CORTE', 'corte', 'Corte', 'CUT', 'cut'), False),
}

CAMPOS_SOLO_LECTURA = ('ivr', 'plataforma', 'opc_menu', 'template')
CAMPOS_EDITABLES = ('estado', 'corte')


def _buscar_columna(fila: Mapping[str, Any], campo: str, con_valor: bool) -> Optional[str]:
    """
    Recorre los candidatos en orden; para cada uno prueba primero el nombre
    exacto y luego cualquier columna igual sin distinguir mayúsculas.
    """
    candidatos, _ = COLUMNAS[campo]
    for candidato in candidatos:
        if candidato in fila and (not con_valor or fila[candidato] is not None):
            return candidato
        buscado = candidato.lower()
        for nombre, valor in fila.items():
            if isinstance(nombre, str) and nombre.lower() == buscado and (not con_valor or valor is not None):
                return nombre
    return None


def resolver_valor(fila: Mapping[str, Any], campo: str) -> Any:
    """Valor del primer candidato presente y no nulo, o el valor por defecto."""
    nombre = _buscar_columna(fila, campo, con_valor=True)
    if nombre is None:
        return COLUMNAS[campo][1]
    return fila[nombre]


def resolver_columna(fila: Mapping[str, Any], campo: str) -> str:
    """
    Nombre real de la columna donde escribir `campo`: la misma que se lee;
    si no hay valor, la primera existente; si no existe, el primer candidato.
    """
    return (_buscar_columna(fila, campo, con_valor=True)
            or _buscar_columna(fila, campo, con_valor=False)
            or COLUMNAS[campo][0][0])


def a_booleano(valor: Any) -> bool:
    if isinstance(valor, bool):
        return valor
    if isinstance(valor, str):
        return valor.strip().lower() in ('true', '1')
    return False


def normalizar_fila(fila: Mapping[str, Any], clave: Optional[str] = None) -> Dict[str, Any]:
    """Convierte una fila cruda de Genesys en la forma local estable."""
    if clave is None:
        clave = fila.get('key')
    datos = {'id': None if clave is None else str(clave)}
    for campo in CAMPOS_SOLO_LECTURA:
        datos[campo] = resolver_valor(fila, campo)
    for campo in CAMPOS_EDITABLES:
        datos[campo] = a_booleano(resolver_valor(fila, campo))
    return datos
