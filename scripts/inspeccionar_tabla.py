"""Inspecciona la DataTable de Genesys: lista las keys y luego cada fila completa.

Ejecutar desde la raíz del proyecto: `python -m scripts.inspeccionar_tabla`.
Usa las variables definidas en `config.py` / `.env`. Útil para descubrir los
nombres reales de las columnas antes de ajustar `consola/models/columnas.py`.
"""
import json
import sys

from config import Config
from consola.errors import ConsolaError
from consola.genesys_client import GenesysSession, RemoteTableClient
from consola.models.columnas import normalizar_fila


def main():
    if not Config.GENESYS_DATATABLE_ID:
        print("Falta GENESYS_DATATABLE_ID en el entorno")
        sys.exit(1)

    session = GenesysSession(Config.GENESYS_REGION, Config.GENESYS_CLIENT_ID, Config.GENESYS_CLIENT_SECRET)
    client = RemoteTableClient(session, Config.GENESYS_DATATABLE_ID)

    try:
        client.authenticate()
        filas = client.fetch_rows()
        print('Keys:', [fila.get('key') for fila in filas])

        for fila in filas:
            completa = client.fetch_row(fila.get('key'))
            print('Fila completa:', json.dumps(completa, indent=2, default=str, ensure_ascii=False))
            print('Normalizada:', normalizar_fila(completa, clave=fila.get('key')))
    except ConsolaError as e:
        print('Error inspeccionando la DataTable:', e.message)
        if e.payload:
            print('Detalle:', e.payload)
        sys.exit(1)


if __name__ == '__main__':
    main()
