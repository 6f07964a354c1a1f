import pytest

from consola.models.columnas import (
    a_booleano,
    normalizar_fila,
    resolver_columna,
    resolver_valor,
)


def test_corte_capitalizado_con_texto_true_es_booleano():
    fila = {'key': '7', 'Corte': 'TRUE'}
    assert normalizar_fila(fila)['corte'] is True


def test_primer_candidato_presente_gana():
    fila = {'ESTADO': None, 'estado': 'false', 'STATUS': 'true'}
    # ESTADO es nulo, se usa el siguiente candidato en orden
    assert resolver_valor(fila, 'estado') == 'false'


def test_busqueda_sin_distinguir_mayusculas_si_no_hay_candidato_exacto():
    fila = {'oPc_MeNu': 'Menu 9'}
    assert resolver_valor(fila, 'opc_menu') == 'Menu 9'


def test_valores_por_defecto_si_no_hay_columna():
    datos = normalizar_fila({'key': 'abc'})
    assert datos == {
        'id': 'abc', 'ivr': None, 'plataforma': None, 'opc_menu': None,
        'template': None, 'estado': False, 'corte': False,
    }


def test_sinonimos_cut_y_status():
    datos = normalizar_fila({'key': 1, 'CUT': True, 'status': '1'})
    assert datos['id'] == '1'
    assert datos['corte'] is True
    assert datos['estado'] is True


@pytest.mark.parametrize('valor, esperado', [
    (True, True), (False, False), ('true', True), (' True ', True), ('1', True),
    ('0', False), ('si', False), ('', False), (None, False), (1, False),
])
def test_a_booleano(valor, esperado):
    assert a_booleano(valor) is esperado


def test_resolver_columna_conserva_nombre_existente():
    assert resolver_columna({'key': '1', 'corte': False}, 'corte') == 'corte'
    assert resolver_columna({'key': '1', 'CoRtE': False}, 'corte') == 'CoRtE'
    assert resolver_columna({'key': '1', 'Cut': False}, 'corte') == 'Cut'


def test_resolver_columna_usa_primer_candidato_si_no_existe():
    assert resolver_columna({'key': '1', 'IVR': 'x'}, 'estado') == 'ESTADO'


def test_lectura_y_escritura_eligen_la_misma_columna():
    # columna principal con mayúsculas mezcladas y un sinónimo también presente
    fila = {'key': 'k', 'EsTaDo': 'true', 'status': 'false'}
    assert resolver_valor(fila, 'estado') == 'true'
    assert resolver_columna(fila, 'estado') == 'EsTaDo'


def test_escritura_sigue_a_la_columna_con_valor():
    fila = {'key': 'k', 'ESTADO': None, 'status': 'true'}
    assert resolver_valor(fila, 'estado') == 'true'
    assert resolver_columna(fila, 'estado') == 'status'


def test_escritura_en_columna_existente_aunque_sea_nula():
    assert resolver_columna({'key': 'k', 'Corte': None}, 'corte') == 'Corte'
