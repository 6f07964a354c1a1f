# consola/routes/configuraciones.py
from flask import Blueprint, current_app, jsonify, request

configuraciones_bp = Blueprint('configuraciones', __name__)


def _service():
    return current_app.extensions['configuraciones']


@configuraciones_bp.route('/configuraciones', methods=['GET'])
def listar():
    data, fuente = _service().list_configurations()
    return jsonify({
        'success': True,
        'fuente': fuente,
        'total': len(data),
        'data': data,
    })


@configuraciones_bp.route('/configuraciones/<string:row_id>', methods=['PUT'])
def actualizar(row_id):
    # silent=True: un cuerpo que no es JSON se trata como vacío (-> 400)
    cambios = request.get_json(silent=True)
    fila, fuente = _service().update_configuration(row_id, cambios)
    current_app.logger.info("Configuración %s actualizada (%s): %s", row_id, fuente, cambios)
    return jsonify({
        'success': True,
        'fuente': fuente,
        'data': fila,
    })
