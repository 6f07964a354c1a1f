from flask import Blueprint, render_template

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Página con la tabla de configuraciones y los switches de ESTADO / CORTE."""
    return render_template('index.html')
