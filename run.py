# run.py

from consola import create_app

# Busca 'config.py' al lado de 'run.py'.
from config import Config

# Pasamos el objeto de configuración a la fábrica
app = create_app(Config)

if __name__ == '__main__':
    # Ponemos en marcha el servidor
    app.run(host=app.config['HOST'], port=app.config['PORT'])
