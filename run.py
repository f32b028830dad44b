# run.py
import os

from config import config
from edu_admin import create_app

env = os.environ.get('FLASK_ENV', 'production')
app = create_app(config.get(env, config['default']))

if __name__ == "__main__":
    port = int(os.environ.get('PORT', 5000))
    app.run(host="0.0.0.0", port=port, debug=app.config.get('DEBUG', False))
