"""Development entry point: ``python app.py``.

In production point a WSGI server at ``app:app``.
"""

import importlib

from config import get_settings_module

from src.fieldforce.fieldforce.main import create_app

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host="0.0.0.0", port=int(settings.PORT), debug=bool(settings.DEBUG))
