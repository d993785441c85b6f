#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app investment_calculator.wsgi run --port 5000 --debug

from __future__ import annotations

from investment_calculator.app import create_app
from investment_calculator.config import configure_logging, load_settings

settings = load_settings()
configure_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    app.run(port=5000, debug=True)
