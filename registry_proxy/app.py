# registry_proxy/app.py
# Entry point for flask run: FLASK_APP=registry_proxy.app:app

from . import create_app

app = create_app()

if __name__ == "__main__":
    # Local dev run: python -m registry_proxy.app
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["ENV"] == "development")
