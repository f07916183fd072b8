"""Development entry point: `python app.py`."""

from src.store_presence.store_presence.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=app.config.get("HOST", "127.0.0.1"), port=int(app.config.get("PORT", 4000)), debug=app.config["DEBUG"])
