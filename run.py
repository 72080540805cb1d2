import os

from jsonserver import create_app
from jsonserver.config import DevConfig

app = create_app(DevConfig)

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    debug = os.getenv("DEBUG", "true").strip().lower() in {"1", "true", "yes", "on"}
    app.logger.info("Database file: %s", app.config["DB_FILE"])
    app.run(host=host, port=port, debug=debug, threaded=True)
