from __future__ import annotations

import os

from src.fingerprint_clock.fingerprint_clock.main import create_app

app = create_app()


if __name__ == "__main__":
    # threaded: a capture blocks its request while the scanner agent posts samples
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), threaded=True)
