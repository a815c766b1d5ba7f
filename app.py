import logging
import os
import socket

from sv_advisor.logging_config import configure_logging
from sv_advisor.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("sv_advisor.app")

app = create_dash_app(os.getenv("SV_ADVISOR_CONFIG_ROOT", "config"))
server = app.server


def first_free_port(preferred: int, attempts: int = 100) -> int:
    """Return ``preferred`` or the next port that nothing is listening on."""
    for port in range(preferred, preferred + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return preferred


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8051"))
    port = first_free_port(preferred_port)
    if port != preferred_port:
        logger.warning("Port %s is taken; starting on %s", preferred_port, port)

    app.run(host=os.getenv("HOST", "0.0.0.0"), port=port, debug=os.getenv("DEBUG", "0") == "1")
