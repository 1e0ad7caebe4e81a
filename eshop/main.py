# eshop/main.py
import uvicorn

from eshop.api import create_app
from eshop.utils.logging import configure_logging, get_logger
from eshop.utils.settings import load_settings

settings = load_settings()
configure_logging(settings.log_level)

logger = get_logger(__name__)

app = create_app(settings)

if __name__ == "__main__":
    logger.info(f"Starting E-Shop API on {settings.app_host}:{settings.app_port}")
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
