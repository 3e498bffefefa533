import uvicorn  # type: ignore

from comparison_center.core import config
from comparison_center.utils import get_logger

log = get_logger(__name__)

if __name__ == "__main__":
    log.info("Running server on %s:%d", config.HOST, config.PORT)
    uvicorn.run("comparison_center.main:app", reload=config.RELOAD, host=config.HOST, port=config.PORT)
