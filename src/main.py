import pathlib
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from api_rest.routes import router_catalog
from config import AppConfig
from services.catalog import CatalogService
from utils import logging


log = logging.getLogger()


@asynccontextmanager
async def lifespan(_: FastAPI):
    with log.any_error(exit_code=1):
        CatalogService.setup()
    yield


app = FastAPI(
    title=AppConfig.APP_NAME,
    lifespan=lifespan,
)
app.include_router(router_catalog)


if __name__ == "__main__":
    # acts as if "python -m uvicorn 'main:app' ..." was executed in the shell:
    with log.with_prefix("cli args parser:"), log.any_error(exit_code=1):
        # use a COPY of sys.argv, because '.make_context()' empties its 'args' input,
        # but uvicorn needs the original sys.argv to spawn new processes, if needed (e.g. the reloader, workers):
        ctx = uvicorn.main.make_context(None, args=sys.argv[:])
    ctx.params["app"] = "main:app"
    if "--reload" in sys.argv and "--reload-dir" not in sys.argv:
        sys.argv.append(f"--reload-dir {pathlib.Path(__file__).parent.resolve()}")
    ctx.forward(uvicorn.main)
