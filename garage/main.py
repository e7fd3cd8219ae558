# garage/main.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from garage import config
from garage.exceptions import CarNotFoundError, StorageError
from garage.schemas import Car, CarCreate, CarUpdate, field_errors
from garage.storage.base import CarStore
from garage.storage.factory import build_store
from garage.texts import CAR_NOT_FOUND, ROOT_MSG, STORAGE_FAILED, VALIDATION_FAILED

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A store passed to create_app() belongs to the caller; only close our own
    owned = app.state.store is None
    if owned:
        app.state.store = build_store()
    yield
    if owned:
        app.state.store.close()
        app.state.store = None


def get_store(request: Request) -> CarStore:
    return request.app.state.store


def create_app(store: Optional[CarStore] = None) -> FastAPI:
    app = FastAPI(title="Virtual Garage API", lifespan=lifespan)
    app.state.store = store

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": VALIDATION_FAILED, "errors": field_errors(exc.errors())},
        )

    @app.exception_handler(CarNotFoundError)
    async def car_not_found(request: Request, exc: CarNotFoundError):
        return JSONResponse(status_code=404, content={"message": CAR_NOT_FOUND})

    @app.exception_handler(StorageError)
    async def storage_failed(request: Request, exc: StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": STORAGE_FAILED, "error": str(exc)})

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return ROOT_MSG

    @app.get("/health")
    async def health(store: CarStore = Depends(get_store)):
        return {"status": "ok", "store": store.backend}

    # Store calls stay synchronous inside async handlers: each one finishes in a
    # single event-loop turn, which keeps the memory store free of races.
    @app.get("/cars", response_model=List[Car])
    async def list_cars(store: CarStore = Depends(get_store)):
        return store.list()

    @app.get("/cars/{car_id}", response_model=Car)
    async def get_car(car_id: str, store: CarStore = Depends(get_store)):
        return store.get(car_id)

    @app.post("/cars", response_model=Car, status_code=201)
    async def create_car(payload: CarCreate, store: CarStore = Depends(get_store)):
        car = store.insert(payload.model_dump())
        logger.info("Created car %s for user %s", car.car_id, car.user_id)
        return car

    @app.put("/cars/{car_id}", response_model=Car)
    async def update_car(car_id: str, payload: CarUpdate, store: CarStore = Depends(get_store)):
        return store.replace(car_id, payload.changes())

    @app.delete("/cars/{car_id}", status_code=204)
    async def delete_car(car_id: str, store: CarStore = Depends(get_store)):
        store.remove(car_id)
        return Response(status_code=204)

    return app


app = create_app()
