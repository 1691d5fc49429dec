import logging

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.orm import Session

from tasktracker.config import Settings, get_settings
from tasktracker.database import create_db_engine, create_session_factory, get_db, init_db
from tasktracker.logging_setup import setup_logging
from tasktracker.repository import TaskRepository
from tasktracker.schemas import TaskCreate, TaskResponse, TaskUpdate
from tasktracker.service import TaskNotFoundError, TaskService

logger = logging.getLogger(__name__)


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    return TaskRepository(db)


def get_task_service(repository: TaskRepository = Depends(get_task_repository)) -> TaskService:
    return TaskService(repository)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API around its own engine and session factory."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(title="Task Tracker API")

    # Create the database tables
    engine = create_db_engine(settings.database_url, echo=settings.sql_echo)
    init_db(engine)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.metrics_enabled:
        Instrumentator(registry=CollectorRegistry()).instrument(app).expose(app, endpoint="/metrics")

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> Response:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    _register_routes(app)
    logger.info("Task Tracker API created metrics=%s", settings.metrics_enabled)
    return app


def _register_routes(app: FastAPI) -> None:
    @app.get("/")
    def root():
        return {"message": "App is working"}

    @app.get("/tasks", response_model=list[TaskResponse])
    def get_tasks(service: TaskService = Depends(get_task_service)):
        return service.list()

    # literal paths go before /tasks/{task_id}
    @app.get("/tasks/search", response_model=list[TaskResponse])
    def search_tasks(title: str, service: TaskService = Depends(get_task_service)):
        return service.search_by_title(title)

    @app.get("/tasks/status/{completed}", response_model=list[TaskResponse])
    def get_tasks_by_status(completed: bool, service: TaskService = Depends(get_task_service)):
        return service.list_by_status(completed)

    @app.get("/tasks/{task_id}", response_model=TaskResponse)
    def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
        task = service.get_by_id(task_id)
        if task is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return task

    @app.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
    def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)):
        return service.create(task)

    @app.put("/tasks/{task_id}", response_model=TaskResponse)
    def update_task(task_id: int, task: TaskUpdate, service: TaskService = Depends(get_task_service)):
        return service.update(task_id, task)

    @app.patch("/tasks/{task_id}/toggle", response_model=TaskResponse)
    def toggle_task_status(task_id: int, service: TaskService = Depends(get_task_service)):
        return service.toggle_status(task_id)

    @app.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
        service.delete(task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


def run() -> None:
    import uvicorn

    settings = get_settings()
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
