import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backend.core.config import Settings, get_settings, redact_database_url, validate_runtime_config
from backend.database import create_schema, engine, verify_database_connection
from backend.routes import admin_routes, auth_routes, dog_routes, profile_routes

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title='PawMate API')

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception('Unhandled request error on %s %s', request.method, request.url.path)
        content = {'detail': 'Server Error'}
        if settings.is_development:
            content['error'] = str(exc)
        return JSONResponse(status_code=500, content=content)

    @app.get('/')
    def root():
        return {'status': 'PawMate API Running'}

    app.include_router(auth_routes.router, prefix='/api/auth')
    app.include_router(profile_routes.router, prefix='/api/users')
    app.include_router(dog_routes.router, prefix='/api/dogs')
    app.include_router(admin_routes.router, prefix='/api/admin')

    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    settings = get_settings()

    logger.info('--- Server startup ---')
    logger.info('Port configured: %s', settings.port)
    logger.info('Connecting to database: %s', redact_database_url(settings.database_url))

    try:
        validate_runtime_config(settings)
        verify_database_connection(engine)
        create_schema(engine)
    except (RuntimeError, SQLAlchemyError):
        logger.exception('Critical error during server startup.')
        sys.exit(1)

    logger.info('Database connection established')
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == '__main__':
    main()
