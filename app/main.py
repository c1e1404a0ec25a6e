import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import progress, quizzes, resources
from app.core.config import settings
from app.core.logging import setup_logging
from app.crud.seed import seed_demo_data
from app.exceptions import BaseAppError
from app.models.store import MemoryStore
from app.schemas.common import format_field_errors

# 로깅 설정
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 데모 데이터 적재 (저장소가 비어 있을 때만)"""
    store: MemoryStore = app.state.store
    if settings.seed_demo_data and not store.resources:
        await seed_demo_data(store)
    yield


def create_cors_response(
    status_code: int,
    content: dict,
    request: Request,
) -> JSONResponse:
    """CORS 헤더를 포함한 JSONResponse 생성"""
    response = JSONResponse(
        status_code=status_code,
        content=content,
    )
    # CORS 헤더 명시적 추가 (예외 핸들러에서도 CORS 헤더 보장)
    origin = request.headers.get("origin")
    allowed_origins = settings.allowed_origins_list
    if origin and origin in allowed_origins:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
    elif origin and "*" in allowed_origins:
        # 와일드카드 허용 시 자격 증명 헤더 없이 "*"만 반환
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """요청 검증 오류 핸들러 (400, 필드별 오류 목록)"""
    errors = format_field_errors(exc.errors())
    logger.warning(f"요청 검증 오류: {errors}, path={request.url.path}")
    return create_cors_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
        request=request,
    )


async def app_exception_handler(request: Request, exc: BaseAppError):
    """애플리케이션 커스텀 예외 핸들러"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application error: {exc.__class__.__name__} - {exc.message}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
        }
    )
    content = {"message": exc.message}
    if exc.errors is not None:
        content["errors"] = exc.errors
    return create_cors_response(
        status_code=exc.status_code,
        content=content,
        request=request,
    )


async def global_exception_handler(request: Request, exc: Exception):
    """전역 예외 핸들러 - 모든 미처리 예외를 로깅 (상세 내용은 응답에 포함하지 않음)"""
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
            "query_params": dict(request.query_params),
        }
    )
    return create_cors_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
        request=request,
    )


def create_app(store: MemoryStore | None = None) -> FastAPI:
    """애플리케이션 생성 (저장소 수명은 애플리케이션이 소유)"""
    app = FastAPI(
        title="Quiz Practice Backend API",
        description="리소스별 퀴즈 풀이, 학습 진행 기록, AI 보너스 문제 생성 API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else MemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials="*" not in settings.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(resources.router, prefix=settings.api_prefix)
    app.include_router(quizzes.router, prefix=settings.api_prefix)
    app.include_router(progress.router, prefix=settings.api_prefix)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(BaseAppError, app_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return {"message": "Quiz Practice Backend API", "version": "0.1.0"}

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {"status": "healthy"}

    return app


app = create_app()
