import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.routes import auth, products, shop, status
from storefront.core.config import get_settings
from storefront.core.logging_config import configure_logging
from storefront.db.store import create_document_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 설정에 맞는 문서 저장소를 한 번 생성하고 종료 시 정리"""
    settings = get_settings()
    configure_logging(settings)

    app.state.store = create_document_store(settings)
    logger.info("Document store backend: %s", app.state.store.backend)

    yield

    app.state.store.close()


app = FastAPI(
    title="Storefront Catalog API",
    description="상품 카탈로그, 관리자 상품 관리, 세션 인증을 제공하는 스토어 백엔드",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """모든 오류 응답을 {"error": "..."} 형태로 반환"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    return JSONResponse(
        status_code=422,
        content={"error": f"Invalid request: {location} {first.get('msg', '')}".strip()},
    )


# 라우터 등록
app.include_router(products.router, prefix="/api", tags=["products"])
app.include_router(status.router, prefix="/api", tags=["status"])
app.include_router(auth.router, prefix="/api", tags=["authentication"])
app.include_router(shop.router, prefix="/api", tags=["storefront"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Storefront Catalog API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
