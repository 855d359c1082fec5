# main.py
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import Settings, get_settings
from app.database import init_db
from app.api.routes import answers, photos, admin
from app.core.logging_middleware import log_requests
from app.core.logger import logger, configure_logging

def create_app(settings: Settings | None = None) -> FastAPI:
    """앱 생성 (업로드 경로, 관리자 키 등 모든 설정은 settings 하나에서)"""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug
    )
    app.state.settings = settings

    # ===== 로깅 미들웨어 =====
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        return await log_requests(request, call_next)

    # 요청 크기 제한 미들웨어
    @app.middleware("http")
    async def limit_upload_size(request: Request, call_next):
        """요청 크기 제한"""
        max_size = request.app.state.settings.max_request_size
        if request.method in ["POST", "PUT", "PATCH"]:
            content_length = request.headers.get("content-length")
            if content_length and content_length.isdigit() and int(content_length) > max_size:
                return JSONResponse(
                    status_code=413,
                    content={"detail": f"Request too large. Max: {max_size // 1024 // 1024}MB"}
                )
        return await call_next(request)

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(answers.router)
    app.include_router(photos.router)
    app.include_router(admin.router)

    @app.on_event("startup")
    async def startup_event():
        init_db()
        logger.info(f"{settings.app_name} 서버 시작 (port {settings.port})")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"{settings.app_name} 서버 종료")

    @app.get("/health")
    def health_check():
        """헬스체크"""
        return {
            "status": "healthy",
            "service": settings.app_name
        }

    # 정적 파일 서빙 (라우터 뒤에 마운트, 업로드 저장 경로와 동일)
    os.makedirs(settings.upload_dir, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True, check_dir=False), name="public")

    return app

app = create_app()

def run():
    """서버 실행 (모든 인터페이스 바인딩)"""
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)

if __name__ == "__main__":
    run()
