"""
全局异常处理
所有错误响应统一为 {"error": 提示信息}
"""
# 标准库导包
import logging

# 第三方库导包
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# 项目内部导包
from utils.errors import ContentError, InternalError

# 配置日志
logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """在FastAPI应用上注册全部异常处理器"""

    @app.exception_handler(ContentError)
    async def content_error_handler(request: Request, exc: ContentError):
        """业务错误：按错误类型返回对应状态码"""
        if exc.http_status >= 500:
            logger.error(f"{request.method} {request.url.path} 失败: {exc.kind}")
            message = InternalError().message
        else:
            logger.info(f"{request.method} {request.url.path} 被拒绝: {exc.kind} {exc.message}")
            message = exc.message
        return JSONResponse(status_code=exc.http_status, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """路由中主动抛出的HTTPException"""
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """请求结构校验失败统一返回400"""
        logger.warning(f"请求参数校验失败: {request.url.path} {exc.errors()}")
        fields = [".".join(str(loc) for loc in err.get("loc", ())) for err in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": f"リクエストが不正です: {', '.join(fields)}"}
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """兜底处理，不向客户端泄露内部细节"""
        logger.error(f"未处理的异常: {request.url.path} {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": InternalError().message}
        )
