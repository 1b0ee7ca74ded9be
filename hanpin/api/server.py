"""
HanPin FastAPI 服务

提供 RESTful API 接口
"""

import logging
import os
import time
import uuid
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from hanpin.engine import (
    PinyinConverter,
    PinyinFormat,
    ConverterConfig,
    create_converter,
    get_api_logger,
)

# 初始化日志
logger = get_api_logger()


# ===== 请求/响应模型 =====

class PinyinRequest(BaseModel):
    """字符串转拼音请求"""
    text: str = Field(..., description="输入文本")
    separator: str = Field(" ", description="拼音分隔符", max_length=8)
    format: PinyinFormat = Field(PinyinFormat.WITH_TONE_MARK, description="拼音格式")


class SegmentItem(BaseModel):
    """切分片段"""
    text: str
    matched: bool
    pinyin: List[str]


class PinyinResponse(BaseModel):
    """字符串转拼音响应"""
    text: str
    pinyin: str
    segments: List[SegmentItem]


class CharResponse(BaseModel):
    """单字拼音响应"""
    char: str
    pinyin: List[str]
    multi: bool


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    version: str


# ===== 全局转换器实例 =====
converter: Optional[PinyinConverter] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    global converter

    logger.info("=" * 50)
    logger.info("HanPin API 服务启动")
    logger.info("正在加载词典...")

    config = ConverterConfig.from_env()
    converter = create_converter(config)

    logger.info("转换器初始化完成")
    logger.info(f"  单字: {converter.dictionary.char_count}")
    logger.info(f"  多音词: {converter.dictionary.word_count}")
    logger.info("=" * 50)

    yield

    logger.info("正在关闭转换器...")
    converter = None
    logger.info("HanPin API 服务已停止")


# ===== FastAPI 应用 =====
app = FastAPI(
    title="HanPin API",
    description="汉字转拼音 API",
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


# ===== 请求日志中间件 =====

def _status_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """请求日志，字段通过 extra 传给 JsonFormatter"""
    fields = {
        'request_id': uuid.uuid4().hex[:8],
        'method': request.method,
        'path': request.url.path,
        'client_ip': request.client.host if request.client else "unknown",
    }
    start_time = time.perf_counter()
    logger.info(f"[{fields['request_id']}] --> {fields['method']} {fields['path']}", extra=fields)

    try:
        response = await call_next(request)
    except Exception as e:
        fields['duration_ms'] = round((time.perf_counter() - start_time) * 1000, 2)
        logger.error(f"[{fields['request_id']}] <-- {type(e).__name__}: {e}", extra=fields)
        raise

    fields['status_code'] = response.status_code
    fields['duration_ms'] = round((time.perf_counter() - start_time) * 1000, 2)
    logger.log(
        _status_level(response.status_code),
        f"[{fields['request_id']}] <-- {response.status_code} | {fields['duration_ms']:.2f}ms",
        extra=fields,
    )

    response.headers["X-Request-ID"] = fields['request_id']
    response.headers["X-Response-Time"] = f"{fields['duration_ms']:.2f}ms"
    return response


def _require_converter() -> PinyinConverter:
    if converter is None:
        logger.error("转换器未就绪，拒绝请求")
        raise HTTPException(status_code=503, detail="转换器未就绪")
    return converter


# ===== API 路由 =====

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查"""
    from hanpin import __version__
    return HealthResponse(
        status="healthy" if converter else "not_ready",
        version=__version__,
    )


@app.post("/pinyin", response_model=PinyinResponse)
async def convert_statement(request: PinyinRequest):
    """字符串转拼音"""
    conv = _require_converter()

    if not request.text:
        logger.warning("无效请求: 空文本")
        raise HTTPException(status_code=400, detail="文本不能为空")

    try:
        converted = conv.convert_segments(request.text, request.format)
    except Exception as e:
        logger.error(f"转换失败: text='{request.text[:20]}', error={e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    pinyin = ''.join(request.separator.join(pieces) for _, pieces in converted)
    logger.debug(f"转换: '{request.text[:20]}' -> '{pinyin[:40]}'")

    return PinyinResponse(
        text=request.text,
        pinyin=pinyin,
        segments=[
            SegmentItem(text=segment.text, matched=segment.matched, pinyin=pieces)
            for segment, pieces in converted
        ],
    )


@app.get("/pinyin/char", response_model=CharResponse)
async def convert_character(c: str, format: PinyinFormat = PinyinFormat.WITH_TONE_MARK):
    """单字转拼音"""
    conv = _require_converter()

    if len(c) != 1:
        raise HTTPException(status_code=400, detail="只接受单个字符")

    pinyins = conv.convert_character(c, format)
    return CharResponse(char=c, pinyin=pinyins, multi=conv.is_multi_pinyin(c))


# ===== 启动入口 =====

def main():
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    logger.info(f"启动 HanPin API 服务: http://{host}:{port}")
    logger.info(f"API 文档: http://{host}:{port}/docs")
    logger.info(f"日志级别: {log_level.upper()}")

    uvicorn.run(
        "hanpin.api.server:app",
        host=host,
        port=port,
        reload=False,
        workers=1,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
