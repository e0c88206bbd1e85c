"""
健康检查路由
"""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict[str, object]:
    service = request.app.state.candle_service
    return {"status": "ok", "cache_entries": len(service.cache)}
