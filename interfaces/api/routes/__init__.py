"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.mail_state import router as mail_state_router
from interfaces.api.routes.notifications import router as notifications_router

__all__ = ["mail_state_router", "notifications_router"]
