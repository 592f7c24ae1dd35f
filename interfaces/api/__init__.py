"""
API 接口层

提供 FastAPI 应用，暴露邮件状态查询与推送通知接收端点。

用法：
    from interfaces.api import create_app

    app = create_app()
"""

from interfaces.api.app import create_app, wire_routes

__all__ = [
    "create_app",
    "wire_routes",
]
