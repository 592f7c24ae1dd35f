"""
Mail State Bridge - API 入口

运行：
    python main.py

或使用 uvicorn：
    uvicorn main:app --host 0.0.0.0 --port 8000 --reload

API 文档：
    http://localhost:8000/docs
"""

import uvicorn

from interfaces.api import create_app

# 导出 FastAPI app (用于 uvicorn)
app = create_app()


if __name__ == "__main__":
    print("=" * 50)
    print("启动 Mail State Bridge")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  GET  /api/v1/mail-state                 - 查询邮件状态")
    print("  POST /api/v1/notifications/{event}      - 接收推送通知事件")
    print("  GET  /health                            - 健康检查")
    print()
    print("文档: http://localhost:8000/docs")
    print("=" * 50)

    uvicorn.run(app, host="0.0.0.0", port=8000)
